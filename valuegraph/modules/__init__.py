"""
Core modules - relation classification and graph construction.

Modules:
- models: Relation enum and the GraphNode / GraphLink / Graph value objects
- relations: Pairwise classification of two values by substring containment
- graph_builder: Node assignment and link accumulation over all key pairs

These modules perform no I/O; loading input and rendering output live in
valuegraph.adapters.

Usage:
    from valuegraph.modules import build_graph, classify

    relation = classify("hello world", "hello")
    graph = build_graph({"a": "hello", "b": "hello world"})
"""

from __future__ import annotations

from .graph_builder import build_graph, classify_pairs, ordered_keys
from .models import Graph, GraphLink, GraphNode, Relation
from .relations import classify, find_relation

__all__ = [
    # Models
    "Relation",
    "GraphNode",
    "GraphLink",
    "Graph",
    # Classification
    "classify",
    "find_relation",
    # Graph construction
    "build_graph",
    "classify_pairs",
    "ordered_keys",
]
