"""
Graph construction from a key/value mapping.

Every key becomes a node. Every ordered pair of nodes (i, j), self-pairs
included, is classified and a link i -> j is emitted when the value of i
equals or contains the value of j. A containment between two distinct keys
therefore surfaces as a single link oriented from the containing value to
the contained one, while equal values link both ways. Since a value always
equals itself, every node carries a self-loop.

Node indices follow the sorted key order unless ``preserve_order`` is set,
in which case the mapping's own iteration order is used. Both are stable
for a given input, which keeps the output reproducible.

Usage:
    from valuegraph.modules.graph_builder import build_graph

    graph = build_graph({"a": "hello", "b": "hello world", "c": "bye"})
    graph.to_dict()
    # {"nodes": [{"name": "a"}, {"name": "b"}, {"name": "c"}],
    #  "links": [{"source": 0, "target": 0}, {"source": 1, "target": 0}, ...]}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from valuegraph.modules.models import Graph, GraphLink, GraphNode, Relation
from valuegraph.modules.relations import classify

logger = logging.getLogger(__name__)

__all__ = ["ordered_keys", "classify_pairs", "build_graph"]


def ordered_keys(values: Mapping[str, str], preserve_order: bool = False) -> list[str]:
    """Return keys in node-index order."""
    if preserve_order:
        return list(values)
    return sorted(values)


def classify_pairs(
    values: Mapping[str, str], *, preserve_order: bool = False
) -> Iterator[tuple[str, str, Relation]]:
    """
    Classify every ordered pair of keys.

    Pairs are yielded row by row in node-index order, self-pairs included,
    which is the same order the graph builder visits them.

    Args:
        values: Key to value mapping
        preserve_order: Use the mapping's order instead of sorted keys

    Yields:
        (left key, right key, relation) tuples
    """
    keys = ordered_keys(values, preserve_order)
    for key_a in keys:
        value_a = values[key_a]
        for key_b in keys:
            yield key_a, key_b, classify(value_a, values[key_b])


def build_graph(values: Mapping[str, str], *, preserve_order: bool = False) -> Graph:
    """
    Build the relationship graph for a key/value mapping.

    Args:
        values: Key to value mapping
        preserve_order: Use the mapping's order instead of sorted keys

    Returns:
        Graph with one node per key and a link for every ordered pair
        classified IS_EQUAL_TO or LEFT_DERIVED_FROM_RIGHT
    """
    keys = ordered_keys(values, preserve_order)
    nodes = tuple(GraphNode(name=key) for key in keys)

    links: list[GraphLink] = []
    for source, key_a in enumerate(keys):
        value_a = values[key_a]
        for target, key_b in enumerate(keys):
            if classify(value_a, values[key_b]).produces_link:
                links.append(GraphLink(source=source, target=target))

    logger.debug("Built graph with %d nodes and %d links", len(nodes), len(links))
    return Graph(nodes=nodes, links=tuple(links))
