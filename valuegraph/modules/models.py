"""Graph models for value relationships.

This module defines the relation categories and the node, link and graph
value objects produced by the graph builder, along with their encoding to
the JSON interchange shape consumed by the visualization template.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from valuegraph.common.exceptions import SerializationError
from valuegraph.common.types import GraphDict, LinkDict, NodeDict

__all__ = [
    "Relation",
    "GraphNode",
    "GraphLink",
    "Graph",
]

# Same escapes Go's encoding/json applies by default
_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def _field(item: dict[str, Any], name: str, kind: type) -> Any:
    """Return item[name], requiring exactly the given JSON type."""
    value = item[name]
    # bool is a subclass of int but JSON true/false is not an index
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{name} must be {kind.__name__}, got {type(value).__name__}")
    return value


class Relation(str, Enum):
    """Relationship between an ordered pair of values (left, right)."""

    UNRELATED = "Unrelated"
    LEFT_DERIVED_FROM_RIGHT = "LeftDerivedFromRight"  # left contains right
    RIGHT_DERIVED_FROM_LEFT = "RightDerivedFromLeft"  # right contains left
    IS_EQUAL_TO = "IsEqualTo"

    @property
    def produces_link(self) -> bool:
        """Whether a left -> right link is emitted for this relation."""
        return self in (Relation.IS_EQUAL_TO, Relation.LEFT_DERIVED_FROM_RIGHT)


@dataclass(frozen=True)
class GraphNode:
    """Represents one input key in the graph."""

    name: str

    def to_dict(self) -> NodeDict:
        """Convert to dictionary for the interchange format."""
        return {"name": self.name}


@dataclass(frozen=True)
class GraphLink:
    """Directed link from the containing value to the contained value."""

    source: int
    target: int

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def to_dict(self) -> LinkDict:
        """Convert to dictionary for the interchange format."""
        return {"source": self.source, "target": self.target}


@dataclass(frozen=True)
class Graph:
    """Immutable node/link graph built from a key/value mapping."""

    nodes: tuple[GraphNode, ...] = field(default_factory=tuple)
    links: tuple[GraphLink, ...] = field(default_factory=tuple)

    @property
    def node_names(self) -> list[str]:
        return [node.name for node in self.nodes]

    def index_of(self, name: str) -> int:
        """Return the node index for a key name.

        Raises:
            KeyError: If no node carries that name
        """
        for index, node in enumerate(self.nodes):
            if node.name == name:
                return index
        raise KeyError(name)

    def to_dict(self) -> GraphDict:
        """Convert to the ``{"nodes": [...], "links": [...]}`` shape."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }

    def to_json(self, indent: int | None = None) -> str:
        """Encode the graph as JSON safe to embed in an HTML ``<script>``.

        ``<``, ``>``, ``&``, U+2028 and U+2029 are written as ``\\uXXXX``
        escapes, so key names cannot close the surrounding script element.

        Raises:
            SerializationError: If the graph holds values JSON cannot encode
        """
        try:
            text = json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"marshal graph to json: {e}") from e
        return text.translate(_HTML_ESCAPES)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Graph:
        """Build a graph from its interchange dictionary.

        Names must be JSON strings and indices JSON integers; nothing is
        coerced.

        Raises:
            SerializationError: If required fields are missing or malformed
        """
        try:
            nodes = tuple(GraphNode(name=_field(n, "name", str)) for n in data["nodes"])
            links = tuple(
                GraphLink(
                    source=_field(item, "source", int),
                    target=_field(item, "target", int),
                )
                for item in data["links"]
            )
        except (KeyError, TypeError) as e:
            raise SerializationError(f"invalid graph data: {e}") from e

        for link in links:
            if not (0 <= link.source < len(nodes) and 0 <= link.target < len(nodes)):
                raise SerializationError(
                    f"link {link.source}->{link.target} refers to a missing node"
                )
        return cls(nodes=nodes, links=links)

    @classmethod
    def from_json(cls, text: str) -> Graph:
        """Decode a graph from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"parsing graph json: {e}") from e
        if not isinstance(data, dict):
            raise SerializationError("graph json must be an object")
        return cls.from_dict(data)
