"""
Shared type definitions for valuegraph.

This module provides the TypedDicts describing the serialized graph and the
Protocols for the collaborators injected into the visualization pipeline.
"""

from __future__ import annotations

from typing import Any, Protocol, TypedDict, runtime_checkable

# =============================================================================
# Serialized Graph Types
# =============================================================================


class NodeDict(TypedDict):
    """A serialized graph node."""

    name: str


class LinkDict(TypedDict):
    """A serialized directed link between two node indices."""

    source: int
    target: int


class GraphDict(TypedDict):
    """
    Interchange shape consumed by the visualization template.

    Nodes are listed in node-index order; links refer to those indices.
    """

    nodes: list[NodeDict]
    links: list[LinkDict]


# =============================================================================
# Utility Protocols
# =============================================================================


@runtime_checkable
class OutputSink(Protocol):
    """Accepts the rendered artifact and returns where it ended up."""

    def write(self, data: bytes) -> str:
        """Write data and return the artifact location."""
        ...


class ViewerLauncher(Protocol):
    """Opens an artifact location, reporting whether it succeeded."""

    def __call__(self, location: str) -> bool: ...


class RunLoggerProtocol(Protocol):
    """Protocol for run loggers used by the pipeline service."""

    def phase_start(self, phase: str, message: str = "") -> None:
        """Log the start of a phase."""
        ...

    def phase_complete(
        self, phase: str, message: str = "", stats: dict[str, Any] | None = None
    ) -> None:
        """Log the completion of a phase."""
        ...

    def phase_error(self, phase: str, error: str, message: str = "") -> None:
        """Log a phase error."""
        ...
