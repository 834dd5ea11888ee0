"""
Visualization service - orchestrates a full run.

Phases, in order:
1. load   - read the key/value document
2. build  - classify all key pairs and assemble the graph
3. render - serialize the graph and inject it into the template
4. write  - hand the page to the output sink
5. open   - launch the viewer (skipped when disabled)

Every phase is recorded in the run log when one is supplied. Fatal errors
propagate as ValueGraphError after being logged; a viewer that fails to
open only marks the result as not opened.

Usage:
    from valuegraph.services.visualize import run_visualization

    result = run_visualization("values.yaml", settings=ValueGraphSettings())
    print(result.location)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

from valuegraph.adapters.document import load_values
from valuegraph.adapters.render import (
    TempFileSink,
    load_template,
    open_in_browser,
    render_template,
)
from valuegraph.common.exceptions import ValueGraphError
from valuegraph.common.types import OutputSink, RunLoggerProtocol, ViewerLauncher
from valuegraph.modules import Graph, build_graph
from valuegraph.services.config_models import ValueGraphSettings

logger = logging.getLogger(__name__)

__all__ = ["VisualizationResult", "load_graph", "run_visualization"]

T = TypeVar("T")


@dataclass
class VisualizationResult:
    """Outcome of a visualization run."""

    location: str
    graph: Graph
    opened: bool = False
    stats: dict[str, Any] = field(default_factory=dict)


def _run_phase(
    run_logger: RunLoggerProtocol | None,
    phase: str,
    fn: Callable[[], T],
    stats: Callable[[T], dict[str, Any]] | None = None,
) -> T:
    """Run one phase, recording start/complete/error in the run log."""
    if run_logger:
        run_logger.phase_start(phase)
    try:
        result = fn()
    except ValueGraphError as e:
        if run_logger:
            run_logger.phase_error(phase, str(e))
        raise
    if run_logger:
        run_logger.phase_complete(phase, stats=stats(result) if stats else None)
    return result


def _graph_stats(graph: Graph) -> dict[str, Any]:
    return {"nodes": len(graph.nodes), "links": len(graph.links)}


def load_graph(
    input_path: str | Path,
    *,
    preserve_order: bool = False,
    run_logger: RunLoggerProtocol | None = None,
) -> Graph:
    """Load a key/value document and build its graph."""
    values = _run_phase(
        run_logger,
        "load",
        lambda: load_values(input_path),
        lambda v: {"entries": len(v)},
    )
    return _run_phase(
        run_logger,
        "build",
        lambda: build_graph(values, preserve_order=preserve_order),
        _graph_stats,
    )


def run_visualization(
    input_path: str | Path,
    *,
    settings: ValueGraphSettings | None = None,
    sink: OutputSink | None = None,
    launcher: ViewerLauncher = open_in_browser,
    run_logger: RunLoggerProtocol | None = None,
) -> VisualizationResult:
    """
    Build the graph for a document and write the visualization page.

    Args:
        input_path: Key/value document to read
        settings: Pipeline settings (defaults from environment)
        sink: Where the page is written (temp file in settings.output_dir
            when None)
        launcher: Callable opening the written location
        run_logger: Optional run logger recording each phase

    Returns:
        VisualizationResult with the artifact location and graph

    Raises:
        ValueGraphError: On any read, parse, render or write failure
    """
    settings = settings or ValueGraphSettings()
    sink = sink or TempFileSink(directory=settings.output_dir)

    graph = load_graph(
        input_path, preserve_order=settings.preserve_order, run_logger=run_logger
    )

    def render() -> bytes:
        template = load_template(settings.template_path)
        page = render_template(template, graph.to_json(), settings.placeholder)
        return page.encode("utf-8")

    page = _run_phase(run_logger, "render", render, lambda p: {"bytes": len(p)})
    location = _run_phase(
        run_logger, "write", lambda: sink.write(page), lambda loc: {"location": loc}
    )

    opened = False
    if settings.open_browser:
        opened = _run_phase(
            run_logger, "open", lambda: launcher(location), lambda ok: {"opened": ok}
        )
        if not opened:
            logger.warning("Viewer did not open; output written to %s", location)

    return VisualizationResult(
        location=location, graph=graph, opened=opened, stats=_graph_stats(graph)
    )
