"""
Services layer for valuegraph.

Provides the orchestration used by the CLI. The core modules stay free of
I/O; this layer wires them to the document loader, the template renderer,
the output sink and the viewer.

Usage:
    from valuegraph.services import ValueGraphSettings, run_visualization

    result = run_visualization("values.yaml", settings=ValueGraphSettings())

Internal services:
    config_models: Environment-backed settings
    visualize: Load, build, render, write and open pipeline
"""

from __future__ import annotations

from .config_models import ValueGraphSettings
from .visualize import VisualizationResult, load_graph, run_visualization

__all__ = [
    "ValueGraphSettings",
    "VisualizationResult",
    "load_graph",
    "run_visualization",
]
