"""Render adapter - turns a serialized graph into a viewable artifact.

This package injects graph JSON into the HTML template, writes the result
through an output sink and opens it in the default browser.
"""

from __future__ import annotations

from .sinks import FileSink, MemorySink, TempFileSink
from .template import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_TEMPLATE_NAME,
    load_template,
    render_template,
)
from .viewer import open_in_browser

__all__ = [
    # Template
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_TEMPLATE_NAME",
    "load_template",
    "render_template",
    # Sinks
    "TempFileSink",
    "FileSink",
    "MemorySink",
    # Viewer
    "open_in_browser",
]
