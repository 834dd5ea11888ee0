"""Document Loader - reads flat key/value documents.

This package decodes YAML (and therefore JSON) documents into the
string-to-string mapping consumed by the graph builder.
"""

from __future__ import annotations

from .loader import load_values, parse_values, scalar_to_text

__all__ = [
    "load_values",
    "parse_values",
    "scalar_to_text",
]
