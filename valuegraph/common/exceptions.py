"""
Exception hierarchy for valuegraph.

Every error the pipeline can raise derives from ValueGraphError so the CLI
can report them at a single boundary. Adapters wrap low-level exceptions
(OSError, yaml.YAMLError, ...) with context using ``raise ... from e``.
"""

from __future__ import annotations

__all__ = [
    "ValueGraphError",
    "InputError",
    "InputReadError",
    "InputParseError",
    "SerializationError",
    "TemplateError",
    "OutputWriteError",
]


class ValueGraphError(Exception):
    """Base exception for all valuegraph errors."""


class InputError(ValueGraphError):
    """Base exception for input document errors."""


class InputReadError(InputError):
    """Raised when the input document cannot be read."""


class InputParseError(InputError):
    """Raised when the input document is not a flat key/value mapping."""


class SerializationError(ValueGraphError):
    """Raised when a graph cannot be encoded to or decoded from JSON."""


class TemplateError(ValueGraphError):
    """Raised when the visualization template cannot be read or rendered."""


class OutputWriteError(ValueGraphError):
    """Raised when the generated artifact cannot be written."""
