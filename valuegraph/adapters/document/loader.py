"""Document Loader - YAML key/value documents.

Reads a document of flat ``key: value`` pairs and returns it as a mapping of
strings. JSON documents are accepted since JSON is valid YAML.

Scalars keep their source text: ``on``, ``0x10`` or ``1.50`` stay exactly as
written instead of being resolved to booleans or numbers. Only null (``~``,
``null`` or an empty value) is recognized, and it reads as the empty string.

Usage:
    from valuegraph.adapters.document import load_values

    values = load_values("values.yaml")
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from valuegraph.common.exceptions import InputParseError, InputReadError

logger = logging.getLogger(__name__)

__all__ = ["TextLoader", "load_values", "parse_values", "scalar_to_text"]

NULL_TAG = "tag:yaml.org,2002:null"


class TextLoader(yaml.BaseLoader):
    """YAML loader that builds every plain scalar as its source text, except null."""


TextLoader.add_implicit_resolver(
    NULL_TAG,
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
TextLoader.add_constructor(NULL_TAG, lambda loader, node: None)


def scalar_to_text(value: Any) -> str:
    """Convert a loaded scalar to text.

    Raises:
        TypeError: If value is a nested mapping or sequence
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a scalar, got {type(value).__name__}")


def parse_values(text: str, source: str = "<string>") -> dict[str, str]:
    """
    Decode a YAML document into a flat key/value mapping.

    Args:
        text: Document contents
        source: Name used in error messages

    Returns:
        Mapping in document order. An empty document yields an empty mapping.

    Raises:
        InputParseError: If the document is not valid YAML or not a flat
            mapping of scalars
    """
    try:
        data = yaml.load(text, Loader=TextLoader)
    except yaml.YAMLError as e:
        raise InputParseError(f"parsing yaml {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InputParseError(
            f"parsing yaml {source}: expected a mapping, got {type(data).__name__}"
        )

    values: dict[str, str] = {}
    for key, value in data.items():
        try:
            values[scalar_to_text(key)] = scalar_to_text(value)
        except TypeError as e:
            raise InputParseError(f"parsing yaml {source}: key {key!r}: {e}") from e

    logger.debug("Parsed %d entries from %s", len(values), source)
    return values


def load_values(path: str | Path) -> dict[str, str]:
    """
    Read and decode a key/value document from disk.

    Raises:
        InputReadError: If the file cannot be read
        InputParseError: If the contents are not a flat key/value mapping
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"reading input {path}: {e}") from e
    return parse_values(text, source=str(path))
