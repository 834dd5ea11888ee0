"""Template rendering for the graph visualization page.

The template is a static HTML page carrying a placeholder token where the
serialized graph JSON is injected. Only the first occurrence is replaced.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from valuegraph.common.exceptions import TemplateError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_TEMPLATE_NAME",
    "load_template",
    "render_template",
]

DEFAULT_PLACEHOLDER = "REPLACE_ME"
DEFAULT_TEMPLATE_NAME = "graph.html"


def load_template(path: str | Path | None = None) -> str:
    """
    Read a visualization template.

    Args:
        path: Template file. When None the packaged d3 template is used.

    Raises:
        TemplateError: If the template cannot be read
    """
    if path is None:
        resource = resources.files(__package__).joinpath(
            "templates", DEFAULT_TEMPLATE_NAME
        )
        try:
            return resource.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"reading template {DEFAULT_TEMPLATE_NAME}: {e}") from e

    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"reading template {path}: {e}") from e


def render_template(
    template: str, graph_json: str, placeholder: str = DEFAULT_PLACEHOLDER
) -> str:
    """
    Inject graph JSON into a template.

    Raises:
        TemplateError: If the placeholder does not appear in the template
    """
    if placeholder not in template:
        raise TemplateError(f"template has no {placeholder!r} placeholder")
    logger.debug("Injecting %d bytes of graph json", len(graph_json))
    return template.replace(placeholder, graph_json, 1)
