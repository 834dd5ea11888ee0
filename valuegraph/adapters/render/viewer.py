"""Viewer launcher - opens a generated artifact in the default browser."""

from __future__ import annotations

import logging
import webbrowser
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["artifact_url", "open_in_browser"]


def artifact_url(location: str) -> str:
    """Return a URL for an artifact location, adding file:// to local paths."""
    if "://" in location:
        return location
    return Path(location).resolve().as_uri()


def open_in_browser(location: str) -> bool:
    """
    Try to open the artifact in the default browser.

    Returns:
        True if a browser was launched. Failure is not an error; the caller
        reports the artifact location instead.
    """
    url = artifact_url(location)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning("Could not open browser for %s: %s", url, e)
        return False

    if not opened:
        logger.warning("No browser available to open %s", url)
    return opened
