"""Output sinks for the rendered artifact.

A sink accepts bytes and returns the location it wrote them to, which keeps
the pipeline independent of where the artifact actually lands.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from valuegraph.common.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

__all__ = ["TempFileSink", "FileSink", "MemorySink"]


class TempFileSink:
    """Writes each artifact to a new temporary file."""

    def __init__(
        self,
        directory: str | Path | None = None,
        prefix: str = "valuegraph-",
        suffix: str = ".html",
    ):
        self.directory = Path(directory) if directory else None
        self.prefix = prefix
        self.suffix = suffix

    def write(self, data: bytes) -> str:
        try:
            if self.directory:
                self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                prefix=self.prefix,
                suffix=self.suffix,
                dir=self.directory,
                delete=False,
            ) as f:
                f.write(data)
                location = f.name
        except OSError as e:
            raise OutputWriteError(f"writing generated file: {e}") from e

        logger.info("Wrote %d bytes to %s", len(data), location)
        return location


class FileSink:
    """Writes the artifact to a fixed path, replacing any existing file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, data: bytes) -> str:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(f"writing generated file {self.path}: {e}") from e

        logger.info("Wrote %d bytes to %s", len(data), self.path)
        return str(self.path.resolve())


class MemorySink:
    """Keeps artifacts in memory; used when no file should be produced."""

    def __init__(self, location: str = "memory://valuegraph"):
        self.location = location
        self.data: bytes | None = None

    def write(self, data: bytes) -> str:
        self.data = data
        return self.location
