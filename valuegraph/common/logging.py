"""
Run log - one JSON Lines file per visualization run.

Each pipeline phase appends a ``started`` line followed by either a
``completed`` line (duration and stats) or an ``error`` line. While the run
log is open as a context manager, warnings from the ``valuegraph`` loggers
are appended too, tagged with the phase that was running, so a viewer that
failed to launch shows up next to the ``open`` phase.

    with RunLogger("logs") as run_log:
        run_visualization("values.yaml", run_logger=run_log)

    for line in read_run_log(run_log.log_file, kind="phase"):
        print(line["phase"], line["status"])
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any

__all__ = ["RunLogger", "configure_logging", "read_run_log"]

PHASE = "phase"
RECORD = "record"


class RunLogger:
    """Appends phase and warning lines for a single run to ``log_dir``."""

    def __init__(
        self,
        log_dir: str | Path,
        capture_level: int = logging.WARNING,
        logger_name: str = "valuegraph",
    ):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"run_{datetime.now():%Y%m%d_%H%M%S_%f}.jsonl"

        self.capture_level = capture_level
        self.logger_name = logger_name
        self.phase: str | None = None
        self._phase_began: float | None = None
        self._forwarder: _WarningForwarder | None = None

    def __enter__(self) -> RunLogger:
        self._forwarder = _WarningForwarder(self)
        logging.getLogger(self.logger_name).addHandler(self._forwarder)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if self._forwarder:
            logging.getLogger(self.logger_name).removeHandler(self._forwarder)
            self._forwarder = None

    def append(self, kind: str, status: str, **fields: Any) -> None:
        """Write one line; fields left as None are omitted."""
        line = {"kind": kind, "phase": self.phase or "system", "status": status}
        line["time"] = datetime.now().isoformat()
        line.update((k, v) for k, v in fields.items() if v is not None)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(line) + "\n")

    def _finish(self, phase: str, status: str, **fields: Any) -> None:
        elapsed = None
        if self.phase == phase and self._phase_began is not None:
            elapsed = round((time.perf_counter() - self._phase_began) * 1000)
        self.phase = phase
        self.append(PHASE, status, duration_ms=elapsed, **fields)
        self.phase = None
        self._phase_began = None

    def phase_start(self, phase: str, message: str = "") -> None:
        self.phase = phase
        self._phase_began = time.perf_counter()
        self.append(PHASE, "started", message=message or None)

    def phase_complete(
        self, phase: str, message: str = "", stats: dict[str, Any] | None = None
    ) -> None:
        self._finish(phase, "completed", message=message or None, stats=stats)

    def phase_error(self, phase: str, error: str, message: str = "") -> None:
        self._finish(phase, "error", message=message or None, error=error)


class _WarningForwarder(logging.Handler):
    """Copies log records at or above the run's capture level into the run log."""

    def __init__(self, run_log: RunLogger):
        super().__init__(level=run_log.capture_level)
        self.run_log = run_log

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.run_log.append(
                RECORD,
                "error" if record.levelno >= logging.ERROR else "warning",
                logger=record.name,
                message=record.getMessage(),
            )
        except Exception:
            self.handleError(record)


def read_run_log(path: str | Path, kind: str | None = None) -> list[dict[str, Any]]:
    """Return the lines of a run log, optionally only those of one kind.

    A missing file reads as empty; blank or corrupt lines are skipped.
    """
    path = Path(path)
    if not path.exists():
        return []

    lines = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        try:
            line = json.loads(raw)
        except json.JSONDecodeError:
            continue
        if kind is None or line.get("kind") == kind:
            lines.append(line)
    return lines


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure the root logger for CLI use."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
