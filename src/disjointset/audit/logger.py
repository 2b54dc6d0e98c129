"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from disjointset.audit.models import LogEvent
from disjointset.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name for context.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context.

        Parameters
        ----------
        stage : str | None
            Stage name or None to clear.
        """
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "stage_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, uses current_stage if not provided.
        """
        if data is None:
            data = {}

        if stage is None:
            stage = self.current_stage

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=stage,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        json.dump(asdict(event), self._file, ensure_ascii=False, separators=(",", ":"), default=str)
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        """
        self.event(
            "run_finished",
            data={"status": status, "duration_seconds": duration_seconds},
        )

    def stage_started(self, stage: str, expected_edges: int | None = None) -> None:
        """Log stage_started event.

        Parameters
        ----------
        stage : str
            Stage identifier.
        expected_edges : int | None, optional
            Number of edges the stage will examine.
        """
        self.set_stage(stage)

        data: dict[str, Any] = {}
        if expected_edges is not None:
            data["expected_edges"] = expected_edges

        self.event("stage_started", data=data, stage=stage)

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log stage_finished event.

        Parameters
        ----------
        stage : str
            Stage identifier.
        duration_seconds : float
            Stage execution time in seconds.
        counters : dict[str, int] | None, optional
            Stage-specific counters.
        """
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters

        self.event("stage_finished", data=data, stage=stage)

    def edge_selected(self, source: Any, target: Any, weight: float) -> None:
        """Log edge_selected event (DEBUG).

        Parameters
        ----------
        source : Any
            Edge source node.
        target : Any
            Edge target node.
        weight : float
            Edge weight.
        """
        self.event(
            "edge_selected",
            data={"source": source, "target": target, "weight": weight},
            level="DEBUG",
        )

    def edge_skipped(self, source: Any, target: Any, weight: float, root: Any) -> None:
        """Log edge_skipped event (DEBUG) for an edge closing a cycle.

        Parameters
        ----------
        source : Any
            Edge source node.
        target : Any
            Edge target node.
        weight : float
            Edge weight.
        root : Any
            Root shared by both endpoints.
        """
        self.event(
            "edge_skipped",
            data={"source": source, "target": target, "weight": weight, "root": root},
            level="DEBUG",
        )

    def error(
        self,
        exception_class: str,
        message: str,
        traceback: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        traceback : str | None, optional
            Stack trace (only in verbose mode).
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, level="ERROR")
