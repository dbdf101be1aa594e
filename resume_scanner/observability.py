"""Observability for scan runs - logging setup and event recording."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class ScanEvent:
    """A single event recorded during a scan run."""

    timestamp: datetime
    event_type: str  # "scan", "warning", "error"
    data: Dict[str, Any]
    duration_ms: Optional[float] = None


class ScanObserver:
    """
    Observability layer for scan runs.

    Configures the ``resume_scanner`` logger and collects events for a
    session summary. Timing is recorded here only and never feeds a score.
    """

    def __init__(self, verbose: bool = False):
        self.events: List[ScanEvent] = []
        self.logger = logging.getLogger("resume_scanner")
        self.verbose = verbose
        self._setup_logging()

    def _setup_logging(self):
        """Configure logging format and handlers."""
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO if self.verbose else logging.WARNING)

    def log_scan(self, path: str, level: str, score: int, duration_ms: float):
        """
        Log a completed scan.

        Args:
            path: File that was scanned
            level: Experience level used
            score: Overall ATS score
            duration_ms: Analysis time in milliseconds
        """
        self.events.append(
            ScanEvent(
                timestamp=datetime.now(),
                event_type="scan",
                data={"path": path, "level": level, "score": score},
                duration_ms=duration_ms,
            )
        )
        self.logger.info(f"Scanned {path} ({level}): score {score} ({duration_ms:.2f}ms)")

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.events.append(
            ScanEvent(
                timestamp=datetime.now(),
                event_type="warning",
                data={"message": message, "context": context or {}},
            )
        )
        self.logger.warning(message)

    def log_error(self, error_type: str, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Log an error event.

        Args:
            error_type: Type of error (e.g., "file_not_found", "decode")
            message: Error message
            context: Additional context about the error
        """
        self.events.append(
            ScanEvent(
                timestamp=datetime.now(),
                event_type="error",
                data={"error_type": error_type, "message": message, "context": context or {}},
            )
        )
        self.logger.error(f"Error ({error_type}): {message}")

    def get_session_stats(self) -> Dict[str, Any]:
        """
        Get aggregated statistics for the current session.

        Returns:
            Dictionary with session statistics
        """
        scans = [e for e in self.events if e.event_type == "scan"]
        warnings = [e for e in self.events if e.event_type == "warning"]
        errors = [e for e in self.events if e.event_type == "error"]
        scores = [e.data["score"] for e in scans]

        return {
            "event_count": len(self.events),
            "scans": len(scans),
            "warnings": len(warnings),
            "errors": len(errors),
            "total_duration_ms": sum(e.duration_ms or 0 for e in self.events),
            "average_score": sum(scores) / len(scores) if scores else 0.0,
        }

    def clear(self):
        """Clear all recorded events."""
        self.events.clear()
        self.logger.info("Observer events cleared")
