"""Structured logging utilities for dashboard sessions."""
import json
import logging
import uuid
from datetime import UTC, datetime
from typing import Optional


class StructuredLogger:
    """Structured logger that tags every entry with the owning session."""

    def __init__(self, logger_name: str, session_id: Optional[str] = None):
        self.logger = logging.getLogger(logger_name)
        self._session_id: Optional[str] = session_id

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    @staticmethod
    def new_session_id() -> str:
        """Generate new session ID."""
        return f"SESS_{uuid.uuid4().hex[:12]}"

    def _format_message(self, level: str, message: str, **kwargs) -> dict:
        """Format log message with structured data."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level,
            "logger": self.logger.name,
            "message": message,
            "session_id": self._session_id or "none",
        }

        if kwargs:
            log_entry["context"] = kwargs

        return log_entry

    def _emit(self, level: int, message: str, **kwargs):
        # Skip JSON encoding when the level is filtered out
        if not self.logger.isEnabledFor(level):
            return
        entry = self._format_message(logging.getLevelName(level), message, **kwargs)
        self.logger.log(level, json.dumps(entry, default=str))

    def debug(self, message: str, **kwargs):
        self._emit(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._emit(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._emit(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._emit(logging.ERROR, message, **kwargs)


def get_structured_logger(
    name: str, session_id: Optional[str] = None
) -> StructuredLogger:
    """Get or create structured logger."""
    return StructuredLogger(name, session_id)
