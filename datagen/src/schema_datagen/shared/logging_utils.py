"""
Structured logging for the HTTP surface and the live feed.

Each structured record is one JSON object carried as the log message. The
correlation ID lives in a context variable so concurrent requests sharing
a module-level logger do not overwrite each other's ID.
"""
import json
import logging
import uuid
from contextvars import ContextVar
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class StructuredLogger:
    """JSON-line logger with a correlation ID and bound context fields."""

    def __init__(self, logger_name: str, context: dict[str, Any] | None = None):
        self.logger = logging.getLogger(logger_name)
        self.context = dict(context or {})

    def bind(self, **context: Any) -> "StructuredLogger":
        """Return a logger that adds ``context`` to every record."""
        return StructuredLogger(self.logger.name, {**self.context, **context})

    def set_correlation_id(self, correlation_id: str):
        _correlation_id.set(correlation_id)

    def clear_correlation_id(self):
        _correlation_id.set(None)

    @property
    def correlation_id(self) -> str | None:
        return _correlation_id.get()

    @staticmethod
    def generate_correlation_id(prefix: str = "GEN") -> str:
        return f"{prefix}_{uuid.uuid4().hex[:12]}"

    def _format_message(self, message: str, **kwargs) -> dict:
        entry: dict[str, Any] = {
            "event": message,
            "correlation_id": _correlation_id.get() or "none",
        }
        entry.update(self.context)
        entry.update(kwargs)
        return entry

    def _log(self, level: int, message: str, **kwargs):
        if not self.logger.isEnabledFor(level):
            return
        entry = self._format_message(message, **kwargs)
        self.logger.log(level, json.dumps(entry, default=str, ensure_ascii=False))

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)


def get_structured_logger(name: str, **context: Any) -> StructuredLogger:
    return StructuredLogger(name, context)
