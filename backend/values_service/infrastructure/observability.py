"""Structured Logging: JSON and text formatters carrying intake context.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Intake context (index, topic, attempt/max_attempts, operation, error_code, path)
      is surfaced by both formats whenever the record carries it
    - JSON format in production, human-readable text otherwise

Design Decisions:
    - Context travels as logging `extra=` fields, so adapters and the startup
      gate log with plain logger calls and no wrapper API
    - Text format appends context as key=value pairs after the message
"""

import json
import logging
from datetime import datetime, timezone

_CONTEXT_FIELDS = (
    "index", "topic", "attempt", "max_attempts",
    "operation", "error_code", "path",
)


def record_context(record: logging.LogRecord) -> dict:
    """Intake context fields present on a log record, in a stable order."""
    context = {}
    for key in _CONTEXT_FIELDS:
        val = record.__dict__.get(key)
        if val is not None:
            context[key] = val
    return context


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable lines, e.g. `... WARNING startup: Waiting for Postgres [attempt=2 max_attempts=10]`."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ContextTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
