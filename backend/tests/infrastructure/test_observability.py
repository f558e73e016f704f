"""Tests for the JSON and text formatters: base fields and intake context."""

import json
import logging

from values_service.infrastructure.observability import (
    ContextTextFormatter, JSONFormatter,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "values_service.test", logging.WARNING, __file__, 1,
        "Waiting for Postgres", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_base_fields_present():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "values_service.test"
    assert payload["message"] == "Waiting for Postgres"
    assert "timestamp" in payload


def test_extras_surface_when_set():
    payload = json.loads(JSONFormatter().format(
        _record(attempt=3, max_attempts=10, index=None),
    ))
    assert payload["attempt"] == 3
    assert payload["max_attempts"] == 10
    assert "index" not in payload


def test_text_format_appends_context_pairs():
    line = ContextTextFormatter().format(_record(attempt=2, max_attempts=10))
    assert "values_service.test: Waiting for Postgres" in line
    assert line.endswith("[attempt=2 max_attempts=10]")


def test_text_format_without_context_is_plain():
    line = ContextTextFormatter().format(_record())
    assert line.endswith("Waiting for Postgres")
    assert "[" not in line
