"""Structured logging — JSON formatter surfaces request extras."""

import json
import logging

from app.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "app.api.middleware", logging.INFO, __file__, 1, "GET /clients -> 200", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.api.middleware"
    assert log["message"] == "GET /clients -> 200"
    assert "timestamp" in log


def test_json_formatter_surfaces_request_extras():
    log = json.loads(JSONFormatter().format(_record(
        request_id="abc", path="/clients", method="GET", status=200, duration_ms=1.5,
    )))
    assert log["request_id"] == "abc"
    assert log["path"] == "/clients"
    assert log["status"] == 200
    assert log["duration_ms"] == 1.5


def test_json_formatter_omits_absent_extras():
    log = json.loads(JSONFormatter().format(_record()))
    assert "request_id" not in log
    assert "error_code" not in log


def test_json_formatter_surfaces_error_classification():
    log = json.loads(JSONFormatter().format(_record(
        error_code="RESOURCE_NOT_FOUND", category="resource_not_found", severity="warning",
    )))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["category"] == "resource_not_found"
    assert log["severity"] == "warning"
