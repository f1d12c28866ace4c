"""Structured Logging: tests for the JSON formatter."""

import json
import logging

from fieldroutes_relay.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "fieldroutes_relay.test", logging.ERROR, __file__, 1, "API Error: %s", ("boom",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "fieldroutes_relay.test"
    assert log["message"] == "API Error: boom"
    assert "timestamp" in log


def test_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(
            status_code=502, upstream_body={"message": "x"},
            error_code="API Error", api_key="secret", client="127.0.0.1",
        ),
    ))
    assert log["status_code"] == 502
    assert log["error_code"] == "API Error"
    assert "client" not in log
    assert log["upstream_body"] == {"message": "x"}
    assert "api_key" not in log
