"""
Tests for structured logging.
"""
import json
import logging

from mockgen.app.logger import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("mockgen.test", logging.INFO, __file__, 1, "Generated %s rows", (10,), None)
    record.table = "users"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Generated 10 rows"
    assert payload["level"] == "INFO"
    assert payload["table"] == "users"
    assert "exception" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("rollback failed")
    except RuntimeError:
        import sys
        record = logging.LogRecord("mockgen.test", logging.ERROR, __file__, 1, "oops", (), sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: rollback failed" in payload["exception"]


def test_configure_logging_scopes_to_package():
    """Only the package namespace is configured; repeated calls do not stack handlers."""
    root_handlers = list(logging.getLogger().handlers)

    configure_logging("debug", json_format=True)
    logger = configure_logging("info", json_format=True)

    assert logger.name == "mockgen"
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
    assert logging.getLogger().handlers == root_handlers
