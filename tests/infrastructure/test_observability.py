"""Structured logging — JSON formatter fields and idempotent setup."""

import json
import logging

from book_catalog.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "book_catalog.services.book_repository", logging.INFO,
        __file__, 1, "Book %s created", ("0691161206",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "book_catalog.services.book_repository"
    assert log["message"] == "Book 0691161206 created"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_fields():
    log = json.loads(JSONFormatter().format(
        _record(isbn="0691161206", status_code=201, unrelated="x"),
    ))
    assert log["isbn"] == "0691161206"
    assert log["status_code"] == 201
    assert "unrelated" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_setup_logging_does_not_duplicate_handlers():
    previous_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(previous_level)
