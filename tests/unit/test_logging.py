"""Tests for sqltags.utils.logging."""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator

import msgspec
import pytest

from sqltags.utils.logging import QueryLogFormatter, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_sqltags_logger() -> Generator[None, None, None]:
    root = logging.getLogger("sqltags")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


def _record(**fields: object) -> logging.LogRecord:
    record = logging.LogRecord("sqltags.executor", logging.DEBUG, __file__, 10, "executing %s", ("get_user",), None)
    record.__dict__.update(fields)
    return record


def test_get_logger_namespaces() -> None:
    assert get_logger().name == "sqltags"
    assert get_logger("compiler").name == "sqltags.compiler"
    assert get_logger("sqltags.executor").name == "sqltags.executor"


def test_formatter_keeps_query_fields() -> None:
    record = _record(query="get_user", operation="select_one_row", parameter_count=2, unrelated="x")
    entry = msgspec.json.decode(QueryLogFormatter().format(record))
    assert entry["message"] == "executing get_user"
    assert entry["level"] == "DEBUG"
    assert entry["logger"] == "sqltags.executor"
    assert entry["query"] == "get_user"
    assert entry["operation"] == "select_one_row"
    assert entry["parameter_count"] == 2
    assert "unrelated" not in entry


def test_formatter_without_query_fields() -> None:
    entry = msgspec.json.decode(QueryLogFormatter().format(_record()))
    assert "query" not in entry
    assert "operation" not in entry


def test_formatter_includes_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("sqltags", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    entry = msgspec.json.decode(QueryLogFormatter().format(record))
    assert "ValueError: boom" in entry["exception"]


@pytest.mark.parametrize(("json", "formatter_type"), [(True, QueryLogFormatter), (False, logging.Formatter)])
def test_configure_logging(json: bool, formatter_type: type[logging.Formatter]) -> None:
    handler = configure_logging(level="debug", json=json)
    root = logging.getLogger("sqltags")
    assert root.level == logging.DEBUG
    assert root.propagate is False
    assert root.handlers == [handler]
    assert type(handler.formatter) is formatter_type
