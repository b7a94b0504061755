"""
Unit tests for core.logger module.

Tests:
- format_kv_pairs() escaping and truncation
- StructuredFormatter key=value and JSON rendering
- Logger levels, structured extras and value truncation
"""

import json
import logging

import pytest

from lnconnect.core import Logger, StructuredFormatter
from lnconnect.core.logger import format_kv_pairs


def _record(msg: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("cli", logging.WARNING, __file__, 1, msg, None, None)
    if extra:
        record.structured_kv = extra
    return record


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self) -> None:
        assert format_kv_pairs({"code": "invalidPort"}) == " code=invalidPort"
        assert format_kv_pairs({"port": 9735}) == " port=9735"

    def test_with_spaces(self) -> None:
        assert format_kv_pairs({"key": "hello world"}) == ' key="hello world"'

    def test_with_equals(self) -> None:
        assert format_kv_pairs({"key": "foo=bar"}) == ' key="foo=bar"'

    def test_with_double_quotes(self) -> None:
        assert format_kv_pairs({"key": 'say "hello"'}) == ' key="say \\"hello\\""'

    def test_empty_value(self) -> None:
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_ipv6_not_quoted(self) -> None:
        assert format_kv_pairs({"host": "[::1]:9735"}) == " host=[::1]:9735"

    def test_empty_dict(self) -> None:
        assert format_kv_pairs({}) == ""

    def test_multiple_keys(self) -> None:
        assert format_kv_pairs({"a": 1, "b": 2}) == " a=1 b=2"

    def test_custom_prefix(self) -> None:
        assert format_kv_pairs({"a": 1}, prefix="") == "a=1"

    def test_truncation(self) -> None:
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result
        assert len(result) < 1500

    def test_truncation_disabled(self) -> None:
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=None)
        assert "truncated" not in result


class TestStructuredFormatter:
    """Formatting of log records."""

    def test_plain_record(self) -> None:
        assert StructuredFormatter().format(_record("started")) == "warning cli started"

    def test_structured_record(self) -> None:
        record = _record("connection_string_rejected", code="invalidAts", input="abc")
        assert StructuredFormatter().format(record) == (
            "warning cli connection_string_rejected code=invalidAts input=abc"
        )

    def test_json(self) -> None:
        record = _record("connection_string_rejected", code="invalidAts")
        payload = json.loads(StructuredFormatter(json_output=True).format(record))
        assert payload["level"] == "warning"
        assert payload["logger"] == "cli"
        assert payload["message"] == "connection_string_rejected"
        assert payload["code"] == "invalidAts"
        assert "timestamp" in payload


class TestLogger:
    """Logger wrapper."""

    def test_name(self) -> None:
        assert Logger("cli").name == "cli"

    @pytest.mark.parametrize("level", ["debug", "info", "warning", "error"])
    def test_levels(self, level: str, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("test_levels")
        with caplog.at_level(logging.DEBUG, logger="test_levels"):
            getattr(logger, level)("event", key="value")
        assert caplog.records[-1].levelname == level.upper()
        assert caplog.records[-1].structured_kv == {"key": "value"}

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("test_exception")
        with caplog.at_level(logging.ERROR, logger="test_exception"):
            try:
                raise ValueError("boom")
            except ValueError:
                logger.exception("failed")
        assert caplog.records[-1].exc_info is not None

    def test_values_truncated(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("test_truncate", max_value_length=10)
        with caplog.at_level(logging.INFO, logger="test_truncate"):
            logger.info("event", value="x" * 25, count=25)
        extra = caplog.records[-1].structured_kv
        assert extra["value"] == "x" * 10 + "...<truncated 15 chars>"
        assert extra["count"] == 25

    def test_disabled_level_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = Logger("test_disabled")
        with caplog.at_level(logging.WARNING, logger="test_disabled"):
            logger.debug("hidden")
        assert not [r for r in caplog.records if r.name == "test_disabled"]
