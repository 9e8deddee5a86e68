"""
Unit tests for core.logger module.

Tests:
- Logger initialization with name and output mode
- format_kv_pairs() quoting, escaping and truncation
- StructuredFormatter rendering of structured_kv extras
- JSON output mode
- Level short-circuit before formatting
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from jidkit.core import Logger, StructuredFormatter
from jidkit.core.logger import format_kv_pairs
from jidkit.models.constants import ComponentKind


class TestInit:
    """Logger initialization."""

    def test_name(self):
        assert Logger("jidkit.test").name == "jidkit.test"

    def test_default_not_json(self):
        assert Logger("test")._json_output is False

    def test_json_mode(self):
        assert Logger("test", json_output=True)._json_output is True

    def test_default_max_value_length(self):
        assert Logger("test")._max_value_length == 1000


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self):
        assert format_kv_pairs({"key": "hello"}) == " key=hello"
        assert format_kv_pairs({"key": 123}) == " key=123"

    def test_enum_value(self):
        assert format_kv_pairs({"kind": ComponentKind.NODE}) == " kind=node"

    def test_with_spaces(self):
        assert format_kv_pairs({"value": "Joe Smith"}) == ' value="Joe Smith"'

    def test_with_equals(self):
        assert format_kv_pairs({"key": "foo=bar"}) == ' key="foo=bar"'

    def test_with_double_quotes(self):
        assert format_kv_pairs({"key": 'say "hello"'}) == ' key="say \\"hello\\""'

    def test_empty_value(self):
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_backslash_unquoted(self):
        assert format_kv_pairs({"node": "joe\\20smith"}) == " node=joe\\20smith"

    def test_backslash_with_spaces(self):
        assert format_kv_pairs({"key": "a\\b c"}) == ' key="a\\\\b c"'

    def test_empty_dict(self):
        assert format_kv_pairs({}) == ""

    def test_truncation(self):
        result = format_kv_pairs({"resource": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self):
        result = format_kv_pairs({"resource": "x" * 1500}, max_value_length=None)
        assert "truncated" not in result

    def test_custom_prefix(self):
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestStructuredFormatter:
    """StructuredFormatter output."""

    def _record(self, msg: str, **extra) -> logging.LogRecord:
        record = logging.LogRecord("jidkit.prep", logging.DEBUG, __file__, 1, msg, None, None)
        for k, v in extra.items():
            setattr(record, k, v)
        return record

    def test_without_fields(self):
        assert StructuredFormatter().format(self._record("hello")) == "debug jidkit.prep hello"

    def test_with_fields(self):
        record = self._record(
            "component_rejected", structured_kv={"kind": ComponentKind.NODE, "value": "a b"}
        )
        assert (
            StructuredFormatter().format(record)
            == 'debug jidkit.prep component_rejected kind=node value="a b"'
        )


class TestLogging:
    """Records emitted through the standard logging machinery."""

    def test_extra_fields(self, caplog):
        with caplog.at_level(logging.INFO, logger="jidkit.test"):
            Logger("jidkit.test").info("hello", count=3)

        record = caplog.records[0]
        assert record.getMessage() == "hello"
        assert record.structured_kv == {"count": 3}

    def test_long_values_clipped(self, caplog):
        with caplog.at_level(logging.INFO, logger="jidkit.test"):
            Logger("jidkit.test", max_value_length=10).info("hello", value="y" * 50)

        assert caplog.records[0].structured_kv["value"].startswith("y" * 10 + "...")

    def test_json(self, caplog):
        with caplog.at_level(logging.INFO, logger="jidkit.json"):
            Logger("jidkit.json", json_output=True).info("test", value=42, kind=ComponentKind.DOMAIN)

        parsed = json.loads(caplog.records[0].getMessage())
        assert parsed["message"] == "test"
        assert parsed["level"] == "info"
        assert parsed["logger"] == "jidkit.json"
        assert parsed["value"] == 42
        assert parsed["kind"] == "domain"

    @pytest.mark.parametrize("method", ["debug", "info", "warning", "error"])
    def test_levels(self, caplog, method):
        with caplog.at_level(logging.DEBUG, logger="jidkit.levels"):
            getattr(Logger("jidkit.levels"), method)("event")

        assert caplog.records[0].levelname == method.upper()

    def test_exception_attaches_traceback(self, caplog):
        logger = Logger("jidkit.exc")
        with caplog.at_level(logging.ERROR, logger="jidkit.exc"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.exception("failed")

        assert caplog.records[0].exc_info is not None


class TestShortCircuit:
    """Disabled levels skip formatting entirely."""

    def test_disabled_level_not_forwarded(self):
        logger = Logger("test")
        mock = MagicMock()
        mock.isEnabledFor.return_value = False
        logger._logger = mock

        logger.debug("skipped", value="x")

        mock.log.assert_not_called()

    def test_enabled_level_forwarded(self):
        logger = Logger("test")
        mock = MagicMock()
        mock.isEnabledFor.return_value = True
        logger._logger = mock

        logger.debug("sent", value="x")

        mock.log.assert_called_once_with(
            logging.DEBUG, "sent", extra={"structured_kv": {"value": "x"}}, exc_info=False
        )
