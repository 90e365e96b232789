"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from shared.logging.logging_setup import ColorLogger, ConsoleFormatter, TimezoneFormatter


def _record(level: int, msg: str, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord("corpus_bridge", level, __file__, 1, msg, args, None)


class TestColorLogger:
    def test_color_is_passed_as_extra(self):
        inner = MagicMock()
        ColorLogger(inner).info("assembled %d items", 5, color="cyan")
        inner.log.assert_called_once_with(logging.INFO, "assembled %d items", 5, extra={"color": "cyan"})

    def test_without_color_no_extra_is_added(self):
        inner = MagicMock()
        ColorLogger(inner).warning("careful")
        inner.log.assert_called_once_with(logging.WARNING, "careful")

    def test_other_attributes_are_delegated(self):
        inner = MagicMock()
        inner.name = "corpus_bridge"
        assert ColorLogger(inner).name == "corpus_bridge"


class TestFormatters:
    def test_warning_prefix_and_args_are_merged(self):
        formatter = TimezoneFormatter(tz_name="UTC", fmt="%(levelname)s %(message)s")
        assert formatter.format(_record(logging.WARNING, "disk %d%%", (90,))) == "WARNING ⚠️ disk 90%"

    def test_info_has_no_prefix(self):
        formatter = TimezoneFormatter(tz_name="UTC", fmt="%(message)s")
        assert formatter.format(_record(logging.INFO, "plain")) == "plain"

    def test_console_formatter_applies_color(self):
        formatter = ConsoleFormatter(tz_name="UTC", fmt="%(message)s")
        record = _record(logging.ERROR, "store down")
        record.color = "red"
        assert formatter.format(record) == "\033[31m⛔ store down\033[0m"

    def test_record_is_not_modified_between_handlers(self):
        console = ConsoleFormatter(tz_name="UTC", fmt="%(message)s")
        plain = TimezoneFormatter(tz_name="UTC", fmt="%(message)s")
        record = _record(logging.WARNING, "store %s slow", ("rest",))

        console.format(record)

        assert plain.format(record) == "⚠️ store rest slow"
        assert record.msg == "store %s slow"
        assert record.args == ("rest",)
