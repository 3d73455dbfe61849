"""Tests for the Level enum and LogEntry model."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from caplog.models import TRACE, Level, LogEntry


class TestLevel:
    def test_ordered_by_severity(self) -> None:
        assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR

    def test_values_match_stdlib(self) -> None:
        assert Level.ERROR == logging.ERROR
        assert Level.WARN == logging.WARNING
        assert Level.INFO == logging.INFO
        assert Level.DEBUG == logging.DEBUG
        assert Level.TRACE == TRACE

    def test_trace_name_registered(self) -> None:
        assert logging.getLevelName(TRACE) == "TRACE"

    @pytest.mark.parametrize(
        "levelno, expected",
        [
            (logging.CRITICAL, Level.ERROR),
            (logging.ERROR, Level.ERROR),
            (35, Level.WARN),
            (logging.WARNING, Level.WARN),
            (logging.INFO, Level.INFO),
            (15, Level.DEBUG),
            (logging.DEBUG, Level.DEBUG),
            (TRACE, Level.TRACE),
            (1, Level.TRACE),
            (logging.NOTSET, Level.TRACE),
        ],
    )
    def test_from_levelno(self, levelno: int, expected: Level) -> None:
        assert Level.from_levelno(levelno) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("error", Level.ERROR),
            ("ERR", Level.ERROR),
            ("critical", Level.ERROR),
            ("Warn", Level.WARN),
            ("warning", Level.WARN),
            ("info", Level.INFO),
            (" debug ", Level.DEBUG),
            ("trace", Level.TRACE),
            ("20", Level.INFO),
            (logging.WARNING, Level.WARN),
            (Level.DEBUG, Level.DEBUG),
        ],
    )
    def test_parse(self, name: str | int, expected: Level) -> None:
        assert Level.parse(name) is expected

    def test_parse_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level 'loud'"):
            Level.parse("loud")


class TestLogEntry:
    def test_target_is_optional(self) -> None:
        entry = LogEntry(level=Level.INFO, message="hello")
        assert entry.target is None

    def test_entries_are_immutable(self) -> None:
        entry = LogEntry(level=Level.INFO, message="hello", target="app")
        with pytest.raises(ValidationError):
            entry.message = "changed"  # type: ignore[misc]

    def test_entries_compare_by_value(self) -> None:
        assert LogEntry(level=Level.WARN, message="a") == LogEntry(
            level=Level.WARN, message="a"
        )

