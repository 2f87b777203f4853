# tests/test_timeparse.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskbell.cli.timeparse import parse_hhmm, parse_when

NOW = datetime(2026, 10, 16, 14, 5, 33, 120)


def test_relative_offsets() -> None:
    assert parse_when("+30m", now=NOW) == datetime(2026, 10, 16, 14, 35, 33)
    assert parse_when("+2h", now=NOW) == datetime(2026, 10, 16, 16, 5, 33)
    assert parse_when("+1d", now=NOW) == datetime(2026, 10, 17, 14, 5, 33)


def test_clock_time_is_today() -> None:
    assert parse_when("9:30", now=NOW) == datetime(2026, 10, 16, 9, 30)


def test_iso_forms() -> None:
    assert parse_when("2026-12-01", now=NOW) == datetime(2026, 12, 1)
    assert parse_when("2026-12-01 08:15", now=NOW) == datetime(2026, 12, 1, 8, 15)


def test_now() -> None:
    assert parse_when("now", now=NOW) == datetime(2026, 10, 16, 14, 5, 33)


@pytest.mark.parametrize("text", ["", "tomorrow", "25:00", "+5y"])
def test_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_when(text, now=NOW)


def test_parse_hhmm_bounds() -> None:
    assert parse_hhmm("23:59") == (23, 59)
    with pytest.raises(ValueError):
        parse_hhmm("24:00")
