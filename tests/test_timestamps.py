"""Tests for timestamp display formatting."""

import os
import time

import pytest

from chat_explorer.export.timestamps import UNKNOWN_TIME, format_message_timestamp, parse_timestamp

pytestmark = pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")


@pytest.fixture
def utc_local_time(monkeypatch):
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_is_unknown(value):
    assert format_message_timestamp(value) == UNKNOWN_TIME


def test_unparseable_is_returned_trimmed():
    assert format_message_timestamp("  yesterday-ish ") == "yesterday-ish"


def test_zulu_suffix_is_utc():
    parsed = parse_timestamp("2026-01-02T03:04:05Z")
    assert parsed is not None
    assert parsed.utcoffset().total_seconds() == 0


def test_formats_in_local_time(utc_local_time):
    assert format_message_timestamp("2026-01-02T03:04:05Z") == "2026-01-02 03:04:05 UTC"


def test_offset_is_converted_to_local_time(utc_local_time):
    assert format_message_timestamp("2026-01-02T05:04:05+02:00") == "2026-01-02 03:04:05 UTC"


def test_fractional_seconds_are_dropped(utc_local_time):
    assert format_message_timestamp("2026-01-02T03:04:05.123456Z") == "2026-01-02 03:04:05 UTC"
