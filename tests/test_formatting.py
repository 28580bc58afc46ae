"""Tests for date string rendering and relative time in words."""

from datetime import datetime, timezone

import pytest

from calutil import (
    configure,
    relative_time_in_words,
    to_atom_string,
    to_date_string,
    to_date_time_string,
    to_http_string,
    to_instant,
    to_rss_string,
    to_time_string,
)
from calutil.util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

UTC = timezone.utc

# Wednesday, Jan 8 2025, 12:00 UTC
NOW = datetime(2025, 1, 8, 12, 0, 0, tzinfo=UTC)
NOW_TS = int(NOW.timestamp())

# Monday, Jan 6 2025, 09:30 UTC
MONDAY_MORNING = int(datetime(2025, 1, 6, 9, 30, tzinfo=UTC).timestamp())


@pytest.fixture(autouse=True)
def frozen_clock():
    with configure(tz="UTC", clock=NOW.timestamp):
        yield


def test_atom_string():
    assert to_atom_string(MONDAY_MORNING) == "2025-01-06T09:30:00+00:00"
    assert to_atom_string(MONDAY_MORNING, tz="US/Pacific") == "2025-01-06T01:30:00-08:00"


def test_atom_string_follows_default_timezone():
    with configure(tz="Asia/Kolkata"):
        assert to_atom_string(MONDAY_MORNING) == "2025-01-06T15:00:00+05:30"


def test_rss_string():
    assert to_rss_string(MONDAY_MORNING) == "Mon, 06 Jan 2025 09:30:00 +0000"
    assert to_rss_string(MONDAY_MORNING, tz="US/Pacific") == "Mon, 06 Jan 2025 01:30:00 -0800"


def test_http_string_is_always_gmt():
    """Test that the HTTP date ignores the default timezone."""
    expected = "Mon, 06 Jan 2025 09:30:00 GMT"
    assert to_http_string(MONDAY_MORNING) == expected

    with configure(tz="US/Pacific"):
        assert to_http_string(MONDAY_MORNING) == expected
        assert to_http_string("2025-01-06 01:30").endswith(" GMT")


def test_date_and_time_strings_default_formats():
    assert to_date_string(MONDAY_MORNING) == "2025-01-06"
    assert to_time_string(MONDAY_MORNING) == "09:30:00"
    assert to_date_time_string(MONDAY_MORNING) == "2025-01-06 09:30:00"


def test_date_and_time_strings_custom_formats():
    assert to_date_string(MONDAY_MORNING, "%d/%m/%Y") == "06/01/2025"
    assert to_time_string(MONDAY_MORNING, "%H.%M") == "09.30"
    assert to_date_time_string(MONDAY_MORNING, "%G-W%V-%u") == "2025-W02-1"


def test_date_strings_respect_timezone():
    # 09:30 UTC is 01:30 in Pacific; ten hours earlier is still Sunday there
    assert to_date_time_string(MONDAY_MORNING, tz="US/Pacific") == "2025-01-06 01:30:00"
    assert to_date_string(MONDAY_MORNING - 10 * HOUR, tz="US/Pacific") == "2025-01-05"

    with configure(tz="Asia/Tokyo"):
        assert to_time_string(MONDAY_MORNING) == "18:30:00"


def test_date_strings_accept_time_like_values():
    assert to_date_string("tomorrow") == "2025-01-09"
    assert to_date_string(None) == "2025-01-08"
    assert to_date_time_string("last month") == "2024-12-08 12:00:00"


def test_date_string_round_trip():
    """Test that a formatted date parses back to the same calendar date."""
    for value in (MONDAY_MORNING, "tomorrow", "2024-02-29 23:59:59", NOW_TS - 400 * DAY):
        rendered = to_date_string(value)
        assert to_date_string(to_instant(rendered)) == rendered


def test_relative_time_just_now():
    assert relative_time_in_words(NOW) == "just now"
    assert relative_time_in_words(NOW_TS - 59) == "just now"
    assert relative_time_in_words(NOW_TS + 30) == "just now"


def test_relative_time_in_the_past():
    assert relative_time_in_words(NOW_TS - MINUTE) == "1 minute ago"
    assert relative_time_in_words(NOW_TS - 3 * HOUR) == "3 hours ago"
    assert relative_time_in_words("-1 day") == "1 day ago"
    assert relative_time_in_words(NOW_TS - WEEK) == "1 week ago"
    assert relative_time_in_words(NOW_TS - 2 * MONTH) == "2 months ago"
    assert relative_time_in_words(NOW_TS - 3 * YEAR - DAY) == "3 years ago"


def test_relative_time_in_the_future():
    assert relative_time_in_words("+90 minutes") == "in 1 hour"
    assert relative_time_in_words("+2 days") == "in 2 days"
    assert relative_time_in_words(NOW_TS + 20 * DAY) == "in 2 weeks"


def test_relative_time_rounds_down_to_largest_unit():
    assert relative_time_in_words(NOW_TS - (2 * HOUR + 59 * MINUTE)) == "2 hours ago"
    assert relative_time_in_words(NOW_TS - (6 * DAY + 23 * HOUR)) == "6 days ago"
