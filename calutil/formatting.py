"""Render instants as feed, header and strftime-style strings."""

from datetime import datetime, timezone
from email.utils import format_datetime

from calutil.timeutil import TimeLike, ZoneLike, datetime_factory, now, to_instant
from calutil.util import MINUTE, UNITS

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def to_atom_string(time_like: TimeLike, *, tz: ZoneLike = None) -> str:
    """Atom (RFC 3339) timestamp, e.g. ``2025-01-06T09:30:00+00:00``."""
    return datetime_factory(time_like, tz).isoformat(timespec="seconds")


def to_rss_string(time_like: TimeLike, *, tz: ZoneLike = None) -> str:
    """RSS (RFC 822) timestamp, e.g. ``Mon, 06 Jan 2025 09:30:00 +0000``."""
    return format_datetime(datetime_factory(time_like, tz))


def to_http_string(time_like: TimeLike) -> str:
    """HTTP date header value, always in GMT: ``Mon, 06 Jan 2025 09:30:00 GMT``."""
    dt = datetime.fromtimestamp(to_instant(time_like), tz=timezone.utc)
    return format_datetime(dt, usegmt=True)


def to_date_string(
    time_like: TimeLike, fmt: str = DATE_FORMAT, *, tz: ZoneLike = None
) -> str:
    return datetime_factory(time_like, tz).strftime(fmt)


def to_time_string(
    time_like: TimeLike, fmt: str = TIME_FORMAT, *, tz: ZoneLike = None
) -> str:
    return datetime_factory(time_like, tz).strftime(fmt)


def to_date_time_string(
    time_like: TimeLike, fmt: str = DATETIME_FORMAT, *, tz: ZoneLike = None
) -> str:
    """
    Format an instant with a strftime-style pattern in the given timezone.

    Any directive supported by ``datetime.strftime`` may be used; for ISO
    week numbering use ``%G`` (year) and ``%V`` (week). Day and month names
    follow the process locale.

    Example:
        >>> to_date_time_string(1736155800, "%a %d %b %H:%M", tz="UTC")
        'Mon 06 Jan 09:30'
    """
    return datetime_factory(time_like, tz).strftime(fmt)


def relative_time_in_words(time_like: TimeLike, *, tz: ZoneLike = None) -> str:
    """
    Describe an instant relative to now, e.g. "3 hours ago" or "in 2 days".

    Anything under a minute away is "just now". Otherwise the largest whole
    unit (year, month, week, day, hour, minute) is used, rounded down, with
    months and years measured by the fixed MONTH and YEAR constants.
    English only.
    """
    delta = to_instant(time_like, tz=tz) - now()
    distance = abs(delta)
    if distance < MINUTE:
        return "just now"

    for name, seconds in UNITS:
        if distance >= seconds:
            count = distance // seconds
            break

    phrase = f"{count} {name}{'s' if count != 1 else ''}"
    return f"{phrase} ago" if delta < 0 else f"in {phrase}"
