"""Time-point normalization, arithmetic and calendar classification.

Every function here accepts a "time-like" value and routes it through
``to_instant``, which turns it into integer seconds since the Unix epoch:

    >>> from calutil import to_instant, is_within_next
    >>> to_instant(datetime(2025, 1, 6, tzinfo=timezone.utc))
    1736121600
    >>> is_within_next("tomorrow noon", "+1 week")
    True

Calendar predicates (``is_today``, ``was_last_month``, ...) compare calendar
labels rendered in the active timezone, not the distance in seconds.
"""

from collections.abc import Callable
from datetime import date, datetime, time, tzinfo
from numbers import Real
from typing import TypeAlias

from calutil.parsing import parse_time
from calutil.settings import get_settings, load_zone

TimeLike: TypeAlias = None | bool | int | float | datetime | date | str
ZoneLike: TypeAlias = str | tzinfo | None

# Calendar label renderers: two instants share a period iff their labels match
_LABELS: dict[str, Callable[[datetime], object]] = {
    "day": lambda dt: dt.strftime("%Y%m%d"),
    # ISO week-numbering year and week, so Dec 30 can belong to next year's week 1
    "week": lambda dt: dt.isocalendar()[:2],
    "month": lambda dt: dt.strftime("%Y%m"),
    "year": lambda dt: dt.strftime("%Y"),
}


def now() -> int:
    """Return the current instant from the active clock."""
    return int(get_settings().clock())


def timezone_of(name: ZoneLike = None) -> tzinfo:
    """
    Resolve a timezone.

    Args:
        name: IANA timezone name, a tzinfo (returned unchanged), or
              None/"" for the default timezone of the active settings

    Raises:
        UnknownTimezoneError: If the name is not a known timezone
    """
    if isinstance(name, tzinfo):
        return name
    if not name:
        return get_settings().zone
    return load_zone(name)


def to_instant(time_like: TimeLike = None, *, tz: ZoneLike = None) -> int:
    """
    Convert a time-like value to integer seconds since the Unix epoch.

    Accepts:
    - None, 0, "" or False: the current instant
    - int/float: truncated to int (already an instant)
    - datetime: its instant; naive values are read as wall time in ``tz``
    - date: midnight of that day in ``tz``
    - str: absolute or relative time string, see ``calutil.parsing``

    Args:
        time_like: Value to convert
        tz: Timezone for naive values and relative phrases
            (default: the active settings' timezone)

    Raises:
        TimeParseError: If a string cannot be parsed
        TypeError: If the value has an unsupported type
    """
    if not time_like:
        return now()
    if isinstance(time_like, datetime):
        if time_like.tzinfo is None:
            time_like = time_like.replace(tzinfo=timezone_of(tz))
        return int(time_like.timestamp())
    if isinstance(time_like, date):
        midnight = datetime.combine(time_like, time.min, tzinfo=timezone_of(tz))
        return int(midnight.timestamp())
    if isinstance(time_like, str):
        zone = timezone_of(tz)
        current = datetime.fromtimestamp(get_settings().clock(), tz=zone)
        return int(parse_time(time_like, now=current, zone=zone).timestamp())
    if isinstance(time_like, Real) and not isinstance(time_like, bool):
        return int(time_like)
    raise TypeError(
        f"Time value must be None, int, float, datetime, date, or str.\n"
        f"Got {type(time_like).__name__!r}: {time_like!r}\n"
        f"Examples:\n"
        f"  to_instant(1736121600)  # int (Unix seconds)\n"
        f"  to_instant(datetime(2025,1,6,tzinfo=timezone.utc))\n"
        f"  to_instant('tomorrow')  # relative phrase"
    )


def datetime_factory(time_like: TimeLike = None, tz: ZoneLike = None) -> datetime:
    """Return an aware datetime for ``time_like`` (default now) in ``tz``."""
    zone = timezone_of(tz)
    return datetime.fromtimestamp(to_instant(time_like, tz=zone), tz=zone)


def difference(a: TimeLike, b: TimeLike, *, tz: ZoneLike = None) -> int:
    """Seconds from ``b`` to ``a``; positive when ``a`` is later."""
    return to_instant(a, tz=tz) - to_instant(b, tz=tz)


def _same_period(
    time_like: TimeLike, reference: TimeLike, period: str, tz: ZoneLike
) -> bool:
    zone = timezone_of(tz)
    label = _LABELS[period]
    target = datetime.fromtimestamp(to_instant(time_like, tz=zone), tz=zone)
    anchor = datetime.fromtimestamp(to_instant(reference, tz=zone), tz=zone)
    return label(target) == label(anchor)


def is_today(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, None, "day", tz)


def is_tomorrow(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, "tomorrow", "day", tz)


def is_this_week(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, None, "week", tz)


def is_this_month(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, None, "month", tz)


def is_this_year(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, None, "year", tz)


def was_yesterday(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, "yesterday", "day", tz)


def was_last_week(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, "last week", "week", tz)


def was_last_month(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, "last month", "month", tz)


def was_last_year(time_like: TimeLike, *, tz: ZoneLike = None) -> bool:
    return _same_period(time_like, "last year", "year", tz)


def is_within_next(
    time_like: TimeLike, span: TimeLike, *, tz: ZoneLike = None
) -> bool:
    """
    Return True if ``time_like`` is after now and before ``span``.

    Note: ``span`` is a time-like value, not a duration. Pass the far edge of
    the window ("+1 week", "next month", a datetime); an int is read as an
    instant, so ``is_within_next(t, 3600)`` compares against 1970-01-01 01:00.
    Use ``is_within_next_seconds`` for a duration.
    """
    instant = to_instant(time_like, tz=tz)
    return now() < instant < to_instant(span, tz=tz)


def was_within_last(
    time_like: TimeLike, span: TimeLike, *, tz: ZoneLike = None
) -> bool:
    """
    Return True if ``time_like`` is before now and after ``span``.

    Like ``is_within_next``, ``span`` is the far edge of the window
    ("-1 week", "last month"), not a duration.
    """
    instant = to_instant(time_like, tz=tz)
    return to_instant(span, tz=tz) < instant < now()


def _check_duration(seconds: int) -> None:
    if seconds < 0:
        raise ValueError(
            f"Duration must be non-negative, got {seconds}\n"
            f"Hint: Use the calutil.util constants, e.g. 2 * WEEK"
        )


def is_within_next_seconds(
    time_like: TimeLike, seconds: int, *, tz: ZoneLike = None
) -> bool:
    """Return True if ``time_like`` falls in the next ``seconds`` (exclusive)."""
    _check_duration(seconds)
    current = now()
    return current < to_instant(time_like, tz=tz) < current + seconds


def was_within_last_seconds(
    time_like: TimeLike, seconds: int, *, tz: ZoneLike = None
) -> bool:
    """Return True if ``time_like`` fell in the last ``seconds`` (exclusive)."""
    _check_duration(seconds)
    current = now()
    return current - seconds < to_instant(time_like, tz=tz) < current
