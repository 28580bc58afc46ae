"""Time string parsing.

Relative phrases ("tomorrow", "+1 week", "last month", "next fri",
"3 days ago") are resolved against a supplied "now". Whatever is left after
the leading relative phrases is handed to python-dateutil's parser, using the
resolved value as the default, so "tomorrow 14:30" and "2025-01-06" both work.
Relative phrases trailing an absolute date shift that date: "2025-01-06 +1 day".

Hours, minutes and seconds count elapsed time, so "+1 hour" is always 3600
seconds away even across a DST change. Days and longer follow the wall clock.
"""

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import TypeAlias

from dateutil import parser as date_parser
from dateutil.relativedelta import (
    FR,
    MO,
    SA,
    SU,
    TH,
    TU,
    WE,
    relativedelta,
    weekday,
)

logger = logging.getLogger(__name__)

# Mapping from day names to dateutil weekday constants
_DAY_MAP: dict[str, weekday] = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
}

# Unit name -> (relativedelta field, multiplier)
_UNIT_MAP: dict[str, tuple[str, int]] = {
    "sec": ("seconds", 1),
    "second": ("seconds", 1),
    "min": ("minutes", 1),
    "minute": ("minutes", 1),
    "hour": ("hours", 1),
    "day": ("days", 1),
    "week": ("weeks", 1),
    "fortnight": ("weeks", 2),
    "month": ("months", 1),
    "year": ("years", 1),
}

# Fields applied as elapsed time rather than wall-clock time
_ELAPSED_FIELDS = {"seconds", "minutes", "hours"}

_STEPS = {"last": -1, "this": 0, "next": 1}

_DAY_ABBREVIATIONS = [
    "mon", "tues", "tue", "wed", "thurs", "thur", "thu", "fri", "sat", "sun"
]

_UNIT = r"(sec(?:ond)?|min(?:ute)?|hour|day|week|fortnight|month|year)s?"
_DAY = "(" + "|".join([*_DAY_MAP, *_DAY_ABBREVIATIONS]) + ")"

_EPOCH_RE = re.compile(r"@([+-]?\d+)")
_KEYWORD_RE = re.compile(
    r"(now|today|midnight|noon|tomorrow|yesterday)\b", re.IGNORECASE
)
_OFFSET_RE = re.compile(
    r"([+-]?)\s*(\d+)\s*" + _UNIT + r"\b(\s+ago\b)?", re.IGNORECASE
)
_STEP_DAY_RE = re.compile(r"(last|next|this)\s+" + _DAY + r"\b", re.IGNORECASE)
_STEP_UNIT_RE = re.compile(r"(last|next|this)\s+" + _UNIT + r"\b", re.IGNORECASE)
_DAY_RE = re.compile(_DAY + r"\b", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[\s,]*")
_WORD_START_RE = re.compile(r"(?<= )\S")

_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)
_NOON = relativedelta(hour=12, minute=0, second=0, microsecond=0)

_KEYWORDS: dict[str, relativedelta] = {
    "now": relativedelta(),
    "today": _MIDNIGHT,
    "midnight": _MIDNIGHT,
    "noon": _NOON,
    "tomorrow": _MIDNIGHT + relativedelta(days=+1),
    "yesterday": _MIDNIGHT + relativedelta(days=-1),
}


Shift: TypeAlias = relativedelta | timedelta


class TimeParseError(ValueError):
    """Raised when a string cannot be resolved to a point in time."""


def _units(unit: str, count: int) -> Shift:
    field, multiplier = _UNIT_MAP[unit.lower()]
    if field in _ELAPSED_FIELDS:
        return timedelta(**{field: count * multiplier})
    return relativedelta(**{field: count * multiplier})


def _weekday(name: str) -> weekday:
    name = name.lower()
    for full, day in _DAY_MAP.items():
        if full.startswith(name):
            return day
    raise KeyError(name)


def _shift(value: datetime, shift: Shift) -> datetime:
    if isinstance(shift, timedelta):
        return (value.astimezone(timezone.utc) + shift).astimezone(value.tzinfo)
    return value + shift


def _step_to_day(step: int, day: weekday) -> relativedelta:
    if step > 0:
        # Strictly after today
        return _MIDNIGHT + relativedelta(days=+1, weekday=day(+1))
    if step < 0:
        # Strictly before today
        return _MIDNIGHT + relativedelta(days=-1, weekday=day(-1))
    return _MIDNIGHT + relativedelta(weekday=day(+1))


def _match_relative(text: str, pos: int) -> tuple[Shift, int] | None:
    """Match one relative token at ``pos``; return its shift and end offset."""
    m = _KEYWORD_RE.match(text, pos)
    if m:
        return _KEYWORDS[m.group(1).lower()], m.end()

    m = _OFFSET_RE.match(text, pos)
    if m:
        sign, amount, unit, ago = m.groups()
        count = int(amount)
        if sign == "-":
            count = -count
        if ago:
            count = -count
        return _units(unit, count), m.end()

    m = _STEP_DAY_RE.match(text, pos)
    if m:
        step, day = m.groups()
        return _step_to_day(_STEPS[step.lower()], _weekday(day)), m.end()

    m = _STEP_UNIT_RE.match(text, pos)
    if m:
        step, unit = m.groups()
        return _units(unit, _STEPS[step.lower()]), m.end()

    m = _DAY_RE.match(text, pos)
    if m:
        return _step_to_day(0, _weekday(m.group(1))), m.end()

    return None


def parse_time(text: str, *, now: datetime, zone: tzinfo) -> datetime:
    """
    Resolve a time string to a timezone-aware datetime.

    Args:
        text: Absolute date ("2025-01-06", "Mon, 06 Jan 2025 09:30:00 GMT"),
              relative phrase ("tomorrow", "-3 days", "last month",
              "next fri"), a combination ("tomorrow noon",
              "yesterday 18:00", "2025-01-06 +1 day") or an epoch
              instant ("@1736150400")
        now: Reference point for relative phrases
        zone: Timezone for relative phrases and for absolute strings
              that carry no offset of their own

    Returns:
        Timezone-aware datetime

    Raises:
        TimeParseError: If the string cannot be resolved

    Example:
        >>> now = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)
        >>> parse_time("tomorrow", now=now, zone=timezone.utc)
        datetime.datetime(2025, 1, 7, 0, 0, tzinfo=datetime.timezone.utc)
    """
    normalized = " ".join(text.split())
    if not normalized:
        raise TimeParseError(
            f"Unable to parse time string {text!r}: string is blank.\n"
            f"Hint: Pass None or an empty string to mean 'now'"
        )

    epoch = _EPOCH_RE.fullmatch(normalized)
    if epoch:
        try:
            return datetime.fromtimestamp(int(epoch.group(1)), tz=zone)
        except (OverflowError, OSError, ValueError) as exc:
            raise TimeParseError(
                f"Unable to parse time string {text!r}: epoch instant is out "
                f"of range.\n"
                f"Hint: Use seconds since 1970-01-01 UTC, e.g. '@1736121600'"
            ) from exc

    base = now.astimezone(zone)
    leading, pos = _consume(normalized, 0)
    for shift in leading:
        base = _shift(base, shift)

    if pos >= len(normalized):
        return base

    head, trailing = _split_trailing(normalized[pos:])
    # Absolute strings default to midnight; after a relative phrase, keep its date
    default = base if pos else base + _MIDNIGHT
    logger.debug("Parsing %r with dateutil (default %s)", head, default)
    try:
        parsed = date_parser.parse(head, default=default.replace(tzinfo=None))
    except (ValueError, OverflowError) as exc:
        raise TimeParseError(
            f"Unable to parse time string {text!r}.\n"
            f"Hint: Use an absolute date such as '2025-01-06 09:30' or a "
            f"relative phrase such as 'tomorrow', '+1 week' or 'last month'"
        ) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    for shift in trailing:
        parsed = _shift(parsed, shift)
    return parsed


def _consume(text: str, pos: int) -> tuple[list[Shift], int]:
    """Match relative tokens from ``pos`` on; return them and where they stop."""
    shifts: list[Shift] = []
    while pos < len(text):
        matched = _match_relative(text, pos)
        if matched is None:
            break
        shift, pos = matched
        shifts.append(shift)
        pos = _SEPARATOR_RE.match(text, pos).end()
    return shifts, pos


def _split_trailing(text: str) -> tuple[str, list[Shift]]:
    """Split "2025-01-06 +1 day" into the absolute head and its trailing shifts."""
    for word in _WORD_START_RE.finditer(text):
        shifts, end = _consume(text, word.start())
        if shifts and end >= len(text):
            return text[: word.start()].rstrip(" ,"), shifts
    return text, []
