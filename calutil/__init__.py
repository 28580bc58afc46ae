from .formatting import (
    relative_time_in_words,
    to_atom_string,
    to_date_string,
    to_date_time_string,
    to_http_string,
    to_rss_string,
    to_time_string,
)
from .masking import (
    PatternByDigitCount,
    PhonePattern,
    SinglePattern,
    format_phone,
    format_ssn,
    mask_format,
)
from .parsing import TimeParseError
from .settings import Settings, UnknownTimezoneError, configure, get_settings
from .timeutil import (
    TimeLike,
    datetime_factory,
    difference,
    is_this_month,
    is_this_week,
    is_this_year,
    is_today,
    is_tomorrow,
    is_within_next,
    is_within_next_seconds,
    now,
    timezone_of,
    to_instant,
    was_last_month,
    was_last_week,
    was_last_year,
    was_within_last,
    was_within_last_seconds,
    was_yesterday,
)

__all__ = [
    "TimeLike",
    "Settings",
    "configure",
    "get_settings",
    "now",
    "to_instant",
    "difference",
    "timezone_of",
    "datetime_factory",
    "is_today",
    "is_tomorrow",
    "is_this_week",
    "is_this_month",
    "is_this_year",
    "was_yesterday",
    "was_last_week",
    "was_last_month",
    "was_last_year",
    "is_within_next",
    "was_within_last",
    "is_within_next_seconds",
    "was_within_last_seconds",
    "to_atom_string",
    "to_rss_string",
    "to_http_string",
    "to_date_string",
    "to_time_string",
    "to_date_time_string",
    "relative_time_in_words",
    "mask_format",
    "format_phone",
    "format_ssn",
    "PhonePattern",
    "SinglePattern",
    "PatternByDigitCount",
    "TimeParseError",
    "UnknownTimezoneError",
]
