"""Time unit constants, in seconds.

MONTH (31 days) and YEAR (365 days) are fixed-length approximations for
coarse comparisons and humanized output. Calendar arithmetic ("last month",
"+1 year") goes through dateutil's relativedelta instead.
"""

SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
FORTNIGHT = 1209600
MONTH = 2678400
YEAR = 31536000

# Named units for humanized output, largest first
UNITS: tuple[tuple[str, int], ...] = (
    ("year", YEAR),
    ("month", MONTH),
    ("week", WEEK),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
)
