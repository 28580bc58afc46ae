"""Ambient configuration: the default timezone and the clock.

Settings live in a context variable rather than module globals so that a
test, a thread, or an asyncio task can pin "now" and the default timezone
without affecting anyone else:

    >>> from calutil.settings import configure
    >>> with configure(tz="US/Pacific", clock=lambda: 1736150400):
    ...     is_today("2025-01-06")
    True
"""

import os
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TZ_ENV_VAR = "CALUTIL_TZ"
DEFAULT_TZ = "UTC"


class UnknownTimezoneError(ValueError):
    """Raised when a timezone name cannot be resolved."""


def load_zone(name: str) -> ZoneInfo:
    """Resolve an IANA timezone name.

    Raises:
        UnknownTimezoneError: If the name is not in the timezone database
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise UnknownTimezoneError(
            f"Unknown timezone {name!r}.\n"
            f"Hint: Use an IANA timezone name, e.g. 'UTC', 'US/Pacific' "
            f"or 'Europe/London'"
        ) from exc


@dataclass(frozen=True, kw_only=True)
class Settings:
    tz: str = DEFAULT_TZ
    clock: Callable[[], float] = field(default=time.time, compare=False)

    def __post_init__(self) -> None:
        # Fail at configuration time, not at first use
        load_zone(self.tz)

    @property
    def zone(self) -> ZoneInfo:
        return load_zone(self.tz)


def settings_from_env() -> Settings:
    """Build settings from the environment (CALUTIL_TZ, falling back to UTC)."""
    return Settings(tz=os.environ.get(TZ_ENV_VAR) or DEFAULT_TZ)


_settings: ContextVar[Settings] = ContextVar(
    "calutil_settings", default=settings_from_env()
)


def get_settings() -> Settings:
    """Return the settings active in the current context."""
    return _settings.get()


@contextmanager
def configure(**changes: Any) -> Iterator[Settings]:
    """Temporarily override settings fields for the enclosed block.

    Args:
        **changes: Settings fields to replace (``tz``, ``clock``)

    Example:
        >>> with configure(tz="Europe/London"):
        ...     to_date_time_string(0)
        '1970-01-01 01:00:00'
    """
    token = _settings.set(replace(_settings.get(), **changes))
    try:
        yield _settings.get()
    finally:
        _settings.reset(token)
