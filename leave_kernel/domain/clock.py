"""
Clock -- where "today" comes from.

Carryover expiry and year seeding depend on the current date.  Services
read it from an injected Clock and hand it to the engines as ``as_of``;
nothing below the services layer calls ``date.today()``.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, timezone

_NOON = time(12, 0, tzinfo=timezone.utc)


class Clock(ABC):
    """
    Source of the current instant.

    Guarantees:
        - ``now()`` is timezone-aware.
        - ``today()`` is the UTC calendar date of ``now()``.
    """

    @abstractmethod
    def now(self) -> datetime:
        ...

    def today(self) -> date:
        return self.now().date()


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class DeterministicClock(Clock):
    """
    Fixed clock for tests and batch replays.

    Accepts a datetime or a plain date; a date is pinned to noon UTC so
    ``today()`` is unambiguous in every timezone offset up to +/-11 hours.
    """

    def __init__(self, fixed_time: datetime | date | None = None):
        self._current = self._as_datetime(fixed_time or date(2024, 1, 1))

    @staticmethod
    def _as_datetime(value: datetime | date) -> datetime:
        if isinstance(value, datetime):
            return value
        return datetime.combine(value, _NOON)

    def now(self) -> datetime:
        return self._current

    def set_date(self, value: datetime | date) -> None:
        self._current = self._as_datetime(value)

    def advance_days(self, days: int = 1) -> None:
        self._current += timedelta(days=days)
