"""
Values -- Immutable, self-validating leave-accounting value objects.

Responsibility:
    Provides the foundational value types for every leave computation:
    DateRange, HalfDay, MonthDay, LeaveRequestSpan and LeaveBalance.  These
    replace raw tuples, strings and floats wherever leave data appears in
    engine logic.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by every engine module.  No outward dependencies except
    leave_kernel.exceptions.

Invariants enforced:
    - Day quantities are always ``Decimal`` (never float).  Inputs given as
      int, str or float are converted through ``str`` at construction.
    - A DateRange with ``start > end`` is degenerate (zero days), not an
      error.
    - LeaveBalance never stores ``remaining``; it is derived from the five
      stored fields on every read.

Failure modes:
    - InvalidCalendarDateError from ``parse_iso_date`` on malformed text.
    - InvalidMonthDayError from MonthDay on impossible month/day pairs.
    - InvalidHalfDayError from ``HalfDay.parse`` on unknown marker text.
    - ValueError when a day quantity cannot be converted to Decimal.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from leave_kernel.exceptions import (
    InvalidCalendarDateError,
    InvalidHalfDayError,
    InvalidMonthDayError,
)

ZERO_DAYS = Decimal("0")
HALF_DAY = Decimal("0.5")
FULL_DAY = Decimal("1")

# Longest possible length of each month (February allows the 29th).
_MAX_MONTH_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_days(value: Decimal | int | str | float) -> Decimal:
    """
    Convert a numeric day quantity to ``Decimal``.

    Raises:
        ValueError: If the value cannot be represented as a Decimal.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid day quantity: {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid day quantity: {value!r}") from e


def parse_iso_date(value: date | str) -> date:
    """
    Parse a calendar date from an ISO ``YYYY-MM-DD`` string.

    ``date`` instances pass through unchanged.  Datetimes are not accepted
    as dates are calendar days without a time-of-day component.

    Raises:
        InvalidCalendarDateError: If the value does not parse to a valid date.
    """
    if isinstance(value, date) and not hasattr(value, "hour"):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise InvalidCalendarDateError(value)


class HalfDay(str, Enum):
    """Half-day marker attachable to the first or last day of a request."""

    NONE = "none"
    MORNING = "morning"
    AFTERNOON = "afternoon"

    @property
    def is_set(self) -> bool:
        """True for MORNING and AFTERNOON."""
        return self is not HalfDay.NONE

    @classmethod
    def parse(cls, value: HalfDay | str | None) -> HalfDay:
        """
        Parse a marker from request input.

        ``None`` and the empty string mean no marker.

        Raises:
            InvalidHalfDayError: For any other unknown text.
        """
        if isinstance(value, HalfDay):
            return value
        if value is None or value == "":
            return cls.NONE
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise InvalidHalfDayError(value) from None


@dataclass(frozen=True, slots=True)
class DateRange:
    """
    Inclusive range of calendar dates.

    Contract:
        ``start`` and ``end`` are both part of the range.
    Guarantees:
        - Immutable and hashable.
        - ``start > end`` is representable and behaves as an empty range:
          ``day_count == 0`` and ``days()`` yields nothing.
    Non-goals:
        - Does not reorder inverted bounds; callers may construct ranges
          speculatively while a user is still typing.
    """

    start: date
    end: date

    @classmethod
    def of(cls, start: date | str, end: date | str) -> DateRange:
        """Build a range from dates or ISO strings."""
        return cls(start=parse_iso_date(start), end=parse_iso_date(end))

    @classmethod
    def single(cls, day: date | str) -> DateRange:
        """A one-day range."""
        parsed = parse_iso_date(day)
        return cls(start=parsed, end=parsed)

    @property
    def is_degenerate(self) -> bool:
        """True when ``start > end``."""
        return self.start > self.end

    @property
    def is_single_day(self) -> bool:
        return self.start == self.end

    @property
    def day_count(self) -> int:
        """Number of calendar days covered (0 for degenerate ranges)."""
        if self.is_degenerate:
            return 0
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> Iterator[date]:
        """Yield each calendar day from start to end inclusive."""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True, slots=True)
class MonthDay:
    """
    Recurring calendar month/day (e.g. the carryover expiry ``03-31``).

    Contract:
        Validated on construction against the longest length of the month,
        so ``02-29`` is a legal recurring date.
    Guarantees:
        - ``in_year`` always returns a real date; 02-29 resolves to 02-28 in
          non-leap years.
    """

    month: int
    day: int

    def __post_init__(self) -> None:
        if not isinstance(self.month, int) or not 1 <= self.month <= 12:
            raise InvalidMonthDayError(f"{self.month}-{self.day}")
        if not isinstance(self.day, int) or not 1 <= self.day <= _MAX_MONTH_DAYS[self.month - 1]:
            raise InvalidMonthDayError(f"{self.month}-{self.day}")

    @classmethod
    def parse(cls, value: MonthDay | str | tuple[int, int]) -> MonthDay:
        """
        Parse ``MM-DD`` text or a ``(month, day)`` tuple.

        Raises:
            InvalidMonthDayError: On malformed text or impossible values.
        """
        if isinstance(value, MonthDay):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(month=value[0], day=value[1])
        if isinstance(value, str):
            parts = value.strip().split("-")
            if len(parts) == 2 and all(p.isdigit() for p in parts):
                return cls(month=int(parts[0]), day=int(parts[1]))
        raise InvalidMonthDayError(value)

    def in_year(self, year: int) -> date:
        """Resolve to a date in ``year``."""
        last_day = calendar.monthrange(year, self.month)[1]
        return date(year, self.month, min(self.day, last_day))

    def is_after(self, day: date) -> bool:
        """True when this month/day falls strictly later in the year than ``day``."""
        return (day.month, day.day) < (self.month, self.day)

    def __str__(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True)
class LeaveRequestSpan:
    """
    The unit the work-day calculator consumes.

    Contract:
        Half-day markers apply only to the boundary dates of ``range``.
    Non-goals:
        - Carries no status or employee data; those stay with the
          request store.
    """

    range: DateRange
    start_half_day: HalfDay = HalfDay.NONE
    end_half_day: HalfDay = HalfDay.NONE
    request_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_half_day", HalfDay.parse(self.start_half_day))
        object.__setattr__(self, "end_half_day", HalfDay.parse(self.end_half_day))

    @classmethod
    def of(
        cls,
        start: date | str,
        end: date | str,
        start_half_day: HalfDay | str | None = None,
        end_half_day: HalfDay | str | None = None,
        request_id: str | None = None,
    ) -> LeaveRequestSpan:
        return cls(
            range=DateRange.of(start, end),
            start_half_day=HalfDay.parse(start_half_day),
            end_half_day=HalfDay.parse(end_half_day),
            request_id=request_id,
        )


@dataclass(frozen=True, slots=True)
class LeaveBalance:
    """
    Per-employee, per-year leave balance snapshot in work-day units.

    Contract:
        Five stored fields; ``remaining`` is derived on every read as
        ``entitled + carried_over + adjustment - used - pending``.
    Guarantees:
        - Immutable; lifecycle changes produce new instances.
        - All fields are Decimal.
        - Negative values and over-draw are representable, never rejected.
    Non-goals:
        - Does not decide whether a request may be approved.
    """

    entitled: Decimal = ZERO_DAYS
    carried_over: Decimal = ZERO_DAYS
    adjustment: Decimal = ZERO_DAYS
    used: Decimal = ZERO_DAYS
    pending: Decimal = ZERO_DAYS

    def __post_init__(self) -> None:
        for name in ("entitled", "carried_over", "adjustment", "used", "pending"):
            object.__setattr__(self, name, to_days(getattr(self, name)))

    @property
    def remaining(self) -> Decimal:
        return self.entitled + self.carried_over + self.adjustment - self.used - self.pending

    @property
    def available_total(self) -> Decimal:
        """Everything granted for the year before consumption."""
        return self.entitled + self.carried_over + self.adjustment

    def evolve(self, **changes: Any) -> LeaveBalance:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, str]:
        """Serializable view including the derived remaining balance."""
        return {
            "entitled": str(self.entitled),
            "carried_over": str(self.carried_over),
            "adjustment": str(self.adjustment),
            "used": str(self.used),
            "pending": str(self.pending),
            "remaining": str(self.remaining),
        }
