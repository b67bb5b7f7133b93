"""
Module: leave_engines.work_calendar
Responsibility:
    Calendar primitives shared by every leave engine: inclusive date
    iteration, weekend detection, holiday-set normalization and lookup,
    and next-working-day search.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Leaf dependency of the other engines; imports only leave_kernel.

Invariants enforced:
    - Weekends are Saturday and Sunday regardless of locale.
    - Holidays are calendar dates (no time component); a holiday set is
      always handed on as a ``frozenset[date]``.
    - Purity: no clock access; all dates arrive as parameters.

Failure modes:
    - InvalidCalendarDateError from ``normalize_holidays`` when an entry is
      a string that does not parse as an ISO date.
    - NoWorkingDayError from ``next_working_day`` when holidays cover the
      whole search window.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from leave_kernel.domain.values import DateRange, parse_iso_date
from leave_kernel.exceptions import NoWorkingDayError
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.work_calendar")

SATURDAY = 5
SUNDAY = 6

# Bound on the next-working-day scan; no real calendar has a longer run of
# consecutive non-working days.
_MAX_SCAN_DAYS = 366


def iter_days(date_range: DateRange) -> Iterator[date]:
    """Yield each day of an inclusive range; nothing for degenerate ranges."""
    return date_range.days()


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def normalize_holidays(holidays: Iterable[date | str] | None) -> frozenset[date]:
    """
    Normalize a holiday collection to a frozenset of dates.

    Accepts ``date`` objects or ISO ``YYYY-MM-DD`` strings, in any iterable.
    ``None`` means no holidays.
    """
    if holidays is None:
        return frozenset()
    if isinstance(holidays, frozenset) and all(isinstance(d, date) for d in holidays):
        return holidays
    return frozenset(parse_iso_date(d) for d in holidays)


def is_holiday(day: date, holidays: frozenset[date]) -> bool:
    return day in holidays


def is_working_day(day: date, holidays: Iterable[date | str] | None = None) -> bool:
    """A working day is neither a weekend day nor a holiday."""
    if is_weekend(day):
        return False
    return day not in normalize_holidays(holidays)


def next_working_day(day: date, holidays: Iterable[date | str] | None = None) -> date:
    """
    First working day strictly after ``day``.

    Raises:
        NoWorkingDayError: If no working day exists within a year (only
            possible with a pathological holiday set).
    """
    holiday_set = normalize_holidays(holidays)
    current = day + timedelta(days=1)
    for _ in range(_MAX_SCAN_DAYS):
        if not is_weekend(current) and current not in holiday_set:
            return current
        current += timedelta(days=1)
    logger.warning("next_working_day_not_found", extra={
        "from_date": day.isoformat(),
        "holiday_count": len(holiday_set),
    })
    raise NoWorkingDayError(day, _MAX_SCAN_DAYS)


def years_spanned(date_range: DateRange) -> tuple[int, ...]:
    """Calendar years touched by a range, ascending; empty when degenerate."""
    if date_range.is_degenerate:
        return ()
    return tuple(range(date_range.start.year, date_range.end.year + 1))


def holidays_in_range(
    date_range: DateRange,
    holidays: Iterable[date | str] | None,
) -> tuple[date, ...]:
    """Holidays that fall inside the range, sorted."""
    return tuple(sorted(d for d in normalize_holidays(holidays) if date_range.contains(d)))
