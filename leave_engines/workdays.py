"""
Module: leave_engines.workdays
Responsibility:
    Convert a requested date range, with optional half-day markers on its
    boundary dates, into a work-day count given a holiday set.  This is the
    number a leave request is sized at and the number booked against the
    employee's balance.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Imports leave_kernel domain values and leave_engines.work_calendar.

Invariants enforced:
    - Purity: no clock access, no I/O.
    - Decimal-only arithmetic; results are multiples of 0.5 and never
      negative.
    - ``start > end`` sizes to 0 (speculative ranges are not errors).
    - Weekends and holidays contribute 0 even when half-day marked.
    - The total always equals the sum of the per-day breakdown.

Failure modes:
    - None for well-formed values.  Holiday strings that do not parse raise
      InvalidCalendarDateError from work_calendar.normalize_holidays.

Usage:
    from datetime import date
    from leave_engines.workdays import work_days
    from leave_kernel.domain.values import DateRange, HalfDay

    work_days(
        DateRange(date(2024, 1, 1), date(2024, 1, 7)),
        {date(2024, 1, 1)},
    )  # Decimal("4")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from leave_engines.tracer import traced_engine
from leave_engines.work_calendar import is_weekend, normalize_holidays
from leave_kernel.domain.values import (
    FULL_DAY,
    HALF_DAY,
    ZERO_DAYS,
    DateRange,
    HalfDay,
    LeaveRequestSpan,
)
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.workdays")


class DayKind(str, Enum):
    """How a single calendar day was counted."""

    WORKDAY = "workday"
    HALF_DAY = "half_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


@dataclass(frozen=True, slots=True)
class DayContribution:
    """
    One calendar day's share of a request.

    Guarantees:
        - ``amount`` is 0 for WEEKEND/HOLIDAY, 0.5 for HALF_DAY and 1 for
          WORKDAY.
    """

    day: date
    kind: DayKind
    amount: Decimal


class WorkDayCalculator:
    """
    Size leave requests in work days.

    Contract:
        Pure functions -- no I/O, no database access.
        Holidays for every year the range spans must be supplied by the
        caller.
    Guarantees:
        - ``work_days`` equals the sum of ``breakdown`` amounts.
        - Result is >= 0 for every input.
    Non-goals:
        - Does not know about regional holiday calendars; the holiday set is
          resolved upstream.
    """

    def breakdown(
        self,
        date_range: DateRange,
        holidays: Iterable[date | str] | None = None,
        start_half_day: HalfDay | str | None = HalfDay.NONE,
        end_half_day: HalfDay | str | None = HalfDay.NONE,
    ) -> tuple[DayContribution, ...]:
        """
        Classify every calendar day in the range.

        A day contributes 0 on a weekend or holiday.  Otherwise it
        contributes 1, except that a single-day range with either marker set
        contributes 0.5, and in a multi-day range the first day contributes
        0.5 under ``start_half_day`` and the last day 0.5 under
        ``end_half_day``.

        Returns:
            One DayContribution per calendar day, in date order; empty for a
            degenerate range.
        """
        if date_range.is_degenerate:
            return ()

        holiday_set = normalize_holidays(holidays)
        start_marker = HalfDay.parse(start_half_day)
        end_marker = HalfDay.parse(end_half_day)
        single_day = date_range.is_single_day

        contributions: list[DayContribution] = []
        for day in date_range.days():
            if is_weekend(day):
                contributions.append(DayContribution(day, DayKind.WEEKEND, ZERO_DAYS))
                continue
            if day in holiday_set:
                contributions.append(DayContribution(day, DayKind.HOLIDAY, ZERO_DAYS))
                continue

            if single_day:
                halved = start_marker.is_set or end_marker.is_set
            elif day == date_range.start:
                halved = start_marker.is_set
            elif day == date_range.end:
                halved = end_marker.is_set
            else:
                halved = False

            if halved:
                contributions.append(DayContribution(day, DayKind.HALF_DAY, HALF_DAY))
            else:
                contributions.append(DayContribution(day, DayKind.WORKDAY, FULL_DAY))

        return tuple(contributions)

    def work_days(
        self,
        date_range: DateRange,
        holidays: Iterable[date | str] | None = None,
        start_half_day: HalfDay | str | None = HalfDay.NONE,
        end_half_day: HalfDay | str | None = HalfDay.NONE,
    ) -> Decimal:
        """Total work days for the range; see ``breakdown`` for the rules."""
        contributions = self.breakdown(date_range, holidays, start_half_day, end_half_day)
        total = sum((c.amount for c in contributions), ZERO_DAYS)

        logger.debug("work_days_calculated", extra={
            "start": date_range.start.isoformat(),
            "end": date_range.end.isoformat(),
            "calendar_days": len(contributions),
            "weekend_days": sum(1 for c in contributions if c.kind is DayKind.WEEKEND),
            "holiday_days": sum(1 for c in contributions if c.kind is DayKind.HOLIDAY),
            "work_days": str(total),
        })
        return total


_calculator = WorkDayCalculator()


@traced_engine(
    "workdays", "1.0",
    fingerprint_fields=("date_range", "holidays", "start_half_day", "end_half_day"),
)
def work_days(
    date_range: DateRange,
    holidays: Iterable[date | str] | None = None,
    start_half_day: HalfDay | str | None = HalfDay.NONE,
    end_half_day: HalfDay | str | None = HalfDay.NONE,
) -> Decimal:
    """
    Work-day count of a date range.

    Args:
        date_range: Inclusive range; ``start > end`` yields 0.
        holidays: Holiday dates for every year the range spans.
        start_half_day: Marker for the first day.
        end_half_day: Marker for the last day.

    Returns:
        Non-negative Decimal, a multiple of 0.5.
    """
    return _calculator.work_days(date_range, holidays, start_half_day, end_half_day)


def work_days_for_span(
    span: LeaveRequestSpan,
    holidays: Iterable[date | str] | None = None,
) -> Decimal:
    """Work-day count of a request span, using its own half-day markers."""
    return work_days(span.range, holidays, span.start_half_day, span.end_half_day)
