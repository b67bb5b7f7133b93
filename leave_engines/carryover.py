"""
Module: leave_engines.carryover
Responsibility:
    Compute how many unused days roll from one accounting year into the
    next, and when that carried-over allowance expires.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import leave_kernel domain values and sibling engine modules.

Invariants enforced:
    - Purity: ``as_of_date`` is always a parameter, never read from a clock.
    - ``amount = min(remaining, cap)``, floored at 0 so an over-drawn year
      never carries a debt forward.
    - An expired carryover always has ``amount == 0``.
    - ``days_until_expiry`` is never negative.
    - Stateless: the caller applies ``amount`` to
      ``LeaveBalance.carried_over`` exactly once per accounting year.

Failure modes:
    - InvalidMonthDayError when ``expiry`` text is not a valid MM-DD.

Usage:
    from datetime import date
    from leave_engines.carryover import calculate_carryover

    result = calculate_carryover(8, 5, "03-31", date(2025, 3, 1), expiry_year=2025)
    result.amount            # Decimal("5")
    result.days_until_expiry # 30
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from leave_engines.tracer import traced_engine
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.domain.values import ZERO_DAYS, MonthDay, to_days
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.carryover")


@dataclass(frozen=True, slots=True)
class CarryoverResult:
    """
    Outcome of a carryover calculation.

    Guarantees:
        - ``expired`` implies ``amount == 0``.
        - ``days_until_expiry >= 0``.
        - ``capped_amount`` is the pre-expiry ``min(remaining, cap)`` value.
    """

    amount: Decimal
    days_until_expiry: int
    expired: bool
    expiry_date: date
    capped_amount: Decimal

    @property
    def forfeited(self) -> Decimal:
        """Days lost to expiry."""
        return self.capped_amount - self.amount


def carryover_expiry_date(
    expiry: MonthDay | str | tuple[int, int],
    as_of_date: date,
    expiry_year: int | None = None,
) -> date:
    """
    Expiry date of the carryover cycle ``as_of_date`` falls into.

    With ``expiry_year`` the date is that year's month/day.  Without it the
    next occurrence is used: the current year when ``as_of_date`` is
    strictly before the month/day, otherwise the following year.
    """
    month_day = MonthDay.parse(expiry)
    if expiry_year is not None:
        return month_day.in_year(expiry_year)
    if month_day.is_after(as_of_date):
        return month_day.in_year(as_of_date.year)
    return month_day.in_year(as_of_date.year + 1)


@traced_engine(
    "carryover", "1.0",
    fingerprint_fields=("remaining_at_year_end", "max_carryover_days", "expiry", "as_of_date", "expiry_year"),
)
def calculate_carryover(
    remaining_at_year_end: Decimal | int | str,
    max_carryover_days: Decimal | int | str,
    expiry: MonthDay | str | tuple[int, int],
    as_of_date: date,
    expiry_year: int | None = None,
) -> CarryoverResult:
    """
    Carryover amount and expiry status.

    Args:
        remaining_at_year_end: Unused days at the end of the closing year.
        max_carryover_days: Policy cap on carried days.
        expiry: Month/day the carried days lapse (e.g. ``"03-31"``).
        as_of_date: Date the status is evaluated for.
        expiry_year: Year in which the carried days are usable.  When None,
            the next occurrence of ``expiry`` after ``as_of_date`` is used,
            which can never be in the past.

    Returns:
        CarryoverResult; expired results carry ``amount == 0``.
    """
    remaining = to_days(remaining_at_year_end)
    cap = to_days(max_carryover_days)
    capped = max(ZERO_DAYS, min(remaining, cap))

    expiry_date = carryover_expiry_date(expiry, as_of_date, expiry_year)
    raw_days = (expiry_date - as_of_date).days
    expired = raw_days < 0

    result = CarryoverResult(
        amount=ZERO_DAYS if expired else capped,
        days_until_expiry=max(0, raw_days),
        expired=expired,
        expiry_date=expiry_date,
        capped_amount=capped,
    )

    logger.debug("carryover_calculated", extra={
        "remaining_at_year_end": str(remaining),
        "max_carryover_days": str(cap),
        "expiry_date": expiry_date.isoformat(),
        "as_of_date": as_of_date.isoformat(),
        "raw_days_until_expiry": raw_days,
        "expired": expired,
        "amount": str(result.amount),
    })
    if expired and capped > ZERO_DAYS:
        logger.info("carryover_expired", extra={
            "expiry_date": expiry_date.isoformat(),
            "forfeited_days": str(result.forfeited),
        })

    return result


def carryover_for_policy(
    remaining_at_year_end: Decimal | int | str,
    policy: LeavePolicy,
    as_of_date: date,
    expiry_year: int | None = None,
) -> CarryoverResult:
    """
    Carryover under an organization policy.

    A policy with carryover disabled carries nothing; the expiry date is
    still reported so callers can display the cycle boundary.
    """
    max_days = policy.carryover_max_days if policy.carryover_enabled else ZERO_DAYS
    return calculate_carryover(
        remaining_at_year_end,
        max_days,
        policy.carryover_expiry,
        as_of_date,
        expiry_year=expiry_year,
    )
