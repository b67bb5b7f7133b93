"""
Module: leave_engines.entitlement
Responsibility:
    Compute an employee's annual leave entitlement for an accounting year,
    scaled for a partial first year (employment starting mid-year) and for
    part-time hours.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import leave_kernel domain values and sibling engine modules.

Invariants enforced:
    - Purity: no clock access; the year and start date are parameters.
    - All rounding goes through ``leave_kernel.domain.rounding.round_half_unit``
      (nearest 0.5, ties half-up).
    - Composition order is fixed: start-date pro-ration first, then
      part-time scaling of the already-rounded value.  The two half-unit
      roundings do not commute, so the order is never varied.
    - The month employment starts in counts as a full month worked.

Failure modes:
    - None for well-formed values.  Non-positive full-time hours or weekly
      hours scale to 0 instead of raising.

Usage:
    from datetime import date
    from leave_engines.entitlement import annual_entitlement

    result = annual_entitlement(
        employment_start=date(2024, 7, 1),
        annual_days=30,
        year=2024,
        weekly_hours=20,
    )
    result.entitlement  # Decimal("7.5"): 30 -> 15 (6 months) -> 7.5 (50%)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from leave_engines.tracer import traced_engine
from leave_kernel.domain.rounding import round_half_unit
from leave_kernel.domain.values import ZERO_DAYS, to_days
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.entitlement")

MONTHS_PER_YEAR = Decimal("12")
DEFAULT_FULL_TIME_WEEKLY_HOURS = Decimal("40")


@dataclass(frozen=True, slots=True)
class EntitlementBreakdown:
    """
    Annual entitlement with its intermediate steps.

    Guarantees:
        - ``entitlement`` is ``after_part_time`` when part-time scaling
          applied, otherwise ``after_start_date``.
    """

    year: int
    annual_days: Decimal
    months_counted: int
    after_start_date: Decimal
    after_part_time: Decimal | None
    entitlement: Decimal

    @property
    def is_pro_rated(self) -> bool:
        return self.entitlement != self.annual_days


def months_counted(employment_start: date, year: int) -> int:
    """
    Months of ``year`` the employee is entitled for (0..12).

    The start month counts in full: a start on July 31 still counts July.
    """
    if employment_start < date(year, 1, 1):
        return 12
    if employment_start > date(year, 12, 31):
        return 0
    return 12 - (employment_start.month - 1)


def pro_rata_entitlement(
    employment_start: date,
    annual_days: Decimal | int | str,
    year: int,
) -> Decimal:
    """
    Entitlement for ``year`` given the employment start date.

    Returns ``annual_days`` unchanged (not rounded) when employment began
    before the year, 0 when it begins after the year, otherwise
    ``round_half_unit(annual_days / 12 * months_remaining)``.
    """
    annual = to_days(annual_days)
    if employment_start < date(year, 1, 1):
        return annual
    if employment_start > date(year, 12, 31):
        return ZERO_DAYS
    months = months_counted(employment_start, year)
    # Multiply before dividing so whole-month shares stay exact.
    return round_half_unit(annual * months / MONTHS_PER_YEAR)


def part_time_pro_rata(
    weekly_hours: Decimal | int | str,
    full_time_days: Decimal | int | str,
    full_time_hours: Decimal | int | str = DEFAULT_FULL_TIME_WEEKLY_HOURS,
) -> Decimal:
    """
    Scale a full-time entitlement by contracted weekly hours.

    Returns ``round_half_unit(full_time_days * weekly_hours / full_time_hours)``;
    0 when either hour figure is not positive.
    """
    hours = to_days(weekly_hours)
    full_hours = to_days(full_time_hours)
    if full_hours <= ZERO_DAYS or hours <= ZERO_DAYS:
        return ZERO_DAYS
    return round_half_unit(to_days(full_time_days) * hours / full_hours)


@traced_engine(
    "entitlement", "1.0",
    fingerprint_fields=("employment_start", "annual_days", "year", "weekly_hours", "full_time_hours"),
)
def annual_entitlement(
    employment_start: date,
    annual_days: Decimal | int | str,
    year: int,
    weekly_hours: Decimal | int | str | None = None,
    full_time_hours: Decimal | int | str = DEFAULT_FULL_TIME_WEEKLY_HOURS,
) -> EntitlementBreakdown:
    """
    Full entitlement computation for one employee and year.

    Start-date pro-ration is applied first and rounded; part-time scaling is
    then applied to that rounded value and rounded again.  Part-time scaling
    is skipped when ``weekly_hours`` is None or equals ``full_time_hours``.

    Args:
        employment_start: First day of employment.
        annual_days: Full-year, full-time entitlement from policy.
        year: Accounting year.
        weekly_hours: Contracted weekly hours, or None for full time.
        full_time_hours: Weekly hours of a full-time contract.

    Returns:
        EntitlementBreakdown with intermediate and final values.
    """
    annual = to_days(annual_days)
    months = months_counted(employment_start, year)
    after_start = pro_rata_entitlement(employment_start, annual, year)

    after_part_time: Decimal | None = None
    if weekly_hours is not None and to_days(weekly_hours) != to_days(full_time_hours):
        after_part_time = part_time_pro_rata(weekly_hours, after_start, full_time_hours)

    entitlement = after_part_time if after_part_time is not None else after_start

    logger.debug("entitlement_calculated", extra={
        "employment_start": employment_start.isoformat(),
        "year": year,
        "annual_days": str(annual),
        "months_counted": months,
        "after_start_date": str(after_start),
        "after_part_time": str(after_part_time) if after_part_time is not None else None,
        "entitlement": str(entitlement),
    })

    return EntitlementBreakdown(
        year=year,
        annual_days=annual,
        months_counted=months,
        after_start_date=after_start,
        after_part_time=after_part_time,
        entitlement=entitlement,
    )
