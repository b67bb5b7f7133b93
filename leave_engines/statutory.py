"""
Module: leave_engines.statutory
Responsibility:
    Jurisdiction-specific legal rules expressed as pure functions: the
    statutory minimum annual leave for a working pattern, and whether a run
    of sick days requires a medical certificate.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Receives ``JurisdictionRule`` objects; never reads configuration files
    itself.  Country codes are resolved to rules by ``leave_config``.

Invariants enforced:
    - No jurisdiction constant appears in this module; every number comes
      from the rule passed in.
    - Statutory minimum rounding is whole days, ties away from zero, via
      ``leave_kernel.domain.rounding.round_whole_day``.
    - Certificate threshold is strict: a run equal to the threshold does
      not yet require a certificate.
"""

from __future__ import annotations

from decimal import Decimal

from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.rounding import round_whole_day
from leave_kernel.domain.values import ZERO_DAYS, to_days
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.statutory")

SIX_DAY_WEEK = Decimal("6")


def minimum_statutory_leave(
    work_days_per_week: Decimal | int | str,
    jurisdiction: JurisdictionRule,
) -> Decimal:
    """
    Statutory minimum annual leave in work days.

    Computed as ``round(minimum_for_six_day_week / 6 * work_days_per_week)``.
    Jurisdictions without a statutory minimum, and non-positive working
    weeks, yield 0.

    Example:
        With the German rule (24 days for a six-day week) a five-day week
        yields 20 and a six-day week 24.
    """
    days_per_week = to_days(work_days_per_week)
    if not jurisdiction.has_statutory_minimum or days_per_week <= ZERO_DAYS:
        return ZERO_DAYS
    minimum = round_whole_day(
        jurisdiction.minimum_for_six_day_week * days_per_week / SIX_DAY_WEEK
    )
    logger.debug("statutory_minimum_calculated", extra={
        "jurisdiction": jurisdiction.code,
        "work_days_per_week": str(days_per_week),
        "minimum": str(minimum),
    })
    return minimum


def meets_statutory_minimum(
    annual_days: Decimal | int | str,
    work_days_per_week: Decimal | int | str,
    jurisdiction: JurisdictionRule,
) -> bool:
    """Whether an annual entitlement is at least the statutory minimum."""
    return to_days(annual_days) >= minimum_statutory_leave(work_days_per_week, jurisdiction)


def requires_certificate(consecutive_sick_days: Decimal | int | str, threshold_days: int) -> bool:
    """A medical certificate is due once a sick run exceeds the threshold."""
    return to_days(consecutive_sick_days) > to_days(threshold_days)
