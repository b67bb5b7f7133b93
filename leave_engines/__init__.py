"""
Module: leave_engines
Responsibility:
    Package entrypoint that re-exports all public symbols from the pure
    leave calculation engines.  This is the canonical import surface for
    higher layers (leave_services and external request handlers).

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import leave_kernel (and sibling engine modules).
    MUST NOT import leave_config or leave_services.

Invariants enforced:
    - Purity: engines NEVER call ``date.today()``.  Dates are passed in as
      explicit parameters; callers (services) own the clock.
    - Decimal-only arithmetic for all day quantities; floats are never
      produced.
    - Determinism: identical inputs always produce identical outputs.

Failure modes:
    - Typed LeaveKernelError subclasses for inputs that are not valid
      values (unparseable dates, impossible month/days).  Degenerate values
      (inverted ranges, zero hours) produce well-defined results instead.

Usage:
    from leave_engines.workdays import work_days
    from leave_engines.entitlement import annual_entitlement
    from leave_engines.carryover import calculate_carryover
    from leave_engines.balance import remaining
    from leave_engines.overlap import overlaps
    from leave_engines.statutory import minimum_statutory_leave
"""

from leave_kernel.logging_config import get_logger

logger = get_logger("engines")

from leave_engines.balance import (
    adjust,
    approve,
    can_cover,
    cancel_approved,
    is_overdrawn,
    record_direct_approval,
    reject,
    remaining,
    seed_balance,
    submit,
    withdraw,
)
from leave_engines.carryover import (
    CarryoverResult,
    calculate_carryover,
    carryover_expiry_date,
    carryover_for_policy,
)
from leave_engines.entitlement import (
    EntitlementBreakdown,
    annual_entitlement,
    months_counted,
    part_time_pro_rata,
    pro_rata_entitlement,
)
from leave_engines.overlap import find_conflicts, overlap_range, overlaps
from leave_engines.statutory import (
    meets_statutory_minimum,
    minimum_statutory_leave,
    requires_certificate,
)
from leave_engines.work_calendar import (
    holidays_in_range,
    is_holiday,
    is_weekend,
    is_working_day,
    iter_days,
    next_working_day,
    normalize_holidays,
    years_spanned,
)
from leave_engines.workdays import (
    DayContribution,
    DayKind,
    WorkDayCalculator,
    work_days,
    work_days_for_span,
)

__all__ = [
    # Calendar
    "iter_days",
    "is_weekend",
    "is_holiday",
    "is_working_day",
    "next_working_day",
    "normalize_holidays",
    "years_spanned",
    "holidays_in_range",
    # Work days
    "WorkDayCalculator",
    "DayContribution",
    "DayKind",
    "work_days",
    "work_days_for_span",
    # Entitlement
    "EntitlementBreakdown",
    "annual_entitlement",
    "months_counted",
    "pro_rata_entitlement",
    "part_time_pro_rata",
    # Carryover
    "CarryoverResult",
    "calculate_carryover",
    "carryover_expiry_date",
    "carryover_for_policy",
    # Balance
    "remaining",
    "is_overdrawn",
    "can_cover",
    "seed_balance",
    "submit",
    "approve",
    "reject",
    "withdraw",
    "cancel_approved",
    "record_direct_approval",
    "adjust",
    # Overlap
    "overlaps",
    "overlap_range",
    "find_conflicts",
    # Statutory
    "minimum_statutory_leave",
    "meets_statutory_minimum",
    "requires_certificate",
]

logger.debug("engines_package_loaded", extra={
    "module_count": 7,
    "modules": [
        "work_calendar", "workdays", "entitlement", "carryover",
        "balance", "overlap", "statutory",
    ],
})
