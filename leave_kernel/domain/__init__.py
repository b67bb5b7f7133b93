"""
Pure domain layer.

This module contains the leave-accounting value objects with NO
dependencies on:
- Database
- Time/clock (except the injectable Clock abstraction)
- I/O

All domain objects are immutable and deterministic.
"""

from leave_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.domain.rounding import round_half_unit, round_whole_day
from leave_kernel.domain.values import (
    FULL_DAY,
    HALF_DAY,
    ZERO_DAYS,
    DateRange,
    HalfDay,
    LeaveBalance,
    LeaveRequestSpan,
    MonthDay,
    parse_iso_date,
    to_days,
)

__all__ = [
    # Value Objects
    "DateRange",
    "HalfDay",
    "MonthDay",
    "LeaveRequestSpan",
    "LeaveBalance",
    "LeavePolicy",
    "JurisdictionRule",
    # Constants
    "ZERO_DAYS",
    "HALF_DAY",
    "FULL_DAY",
    # Helpers
    "parse_iso_date",
    "to_days",
    "round_half_unit",
    "round_whole_day",
    # Clock
    "Clock",
    "SystemClock",
    "DeterministicClock",
]
