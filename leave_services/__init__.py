"""
leave_services -- orchestration over the leave engines.

Services read the clock, resolve jurisdiction rules and fetch holidays
through injected ports, then hand plain values to the pure engines.
"""

from leave_services.leave_accounting_service import (
    NO_WORKING_DAYS,
    OVERLAPPING_REQUEST,
    LeaveAccountingService,
    RequestValidation,
    StatutoryCheck,
    YearBalanceSeed,
)
from leave_services.ports import (
    BalanceStore,
    HolidayCalendar,
    PolicyStore,
    StaticHolidayCalendar,
)

__all__ = [
    "LeaveAccountingService",
    "RequestValidation",
    "YearBalanceSeed",
    "StatutoryCheck",
    "NO_WORKING_DAYS",
    "OVERLAPPING_REQUEST",
    "HolidayCalendar",
    "PolicyStore",
    "BalanceStore",
    "StaticHolidayCalendar",
]
