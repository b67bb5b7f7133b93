"""
Typed Exception Hierarchy for the Leave Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

The leave engines are total over degenerate values: an inverted date range
sizes to zero days, a zero full-time week scales to zero days.  What they
do NOT accept are inputs that are not values at all -- a date string that
does not parse, a month/day that cannot exist, a country code with no
configured rules.  Those are precondition violations and are signalled with
typed exceptions so callers can catch by type and read structured fields
instead of parsing messages.

Every exception has:
  1. A TYPED class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. Structured attributes carrying the offending input

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    LeaveKernelError (base)
    |
    +-- CalendarError
    |   +-- InvalidCalendarDateError
    |   +-- InvalidMonthDayError
    |   +-- NoWorkingDayError
    |
    +-- PolicyError
    |   +-- InvalidHalfDayError
    |
    +-- ConfigurationError
        +-- JurisdictionNotFoundError
        +-- InvalidJurisdictionError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Calendar        | INVALID_CALENDAR_DATE       | Text does not parse to a calendar date
                | INVALID_MONTH_DAY           | MM-DD value that can never exist
                | NO_WORKING_DAY              | Holidays cover every day of the scan window
----------------|-----------------------------|-----------------------------------------
Policy          | INVALID_HALF_DAY            | Unknown half-day marker text
----------------|-----------------------------|-----------------------------------------
Configuration   | JURISDICTION_NOT_FOUND      | No rules configured for a country code
                | INVALID_JURISDICTION        | Malformed jurisdiction entry in YAML

===============================================================================
HANDLING PATTERN
===============================================================================

    try:
        span = LeaveRequestSpan.of(form["start"], form["end"])
    except CalendarError as e:
        return api_error(code=e.code, field_value=e.value)
"""

from __future__ import annotations

from datetime import date
from typing import Any


class LeaveKernelError(Exception):
    """
    Base exception for all leave kernel errors.

    All subclasses must have a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "LEAVE_KERNEL_ERROR"


# Calendar-related exceptions


class CalendarError(LeaveKernelError):
    """Base exception for calendar input errors."""

    code: str = "CALENDAR_ERROR"


class InvalidCalendarDateError(CalendarError):
    """Value does not parse to a valid calendar date."""

    code: str = "INVALID_CALENDAR_DATE"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a valid calendar date: {value!r}")


class InvalidMonthDayError(CalendarError):
    """Recurring month/day value that cannot exist."""

    code: str = "INVALID_MONTH_DAY"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Not a valid month-day (expected MM-DD): {value!r}")


class NoWorkingDayError(CalendarError):
    """Holiday set leaves no working day within the search window."""

    code: str = "NO_WORKING_DAY"

    def __init__(self, from_date: date, scan_days: int):
        self.from_date = from_date
        self.scan_days = scan_days
        super().__init__(f"No working day within {scan_days} days after {from_date}")



# Policy-related exceptions


class PolicyError(LeaveKernelError):
    """Base exception for leave policy input errors."""

    code: str = "POLICY_ERROR"


class InvalidHalfDayError(PolicyError):
    """Half-day marker that is neither morning nor afternoon."""

    code: str = "INVALID_HALF_DAY"

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Unknown half-day marker: {value!r} (expected 'morning' or 'afternoon')"
        )


# Configuration-related exceptions


class ConfigurationError(LeaveKernelError):
    """Base exception for jurisdiction configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class JurisdictionNotFoundError(ConfigurationError):
    """No jurisdiction rules are configured for the country code."""

    code: str = "JURISDICTION_NOT_FOUND"

    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(f"No jurisdiction rules configured for: {country_code}")


class InvalidJurisdictionError(ConfigurationError):
    """A jurisdiction entry in configuration is malformed."""

    code: str = "INVALID_JURISDICTION"

    def __init__(self, country_code: str | None, reason: str):
        self.country_code = country_code
        self.reason = reason
        super().__init__(f"Invalid jurisdiction {country_code!r}: {reason}")
