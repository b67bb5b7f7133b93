"""
Pytest fixtures for the leave accounting test suite.

Provides:
- Structured logging configured for every test session
- ``captured_logs`` for asserting on emitted JSON log records
- Deterministic clock, policy, jurisdiction and holiday fixtures
"""

import json
import logging
from datetime import date
from io import StringIO

import pytest

from leave_config import clear_cache, get_jurisdiction_registry
from leave_kernel.domain.clock import DeterministicClock
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from leave_services import LeaveAccountingService, StaticHolidayCalendar


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture leave_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            work_days(DateRange(...), holidays)
            logs = captured_logs()
            assert any(r["message"] == "LEAVE_ENGINE_TRACE" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("leave_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def deterministic_clock() -> DeterministicClock:
    """Clock fixed at 2025-01-02, the first working day of 2025."""
    return DeterministicClock(date(2025, 1, 2))


@pytest.fixture
def default_policy() -> LeavePolicy:
    """Onboarding defaults: 30 days, carry up to 5 until 03-31."""
    return LeavePolicy()


@pytest.fixture
def registry():
    """The packaged jurisdiction registry, loaded fresh for the test."""
    clear_cache()
    yield get_jurisdiction_registry()
    clear_cache()


@pytest.fixture
def german_rule(registry):
    return registry.get("DE")


@pytest.fixture
def holiday_calendar() -> StaticHolidayCalendar:
    """German national holidays for 2024/2025 plus Bavarian Epiphany."""
    return StaticHolidayCalendar({
        ("DE", None, 2024): [
            date(2024, 1, 1), date(2024, 3, 29), date(2024, 4, 1),
            date(2024, 5, 1), date(2024, 12, 25), date(2024, 12, 26),
        ],
        ("DE", "BY", 2024): [date(2024, 1, 6)],
        ("DE", None, 2025): [
            date(2025, 1, 1), date(2025, 4, 18), date(2025, 4, 21),
            date(2025, 5, 1), date(2025, 12, 25), date(2025, 12, 26),
        ],
        ("DE", "BY", 2025): ["2025-01-06"],
    })


@pytest.fixture
def leave_service(holiday_calendar, deterministic_clock, registry) -> LeaveAccountingService:
    return LeaveAccountingService(
        holiday_calendar,
        clock=deterministic_clock,
        registry=registry,
    )
