"""Tests for the injectable clock, LeavePolicy and JurisdictionRule."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from leave_kernel.domain.clock import DeterministicClock, SystemClock
from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.domain.values import MonthDay
from leave_kernel.exceptions import InvalidMonthDayError


class TestDeterministicClock:
    """Controlled time for deterministic tests."""

    def test_default_date(self):
        assert DeterministicClock().today() == date(2024, 1, 1)

    def test_plain_date_taken_at_noon_utc(self):
        clock = DeterministicClock(date(2025, 3, 1))
        assert clock.now() == datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    def test_repeated_calls_are_stable(self):
        clock = DeterministicClock(date(2025, 3, 1))
        assert clock.now() == clock.now()

    def test_advance_days(self):
        clock = DeterministicClock(date(2025, 3, 31))
        clock.advance_days()
        assert clock.today() == date(2025, 4, 1)

    def test_set_date(self):
        clock = DeterministicClock()
        clock.set_date(date(2026, 12, 31))
        assert clock.today() == date(2026, 12, 31)


class TestSystemClock:

    def test_now_is_timezone_aware(self):
        assert SystemClock().now().tzinfo is not None


class TestLeavePolicy:
    """Organization policy defaults and coercion."""

    def test_onboarding_defaults(self):
        policy = LeavePolicy()
        assert policy.annual_entitlement_days == Decimal("30")
        assert policy.carryover_enabled is True
        assert policy.carryover_max_days == Decimal("5")
        assert policy.carryover_expiry == MonthDay(3, 31)
        assert policy.sick_certificate_threshold_days == 3
        assert policy.full_time_weekly_hours == Decimal("40")

    def test_values_coerced(self):
        policy = LeavePolicy(annual_entitlement_days=28, carryover_expiry="06-30")
        assert policy.annual_entitlement_days == Decimal("28")
        assert policy.carryover_expiry == MonthDay(6, 30)

    def test_invalid_expiry_rejected(self):
        with pytest.raises(InvalidMonthDayError):
            LeavePolicy(carryover_expiry="06-31")

    def test_for_jurisdiction_copies_country_defaults(self):
        rule = JurisdictionRule(
            code="nl",
            name="Netherlands",
            minimum_for_six_day_week=Decimal("24"),
            sick_certificate_threshold_days=7,
            default_carryover_expiry=MonthDay(7, 1),
            full_time_weekly_hours=Decimal("40"),
        )
        policy = LeavePolicy.for_jurisdiction(rule, annual_entitlement_days=25)
        assert policy.annual_entitlement_days == Decimal("25")
        assert policy.carryover_expiry == MonthDay(7, 1)
        assert policy.sick_certificate_threshold_days == 7


class TestJurisdictionRule:
    """Country rule value object."""

    def test_code_uppercased(self):
        rule = JurisdictionRule("de", "Germany", "24", 3, "03-31", 40)
        assert rule.code == "DE"
        assert rule.minimum_for_six_day_week == Decimal("24")
        assert rule.default_carryover_expiry == MonthDay(3, 31)
        assert rule.full_time_weekly_hours == Decimal("40")

    def test_no_statutory_minimum(self):
        rule = JurisdictionRule("US", "United States", None, 3, "03-31", 40)
        assert not rule.has_statutory_minimum
