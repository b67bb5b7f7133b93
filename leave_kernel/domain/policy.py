"""
LeavePolicy -- organization-owned leave settings, read-only to the engines.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.values import MonthDay, to_days


@dataclass(frozen=True, slots=True)
class LeavePolicy:
    """
    Organization leave policy.

    Contract:
        Owned and persisted by the policy store; the engines only read it.
        Defaults match what a new organization gets at onboarding.
    Guarantees:
        - Day and hour quantities are Decimal.
        - ``carryover_expiry`` is a validated MonthDay.
    Non-goals:
        - Does not validate against statutory minimums; see
          ``leave_engines.statutory.meets_statutory_minimum``.
    """

    annual_entitlement_days: Decimal = Decimal("30")
    carryover_enabled: bool = True
    carryover_max_days: Decimal = Decimal("5")
    carryover_expiry: MonthDay = MonthDay(3, 31)
    sick_certificate_threshold_days: int = 3
    full_time_weekly_hours: Decimal = Decimal("40")

    def __post_init__(self) -> None:
        object.__setattr__(self, "annual_entitlement_days", to_days(self.annual_entitlement_days))
        object.__setattr__(self, "carryover_max_days", to_days(self.carryover_max_days))
        object.__setattr__(self, "full_time_weekly_hours", to_days(self.full_time_weekly_hours))
        object.__setattr__(self, "carryover_expiry", MonthDay.parse(self.carryover_expiry))

    @classmethod
    def for_jurisdiction(
        cls,
        rule: JurisdictionRule,
        annual_entitlement_days: Decimal | int | str = Decimal("30"),
        carryover_enabled: bool = True,
        carryover_max_days: Decimal | int | str = Decimal("5"),
    ) -> LeavePolicy:
        """Policy seeded with a country's default expiry, threshold and hours."""
        return cls(
            annual_entitlement_days=to_days(annual_entitlement_days),
            carryover_enabled=carryover_enabled,
            carryover_max_days=to_days(carryover_max_days),
            carryover_expiry=rule.default_carryover_expiry,
            sick_certificate_threshold_days=rule.sick_certificate_threshold_days,
            full_time_weekly_hours=rule.full_time_weekly_hours,
        )
