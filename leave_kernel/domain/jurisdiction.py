"""
Jurisdiction -- per-country statutory leave constants as a value object.

Responsibility:
    Holds the numbers that differ between countries (statutory minimum for
    a six-day week, sick-note threshold, default carryover expiry, standard
    full-time hours) so that calculation code never embeds them as literals.
    Instances are built by ``leave_config`` from YAML.

Architecture position:
    Kernel > Domain -- pure value type.  Engines type against it; only the
    config layer constructs it from files.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from leave_kernel.domain.values import MonthDay, to_days


@dataclass(frozen=True, slots=True)
class JurisdictionRule:
    """
    Statutory leave rules for one country.

    Contract:
        ``minimum_for_six_day_week`` is None where the country has no
        statutory paid-leave minimum (e.g. US).
    Guarantees:
        - ``code`` is uppercase.
        - Numeric fields are Decimal / int, never float.
    """

    code: str
    name: str
    minimum_for_six_day_week: Decimal | None
    sick_certificate_threshold_days: int
    default_carryover_expiry: MonthDay
    full_time_weekly_hours: Decimal
    has_regional_holidays: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", self.code.strip().upper())
        if self.minimum_for_six_day_week is not None:
            object.__setattr__(
                self, "minimum_for_six_day_week", to_days(self.minimum_for_six_day_week),
            )
        object.__setattr__(self, "full_time_weekly_hours", to_days(self.full_time_weekly_hours))
        object.__setattr__(
            self, "default_carryover_expiry", MonthDay.parse(self.default_carryover_expiry),
        )

    @property
    def has_statutory_minimum(self) -> bool:
        return self.minimum_for_six_day_week is not None
