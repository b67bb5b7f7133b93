"""
leave_services.leave_accounting_service -- Request sizing, validation and year seeding.

Responsibility:
    Orchestrate the pure leave engines for the three consumers of the
    accounting layer: request validation (work days + overlap), the
    year-end/onboarding batch (entitlement + carryover) and policy checks
    (statutory minimum, sick-note threshold).

Architecture position:
    Services -- orchestration over engines + config.
    Receives the holiday calendar and clock via constructor injection;
    resolves jurisdiction rules through ``leave_config``.  Holds no mutable
    state between calls.

Invariants enforced:
    - Holidays are gathered for every calendar year a request spans, so a
      request crossing New Year is sized against both years' calendars.
    - Engines never see the clock; "today" is read here and passed down as
      ``as_of``.
    - Year seeding applies carryover exactly once, into the new year's
      ``carried_over`` field.

Failure modes:
    - JurisdictionNotFoundError is never raised for unknown countries in
      ``statutory_check``; the ``OTHER`` rule is used instead.
    - Errors raised by the injected HolidayCalendar propagate unchanged.

Usage:
    from leave_services import LeaveAccountingService, StaticHolidayCalendar

    service = LeaveAccountingService(StaticHolidayCalendar({...}))
    outcome = service.validate_request(span, existing_spans, "DE", "BY")
    if not outcome.is_valid:
        ...
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from leave_config import get_jurisdiction_registry
from leave_config.schema import JurisdictionRegistry
from leave_engines.balance import seed_balance
from leave_engines.carryover import CarryoverResult, carryover_for_policy
from leave_engines.entitlement import EntitlementBreakdown, annual_entitlement
from leave_engines.overlap import find_conflicts
from leave_engines.statutory import minimum_statutory_leave, requires_certificate
from leave_engines.work_calendar import years_spanned
from leave_engines.workdays import work_days_for_span
from leave_kernel.domain.clock import Clock, SystemClock
from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.domain.values import (
    ZERO_DAYS,
    DateRange,
    LeaveBalance,
    LeaveRequestSpan,
    to_days,
)
from leave_kernel.logging_config import get_logger
from leave_services.ports import HolidayCalendar

logger = get_logger("services.leave_accounting")

NO_WORKING_DAYS = "NO_WORKING_DAYS"
OVERLAPPING_REQUEST = "OVERLAPPING_REQUEST"


@dataclass(frozen=True)
class RequestValidation:
    """
    Outcome of validating a new leave request.

    Guarantees:
        - ``is_valid`` is True iff ``errors`` is empty.
        - ``work_days`` is always populated, even for invalid requests.
    """

    work_days: Decimal
    conflicts: tuple[LeaveRequestSpan, ...] = ()
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class YearBalanceSeed:
    """New-year balance with the entitlement and carryover it was built from."""

    balance: LeaveBalance
    entitlement: EntitlementBreakdown
    carryover: CarryoverResult


@dataclass(frozen=True)
class StatutoryCheck:
    """Policy entitlement compared with the statutory minimum."""

    jurisdiction: JurisdictionRule
    annual_days: Decimal
    minimum: Decimal

    @property
    def compliant(self) -> bool:
        return self.annual_days >= self.minimum

    @property
    def shortfall(self) -> Decimal:
        return max(ZERO_DAYS, self.minimum - self.annual_days)


class LeaveAccountingService:
    """
    Entry point for request handlers and batch jobs.

    Contract:
        Receives a HolidayCalendar, and optionally a Clock and a
        JurisdictionRegistry, via constructor injection.
    Guarantees:
        - ``size_request`` and ``validate_request`` agree on work days.
        - ``seed_year_balance`` returns a balance whose ``entitled`` and
          ``carried_over`` equal the reported entitlement and carryover.
    Non-goals:
        - Does not persist balances or requests; callers store the
          returned values.
        - Does not decide approval; see the approval workflow.
    """

    def __init__(
        self,
        holiday_calendar: HolidayCalendar,
        clock: Clock | None = None,
        registry: JurisdictionRegistry | None = None,
    ):
        self._calendar = holiday_calendar
        self._clock = clock or SystemClock()
        self._registry = registry

    @property
    def registry(self) -> JurisdictionRegistry:
        if self._registry is None:
            self._registry = get_jurisdiction_registry()
        return self._registry

    # ------------------------------------------------------------------
    # Request sizing and validation
    # ------------------------------------------------------------------

    def holidays_for_range(
        self,
        date_range: DateRange,
        country_code: str,
        region_code: str | None = None,
    ) -> frozenset[date]:
        """Union of holidays for every year the range touches."""
        holidays: frozenset[date] = frozenset()
        for year in years_spanned(date_range):
            holidays |= self._calendar.holidays_for(country_code, region_code, year)
        return holidays

    def size_request(
        self,
        span: LeaveRequestSpan,
        country_code: str,
        region_code: str | None = None,
    ) -> Decimal:
        """Work days a request would book against the balance."""
        holidays = self.holidays_for_range(span.range, country_code, region_code)
        days = work_days_for_span(span, holidays)
        logger.info("request_sized", extra={
            "request_id": span.request_id,
            "start": span.range.start.isoformat(),
            "end": span.range.end.isoformat(),
            "country_code": country_code,
            "region_code": region_code,
            "work_days": str(days),
        })
        return days

    def validate_request(
        self,
        span: LeaveRequestSpan,
        existing: Iterable[LeaveRequestSpan],
        country_code: str,
        region_code: str | None = None,
    ) -> RequestValidation:
        """
        Size a new request and check it against existing ones.

        ``existing`` should hold the employee's pending and approved
        requests; which statuses count is the caller's decision.
        """
        days = self.size_request(span, country_code, region_code)
        conflicts = find_conflicts(span, existing)

        errors: list[str] = []
        if days <= ZERO_DAYS:
            errors.append(NO_WORKING_DAYS)
        if conflicts:
            errors.append(OVERLAPPING_REQUEST)
            logger.info("request_conflict_detected", extra={
                "request_id": span.request_id,
                "conflicting_request_ids": [c.request_id for c in conflicts],
            })

        return RequestValidation(work_days=days, conflicts=conflicts, errors=tuple(errors))

    # ------------------------------------------------------------------
    # Period boundaries
    # ------------------------------------------------------------------

    def close_year(
        self,
        closing_balance: LeaveBalance,
        policy: LeavePolicy,
        closing_year: int,
        as_of: date | None = None,
    ) -> CarryoverResult:
        """Carryover from ``closing_year`` into the following year."""
        as_of_date = as_of or self._clock.today()
        return carryover_for_policy(
            closing_balance.remaining,
            policy,
            as_of_date,
            expiry_year=closing_year + 1,
        )

    def seed_year_balance(
        self,
        employment_start: date,
        policy: LeavePolicy,
        year: int,
        weekly_hours: Decimal | int | str | None = None,
        previous_remaining: Decimal | int | str = ZERO_DAYS,
        as_of: date | None = None,
    ) -> YearBalanceSeed:
        """
        Opening balance for ``year``.

        Entitlement is pro-rated by start date then by part-time hours;
        carryover of ``previous_remaining`` uses the policy cap and expires
        on the policy month/day of ``year``.  ``as_of`` defaults to today
        from the injected clock.
        """
        as_of_date = as_of or self._clock.today()

        entitlement = annual_entitlement(
            employment_start,
            policy.annual_entitlement_days,
            year,
            weekly_hours=weekly_hours,
            full_time_hours=policy.full_time_weekly_hours,
        )
        carryover = carryover_for_policy(
            to_days(previous_remaining),
            policy,
            as_of_date,
            expiry_year=year,
        )
        balance = seed_balance(entitlement.entitlement, carryover.amount)

        logger.info("year_balance_seeded", extra={
            "year": year,
            "employment_start": employment_start.isoformat(),
            "entitled": str(balance.entitled),
            "carried_over": str(balance.carried_over),
            "carryover_expired": carryover.expired,
            "as_of": as_of_date.isoformat(),
        })
        return YearBalanceSeed(balance=balance, entitlement=entitlement, carryover=carryover)

    # ------------------------------------------------------------------
    # Policy rules
    # ------------------------------------------------------------------

    def statutory_check(
        self,
        policy: LeavePolicy,
        work_days_per_week: Decimal | int | str,
        country_code: str | None,
    ) -> StatutoryCheck:
        """Compare the policy entitlement with the country's statutory minimum."""
        rule = self.registry.get_or_fallback(country_code)
        check = StatutoryCheck(
            jurisdiction=rule,
            annual_days=policy.annual_entitlement_days,
            minimum=minimum_statutory_leave(work_days_per_week, rule),
        )
        if not check.compliant:
            logger.warning("policy_below_statutory_minimum", extra={
                "jurisdiction": rule.code,
                "annual_days": str(check.annual_days),
                "minimum": str(check.minimum),
            })
        return check

    def sick_note_required(
        self,
        consecutive_sick_days: Decimal | int | str,
        policy: LeavePolicy,
    ) -> bool:
        """Whether a sick run needs a certificate under the organization policy."""
        return requires_certificate(consecutive_sick_days, policy.sick_certificate_threshold_days)
