"""
Collaborator ports for the leave accounting services.

The engines are fed by three external collaborators: a holiday calendar,
a policy store and a balance store.  They are declared here as Protocols so
the request handler can plug in whatever persistence it uses.
``StaticHolidayCalendar`` is an in-memory implementation for tests and for
deployments that ship holidays as data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Protocol, runtime_checkable

from leave_engines.work_calendar import normalize_holidays
from leave_kernel.domain.policy import LeavePolicy
from leave_kernel.domain.values import LeaveBalance


@runtime_checkable
class HolidayCalendar(Protocol):
    """Public holidays for a country (and optional region) in a year."""

    def holidays_for(
        self,
        country_code: str,
        region_code: str | None,
        year: int,
    ) -> frozenset[date]:
        """Return the holiday dates; an empty set when none are known."""
        ...


class PolicyStore(Protocol):
    """Current leave policy per organization."""

    def policy_for(self, organization_id: str) -> LeavePolicy:
        ...


class BalanceStore(Protocol):
    """Per-employee, per-year balance snapshots."""

    def balance_for(self, employee_id: str, year: int) -> LeaveBalance:
        ...

    def save_balance(self, employee_id: str, year: int, balance: LeaveBalance) -> None:
        ...


class StaticHolidayCalendar:
    """
    In-memory holiday calendar.

    Contract:
        Keyed by ``(country_code, region_code, year)``.  Entries stored with
        ``region_code=None`` are national holidays and apply to every
        region of that country.
    """

    def __init__(
        self,
        holidays: Mapping[tuple[str, str | None, int], Iterable[date | str]] | None = None,
    ):
        self._holidays: dict[tuple[str, str | None, int], frozenset[date]] = {}
        for (country, region, year), days in (holidays or {}).items():
            self.add(country, region, year, days)

    def add(
        self,
        country_code: str,
        region_code: str | None,
        year: int,
        days: Iterable[date | str],
    ) -> None:
        key = (country_code.upper(), region_code.upper() if region_code else None, year)
        self._holidays[key] = self._holidays.get(key, frozenset()) | normalize_holidays(days)

    def holidays_for(
        self,
        country_code: str,
        region_code: str | None,
        year: int,
    ) -> frozenset[date]:
        country = country_code.upper()
        national = self._holidays.get((country, None, year), frozenset())
        if not region_code:
            return national
        return national | self._holidays.get((country, region_code.upper(), year), frozenset())
