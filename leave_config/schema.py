"""
Jurisdiction configuration schema.

Defines the runtime artifact built from ``jurisdictions.yaml``: an
immutable registry of ``JurisdictionRule`` values keyed by country code.
The rule type itself lives in ``leave_kernel.domain.jurisdiction`` so the
engines can type against it without depending on this package.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.exceptions import JurisdictionNotFoundError

FALLBACK_JURISDICTION = "OTHER"


@dataclass(frozen=True)
class JurisdictionRegistry:
    """
    Lookup of jurisdiction rules by country code.

    Contract:
        Built once by the loader; read-only afterwards.
    Guarantees:
        - Lookups are case-insensitive.
        - ``checksum`` identifies the exact configuration content.
    """

    rules: tuple[JurisdictionRule, ...]
    version: int = 1
    checksum: str = ""
    _by_code: dict[str, JurisdictionRule] = field(
        default_factory=dict, init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_code", {r.code: r for r in self.rules})

    def get(self, country_code: str) -> JurisdictionRule:
        """
        Rule for a country code.

        Raises:
            JurisdictionNotFoundError: If the code is not configured.
        """
        rule = self._by_code.get(country_code.strip().upper())
        if rule is None:
            raise JurisdictionNotFoundError(country_code)
        return rule

    def get_or_fallback(self, country_code: str | None) -> JurisdictionRule:
        """Rule for a country code, or the ``OTHER`` rule when unknown."""
        if country_code:
            rule = self._by_code.get(country_code.strip().upper())
            if rule is not None:
                return rule
        return self.get(FALLBACK_JURISDICTION)

    def __contains__(self, country_code: object) -> bool:
        return isinstance(country_code, str) and country_code.strip().upper() in self._by_code

    def __iter__(self) -> Iterator[JurisdictionRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(r.code for r in self.rules)
