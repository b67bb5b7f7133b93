"""
Configuration Loader (``leave_config.loader``).

Responsibility
--------------
Loads the jurisdiction YAML file and parses it into typed
``JurisdictionRule`` values collected in a ``JurisdictionRegistry``.
Runtime callers go through ``leave_config.get_jurisdiction_registry()``;
this module is the parsing machinery behind it.

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  Depends on ``leave_kernel``
value types only; no dependency on engines or services.

Invariants enforced
-------------------
* Every parse error on a jurisdiction entry raises
  ``InvalidJurisdictionError`` naming the offending code; no silent
  defaults for required fields.
* Duplicate country codes are rejected.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing or invalid fields  -> ``InvalidJurisdictionError``.
"""

from __future__ import annotations

import hashlib
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from leave_config.schema import JurisdictionRegistry
from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.domain.values import MonthDay
from leave_kernel.exceptions import InvalidJurisdictionError, InvalidMonthDayError

_REQUIRED_FIELDS = (
    "code",
    "name",
    "minimum_for_six_day_week",
    "sick_certificate_threshold_days",
    "default_carryover_expiry",
    "full_time_weekly_hours",
)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _parse_decimal(code: str | None, field_name: str, value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidJurisdictionError(code, f"{field_name} must be a number")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidJurisdictionError(code, f"{field_name} is not a number: {value!r}") from None


def parse_jurisdiction(data: dict[str, Any]) -> JurisdictionRule:
    """
    Parse a ``JurisdictionRule`` from a dict.

    Raises:
        InvalidJurisdictionError: if required keys are missing or values
            have the wrong shape.
    """
    code = data.get("code")
    missing = [f for f in _REQUIRED_FIELDS if f not in data]
    if missing:
        raise InvalidJurisdictionError(code, f"missing fields: {', '.join(missing)}")

    minimum_raw = data["minimum_for_six_day_week"]
    minimum = None if minimum_raw is None else _parse_decimal(
        code, "minimum_for_six_day_week", minimum_raw,
    )
    if minimum is not None and minimum < 0:
        raise InvalidJurisdictionError(code, "minimum_for_six_day_week cannot be negative")

    threshold = data["sick_certificate_threshold_days"]
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
        raise InvalidJurisdictionError(
            code, "sick_certificate_threshold_days must be a non-negative integer",
        )

    try:
        expiry = MonthDay.parse(str(data["default_carryover_expiry"]))
    except InvalidMonthDayError as e:
        raise InvalidJurisdictionError(code, str(e)) from e

    hours = _parse_decimal(code, "full_time_weekly_hours", data["full_time_weekly_hours"])
    if hours <= 0:
        raise InvalidJurisdictionError(code, "full_time_weekly_hours must be positive")

    return JurisdictionRule(
        code=str(code),
        name=str(data["name"]),
        minimum_for_six_day_week=minimum,
        sick_certificate_threshold_days=threshold,
        default_carryover_expiry=expiry,
        full_time_weekly_hours=hours,
        has_regional_holidays=bool(data.get("has_regional_holidays", False)),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def build_registry(data: dict[str, Any]) -> JurisdictionRegistry:
    """
    Build a registry from already-loaded YAML content.

    Raises:
        InvalidJurisdictionError: on malformed entries or duplicate codes.
    """
    entries = data.get("jurisdictions") or []
    rules: list[JurisdictionRule] = []
    seen: set[str] = set()
    for entry in entries:
        rule = parse_jurisdiction(entry)
        if rule.code in seen:
            raise InvalidJurisdictionError(rule.code, "duplicate jurisdiction code")
        seen.add(rule.code)
        rules.append(rule)

    return JurisdictionRegistry(
        rules=tuple(rules),
        version=int(data.get("version", 1)),
        checksum=compute_checksum(data),
    )


def load_registry(path: Path) -> JurisdictionRegistry:
    """Load and parse a jurisdiction YAML file."""
    return build_registry(load_yaml_file(path))
