"""
Tests for jurisdiction configuration loading.

Covers:
- The packaged jurisdictions.yaml parses and carries expected rules
- Registry lookup, fallback and caching
- Rejection of malformed entries
- LEAVE_CONFIG_TRACE audit log
"""

from decimal import Decimal

import pytest
import yaml

from leave_config import (
    DEFAULT_CONFIG_PATH,
    clear_cache,
    get_jurisdiction,
    get_jurisdiction_registry,
)
from leave_config.loader import build_registry, compute_checksum, parse_jurisdiction
from leave_config.schema import FALLBACK_JURISDICTION
from leave_engines.statutory import minimum_statutory_leave
from leave_kernel.domain.values import MonthDay
from leave_kernel.exceptions import (
    ConfigurationError,
    InvalidJurisdictionError,
    JurisdictionNotFoundError,
)


def _entry(**overrides) -> dict:
    entry = {
        "code": "XX",
        "name": "Testland",
        "minimum_for_six_day_week": "24",
        "sick_certificate_threshold_days": 3,
        "default_carryover_expiry": "03-31",
        "full_time_weekly_hours": "40",
    }
    entry.update(overrides)
    return entry


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


class TestPackagedConfiguration:
    """The shipped jurisdictions.yaml."""

    def test_default_path_exists(self):
        assert DEFAULT_CONFIG_PATH.is_file()

    def test_germany(self, registry):
        rule = registry.get("DE")
        assert rule.name == "Germany"
        assert rule.minimum_for_six_day_week == Decimal("24")
        assert rule.sick_certificate_threshold_days == 3
        assert rule.default_carryover_expiry == MonthDay(3, 31)
        assert rule.has_regional_holidays

    def test_german_statutory_minimum(self, german_rule):
        assert minimum_statutory_leave(5, german_rule) == Decimal("20")
        assert minimum_statutory_leave(6, german_rule) == Decimal("24")

    def test_fallback_present(self, registry):
        assert FALLBACK_JURISDICTION in registry
        assert not registry.get(FALLBACK_JURISDICTION).has_statutory_minimum

    def test_all_codes_unique_and_uppercase(self, registry):
        assert len(set(registry.codes)) == len(registry)
        assert all(code == code.upper() for code in registry.codes)

    @pytest.mark.parametrize(
        "code, six_day, five_day",
        [
            ("DE", "24", "20"),
            ("AT", "30", "25"),
            ("CH", "24", "20"),
            ("GB", "33.6", "28"),
            ("NL", "24", "20"),
            ("FR", "30", "25"),
        ],
    )
    def test_minimum_is_five_day_minimum_scaled_to_six_days(self, registry, code, six_day, five_day):
        rule = registry.get(code)
        assert rule.minimum_for_six_day_week == Decimal(six_day)
        assert minimum_statutory_leave(5, rule) == Decimal(five_day)

    def test_organization_defaults_shared_by_every_country(self, registry):
        for code in registry.codes:
            rule = registry.get(code)
            assert rule.sick_certificate_threshold_days == 3
            assert rule.default_carryover_expiry == MonthDay(3, 31)
            assert rule.full_time_weekly_hours == Decimal("40")


class TestRegistryLookup:

    def test_case_insensitive(self, registry):
        assert registry.get("de") is registry.get("DE")
        assert "at" in registry

    def test_unknown_code_raises(self, registry):
        with pytest.raises(JurisdictionNotFoundError, match="ZZ") as exc_info:
            registry.get("ZZ")
        assert exc_info.value.country_code == "ZZ"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_get_or_fallback(self, registry):
        assert registry.get_or_fallback("ZZ").code == "OTHER"
        assert registry.get_or_fallback(None).code == "OTHER"
        assert registry.get_or_fallback("fr").code == "FR"

    def test_get_jurisdiction_helper(self):
        assert get_jurisdiction("NL").minimum_for_six_day_week == Decimal("24")

    def test_registry_cached(self):
        assert get_jurisdiction_registry() is get_jurisdiction_registry()

    def test_config_trace_logged_once_per_load(self, captured_logs):
        get_jurisdiction_registry()
        get_jurisdiction_registry()

        traces = [r for r in captured_logs() if r["message"] == "LEAVE_CONFIG_TRACE"]
        assert len(traces) == 1
        assert traces[0]["config_version"] == 1
        assert "DE" in traces[0]["jurisdictions"]
        assert len(traces[0]["checksum"]) == 64


class TestAlternativeConfigPath:

    def test_loads_custom_file(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text(yaml.safe_dump({
            "version": 2,
            "jurisdictions": [_entry(code="xx"), _entry(code="OTHER", minimum_for_six_day_week=None)],
        }))

        registry = get_jurisdiction_registry(path)
        assert registry.version == 2
        assert registry.codes == ("XX", "OTHER")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_jurisdiction_registry(tmp_path / "absent.yaml")


class TestParseJurisdiction:
    """Malformed entries are rejected with the offending code."""

    def test_valid_entry(self):
        rule = parse_jurisdiction(_entry(minimum_for_six_day_week=24.0))
        assert rule.minimum_for_six_day_week == Decimal("24.0")

    def test_missing_fields(self):
        data = _entry()
        del data["name"]
        with pytest.raises(InvalidJurisdictionError, match="missing fields: name") as exc_info:
            parse_jurisdiction(data)
        assert exc_info.value.country_code == "XX"

    def test_negative_minimum(self):
        with pytest.raises(InvalidJurisdictionError, match="negative"):
            parse_jurisdiction(_entry(minimum_for_six_day_week="-1"))

    def test_non_numeric_minimum(self):
        with pytest.raises(InvalidJurisdictionError, match="not a number"):
            parse_jurisdiction(_entry(minimum_for_six_day_week="lots"))

    @pytest.mark.parametrize("threshold", [-1, "3", True, 2.5])
    def test_bad_threshold(self, threshold):
        with pytest.raises(InvalidJurisdictionError, match="sick_certificate_threshold_days"):
            parse_jurisdiction(_entry(sick_certificate_threshold_days=threshold))

    def test_bad_expiry(self):
        with pytest.raises(InvalidJurisdictionError, match="month-day"):
            parse_jurisdiction(_entry(default_carryover_expiry="02-30"))

    def test_non_positive_hours(self):
        with pytest.raises(InvalidJurisdictionError, match="full_time_weekly_hours"):
            parse_jurisdiction(_entry(full_time_weekly_hours="0"))


class TestBuildRegistry:

    def test_duplicate_codes_rejected(self):
        with pytest.raises(InvalidJurisdictionError, match="duplicate"):
            build_registry({"jurisdictions": [_entry(), _entry(code="xx")]})

    def test_checksum_deterministic(self):
        data = {"version": 1, "jurisdictions": [_entry()]}
        assert compute_checksum(data) == compute_checksum({"jurisdictions": [_entry()], "version": 1})
        assert build_registry(data).checksum == compute_checksum(data)

    def test_empty_document(self):
        registry = build_registry({})
        assert len(registry) == 0
        assert registry.version == 1
