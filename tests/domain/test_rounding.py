"""
Tests for leave-day rounding.

Both rounding rules break ties upward; these cases pin the exact tie
behaviour every calculator relies on.
"""

from decimal import Decimal

import pytest

from leave_kernel.domain.rounding import round_half_unit, round_whole_day


class TestRoundHalfUnit:
    """Nearest multiple of 0.5, ties half-up."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("14.25", "14.5"),
            ("14.74", "14.5"),
            ("14.75", "15"),
            ("2.3", "2.5"),
            ("2.2", "2"),
            ("0.25", "0.5"),
            ("0.24", "0"),
            ("30", "30"),
        ],
    )
    def test_rounds_to_nearest_half(self, value, expected):
        assert round_half_unit(Decimal(value)) == Decimal(expected)

    def test_accepts_int_and_str(self):
        assert round_half_unit(7) == Decimal("7")
        assert round_half_unit("7.6") == Decimal("7.5")

    def test_result_is_multiple_of_half(self):
        for tenth in range(0, 100):
            result = round_half_unit(Decimal(tenth) / 10)
            assert (result * 2) == (result * 2).to_integral_value()


class TestRoundWholeDay:
    """Nearest whole day, ties away from zero."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("20", "20"),
            ("19.5", "20"),
            ("19.49", "19"),
            ("16.8", "17"),
            ("0.5", "1"),
        ],
    )
    def test_rounds_to_whole_day(self, value, expected):
        assert round_whole_day(Decimal(value)) == Decimal(expected)
