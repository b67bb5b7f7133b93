"""Tests for the Overlap Detector."""

from datetime import date

import pytest

from leave_engines.overlap import find_conflicts, overlap_range, overlaps
from leave_kernel.domain.values import DateRange, LeaveRequestSpan


def _range(start: str, end: str) -> DateRange:
    return DateRange.of(start, end)


class TestOverlaps:
    """Inclusive range overlap."""

    def test_shared_boundary_day_overlaps(self):
        assert overlaps(_range("2024-01-01", "2024-01-05"), _range("2024-01-05", "2024-01-10"))

    def test_adjacent_days_do_not_overlap(self):
        assert not overlaps(_range("2024-01-01", "2024-01-05"), _range("2024-01-06", "2024-01-10"))

    def test_one_day_gap_does_not_overlap(self):
        assert not overlaps(_range("2024-01-01", "2024-01-05"), _range("2024-01-07", "2024-01-10"))

    def test_containment_overlaps(self):
        assert overlaps(_range("2024-01-01", "2024-01-31"), _range("2024-01-10", "2024-01-12"))

    def test_identical_single_days_overlap(self):
        assert overlaps(DateRange.single("2024-01-03"), DateRange.single("2024-01-03"))

    def test_inverted_range_uses_boundary_comparison(self):
        inverted = _range("2024-01-10", "2024-01-05")
        january = _range("2024-01-01", "2024-01-31")
        assert overlaps(inverted, january)
        assert overlaps(january, inverted)

    def test_inverted_range_outside_other_does_not_overlap(self):
        inverted = _range("2024-01-10", "2024-01-05")
        assert not overlaps(inverted, _range("2024-02-01", "2024-02-29"))

    @pytest.mark.parametrize(
        "a, b",
        [
            (("2024-01-01", "2024-01-05"), ("2024-01-05", "2024-01-10")),
            (("2024-01-01", "2024-01-05"), ("2024-01-07", "2024-01-10")),
            (("2024-01-01", "2024-01-31"), ("2024-01-10", "2024-01-12")),
            (("2024-01-10", "2024-01-01"), ("2024-01-01", "2024-01-31")),
        ],
    )
    def test_symmetric(self, a, b):
        assert overlaps(_range(*a), _range(*b)) == overlaps(_range(*b), _range(*a))


class TestOverlapRange:

    def test_shared_days(self):
        shared = overlap_range(_range("2024-01-01", "2024-01-10"), _range("2024-01-08", "2024-01-20"))
        assert shared == DateRange(date(2024, 1, 8), date(2024, 1, 10))

    def test_no_overlap_is_none(self):
        assert overlap_range(_range("2024-01-01", "2024-01-05"), _range("2024-01-07", "2024-01-10")) is None

    def test_inverted_range_has_no_shared_days(self):
        inverted = _range("2024-01-10", "2024-01-05")
        january = _range("2024-01-01", "2024-01-31")
        assert overlap_range(inverted, january) is None
        assert overlap_range(january, inverted) is None


class TestFindConflicts:
    """Conflicts against an employee's existing requests."""

    def setup_method(self):
        self.existing = [
            LeaveRequestSpan.of("2024-01-08", "2024-01-12", request_id="a"),
            LeaveRequestSpan.of("2024-02-01", "2024-02-02", request_id="b"),
            LeaveRequestSpan.of("2024-01-12", "2024-01-15", request_id="c"),
        ]

    def test_returns_overlapping_in_input_order(self):
        candidate = LeaveRequestSpan.of("2024-01-10", "2024-01-12", request_id="new")
        conflicts = find_conflicts(candidate, self.existing)
        assert [c.request_id for c in conflicts] == ["a", "c"]

    def test_accepts_plain_range(self):
        conflicts = find_conflicts(_range("2024-02-02", "2024-02-05"), self.existing)
        assert [c.request_id for c in conflicts] == ["b"]

    def test_no_conflicts(self):
        assert find_conflicts(_range("2024-03-01", "2024-03-05"), self.existing) == ()
