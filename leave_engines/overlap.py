"""
Module: leave_engines.overlap
Responsibility:
    Decide whether leave requests conflict in time.  Used by request
    validation to reject a new request that shares a day with one of the
    employee's pending or approved requests.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Ranges are inclusive: sharing a single boundary day is an overlap;
      a gap of one full day is not.
    - ``overlaps(a, b) == overlaps(b, a)`` for all inputs.
    - The comparison is applied as-is to degenerate ranges (``start > end``);
      ``overlap_range`` returns None whenever there is no shared day.
"""

from __future__ import annotations

from collections.abc import Iterable

from leave_kernel.domain.values import DateRange, LeaveRequestSpan
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.overlap")


def overlaps(range_a: DateRange, range_b: DateRange) -> bool:
    """
    True iff ``range_a.start <= range_b.end`` and ``range_a.end >= range_b.start``.

    For well-formed ranges this means the two share at least one calendar day.
    """
    return range_a.start <= range_b.end and range_a.end >= range_b.start


def overlap_range(range_a: DateRange, range_b: DateRange) -> DateRange | None:
    """The shared days of two ranges, or None when they do not overlap."""
    if range_a.is_degenerate or range_b.is_degenerate or not overlaps(range_a, range_b):
        return None
    return DateRange(max(range_a.start, range_b.start), min(range_a.end, range_b.end))


def find_conflicts(
    candidate: LeaveRequestSpan | DateRange,
    existing: Iterable[LeaveRequestSpan],
) -> tuple[LeaveRequestSpan, ...]:
    """
    Existing spans that overlap the candidate, in input order.

    The caller decides which existing requests count (typically pending and
    approved ones for the same employee).
    """
    candidate_range = candidate.range if isinstance(candidate, LeaveRequestSpan) else candidate
    conflicts = tuple(span for span in existing if overlaps(candidate_range, span.range))
    if conflicts:
        logger.debug("overlap_conflicts_found", extra={
            "candidate": str(candidate_range),
            "conflict_count": len(conflicts),
            "conflicting_request_ids": [s.request_id for s in conflicts],
        })
    return conflicts
