"""
Rounding -- the single source of leave-day rounding rules.

Responsibility:
    Every calculator that rounds day quantities goes through these two
    functions so that tie-breaking is identical everywhere: entitlement
    pro-ration, part-time scaling and statutory minimums.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Half-unit rounding: nearest multiple of 0.5, ties rounded half-up
      (``ROUND_HALF_UP``, away from zero for negative values).
    - Whole-day rounding: nearest integer, ties away from zero.
    - Decimal in, Decimal out; no float arithmetic.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from leave_kernel.domain.values import to_days

_WHOLE = Decimal("1")
_TWO = Decimal("2")


def round_half_unit(value: Decimal | int | str) -> Decimal:
    """
    Round a day quantity to the nearest half day.

    Examples:
        14.25 -> 14.5, 14.74 -> 14.5, 14.75 -> 15, 2.3 -> 2.5
    """
    doubled = (to_days(value) * _TWO).quantize(_WHOLE, rounding=ROUND_HALF_UP)
    return doubled / _TWO


def round_whole_day(value: Decimal | int | str) -> Decimal:
    """Round a day quantity to the nearest whole day, ties away from zero."""
    return to_days(value).quantize(_WHOLE, rounding=ROUND_HALF_UP)
