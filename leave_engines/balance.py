"""
Leave Balance Aggregator (``leave_engines.balance``).

Responsibility
--------------
Pure functions over ``LeaveBalance`` snapshots:

* remaining balance (entitled + carried over + adjustment - used - pending)
* over-draw detection and coverage checks
* request lifecycle transitions (submit, approve, reject, withdraw,
  cancel) that return new balances

Architecture position
---------------------
**Engines layer** -- pure functional core.  ZERO I/O, ZERO database,
ZERO clock reads.  May only import from ``leave_kernel``.

Invariants enforced
-------------------
* ``remaining`` is always derived from the five stored fields, never
  stored or passed around as an independent value.
* Transitions never mutate their input; they return a new snapshot.
* Total over all numeric inputs: negative intermediate values are
  representable and reported, never rejected.

Failure modes
-------------
* ValueError only when a day quantity cannot be converted to Decimal.
* Concurrent updates to the same stored balance are the storage layer's
  concern; these functions only see the snapshot they are given.
"""

from __future__ import annotations

from decimal import Decimal

from leave_kernel.domain.values import ZERO_DAYS, LeaveBalance, to_days
from leave_kernel.logging_config import get_logger

logger = get_logger("engines.balance")


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def remaining(balance: LeaveBalance) -> Decimal:
    """Remaining days: entitled + carried_over + adjustment - used - pending."""
    return balance.remaining


def is_overdrawn(balance: LeaveBalance) -> bool:
    """True when more has been used or requested than was granted."""
    return balance.remaining < ZERO_DAYS


def can_cover(balance: LeaveBalance, days: Decimal | int | str) -> bool:
    """Whether the remaining balance covers a request of ``days``."""
    return balance.remaining >= to_days(days)


def seed_balance(
    entitled: Decimal | int | str,
    carried_over: Decimal | int | str = ZERO_DAYS,
    adjustment: Decimal | int | str = ZERO_DAYS,
) -> LeaveBalance:
    """Fresh balance for a new accounting year."""
    return LeaveBalance(
        entitled=to_days(entitled),
        carried_over=to_days(carried_over),
        adjustment=to_days(adjustment),
    )


# ---------------------------------------------------------------------------
# Lifecycle transitions
# ---------------------------------------------------------------------------


def submit(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """A request was submitted: its days become pending."""
    return _transition("submit", balance, pending=balance.pending + to_days(days))


def approve(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """A pending request was approved: its days move from pending to used."""
    amount = to_days(days)
    return _transition(
        "approve", balance,
        pending=balance.pending - amount,
        used=balance.used + amount,
    )


def reject(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """A pending request was rejected: its days return to the balance."""
    return _transition("reject", balance, pending=balance.pending - to_days(days))


def withdraw(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """The employee withdrew a pending request."""
    return _transition("withdraw", balance, pending=balance.pending - to_days(days))


def cancel_approved(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """An already approved request was cancelled: used days are returned."""
    return _transition("cancel_approved", balance, used=balance.used - to_days(days))


def record_direct_approval(balance: LeaveBalance, days: Decimal | int | str) -> LeaveBalance:
    """A request entered already approved (e.g. by an admin) is booked as used."""
    return _transition("record_direct_approval", balance, used=balance.used + to_days(days))


def adjust(balance: LeaveBalance, delta: Decimal | int | str) -> LeaveBalance:
    """Manual correction; positive grants days, negative removes them."""
    return _transition("adjust", balance, adjustment=balance.adjustment + to_days(delta))


def _transition(action: str, balance: LeaveBalance, **changes: Decimal) -> LeaveBalance:
    updated = balance.evolve(**changes)
    logger.debug("balance_transition", extra={
        "action": action,
        "remaining_before": str(balance.remaining),
        "remaining_after": str(updated.remaining),
    })
    if is_overdrawn(updated) and not is_overdrawn(balance):
        logger.warning("balance_overdrawn", extra={
            "action": action,
            "remaining": str(updated.remaining),
        })
    return updated
