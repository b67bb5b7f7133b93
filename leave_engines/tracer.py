"""
leave_engines.tracer -- LEAVE_ENGINE_TRACE records for engine calls.

Responsibility:
    ``@traced_engine`` wraps a pure calculation and, after it returns, logs
    one ``LEAVE_ENGINE_TRACE`` record naming the engine, its version, a
    fingerprint of the selected inputs and the wall time spent.  Two calls
    with equal inputs carry the same fingerprint, which lets a computed
    balance be tied back to the exact request, holidays and policy values
    that produced it.

Architecture position:
    Engines -- support module for the pure calculation layer.
    Emits a log record only; no other I/O.

Invariants enforced:
    - Fingerprints are deterministic: sets are sorted, dataclasses are
      expanded field by field, dates use ISO format and Decimals keep their
      exact text.  The digest is SHA-256 truncated to 16 hex chars.
    - The wrapped function's arguments and return value are untouched.
    - Calls that raise are not traced; the exception propagates.
"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import inspect
import time
from collections.abc import Callable, Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from leave_kernel.logging_config import get_logger

_logger = get_logger("engines.tracer")

TRACE_TYPE = "LEAVE_ENGINE_TRACE"
FINGERPRINT_LENGTH = 16

F = TypeVar("F", bound=Callable[..., Any])


def _canonical(value: Any) -> str:
    """Stable text form of an engine argument."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, Decimal)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        pairs = sorted((str(k), _canonical(v)) for k, v in value.items())
        return "{" + ",".join(f"{k}:{v}" for k, v in pairs) + "}"
    if isinstance(value, (set, frozenset)):
        return "{" + ",".join(sorted(_canonical(v) for v in value)) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonical(v) for v in value) + "]"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        return type(value).__name__ + _canonical(fields)
    return str(value)


def compute_input_fingerprint(
    fingerprint_fields: tuple[str, ...],
    arguments: Mapping[str, Any],
) -> str:
    """
    Fingerprint of the named arguments.

    Absent arguments are hashed as ``null`` so a defaulted parameter and an
    explicit None produce the same fingerprint.
    """
    canonical = "|".join(f"{name}={_canonical(arguments.get(name))}" for name in fingerprint_fields)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:FINGERPRINT_LENGTH]


def traced_engine(
    engine_name: str,
    engine_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable[[F], F]:
    """Decorate a pure engine function so each call emits LEAVE_ENGINE_TRACE.

    Args:
        engine_name: Engine identifier, e.g. ``"carryover"``.
        engine_version: Version of the calculation rules, e.g. ``"1.0"``.
        fingerprint_fields: Parameter names to include in the fingerprint;
            positional and keyword calls fingerprint identically.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fingerprint = ""
            if fingerprint_fields:
                bound = signature.bind_partial(*args, **kwargs)
                fingerprint = compute_input_fingerprint(fingerprint_fields, bound.arguments)

            started = time.monotonic()
            result = func(*args, **kwargs)
            elapsed_ms = round((time.monotonic() - started) * 1000, 2)

            _logger.info(TRACE_TYPE, extra={
                "trace_type": TRACE_TYPE,
                "engine_name": engine_name,
                "engine_version": engine_version,
                "input_fingerprint": fingerprint,
                "duration_ms": elapsed_ms,
                "function": func.__qualname__,
            })
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
