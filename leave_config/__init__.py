"""
leave_config -- single public entrypoint for jurisdiction configuration.

Responsibility:
    Provides the ONLY way to obtain statutory leave rules at runtime through
    ``get_jurisdiction_registry()``.  No other component reads the YAML
    file directly.

Architecture position:
    Configuration -- YAML-driven, parsed once per path and cached.
    This package sits above ``leave_kernel`` and below ``leave_services``.
    The kernel and the engines MUST NEVER import from ``leave_config``;
    they receive ``JurisdictionRule`` values from their callers.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``InvalidJurisdictionError`` -- malformed jurisdiction entries.

Audit relevance:
    Every fresh load emits a ``LEAVE_CONFIG_TRACE`` log entry containing the
    path, version, checksum and jurisdiction codes, tying computed minimums
    back to the exact configuration content.
"""

from __future__ import annotations

import threading
from pathlib import Path

from leave_config.loader import load_registry
from leave_config.schema import JurisdictionRegistry
from leave_kernel.domain.jurisdiction import JurisdictionRule
from leave_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default jurisdictions file shipped with the package
DEFAULT_CONFIG_PATH = Path(__file__).parent / "jurisdictions.yaml"

_cache: dict[Path, JurisdictionRegistry] = {}
_cache_lock = threading.Lock()


def get_jurisdiction_registry(config_path: Path | None = None) -> JurisdictionRegistry:
    """The ONLY public configuration entrypoint.

    Args:
        config_path: Alternative YAML file (tests, per-deployment rules).
            Defaults to the packaged ``jurisdictions.yaml``.

    Returns:
        The parsed registry, cached per resolved path.
    """
    path = (config_path or DEFAULT_CONFIG_PATH).resolve()
    with _cache_lock:
        cached = _cache.get(path)
        if cached is not None:
            return cached

        registry = load_registry(path)
        _cache[path] = registry

    _logger.info(
        "LEAVE_CONFIG_TRACE",
        extra={
            "trace_type": "LEAVE_CONFIG_TRACE",
            "config_path": str(path),
            "config_version": registry.version,
            "checksum": registry.checksum,
            "jurisdiction_count": len(registry),
            "jurisdictions": list(registry.codes),
        },
    )
    return registry


def get_jurisdiction(country_code: str, config_path: Path | None = None) -> JurisdictionRule:
    """Rule for one country code; raises JurisdictionNotFoundError if absent."""
    return get_jurisdiction_registry(config_path).get(country_code)


def clear_cache() -> None:
    """Drop cached registries. FOR TESTING ONLY."""
    with _cache_lock:
        _cache.clear()


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "JurisdictionRegistry",
    "clear_cache",
    "get_jurisdiction",
    "get_jurisdiction_registry",
]
