"""Environment-driven engine limits.

Limits are read from environment variables on every call so tests and the web
runner can adjust them without reloading modules:

``BANKROLLSIM_DISPLAY_CAP``
    Runs that keep their full trajectory in a batch result (default 100).
``BANKROLLSIM_MAX_RUNS``
    Upper bound on the run count accepted at the HTTP edge and CLI
    (default ``catalog.MAX_RUNS``).
``BANKROLLSIM_MAX_SPINS``
    Upper bound on spins per session accepted at the HTTP edge and CLI
    (default: the largest spin preset).
``BANKROLLSIM_WORKERS``
    Threads in the pool that runs batches for the web API (default: CPU count,
    at most 8).

Values that are not positive integers fall back to the default.  Tests can
pin limits temporarily with :func:`override_limits`.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Final

from .catalog import MAX_RUNS, SPIN_PRESETS

__all__ = ["EngineLimits", "load_limits", "override_limits", "worker_count"]

logger = logging.getLogger(__name__)

_DISPLAY_CAP_ENV: Final = "BANKROLLSIM_DISPLAY_CAP"
_MAX_RUNS_ENV: Final = "BANKROLLSIM_MAX_RUNS"
_MAX_SPINS_ENV: Final = "BANKROLLSIM_MAX_SPINS"
_WORKERS_ENV: Final = "BANKROLLSIM_WORKERS"


@dataclass(frozen=True)
class EngineLimits:
    display_cap: int = 100
    max_runs: int = MAX_RUNS
    max_spins: int = SPIN_PRESETS[-1]


_DEFAULTS: Final = EngineLimits()
_OVERRIDE_STACK: list[dict[str, int]] = []


def _parse_positive(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.debug("Ignoring non-integer %s=%r; using %d", name, raw, default)
        return default
    if value <= 0:
        logger.debug("Ignoring non-positive %s=%d; using %d", name, value, default)
        return default
    return value


def load_limits() -> EngineLimits:
    """Return the active limits: defaults, then env vars, then overrides."""

    limits = EngineLimits(
        display_cap=_parse_positive(_DISPLAY_CAP_ENV, _DEFAULTS.display_cap),
        max_runs=_parse_positive(_MAX_RUNS_ENV, _DEFAULTS.max_runs),
        max_spins=_parse_positive(_MAX_SPINS_ENV, _DEFAULTS.max_spins),
    )
    for overrides in _OVERRIDE_STACK:
        limits = replace(limits, **overrides)
    return limits


def worker_count() -> int:
    return _parse_positive(_WORKERS_ENV, max(1, min(8, os.cpu_count() or 1)))


@contextmanager
def override_limits(
    *,
    display_cap: int | None = None,
    max_runs: int | None = None,
    max_spins: int | None = None,
):
    """Temporarily replace individual limits within the context.

    Overrides are stacked, so nested contexts behave predictably.
    """

    overrides = {
        key: value
        for key, value in (("display_cap", display_cap), ("max_runs", max_runs), ("max_spins", max_spins))
        if value is not None
    }
    _OVERRIDE_STACK.append(overrides)
    try:
        yield
    finally:
        _OVERRIDE_STACK.pop()
