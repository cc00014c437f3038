"""Deterministic Mulberry32 random source.

The generator keeps a single unsigned 32-bit state word and uses only integer
bit-mixing plus one final division, so a given seed produces the same stream of
floats on every platform.  Batch simulations rely on this to make each run
reproducible from ``(base_seed, run_index)`` alone.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from typing import Final

__all__ = [
    "Mulberry32",
    "RandomSource",
    "create_seeded_random",
    "random_seed",
]

RandomSource = Callable[[], float]

_MASK32: Final = 0xFFFFFFFF
_INCREMENT: Final = 0x6D2B79F5
_SCALE: Final = 4294967296.0
_SEED_CEILING: Final = 1_000_000_000


def _imul32(a: int, b: int) -> int:
    return (a * b) & _MASK32


class Mulberry32:
    """Callable Mulberry32 stream yielding floats in ``[0, 1)``."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & _MASK32

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        t = (self._state + _INCREMENT) & _MASK32
        self._state = t
        result = _imul32(t ^ (t >> 15), t | 1)
        result ^= (result + _imul32(result ^ (result >> 7), result | 61)) & _MASK32
        return (result ^ (result >> 14)) & _MASK32

    def __call__(self) -> float:
        return self.next_uint32() / _SCALE


def create_seeded_random(seed: int) -> RandomSource:
    """Return a draw function for ``seed`` (truncated to 32 bits)."""

    return Mulberry32(seed)


def random_seed() -> int:
    """Pick a fresh base seed when the caller did not supply one."""

    return secrets.randbelow(_SEED_CEILING)
