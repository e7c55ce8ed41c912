"""Randomness helpers for deterministic behaviour.

Every draw is a pure function of an explicit 32-bit seed. Callers derive
independent streams by adding fixed offsets to a fingerprint (``seed + 17``,
``seed + 13``, ``seed + i * 31``) rather than advancing a generator.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

UINT32_MASK = 0xFFFFFFFF
UINT32_MAX = 4294967295

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223

T = TypeVar("T")


def to_uint32(value: int) -> int:
    """Reduce ``value`` to an unsigned 32-bit integer."""
    return value & UINT32_MASK


def fnv1a_hash(value: str) -> int:
    """Return the 32-bit FNV-1a fingerprint of ``value``.

    Characters are folded in as UTF-16 code units, so text outside the Basic
    Multilingual Plane contributes both halves of its surrogate pair.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    data = value.encode("utf-16-le", "surrogatepass")
    accumulator = FNV_OFFSET_BASIS
    for index in range(0, len(data), 2):
        accumulator ^= data[index] | (data[index + 1] << 8)
        accumulator = (accumulator * FNV_PRIME) & UINT32_MASK
    return accumulator


def seeded_random(seed: int) -> float:
    """Return a reproducible value in ``[0, 1]`` from a single LCG step."""
    state = (to_uint32(seed) * LCG_MULTIPLIER + LCG_INCREMENT) & UINT32_MASK
    return state / UINT32_MAX


def seeded_index(seed: int, size: int) -> int:
    """Map ``seeded_random(seed)`` onto ``range(size)``."""
    if size <= 0:
        raise ValueError("size must be positive")
    return min(int(seeded_random(seed) * size), size - 1)


def seeded_choice(seed: int, pool: Sequence[T]) -> T:
    """Pick one element of ``pool`` using :func:`seeded_index`."""
    return pool[seeded_index(seed, len(pool))]
