"""Seeded Park-Miller generator and the per-year image permutation."""

from __future__ import annotations

from functools import lru_cache

MULTIPLIER = 16807
MODULUS = 2147483647  # 2**31 - 1


def lcg_next(seed: int) -> int:
    """Advance the Park-Miller generator by one step.

    The result lies in ``[1, MODULUS - 1]`` for every valid seed. Zero is a fixed
    point of the generator, so seeds that are non-positive or congruent to zero
    are rejected instead of producing an endless run of zeros.
    """
    if seed <= 0 or seed % MODULUS == 0:
        raise ValueError(f"Seed must be a positive integer not divisible by {MODULUS}, got {seed}")
    return (seed * MULTIPLIER) % MODULUS


@lru_cache(maxsize=64)
def build_permutation(n: int, year: int) -> tuple[int, ...]:
    """Return the Fisher-Yates shuffle of ``range(n)`` seeded by ``year``.

    The shuffle walks from the last index down to 1, swapping each position with
    ``seed % (i + 1)``. Results are cached per ``(n, year)``; the tuple return
    keeps cached values immutable.
    """
    if n <= 0:
        raise ValueError(f"Permutation size must be positive, got {n}")

    indices = list(range(n))
    seed = year
    for i in range(n - 1, 0, -1):
        seed = lcg_next(seed)
        j = seed % (i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return tuple(indices)


__all__ = ["MODULUS", "MULTIPLIER", "build_permutation", "lcg_next"]
