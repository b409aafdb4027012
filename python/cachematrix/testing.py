"""Fixtures and a self-test runner for the inverse cache.

Run ``python -m cachematrix.testing`` to sweep matrix sizes 5..50 and verify
that the cache computes each inverse exactly once per value.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from ._internal.cache import CacheMatrix, cache_solve
from ._internal.runtime import runtime as _runtime


class SelfTestFailure(AssertionError):
    pass


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise SelfTestFailure(message)


def make_random_cache_matrix(
    dimension: int,
    *,
    rate: float = 0.1,
    rng: np.random.Generator | None = None,
) -> CacheMatrix:
    """Cache around a random square matrix with exponentially distributed entries.

    A singular draw has probability zero and is not handled specially; it
    surfaces as a failed check.
    """
    if dimension < 0:
        raise ValueError("dimension must be non-negative")
    if rate <= 0:
        raise ValueError("rate must be positive")
    if rng is None:
        rng = _runtime.rng()
    return CacheMatrix(rng.exponential(scale=1.0 / rate, size=(dimension, dimension)))


def check_cache_matrix(cache: CacheMatrix, dimension: int) -> None:
    _check(
        cache.times_computed() == 0,
        "Cache was calculated before the inverse matrix was requested",
    )

    mat = cache.value()
    inv = cache_solve(cache)
    _check(cache.times_computed() == 1, "Cache should have been only calculated once")

    product = np.asarray(mat) @ np.asarray(inv)
    _check(
        np.array_equal(np.eye(dimension), np.round(product, 0)),
        "Inverse matrix not calculated correctly",
    )

    for _ in range(2):
        again = cache_solve(cache)
        _check(again is inv, "Cached inverse was replaced by a repeated request")
        _check(cache.times_computed() == 1, "Cache was calculated more than once")


def run_self_test(
    dimensions: Iterable[int] = range(5, 51),
    rounds: int = 5,
    *,
    rng: np.random.Generator | None = None,
) -> int:
    """Check a fresh fixture per dimension, then `rounds` value replacements.

    Returns the number of fixtures checked.
    """
    checked = 0
    for dimension in dimensions:
        cache = make_random_cache_matrix(dimension, rng=rng)
        check_cache_matrix(cache, dimension)
        checked += 1

        for _ in range(rounds):
            temp = make_random_cache_matrix(dimension, rng=rng)
            cache.set_value(temp.value())
            check_cache_matrix(cache, dimension)
            checked += 1
    return checked


def main() -> int:
    run_self_test()
    print("All tests passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
