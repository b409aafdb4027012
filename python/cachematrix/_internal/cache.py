from __future__ import annotations

import warnings
from typing import Any, Callable

import numpy as np

from .coercion import empty_matrix, owned_matrix
from .formatting import CacheMatrixMixin
from .linalg import invert
from .warnings import CacheMatrixIntegrityWarning


class CacheMatrix(CacheMatrixMixin):
    """Square matrix that lazily computes and remembers its inverse.

    States:
    - empty: no inverse held (initially, and after `set_value`)
    - cached: inverse held, returned as-is by `inverse()`

    The inverse is computed at most once per value. Failures from the solver
    propagate unchanged and leave the cache exactly as it was.

    Not thread-safe: `inverse()` is check-then-compute-then-store. Callers
    sharing an instance across threads must serialize access.
    """

    def __init__(
        self,
        value: Any = None,
        *,
        solver: Callable[..., Any] = invert,
    ) -> None:
        self._solver = solver
        self._value = empty_matrix() if value is None else owned_matrix(value)
        self._inverse: Any | None = None
        # Presence is tracked separately: None is a legal overwritten inverse.
        self._has_inverse = False
        self._times_computed = 0

    def value(self) -> np.ndarray:
        """Return the held matrix (read-only)."""
        return self._value

    def set_value(self, new_value: Any) -> None:
        """Replace the matrix, dropping any cached inverse.

        Nothing is computed here; the next `inverse()` call does the work.
        """
        self._value = owned_matrix(new_value)
        self._inverse = None
        self._has_inverse = False
        self._times_computed = 0

    def inverse(self, **options: Any) -> Any:
        """Return the inverse, computing it on first request.

        `options` are forwarded verbatim to the solver and only matter when a
        computation actually happens.
        """
        if not self._has_inverse:
            inv = self._solver(self._value, **options)
            if isinstance(inv, np.ndarray):
                # Freeze a view so the solver's own array stays writable.
                inv = inv.view()
                inv.flags.writeable = False
            self._inverse = inv
            self._has_inverse = True
            self._times_computed += 1
        return self._inverse

    def unsafe_set_inverse(self, new_inverse: Any) -> None:
        """Overwrite the cached inverse without checking it.

        After this call `inverse()` returns `new_inverse` (any object,
        including None) even if it is not the inverse of `value()`. The
        computation counter is left alone.

        A CacheMatrixIntegrityWarning is emitted after the store, so the
        overwrite is kept even when warnings are escalated to errors.
        """
        self._inverse = new_inverse
        self._has_inverse = True
        warnings.warn(
            "Overwriting the cached inverse; it is no longer guaranteed to match the matrix value.",
            CacheMatrixIntegrityWarning,
            stacklevel=2,
        )

    def times_computed(self) -> int:
        return self._times_computed

    def is_cached(self) -> bool:
        return self._has_inverse

    def rows(self) -> int:
        return int(self._value.shape[0]) if self._value.ndim >= 1 else 0

    def cols(self) -> int:
        return int(self._value.shape[1]) if self._value.ndim >= 2 else 0

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(d) for d in self._value.shape)


def make_cache_matrix(value: Any = None, *, solver: Callable[..., Any] = invert) -> CacheMatrix:
    return CacheMatrix(value, solver=solver)


def cache_solve(cache: CacheMatrix, **options: Any) -> Any:
    """Return the (possibly cached) inverse held by `cache`."""
    return cache.inverse(**options)
