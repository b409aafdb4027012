from __future__ import annotations

from typing import Any

import numpy as np


def empty_matrix() -> np.ndarray:
    """Placeholder value for a cache created without a matrix."""
    return owned_matrix(np.empty((0, 0), dtype=np.float64))


def owned_matrix(candidate: Any) -> np.ndarray:
    """Copy `candidate` into a private, read-only NumPy array.

    Shape is deliberately not validated here; a non-square value is accepted
    and only rejected once an inverse is requested.
    """
    array = np.array(candidate, copy=True)
    array.flags.writeable = False
    return array


def square_dimension(array: np.ndarray) -> int | None:
    """Return n for an n x n array, or None when the array is not square 2-D."""
    if array.ndim != 2:
        return None
    rows, cols = array.shape
    if rows != cols:
        return None
    return int(rows)
