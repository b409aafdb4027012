from __future__ import annotations

from typing import Any

import numpy as np

from .coercion import square_dimension
from .runtime import runtime as _runtime


class ComputationFailure(np.linalg.LinAlgError):
    """The matrix has no inverse (singular, ill-conditioned or not square)."""


def invert(
    matrix: Any,
    *,
    tol: float | None = None,
    check_finite: bool = True,
    dtype: Any = None,
) -> np.ndarray:
    """Return the inverse of a square matrix.

    Options:
    - tol: reject matrices whose reciprocal 1-norm condition number is below
      `tol`. Defaults to the CACHEMATRIX_INVERT_TOL setting, then to float64
      machine epsilon. Pass 0.0 to only reject exact singularity.
    - check_finite: reject NaN/inf entries instead of returning garbage.
    - dtype: cast the result.

    Raises ComputationFailure when no inverse can be produced.
    """
    array = np.asarray(matrix)
    n = square_dimension(array)
    if n is None:
        raise ComputationFailure(f"cannot invert a non-square matrix of shape {array.shape}")

    if check_finite and not np.all(np.isfinite(array)):
        raise ComputationFailure("cannot invert a matrix with non-finite entries")

    if tol is None:
        tol = _runtime.invert_tol()
    if tol is None:
        tol = float(np.finfo(np.float64).eps)

    if tol > 0 and n > 0:
        # R-style tolerance: 1 / kappa_1 must stay above tol.
        with np.errstate(divide="ignore", invalid="ignore"):
            cond = np.linalg.cond(array, 1)
        rcond = 0.0 if not np.isfinite(cond) or cond == 0 else 1.0 / cond
        if rcond < tol:
            raise ComputationFailure(
                f"matrix is computationally singular: reciprocal condition number = {rcond:g}"
            )

    try:
        inv = np.linalg.inv(array)
    except np.linalg.LinAlgError as exc:
        raise ComputationFailure(str(exc)) from exc

    if dtype is not None:
        inv = inv.astype(dtype, copy=False)
    return inv
