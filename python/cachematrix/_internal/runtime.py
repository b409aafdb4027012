from __future__ import annotations

import os

import numpy as np


class Runtime:
    """Process-wide settings read lazily from the environment.

    Values are cached on first access; call `reset()` after changing the
    environment to pick up new values.
    """

    def __init__(
        self,
        *,
        seed_env_var: str = "CACHEMATRIX_SEED",
        tol_env_var: str = "CACHEMATRIX_INVERT_TOL",
    ) -> None:
        self._seed_env_var = seed_env_var
        self._tol_env_var = tol_env_var
        self._rng_cache: np.random.Generator | None = None
        self._tol_cache: float | None = None
        self._tol_loaded = False

    def seed(self) -> int | None:
        env = os.environ.get(self._seed_env_var)
        if env is None or not env.strip():
            return None
        try:
            return int(env)
        except ValueError:
            raise ValueError(f"{self._seed_env_var} must be an integer, got {env!r}") from None

    def rng(self) -> np.random.Generator:
        if self._rng_cache is None:
            self._rng_cache = np.random.default_rng(self.seed())
        return self._rng_cache

    def invert_tol(self) -> float | None:
        if self._tol_loaded:
            return self._tol_cache

        env = os.environ.get(self._tol_env_var)
        tol: float | None = None
        if env is not None and env.strip():
            try:
                tol = float(env)
            except ValueError:
                raise ValueError(f"{self._tol_env_var} must be a number, got {env!r}") from None
            if tol < 0:
                raise ValueError(f"{self._tol_env_var} must be non-negative, got {env!r}")

        self._tol_cache = tol
        self._tol_loaded = True
        return tol

    def reset(self) -> None:
        self._rng_cache = None
        self._tol_cache = None
        self._tol_loaded = False


runtime = Runtime()
