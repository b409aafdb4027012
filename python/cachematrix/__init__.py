"""Matrix container that lazily computes and caches its inverse."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal.cache import CacheMatrix, cache_solve, make_cache_matrix
from ._internal.linalg import ComputationFailure, invert
from ._internal.runtime import runtime
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixIntegrityWarning,
)


def set_print_edge_items(edge_items: int) -> None:
    """Number of leading/trailing rows and columns shown by ``str(cache)``."""
    _formatting.configure(edge_items=edge_items)


__all__ = [
    "CacheMatrix",
    "CacheMatrixIntegrityWarning",
    "CacheMatrixWarning",
    "ComputationFailure",
    "cache_solve",
    "invert",
    "make_cache_matrix",
    "runtime",
    "set_print_edge_items",
]
