"""
Dense storage layer.

Owned containers (Matrix, Vector), non-owning views, elementary row
operations and the sticky-compute cache.
"""

from pymatrix.dense.matrix import Matrix, allocate, identity, ones, zeros
from pymatrix.dense.vector import Vector
from pymatrix.dense.views import ColProjection, RangeView, RowProjection, TransposeView
from pymatrix.dense.rowops import row_add, row_add_multiple, row_scale, row_swap
from pymatrix.dense.cache import CACHE_DET, CACHE_DIAG, CACHE_INV, StickyCache
from pymatrix.dense._common import allclose, dot

__all__ = [
    # Containers
    "Matrix",
    "Vector",
    "allocate",
    "identity",
    "zeros",
    "ones",
    # Views
    "TransposeView",
    "RangeView",
    "RowProjection",
    "ColProjection",
    # Row operations
    "row_swap",
    "row_scale",
    "row_add",
    "row_add_multiple",
    # Cache
    "StickyCache",
    "CACHE_DIAG",
    "CACHE_DET",
    "CACHE_INV",
    # Helpers
    "dot",
    "allclose",
]
