"""
PyMatrix: dense matrices with views and Gauss-Jordan elimination.

Owned row-major storage, zero-copy views, elementary row operations,
and a deterministic elimination engine for rref, determinants, inverses
and linear systems over any field-like element type.

Submodules:
    core: Exceptions, validation, configuration, result envelopes
    dense: Matrix, Vector, views, row operations, sticky-compute cache
    linalg: Elimination engine and backend dispatch
"""

__version__ = "0.1.0"

from pymatrix import core
from pymatrix import dense
from pymatrix import linalg

from pymatrix.core.fill import (
    FILL_IDENTITY,
    FILL_ONES,
    FILL_RANDOM,
    FILL_VALUE,
    FILL_ZEROS,
)
from pymatrix.core.config import config_context, get_config, set_config
from pymatrix.dense import Matrix, Vector, allocate, identity, ones, zeros
from pymatrix.linalg import det, inv, rank, reduce, rref, solve

__all__ = [
    "__version__",
    "core",
    "dense",
    "linalg",
    # Construction
    "Matrix",
    "Vector",
    "allocate",
    "identity",
    "zeros",
    "ones",
    "FILL_ZEROS",
    "FILL_ONES",
    "FILL_IDENTITY",
    "FILL_RANDOM",
    "FILL_VALUE",
    # Elimination
    "reduce",
    "rref",
    "rank",
    "det",
    "inv",
    "solve",
    # Configuration
    "get_config",
    "set_config",
    "config_context",
]
