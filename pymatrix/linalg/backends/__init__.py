"""
Elimination backends.

Available backends:
    GaussJordanBackend: CPU reference implementation, exact for exact types
    LapackBackend: CPU LU factorization through SciPy, float64 only
"""

from pymatrix.linalg.backends.cpu import GaussJordanBackend
from pymatrix.linalg.backends.lapack import LapackBackend

__all__ = [
    "GaussJordanBackend",
    "LapackBackend",
]
