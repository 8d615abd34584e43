"""
Row reduction, determinants, inverses and linear systems.

Public API:
    reduce(A, rhs=None, forward_only=False) -> ReductionSolution
    rref(A, rhs=None) -> Matrix
    rank(A) -> int
    det(A, backend='auto')
    inv(A, backend='auto') -> Matrix
    solve(A, B, backend='auto') -> Matrix

Every entry point snapshots its inputs into an EliminationDesign, so the
caller's matrices are never mutated.

Example:
    >>> from pymatrix import Matrix
    >>> from pymatrix.linalg import det, inv
    >>> A = Matrix.from_rows([[1, 2], [3, 4]])
    >>> det(A)
    -2.0
"""

from pymatrix.linalg.design import EliminationDesign
from pymatrix.linalg.solution import (
    DeterminantParams,
    InverseParams,
    ReductionParams,
    ReductionSolution,
    SolveParams,
)
from pymatrix.linalg.solvers import det, inv, rank, reduce, rref, solve

__all__ = [
    "reduce",
    "rref",
    "rank",
    "det",
    "inv",
    "solve",
    "EliminationDesign",
    "ReductionSolution",
    "ReductionParams",
    "DeterminantParams",
    "InverseParams",
    "SolveParams",
]
