"""
Solver dispatch for elimination.

This module provides the public elimination API (reduce, rref, rank, det,
inv, solve) and backend selection.
"""

from typing import Any, Literal

from pymatrix.core.config import get_config
from pymatrix.dense.matrix import Matrix
from pymatrix.linalg.backends.cpu import GaussJordanBackend
from pymatrix.linalg.backends.lapack import LapackBackend
from pymatrix.linalg.design import EliminationDesign
from pymatrix.linalg.solution import ReductionSolution


# Type alias for backend selection
BackendChoice = Literal['auto', 'gauss_jordan', 'lapack']


def reduce(
    A: Any,
    rhs: Any = None,
    *,
    forward_only: bool = False,
) -> ReductionSolution:
    """
    Row-reduce A, applying the same operations to rhs if given.

    Always runs the reference Gauss-Jordan engine; pivot structure is only
    meaningful for the deterministic first-nonzero policy.

    Args:
        A: Matrix, view, NumPy array or nested sequence
        rhs: Optional right-hand side with A's row count
        forward_only: Stop after clearing entries below each pivot

    Returns:
        ReductionSolution with the reduced matrices, pivots and rank

    Raises:
        DimensionError: If rhs has a different number of rows

    Example:
        >>> from pymatrix import Matrix, reduce
        >>> sol = reduce(Matrix.from_rows([[1, 2], [2, 4]]))
        >>> sol.rank
        1
    """
    design = EliminationDesign.build(A, rhs)
    result = GaussJordanBackend().reduce(design, forward_only=forward_only)
    return ReductionSolution(_result=result, _design=design)


def rref(A: Any, rhs: Any = None) -> Matrix:
    """
    Reduced row echelon form of A.

    With rhs, returns rhs after the row operations that reduce A. Rank
    deficient input yields the partial reduction; it is not an error.
    """
    solution = reduce(A, rhs)
    if rhs is None:
        return solution.reduced
    return solution.rhs


def rank(A: Any) -> int:
    """Number of pivots found by a full reduction of A."""
    return reduce(A).rank


def det(A: Any, *, backend: BackendChoice = 'auto') -> Any:
    """
    Determinant of a square matrix.

    Args:
        A: Square matrix-like input
        backend: 'auto' (configured default), 'gauss_jordan' or 'lapack'

    Returns:
        The determinant, in A's element type for the Gauss-Jordan backend;
        the element type's zero when A is singular

    Raises:
        DimensionError: If A is not square
        ValueError: If backend is unknown
    """
    backend_impl = _get_backend(backend)
    if isinstance(A, Matrix) and isinstance(backend_impl, GaussJordanBackend):
        return A.det()
    design = EliminationDesign.build(A, require_square=True)
    return backend_impl.determinant(design).params.determinant


def inv(A: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Inverse of a square matrix.

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If A is not invertible
        ValueError: If backend is unknown
    """
    backend_impl = _get_backend(backend)
    if isinstance(A, Matrix) and isinstance(backend_impl, GaussJordanBackend):
        return A.inv()
    design = EliminationDesign.build(A, require_square=True)
    return backend_impl.inverse(design).params.inverse


def solve(A: Any, B: Any, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Solve A X = B for X.

    Args:
        A: Square coefficient matrix
        B: Right-hand side with A.rows() rows (matrix or column vector)
        backend: 'auto' (configured default), 'gauss_jordan' or 'lapack'

    Raises:
        DimensionError: If A is not square or B has the wrong row count
        SingularMatrixError: If A is not invertible
        ValueError: If backend is unknown
    """
    backend_impl = _get_backend(backend)
    design = EliminationDesign.build(A, B, require_square=True)
    return backend_impl.solve_system(design).params.solution


def _determinant(A: Any, backend: BackendChoice) -> Any:
    design = EliminationDesign.build(A, require_square=True)
    return _get_backend(backend).determinant(design).params.determinant


def _inverse(A: Any, backend: BackendChoice) -> Matrix:
    design = EliminationDesign.build(A, require_square=True)
    return _get_backend(backend).inverse(design).params.inverse


def _get_backend(choice: str):
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference

    Returns:
        Backend instance

    Raises:
        ValueError: If unknown backend specified
    """
    if choice == 'auto':
        choice = get_config().default_backend
        if choice == 'auto':
            choice = 'gauss_jordan'

    if choice == 'gauss_jordan':
        return GaussJordanBackend()

    elif choice == 'lapack':
        return LapackBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
