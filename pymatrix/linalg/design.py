"""
Elimination Design.

A design is the validated, frozen input of an elimination: an owned
snapshot of the coefficient matrix and, optionally, of a right-hand side.
Backends receive designs and never touch the caller's objects, so the
inputs of det/inv/rref/solve are never mutated.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.protocols import MatrixLike
from pymatrix.core.validation import check_square
from pymatrix.dense.matrix import Matrix


def _working_type(element_type: Callable[[Any], Any]) -> Callable[[Any], Any]:
    # Division promotes integers, so integer input is reduced as float
    if isinstance(element_type, type) and issubclass(element_type, numbers.Integral):
        return float
    return element_type


def _snapshot(obj: Any, name: str) -> Matrix:
    if isinstance(obj, MatrixLike):
        return Matrix.from_matrix(obj)
    if isinstance(obj, np.ndarray):
        if obj.ndim == 1:
            obj = obj.reshape(-1, 1)
        return Matrix.from_array(obj)
    try:
        rows = list(obj)
    except TypeError as e:
        raise TypeError(f"{name}: expected a matrix-like object or nested sequence, "
                        f"got {type(obj).__name__}") from e
    return Matrix.from_rows(rows)


@dataclass(frozen=True)
class EliminationDesign:
    """
    Validated input for the elimination backends.

    Construction:
        EliminationDesign.build(A)                          # rref / rank
        EliminationDesign.build(A, require_square=True)     # det / inv
        EliminationDesign.build(A, B, require_square=True)  # solve
    """
    _a: Matrix
    _rhs: Matrix | None
    _name: str

    @classmethod
    def build(
        cls,
        a: Any,
        rhs: Any = None,
        *,
        require_square: bool = False,
        name: str = 'A',
    ) -> EliminationDesign:
        """
        Snapshot and validate inputs.

        Args:
            a: Matrix, view, NumPy array, or nested sequence
            rhs: Optional right-hand side with the same number of rows
            require_square: Reject non-square a
            name: Name used in error messages

        Raises:
            DimensionError: If a is not square when required, or rhs has a
                different number of rows
            EmptyError: If a nested sequence is empty
        """
        a_snap = _snapshot(a, name)
        if require_square:
            check_square(a_snap.rows(), a_snap.cols(), name)
        rhs_snap = None
        if rhs is not None:
            rhs_snap = _snapshot(rhs, 'rhs')
            if rhs_snap.rows() != a_snap.rows():
                raise DimensionError(
                    f"rhs: expected {a_snap.rows()} rows to match {name}, got {rhs_snap.rows()}"
                )
        return cls(_a=a_snap, _rhs=rhs_snap, _name=name)

    # === Properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def n_rows(self) -> int:
        return self._a.rows()

    @property
    def n_cols(self) -> int:
        return self._a.cols()

    @property
    def element_type(self) -> Callable[[Any], Any]:
        return self._a.element_type

    @property
    def has_rhs(self) -> bool:
        return self._rhs is not None

    @property
    def working_type(self) -> Callable[[Any], Any]:
        """Element type the backends reduce in: float for integer input."""
        return _working_type(self._a.element_type)

    def _working_copy(self, matrix: Matrix) -> Matrix:
        if _working_type(matrix.element_type) is matrix.element_type:
            return matrix.copy()
        return Matrix.from_matrix(matrix, element_type=self.working_type)

    def working_a(self) -> Matrix:
        """Fresh mutable copy of the coefficient matrix in the working type."""
        return self._working_copy(self._a)

    def working_rhs(self) -> Matrix | None:
        """Fresh mutable copy of the right-hand side, or None."""
        return None if self._rhs is None else self._working_copy(self._rhs)

    def a_array(self) -> np.ndarray:
        return self._a.to_numpy()

    def rhs_array(self) -> np.ndarray | None:
        return None if self._rhs is None else self._rhs.to_numpy()
