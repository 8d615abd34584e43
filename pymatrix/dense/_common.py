"""
Shared read surface for owned matrices and views.

MatrixOps is mixed into Matrix and every view type. It implements
everything that can be expressed in terms of rows(), cols() and at():
shape queries, view construction, materialization, equality, arithmetic
and rendering. LinearOps adds one-coordinate access for the 1-D variants
(Vector, RowProjection, ColProjection).
"""

from __future__ import annotations

import numbers
from typing import Any, Iterator, TYPE_CHECKING

from pymatrix.core.compute.tolerances import ToleranceTier, is_close, select_tolerance
from pymatrix.core.exceptions import DimensionError, EmptyError
from pymatrix.core.protocols import MatrixLike
from pymatrix.core.validation import (
    check_index,
    check_inner_dimensions,
    check_same_shape,
)
from pymatrix.dense.formatting import matrix_repr, matrix_str

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix
    from pymatrix.dense.vector import Vector
    from pymatrix.dense.views import ColProjection, RangeView, RowProjection, TransposeView


def shape_of(obj: Any) -> tuple[int, int]:
    return int(obj.rows()), int(obj.cols())


def _is_integral(element_type: Any) -> bool:
    return isinstance(element_type, type) and issubclass(element_type, numbers.Integral)


def result_type(left: Any, right: Any) -> Any:
    """Element type of a binary result: integers give way to the other operand's type."""
    if _is_integral(left) and not _is_integral(right):
        return right
    return left


def read_buffer(obj: Any) -> list[Any]:
    """Row-major copy of every element of a matrix-like object."""
    rows, cols = shape_of(obj)
    return [obj.at(i, j) for i in range(rows) for j in range(cols)]


def allclose(a: Any, b: Any, tier: ToleranceTier | None = None) -> bool:
    """
    Element-wise closeness of two matrix-like objects.

    Shapes must match exactly; a shape mismatch is False, not an error.
    When tier is None it is chosen from a's element type.
    """
    if shape_of(a) != shape_of(b):
        return False
    if tier is None:
        tier = select_tolerance(getattr(a, 'element_type', float))
    rows, cols = shape_of(a)
    return all(
        is_close(a.at(i, j), b.at(i, j), tier)
        for i in range(rows)
        for j in range(cols)
    )


class MatrixOps:
    """Operations available on anything with rows(), cols() and at()."""

    # Result matrices of arithmetic use this element type
    @property
    def element_type(self) -> Any:
        raise NotImplementedError

    # === Shape ===

    def rows(self) -> int:
        raise NotImplementedError

    def cols(self) -> int:
        raise NotImplementedError

    def at(self, row: int, col: int) -> Any:
        raise NotImplementedError

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    def is_square(self) -> bool:
        return self.rows() == self.cols()

    # === Views ===

    def t(self) -> TransposeView:
        """Read-only transpose view."""
        from pymatrix.dense.views import TransposeView
        return TransposeView(self)

    def range(self, row1: int, row2: int, col1: int, col2: int) -> RangeView:
        """Read-only view of the inclusive window [row1..row2] x [col1..col2]."""
        from pymatrix.dense.views import RangeView
        return RangeView(self, row1, row2, col1, col2)

    def row(self, index: int) -> RowProjection:
        """Write-through projection of one row."""
        from pymatrix.dense.views import RowProjection
        return RowProjection(self, index)

    def col(self, index: int) -> ColProjection:
        """Write-through projection of one column."""
        from pymatrix.dense.views import ColProjection
        return ColProjection(self, index)

    # === Materialization ===

    def to_list(self) -> list[list[Any]]:
        return [[self.at(i, j) for j in range(self.cols())] for i in range(self.rows())]

    def to_numpy(self, dtype: Any = None) -> Any:
        import numpy as np
        return np.array(self.to_list(), dtype=dtype)

    def _build(self, rows: int, cols: int, buffer: list[Any], element_type: Any = None) -> Matrix:
        from pymatrix.dense.matrix import Matrix
        return Matrix._from_buffer(rows, cols, buffer, element_type or self.element_type)

    def materialize(self) -> Matrix:
        """Copy the logical contents into a freshly owned matrix."""
        rows, cols = self.shape
        return self._build(rows, cols, read_buffer(self))

    # === Indexing sugar ===

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError("matrix indices must be provided as [row, col]")
            return self.at(key[0], key[1])
        if self.rows() == 1:
            return self.at(0, key)
        index = check_index(key, self.rows(), 'row')
        return self.range(index, index, 0, self.cols() - 1)

    # === Comparison ===

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        if shape_of(self) != shape_of(other):
            return False
        return all(
            self.at(i, j) == other.at(i, j)
            for i in range(self.rows())
            for j in range(self.cols())
        )

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Any, tier: ToleranceTier | None = None) -> bool:
        return allclose(self, other, tier)

    # === Arithmetic ===

    def _elementwise(self, other: Any, op: Any, names: tuple[str, str]) -> Matrix:
        check_same_shape(self.shape, shape_of(other), names)
        rows, cols = self.shape
        buffer = [
            op(self.at(i, j), other.at(i, j))
            for i in range(rows)
            for j in range(cols)
        ]
        element_type = result_type(self.element_type, getattr(other, 'element_type', self.element_type))
        return self._build(rows, cols, buffer, element_type)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self._elementwise(other, lambda x, y: x + y, ('left', 'right'))

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self._elementwise(other, lambda x, y: x - y, ('left', 'right'))

    def __neg__(self) -> Matrix:
        rows, cols = self.shape
        return self._build(rows, cols, [-value for value in read_buffer(self)])

    def __mul__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, MatrixLike):
            return NotImplemented
        rows, cols = self.shape
        element_type = result_type(self.element_type, type(scalar))
        return self._build(rows, cols, [value * scalar for value in read_buffer(self)], element_type)

    def __rmul__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, MatrixLike):
            return NotImplemented
        rows, cols = self.shape
        element_type = result_type(self.element_type, type(scalar))
        return self._build(rows, cols, [scalar * value for value in read_buffer(self)], element_type)

    def __truediv__(self, scalar: Any) -> Matrix:
        if isinstance(scalar, MatrixLike):
            return NotImplemented
        rows, cols = self.shape
        element_type = result_type(self.element_type, type(scalar))
        if _is_integral(element_type):
            element_type = float
        return self._build(rows, cols, [value / scalar for value in read_buffer(self)], element_type)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        check_inner_dimensions(self.shape, shape_of(other), ('left', 'right'))
        rows, inner = self.shape
        cols = other.cols()
        buffer = []
        for i in range(rows):
            for j in range(cols):
                acc = self.at(i, 0) * other.at(0, j)
                for k in range(1, inner):
                    acc = acc + self.at(i, k) * other.at(k, j)
                buffer.append(acc)
        element_type = result_type(self.element_type, getattr(other, 'element_type', self.element_type))
        # Matrix @ column vector yields a column vector
        builder = other if cols == 1 and isinstance(other, LinearOps) else self
        return builder._build(rows, cols, buffer, element_type)

    # === Rendering ===

    def __str__(self) -> str:
        return matrix_str(self)

    def __repr__(self) -> str:
        return matrix_repr(self)


class LinearOps:
    """
    One-coordinate access for 1-D variants.

    Requires the host class to provide rows(), cols(), and two-coordinate
    at()/set() further along the MRO.
    """

    def length(self) -> int:
        return self.rows() * self.cols()

    def __len__(self) -> int:
        return self.length()

    def _coords(self, index: Any) -> tuple[int, int]:
        index = check_index(index, self.length(), 'index')
        if self.rows() == 1:
            return 0, index
        return index, 0

    def at(self, index: int, col: int | None = None) -> Any:
        """at(k) reads the k-th element; at(row, col) reads in 2-D."""
        if col is None:
            return super().at(*self._coords(index))
        return super().at(index, col)

    def set(self, *args: Any) -> None:
        """set(k, value) writes the k-th element; set(row, col, value) writes in 2-D."""
        if len(args) == 2:
            index, value = args
            super().set(*self._coords(index), value)
        elif len(args) == 3:
            super().set(*args)
        else:
            raise TypeError(f"set() takes (index, value) or (row, col, value), got {len(args)} arguments")

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return self.at(*key)
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            self.set(key[0], key[1], value)
        else:
            self.set(key, value)

    def __iter__(self) -> Iterator[Any]:
        for k in range(self.length()):
            yield self.at(k)

    def to_values(self) -> list[Any]:
        return list(self)

    # === Reductions ===

    def sum(self) -> Any:
        total = self.at(0)
        for k in range(1, self.length()):
            total = total + self.at(k)
        return total

    def prod(self) -> Any:
        total = self.at(0)
        for k in range(1, self.length()):
            total = total * self.at(k)
        return total

    def dot(self, other: Any) -> Any:
        return dot(self, other)

    def norm(self) -> Any:
        """Euclidean norm, sqrt(sum |x_k|^2)."""
        total = abs(self.at(0)) ** 2
        for k in range(1, self.length()):
            total = total + abs(self.at(k)) ** 2
        return total ** 0.5


def dot(v1: Any, v2: Any) -> Any:
    """
    Inner product sum(v1[k] * v2[k]) of two 1-D objects.

    Raises:
        EmptyError: If either operand has no elements
        DimensionError: If the lengths differ
    """
    n1, n2 = len(v1), len(v2)
    if n1 == 0 or n2 == 0:
        raise EmptyError("dot: operands must be non-empty")
    if n1 != n2:
        raise DimensionError(f"dot: lengths differ, left={n1}, right={n2}")
    total = v1.at(0) * v2.at(0)
    for k in range(1, n1):
        total = total + v1.at(k) * v2.at(k)
    return total
