"""
Vector: a Matrix with one row or one column.

A Vector is an ordinary owned Matrix and supports everything a Matrix
does. It adds single-index access, reductions, and the dot product.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Sequence

from pymatrix.core.exceptions import EmptyError
from pymatrix.core.validation import check_size
from pymatrix.dense._common import LinearOps
from pymatrix.dense.matrix import Matrix, _infer_element_type

Orientation = Literal['row', 'col']

_ORIENTATIONS = ('row', 'col')


def _check_orientation(orientation: str) -> str:
    if orientation not in _ORIENTATIONS:
        raise ValueError(f"orientation must be one of {_ORIENTATIONS}, got {orientation!r}")
    return orientation


class Vector(LinearOps, Matrix):
    """
    1 x n (row) or n x 1 (column) owned matrix.

    Usage:
        v = Vector(3, fill=FILL_ZEROS)            # column vector
        w = Vector.from_values([1, 2, 3], orientation='row')
        v[0] = 5.0
        v.dot(w)
    """

    def __init__(
        self,
        length: int,
        orientation: Orientation = 'col',
        fill: str | None = None,
        **kwargs: Any,
    ):
        length = check_size(length, 'length')
        _check_orientation(orientation)
        if orientation == 'row':
            super().__init__(1, length, fill, **kwargs)
        else:
            super().__init__(length, 1, fill, **kwargs)

    @classmethod
    def from_values(
        cls,
        values: Sequence[Any],
        orientation: Orientation = 'col',
        *,
        element_type: Callable[[Any], Any] | None = None,
    ) -> Vector:
        """
        Build a vector from a flat sequence.

        Raises:
            EmptyError: If values is empty
        """
        _check_orientation(orientation)
        data = list(values)
        if not data:
            raise EmptyError("values: vector must have at least one element")
        if element_type is None:
            element_type = _infer_element_type(data[0])
        if orientation == 'row':
            return cls._from_buffer(1, len(data), data, element_type)
        return cls._from_buffer(len(data), 1, data, element_type)

    @property
    def orientation(self) -> Orientation:
        return 'row' if self._rows == 1 and self._cols != 1 else 'col'

    def _build(self, rows: int, cols: int, buffer: list[Any], element_type: Any = None) -> Matrix:
        if rows == 1 or cols == 1:
            return Vector._from_buffer(rows, cols, buffer, element_type or self._element_type)
        return super()._build(rows, cols, buffer, element_type)
