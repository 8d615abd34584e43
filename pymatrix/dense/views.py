"""
Non-owning views onto matrices.

A view holds a reference to its parent and maps its own coordinates onto
the parent's on every access; nothing is copied. Views observe later
writes to the parent. Transpose and range views are read-only. Row and
column projections write through to the parent.

A range of a range collapses onto the base parent with combined offsets,
so chains of windows never stack indirections.
"""

from __future__ import annotations

from typing import Any, Callable

from pymatrix.core.validation import check_index, check_length, check_window
from pymatrix.dense._common import LinearOps, MatrixOps, shape_of


class _MatrixView(MatrixOps):
    """Shared plumbing for every view: parent reference and bounds checking."""

    _writable = False

    def __init__(self, parent: Any, rows: int, cols: int):
        self._parent = parent
        self._rows = rows
        self._cols = cols

    @property
    def parent(self) -> Any:
        return self._parent

    @property
    def writable(self) -> bool:
        return self._writable

    @property
    def element_type(self) -> Callable[[Any], Any]:
        return getattr(self._parent, 'element_type', float)

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    def _map(self, row: int, col: int) -> tuple[int, int]:
        raise NotImplementedError

    def at(self, row: int, col: int) -> Any:
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        return self._parent.at(*self._map(row, col))

    def set(self, row: int, col: int, value: Any) -> None:
        if not self._writable:
            raise TypeError(f"{type(self).__name__} is read-only")
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        self._parent.set(*self._map(row, col), value)

    def __setitem__(self, key: Any, value: Any) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("view assignment requires [row, col]")
        self.set(key[0], key[1], value)


class TransposeView(_MatrixView):
    """Read-only view with rows and columns exchanged."""

    def __init__(self, parent: Any):
        rows, cols = shape_of(parent)
        super().__init__(parent, cols, rows)

    def _map(self, row: int, col: int) -> tuple[int, int]:
        return col, row


class RangeView(_MatrixView):
    """
    Read-only view of the inclusive window [row1..row2] x [col1..col2].

    Raises:
        DimensionError: If row2 < row1 or col2 < col1
        OutOfBoundsError: If the window extends past the parent
    """

    def __init__(self, parent: Any, row1: int, row2: int, col1: int, col2: int):
        p_rows, p_cols = shape_of(parent)
        row1, row2 = check_window(row1, row2, p_rows, 'row')
        col1, col2 = check_window(col1, col2, p_cols, 'col')
        if isinstance(parent, RangeView):
            row1 += parent.row_offset
            row2 += parent.row_offset
            col1 += parent.col_offset
            col2 += parent.col_offset
            parent = parent.parent
        super().__init__(parent, row2 - row1 + 1, col2 - col1 + 1)
        self._row_offset = row1
        self._col_offset = col1

    @property
    def row_offset(self) -> int:
        return self._row_offset

    @property
    def col_offset(self) -> int:
        return self._col_offset

    def _map(self, row: int, col: int) -> tuple[int, int]:
        return row + self._row_offset, col + self._col_offset

    def __repr__(self) -> str:
        return (
            f"<RangeView shape=({self._rows}, {self._cols}) "
            f"offset=({self._row_offset}, {self._col_offset}) "
            f"parent={type(self._parent).__name__}>"
        )


class _Projection(LinearOps, _MatrixView):
    """One-dimensional write-through view."""

    _writable = True

    def materialize(self) -> Any:
        from pymatrix.dense.vector import Vector
        rows, cols = self.shape
        return Vector._from_buffer(rows, cols, list(self), self.element_type)

    def _build(self, rows: int, cols: int, buffer: list[Any], element_type: Any = None) -> Any:
        from pymatrix.dense.vector import Vector
        return Vector._from_buffer(rows, cols, buffer, element_type or self.element_type)

    def assign(self, values: Any) -> None:
        """Overwrite every element from a sequence or 1-D object of equal length."""
        values = list(values)
        check_length(len(values), self.length(), 'values')
        for k, value in enumerate(values):
            self.set(k, value)


class RowProjection(_Projection):
    """1 x cols view of one parent row."""

    def __init__(self, parent: Any, index: int):
        p_rows, p_cols = shape_of(parent)
        self._index = check_index(index, p_rows, 'row')
        super().__init__(parent, 1, p_cols)

    @property
    def index(self) -> int:
        return self._index

    def _map(self, row: int, col: int) -> tuple[int, int]:
        return self._index, col


class ColProjection(_Projection):
    """rows x 1 view of one parent column."""

    def __init__(self, parent: Any, index: int):
        p_rows, p_cols = shape_of(parent)
        self._index = check_index(index, p_cols, 'col')
        super().__init__(parent, p_rows, 1)

    @property
    def index(self) -> int:
        return self._index

    def _map(self, row: int, col: int) -> tuple[int, int]:
        return row, self._index
