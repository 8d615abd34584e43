"""
Dense row-major matrix with exclusive storage ownership.

Matrix owns a flat Python list of rows*cols elements. Every mutation,
including those made by row operations and write-through projections,
funnels into set(), which clears the sticky-compute cache.

Construction:
    allocate(3, 3)                          # uninitialized (cells hold None)
    allocate(3, 3, FILL_IDENTITY)           # identity
    allocate(2, 4, FILL_RANDOM, low=-1.0, high=1.0, rng=rng)
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.from_blocks([[A, B], [C, D]])
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TYPE_CHECKING

import numpy as np

from pymatrix.core.config import get_config
from pymatrix.core.exceptions import DimensionError, EmptyError
from pymatrix.core.fill import (
    FILL_IDENTITY,
    FILL_ONES,
    FILL_RANDOM,
    FILL_VALUE,
    FILL_ZEROS,
    check_fill_mode,
)
from pymatrix.core.protocols import MatrixLike
from pymatrix.core.validation import (
    check_index,
    check_length,
    check_rectangular,
    check_size,
)
from pymatrix.dense._common import MatrixOps, read_buffer, shape_of
from pymatrix.dense.cache import CACHE_DET, CACHE_DIAG, CACHE_INV, StickyCache

if TYPE_CHECKING:
    from pymatrix.dense.vector import Vector
    from pymatrix.linalg.solution import ReductionSolution


def _infer_element_type(value: Any) -> Callable[[Any], Any]:
    if value is None or isinstance(value, bool):
        return get_config().default_element_type
    if isinstance(value, np.generic):
        return type(value.item())
    return type(value)


class Matrix(MatrixOps):
    """
    Dense matrix that exclusively owns its storage.

    Attributes are private; read through rows(), cols(), at(). Storage is
    never resized after allocation.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        fill: str | None = None,
        *,
        value: Any = None,
        low: Any = 0.0,
        high: Any = 1.0,
        rng: np.random.Generator | None = None,
        element_type: Callable[[Any], Any] | None = None,
    ):
        """
        Allocate a rows x cols matrix, optionally populated by a fill mode.

        Args:
            rows: Number of rows (> 0)
            cols: Number of columns (> 0)
            fill: One of the pymatrix.core.fill constants, or None to leave
                  storage uninitialized (every cell holds None)
            value: Fill value for FILL_VALUE
            low: Lower bound for FILL_RANDOM
            high: Upper bound for FILL_RANDOM
            rng: Generator for FILL_RANDOM; a fresh default_rng() if None
            element_type: Callable building elements from 0/1 literals;
                          defaults to the configured default (float)

        Raises:
            DimensionError: If rows or cols is negative or not an integer
            EmptyError: If rows or cols is zero
            UnknownFillModeError: If fill is not a known mode
        """
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        if fill is not None:
            check_fill_mode(fill)
        if element_type is None:
            element_type = get_config().default_element_type
        self._allocate(rows, cols, element_type)
        if fill is not None:
            self._populate(fill, value=value, low=low, high=high, rng=rng)

    # === Storage ===

    def _allocate(self, rows: int, cols: int, element_type: Callable[[Any], Any]) -> None:
        self._rows = rows
        self._cols = cols
        self._data: list[Any] = [None] * (rows * cols)
        self._element_type = element_type
        self._cache = StickyCache()

    def _adopt(self, rows: int, cols: int, buffer: list[Any], element_type: Callable[[Any], Any]) -> None:
        self._allocate(rows, cols, element_type)
        self._data = buffer

    @classmethod
    def _from_buffer(
        cls,
        rows: int,
        cols: int,
        buffer: list[Any],
        element_type: Callable[[Any], Any],
    ) -> Matrix:
        """Wrap an already-validated row-major buffer without copying it."""
        obj = cls.__new__(cls)
        obj._adopt(rows, cols, buffer, element_type)
        return obj

    def _offset(self, row: Any, col: Any) -> int:
        row = check_index(row, self._rows, 'row')
        col = check_index(col, self._cols, 'col')
        return col + row * self._cols

    # === Fill ===

    def _populate(
        self,
        fill: str,
        *,
        value: Any,
        low: Any,
        high: Any,
        rng: np.random.Generator | None,
    ) -> None:
        zero = self._element_type(0)
        one = self._element_type(1)
        if fill == FILL_ZEROS:
            self.fill_value(zero)
        elif fill == FILL_ONES:
            self.fill_value(one)
        elif fill == FILL_IDENTITY:
            self.fill_value(zero)
            for i in range(min(self._rows, self._cols)):
                self.set(i, i, one)
        elif fill == FILL_RANDOM:
            if rng is None:
                rng = np.random.default_rng()
            draws = rng.uniform(float(low), float(high), size=self._rows * self._cols)
            for k, draw in enumerate(draws):
                self.set(k // self._cols, k % self._cols, self._element_type(float(draw)))
        elif fill == FILL_VALUE:
            if value is None:
                raise ValueError(f"fill: mode {FILL_VALUE!r} requires value=")
            self.fill_value(value)

    def fill_value(self, value: Any) -> Matrix:
        """Overwrite every element with value. Returns self."""
        for i in range(self._rows):
            for j in range(self._cols):
                self.set(i, j, value)
        return self

    # === Alternate constructors ===

    @classmethod
    def from_rows(
        cls,
        data: Sequence[Sequence[Any]],
        *,
        element_type: Callable[[Any], Any] | None = None,
    ) -> Matrix:
        """
        Build from a rectangular nested sequence.

        The element type defaults to the type of the first element.

        Raises:
            EmptyError: If data has no rows or an empty first row
            DimensionError: If rows differ in length
        """
        rows_data = [list(row) for row in data]
        rows, cols = check_rectangular(rows_data, 'data')
        if element_type is None:
            element_type = _infer_element_type(rows_data[0][0])
        matrix = Matrix(rows, cols, element_type=element_type)
        for i, row in enumerate(rows_data):
            for j, value in enumerate(row):
                matrix.set(i, j, value)
        return matrix

    @classmethod
    def from_blocks(cls, layout: Sequence[Sequence[Any]]) -> Matrix:
        """
        Build from a block layout of matrix-like pieces.

        Blocks within a block row must share a row count; blocks within a
        block column must share a column count.

        Raises:
            EmptyError: If the layout or any block row is empty
            DimensionError: If block shapes do not tile a rectangle
        """
        block_rows = [list(block_row) for block_row in layout]
        if not block_rows or not block_rows[0]:
            raise EmptyError("blocks: layout has no blocks")

        widths = [block.cols() for block in block_rows[0]]
        total_cols = sum(widths)
        total_rows = 0
        for i, block_row in enumerate(block_rows):
            if not block_row:
                raise EmptyError(f"blocks: block row {i} is empty")
            height = block_row[0].rows()
            for j, block in enumerate(block_row):
                if block.rows() != height:
                    raise DimensionError(
                        f"blocks: block ({i}, {j}) has {block.rows()} rows, "
                        f"expected {height} to match block row {i}"
                    )
            if len(block_row) != len(widths):
                raise DimensionError(
                    f"blocks: block row {i} has {len(block_row)} blocks, expected {len(widths)}"
                )
            for j, block in enumerate(block_row):
                if block.cols() != widths[j]:
                    raise DimensionError(
                        f"blocks: block ({i}, {j}) has {block.cols()} columns, "
                        f"expected {widths[j]} to match block column {j}"
                    )
            total_rows += height

        first = block_rows[0][0]
        element_type = getattr(first, 'element_type', None) or _infer_element_type(first.at(0, 0))
        matrix = Matrix(total_rows, total_cols, element_type=element_type)
        row_start = 0
        for block_row in block_rows:
            col_start = 0
            for block in block_row:
                for i in range(block.rows()):
                    for j in range(block.cols()):
                        matrix.set(row_start + i, col_start + j, block.at(i, j))
                col_start += block.cols()
            row_start += block_row[0].rows()
        return matrix

    @classmethod
    def from_array(cls, array: Any) -> Matrix:
        """
        Build from a 2-D array-like (typically a NumPy array).

        Elements are converted to Python scalars.

        Raises:
            DimensionError: If the array is not 2-D
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise DimensionError(f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}")
        return cls.from_rows(arr.tolist())

    @classmethod
    def from_matrix(
        cls,
        source: Any,
        *,
        element_type: Callable[[Any], Any] | None = None,
    ) -> Matrix:
        """
        Materialize any matrix-like object, optionally casting elements.

        Args:
            source: Matrix, Vector, view, or other MatrixLike
            element_type: If given, every element is passed through it
        """
        if not isinstance(source, MatrixLike):
            raise TypeError(f"from_matrix expects a matrix-like object, got {type(source).__name__}")
        rows, cols = shape_of(source)
        buffer = read_buffer(source)
        if element_type is None:
            element_type = getattr(source, 'element_type', None) or _infer_element_type(buffer[0])
        else:
            buffer = [element_type(value) for value in buffer]
        return Matrix._from_buffer(rows, cols, buffer, element_type)

    # === Read surface ===

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    @property
    def element_type(self) -> Callable[[Any], Any]:
        return self._element_type

    def at(self, row: int, col: int) -> Any:
        """
        Bounds-checked element read.

        Raises:
            OutOfBoundsError: Unless 0 <= row < rows and 0 <= col < cols
        """
        return self._data[self._offset(row, col)]

    def copy(self) -> Matrix:
        return self._from_buffer(self._rows, self._cols, list(self._data), self._element_type)

    def materialize(self) -> Matrix:
        return self.copy()

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return super().__getitem__(key)
        index = check_index(key, self._rows, 'row')
        return self.range(index, index, 0, self._cols - 1)

    # === Mutation ===

    def set(self, row: int, col: int, value: Any) -> None:
        """
        Bounds-checked element write. Clears every cached quantity.

        Raises:
            OutOfBoundsError: Unless 0 <= row < rows and 0 <= col < cols
        """
        self._data[self._offset(row, col)] = value
        self._cache.invalidate()

    def __setitem__(self, key: Any, value: Any) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix assignment requires [row, col]")
        self.set(key[0], key[1], value)

    def set_row(self, row: int, values: Any) -> None:
        """
        Overwrite row with a sequence or 1-D object of length cols.

        Raises:
            DimensionError: If the length differs from cols
        """
        row = check_index(row, self._rows, 'row')
        values = list(values)
        check_length(len(values), self._cols, 'values')
        for j, value in enumerate(values):
            self.set(row, j, value)

    def set_col(self, col: int, values: Any) -> None:
        """
        Overwrite col with a sequence or 1-D object of length rows.

        Raises:
            DimensionError: If the length differs from rows
        """
        col = check_index(col, self._cols, 'col')
        values = list(values)
        check_length(len(values), self._rows, 'values')
        for i, value in enumerate(values):
            self.set(i, col, value)

    # === Row operations ===

    def row_swap(self, r1: int, r2: int) -> None:
        from pymatrix.dense.rowops import row_swap
        row_swap(self, r1, r2)

    def row_scale(self, row: int, k: Any) -> None:
        from pymatrix.dense.rowops import row_scale
        row_scale(self, row, k)

    def row_add(self, r1: int, r2: int) -> None:
        from pymatrix.dense.rowops import row_add
        row_add(self, r1, r2)

    def row_add_multiple(self, r1: int, r2: int, k: Any) -> None:
        from pymatrix.dense.rowops import row_add_multiple
        row_add_multiple(self, r1, r2, k)

    # === Derived quantities (sticky compute) ===

    @property
    def cache(self) -> StickyCache:
        return self._cache

    def _compute_diag(self) -> Vector:
        from pymatrix.dense.vector import Vector
        n = min(self._rows, self._cols)
        return Vector.from_values(
            [self.at(i, i) for i in range(n)],
            orientation='col',
            element_type=self._element_type,
        )

    def diag(self) -> Vector:
        """Leading diagonal as a column vector of length min(rows, cols)."""
        return self._cache.get_or_compute(CACHE_DIAG, self._compute_diag).copy()

    def trace(self) -> Any:
        """Sum of the leading diagonal."""
        return self.diag().sum()

    def det(self) -> Any:
        """
        Determinant by forward elimination.

        Raises:
            DimensionError: If the matrix is not square
        """
        from pymatrix.linalg.solvers import _determinant
        return self._cache.get_or_compute(CACHE_DET, lambda: _determinant(self, 'gauss_jordan'))

    def inv(self) -> Matrix:
        """
        Inverse by Gauss-Jordan reduction of [A | I].

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is not invertible
        """
        from pymatrix.linalg.solvers import _inverse
        return self._cache.get_or_compute(CACHE_INV, lambda: _inverse(self, 'gauss_jordan')).copy()

    def rref(self, rhs: Any = None) -> Matrix:
        """Row-reduced echelon form, or the reduced rhs when one is given."""
        from pymatrix.linalg.solvers import rref
        return rref(self, rhs)

    def reduce(self, rhs: Any = None, *, forward_only: bool = False) -> ReductionSolution:
        from pymatrix.linalg.solvers import reduce
        return reduce(self, rhs, forward_only=forward_only)


def allocate(
    rows: int,
    cols: int,
    fill: str | None = None,
    **kwargs: Any,
) -> Matrix:
    """
    Allocate a rows x cols Matrix. See Matrix.__init__ for keyword options.

    Raises:
        DimensionError: If rows or cols is negative
        EmptyError: If rows or cols is zero
        UnknownFillModeError: If fill is not a known mode
    """
    return Matrix(rows, cols, fill, **kwargs)


def identity(n: int, *, element_type: Callable[[Any], Any] | None = None) -> Matrix:
    return Matrix(n, n, FILL_IDENTITY, element_type=element_type)


def zeros(rows: int, cols: int, *, element_type: Callable[[Any], Any] | None = None) -> Matrix:
    return Matrix(rows, cols, FILL_ZEROS, element_type=element_type)


def ones(rows: int, cols: int, *, element_type: Callable[[Any], Any] | None = None) -> Matrix:
    return Matrix(rows, cols, FILL_ONES, element_type=element_type)
