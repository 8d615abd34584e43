"""
Elementary row operations.

Each operation runs in O(cols) and mutates its matrix in place through
RowProjection views, so every write goes through Matrix.set() and clears
the sticky-compute cache. Any object with rows(), cols(), at() and set()
can be passed.
"""

from typing import Any

from pymatrix.core.validation import check_index
from pymatrix.dense.views import RowProjection


def _check_row(matrix: Any, row: int, name: str) -> int:
    return check_index(row, matrix.rows(), name)


def row_swap(matrix: Any, r1: int, r2: int) -> None:
    """
    Exchange rows r1 and r2.

    Row r1 is snapshotted into a temporary Vector before r2 is copied over
    it, since both projections alias the same storage.

    Raises:
        OutOfBoundsError: If either row index is invalid
    """
    r1 = _check_row(matrix, r1, 'r1')
    r2 = _check_row(matrix, r2, 'r2')
    if r1 == r2:
        return
    first = RowProjection(matrix, r1)
    second = RowProjection(matrix, r2)
    snapshot = first.materialize()
    for k in range(first.length()):
        first.set(k, second.at(k))
    for k in range(second.length()):
        second.set(k, snapshot.at(k))


def row_scale(matrix: Any, row: int, k: Any) -> None:
    """
    Multiply every element of row by k.

    Raises:
        OutOfBoundsError: If row is invalid
    """
    row = _check_row(matrix, row, 'row')
    target = RowProjection(matrix, row)
    for c in range(target.length()):
        target.set(c, target.at(c) * k)


def row_add_multiple(matrix: Any, r1: int, r2: int, k: Any = None) -> None:
    """
    row[r1] += k * row[r2], reading row r2's values before any update.

    k=None adds row r2 unscaled.

    Raises:
        OutOfBoundsError: If either row index is invalid
    """
    r1 = _check_row(matrix, r1, 'r1')
    r2 = _check_row(matrix, r2, 'r2')
    dest = RowProjection(matrix, r1)
    source = RowProjection(matrix, r2).materialize()
    for c in range(dest.length()):
        if k is None:
            dest.set(c, dest.at(c) + source.at(c))
        else:
            dest.set(c, dest.at(c) + k * source.at(c))


def row_add(matrix: Any, r1: int, r2: int) -> None:
    """row[r1] += row[r2]."""
    row_add_multiple(matrix, r1, r2)
