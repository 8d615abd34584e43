"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of indices (no negative wraparound, no floats)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Integral
from typing import Any, Sequence

from pymatrix.core.exceptions import (
    DimensionError,
    EmptyError,
    OutOfBoundsError,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_size(value: Any, name: str) -> int:
    """
    Validate a requested row or column count.

    Args:
        value: Requested extent
        name: Parameter name for error messages

    Returns:
        The extent as a plain int

    Raises:
        DimensionError: If value is not an integer or is negative
        EmptyError: If value is zero
    """
    if not _is_int(value):
        raise DimensionError(
            f"{name}: expected an integer extent, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise DimensionError(f"{name}: extent must be non-negative, got {value}")
    if value == 0:
        raise EmptyError(f"{name}: extent must be positive, got 0")
    return int(value)


def check_index(index: Any, extent: int, name: str) -> int:
    """
    Verify 0 <= index < extent.

    The upper bound is strict: ``index == extent`` is out of bounds.

    Args:
        index: Index to check
        extent: Number of valid positions along the axis
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        OutOfBoundsError: If index is not an integer or lies outside [0, extent)
    """
    if not _is_int(index):
        raise OutOfBoundsError(
            f"{name}: index must be an integer, got {type(index).__name__} {index!r}"
        )
    if index < 0 or index >= extent:
        raise OutOfBoundsError(f"{name}: index {index} outside [0, {extent})")
    return int(index)


def check_square(rows: int, cols: int, name: str) -> None:
    """
    Verify a shape is square.

    Raises:
        DimensionError: If rows != cols
    """
    if rows != cols:
        raise DimensionError(f"{name}: expected a square matrix, got shape ({rows}, {cols})")


def check_same_shape(
    shape_a: tuple[int, int],
    shape_b: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two shapes agree element-wise.

    Raises:
        DimensionError: If the shapes differ
    """
    if shape_a != shape_b:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={shape_a}, {names[1]}={shape_b}"
        )


def check_inner_dimensions(
    shape_a: tuple[int, int],
    shape_b: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify shapes are compatible for a matrix product (a.cols == b.rows).

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if shape_a[1] != shape_b[0]:
        raise DimensionError(
            f"Inner dimensions differ: {names[0]}={shape_a}, {names[1]}={shape_b}"
        )


def check_length(actual: int, expected: int, name: str) -> None:
    """
    Verify a sequence has the expected number of elements.

    Raises:
        DimensionError: If the lengths differ
    """
    if actual != expected:
        raise DimensionError(f"{name}: expected {expected} elements, got {actual}")


def check_rectangular(data: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify nested row data is non-empty and rectangular.

    Args:
        data: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (rows, cols)

    Raises:
        EmptyError: If there are no rows or the first row is empty
        DimensionError: If any row length differs from the first
    """
    if len(data) == 0:
        raise EmptyError(f"{name}: no rows supplied")
    cols = len(data[0])
    if cols == 0:
        raise EmptyError(f"{name}: row 0 is empty")
    for i, row in enumerate(data):
        if len(row) != cols:
            raise DimensionError(
                f"{name}: row {i} has {len(row)} elements, expected {cols}"
            )
    return len(data), cols


def check_window(
    first: Any,
    last: Any,
    extent: int,
    name: str,
) -> tuple[int, int]:
    """
    Verify an inclusive [first, last] window lies inside [0, extent).

    Args:
        first: First index of the window
        last: Last index of the window (inclusive)
        extent: Extent of the parent axis
        name: Axis name for error messages

    Returns:
        (first, last) as plain ints

    Raises:
        DimensionError: If last < first
        OutOfBoundsError: If either end lies outside the parent
    """
    if _is_int(first) and _is_int(last) and last < first:
        raise DimensionError(f"{name}: end {last} precedes start {first}")
    first = check_index(first, extent, f"{name} start")
    last = check_index(last, extent, f"{name} end")
    return first, last
