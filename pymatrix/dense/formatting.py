"""
Text rendering for matrices and views.

Row-major: values separated by a single space within a row, a newline
between rows. Every element is rendered; there is no truncation.
"""

from typing import Any

import numpy as np


def format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def matrix_str(matrix: Any) -> str:
    lines = []
    for i in range(matrix.rows()):
        lines.append(" ".join(format_value(matrix.at(i, j)) for j in range(matrix.cols())))
    return "\n".join(lines)


def matrix_repr(matrix: Any) -> str:
    return f"<{type(matrix).__name__} shape=({matrix.rows()}, {matrix.cols()})>"
