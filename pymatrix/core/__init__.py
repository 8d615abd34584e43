"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the dense
storage layer and the elimination engine.

Key components:
    protocols: MatrixLike, EliminationBackend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy with stable error codes
    validation: Shape and index validators
    fill: Fill-mode constants
    config: Engine configuration
    compute: Timing and tolerance tiers
"""

from pymatrix.core.protocols import MatrixLike, EliminationBackend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    EmptyError,
    OutOfBoundsError,
    UnknownFillModeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    "EliminationBackend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "EmptyError",
    "OutOfBoundsError",
    "UnknownFillModeError",
    "NumericalError",
    "SingularMatrixError",
]
