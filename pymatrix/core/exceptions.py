"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every concrete error carries a stable numeric
``code`` and a ``description`` prefix so callers can dispatch on the code
without parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

# Stable numeric codes. Values are part of the public contract.
CODE_OUT_OF_BOUNDS = 0x2
CODE_EMPTY_ELEMENT = 0x4
CODE_BAD_DIMENSIONS = 0x5
CODE_UNKNOWN_FILL = 0x6
CODE_SINGULAR_MATRIX = 0x7


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""

    code: int = 0x0
    description: str = "PyMatrix Error"

    def __str__(self) -> str:
        message = super().__str__()
        if message:
            return f"{self.description}: {message}"
        return self.description


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when shapes, indices or selectors fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are invalid or incompatible.

    Raised for negative or non-integer sizes, ragged nested input,
    inconsistent block layouts, arithmetic shape mismatches, and
    non-square input to determinant/inverse.
    """
    code = CODE_BAD_DIMENSIONS
    description = "Incompatible Dimensions Error"


class EmptyError(ValidationError):
    """Zero rows or zero columns were requested."""
    code = CODE_EMPTY_ELEMENT
    description = "Empty Element Error"


class OutOfBoundsError(ValidationError, IndexError):
    """
    An index fell outside its extent.

    Also an IndexError so that sequence protocols (iteration via
    ``__getitem__``) terminate the way Python expects.
    """
    code = CODE_OUT_OF_BOUNDS
    description = "Out of Bounds Error"


class UnknownFillModeError(ValidationError, ValueError):
    """An unrecognized fill-mode selector was passed to allocation."""
    code = CODE_UNKNOWN_FILL
    description = "Unknown Fill Type Error"


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility but elimination
    found fewer pivots than rows.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of pivots found, if computed
        expected_rank: Rank required for invertibility (the matrix order)
    """
    code = CODE_SINGULAR_MATRIX
    description = "Singular Matrix Error"

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
