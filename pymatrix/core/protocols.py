"""
Core protocols for PyMatrix.

These define structural interfaces shared by owned matrices, views and
elimination backends. We use Protocol (structural typing) rather than ABC
(nominal typing) so views and foreign containers participate without
inheriting from Matrix.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Read surface only: writing is a capability of specific variants
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal read protocol for anything shaped like a matrix.

    Satisfied by Matrix, Vector and every view type. Functions that only
    read elements (materialization, equality, elimination input) accept
    MatrixLike rather than Matrix.
    """

    def rows(self) -> int:
        """Number of rows."""
        ...

    def cols(self) -> int:
        """Number of columns."""
        ...

    def at(self, row: int, col: int) -> Any:
        """Bounds-checked element read."""
        ...


@runtime_checkable
class EliminationBackend(Protocol[D]):
    """
    Protocol for elimination backends.

    Each backend takes a validated EliminationDesign and produces Result
    envelopes. Backends are stateless: all inputs travel in the design.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss_jordan', 'cpu_lapack'
        """
        ...

    def determinant(self, design: D) -> Any:
        """Return Result[DeterminantParams]."""
        ...

    def inverse(self, design: D) -> Any:
        """
        Return Result[InverseParams].

        Raises:
            SingularMatrixError: If the design matrix is not invertible
        """
        ...

    def solve_system(self, design: D) -> Any:
        """
        Return Result[SolveParams] holding X with A X = B.

        Raises:
            SingularMatrixError: If the design matrix is not invertible
        """
        ...
