"""
Elimination solution types.

Contains the parameter payloads produced by backends and the user-facing
reduction wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatrix.core.result import Result
from pymatrix.dense.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.linalg.design import EliminationDesign


@dataclass(frozen=True)
class ReductionParams:
    """
    Parameter payload for a row reduction.

    pivots lists (row, column) for every pivot found, in elimination order.
    """
    reduced: Matrix
    rhs: Matrix | None
    pivots: tuple[tuple[int, int], ...]
    sign: int
    pivot_product: Any
    forward_only: bool

    @property
    def rank(self) -> int:
        return len(self.pivots)


@dataclass(frozen=True)
class DeterminantParams:
    determinant: Any
    rank: int


@dataclass(frozen=True)
class InverseParams:
    inverse: Matrix
    rank: int


@dataclass(frozen=True)
class SolveParams:
    solution: Matrix
    rank: int


@dataclass
class ReductionSolution:
    """
    User-facing reduction results.

    Wraps the backend Result and exposes the reduced matrices, pivot
    structure and diagnostics.
    """
    _result: Result[ReductionParams]
    _design: 'EliminationDesign'

    @property
    def reduced(self) -> Matrix:
        return self._result.params.reduced

    @property
    def rhs(self) -> Matrix | None:
        return self._result.params.rhs

    @property
    def pivots(self) -> tuple[tuple[int, int], ...]:
        return self._result.params.pivots

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return tuple(col for _, col in self.pivots)

    @property
    def free_columns(self) -> tuple[int, ...]:
        """Columns without a pivot."""
        pivot_cols = set(self.pivot_columns)
        return tuple(c for c in range(self._design.n_cols) if c not in pivot_cols)

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._design.n_rows, self._design.n_cols)

    @property
    def sign(self) -> int:
        return self._result.params.sign

    @property
    def pivot_product(self) -> Any:
        return self._result.params.pivot_product

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        mode = 'forward' if self._result.params.forward_only else 'full'
        lines = [
            "Row Reduction Results",
            "=" * 40,
            f"Shape: ({self._design.n_rows}, {self._design.n_cols})",
            f"Mode: {mode}",
            f"Rank: {self.rank}",
            f"Pivot columns: {list(self.pivot_columns)}",
            f"Row swaps: {'even' if self.sign > 0 else 'odd'}",
        ]
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ReductionSolution(shape=({self._design.n_rows}, {self._design.n_cols}), "
            f"rank={self.rank}, backend={self.backend_name!r})"
        )
