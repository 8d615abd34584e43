"""
Gauss-Jordan elimination state machine.

One routine drives every entry point: full reduction (rref), paired
reduction against a right-hand side (inverse, solve), and forward-only
reduction (determinant). Operands are owned matrices mutated in place
through the elementary row operations.

Pivot policy: the first nonzero entry scanning downward from the current
row in the current lead column. Magnitude is not considered; results are
reproducible for a given input.
"""

from dataclasses import dataclass, field
from typing import Any

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.rowops import row_add_multiple, row_scale, row_swap


@dataclass
class EliminationState:
    """Mutable outcome of one elimination pass."""
    a: Matrix
    b: Matrix | None
    sign: int = 1
    product: Any = None
    pivots: list[tuple[int, int]] = field(default_factory=list)

    @property
    def rank(self) -> int:
        return len(self.pivots)

    def determinant(self) -> Any:
        """sign * product * prod(diag(a)), or zero if a pivot is missing."""
        n = self.a.rows()
        if self.rank < n:
            return self.a.element_type(0)
        diagonal = self.a.at(0, 0)
        for i in range(1, n):
            diagonal = diagonal * self.a.at(i, i)
        return self.sign * self.product * diagonal


def _find_pivot(a: Matrix, r: int, lead: int) -> tuple[int, int] | None:
    zero = a.element_type(0)
    rows, cols = a.rows(), a.cols()
    while lead < cols:
        for i in range(r, rows):
            if a.at(i, lead) != zero:
                return i, lead
        lead += 1
    return None


def eliminate(
    a: Matrix,
    b: Matrix | None = None,
    *,
    forward_only: bool = False,
) -> EliminationState:
    """
    Reduce a in place, applying every row operation to b as well.

    Args:
        a: Coefficient matrix (mutated)
        b: Optional paired right-hand side with a.rows() rows (mutated)
        forward_only: Only clear entries below each pivot

    Returns:
        EliminationState with the pivot positions, swap parity and the
        product of the pivots divided out.

    After a full pass a is in reduced row echelon form. Each pivot entry is
    set to exactly one and each cleared entry to exactly zero, so rounding
    never leaves residue in pivot columns.
    """
    element_type = a.element_type
    zero = element_type(0)
    one = element_type(1)
    rows = a.rows()
    state = EliminationState(a=a, b=b, product=one)

    lead = 0
    for r in range(rows):
        found = _find_pivot(a, r, lead)
        if found is None:
            break
        i, lead = found

        if i != r:
            row_swap(a, i, r)
            if b is not None:
                row_swap(b, i, r)
            state.sign = -state.sign

        pivot = a.at(r, lead)
        state.product = state.product * pivot
        inverse_pivot = one / pivot
        row_scale(a, r, inverse_pivot)
        if b is not None:
            row_scale(b, r, inverse_pivot)
        a.set(r, lead, one)

        start = r + 1 if forward_only else 0
        for i2 in range(start, rows):
            if i2 == r:
                continue
            factor = -a.at(i2, lead)
            row_add_multiple(a, i2, r, factor)
            if b is not None:
                row_add_multiple(b, i2, r, factor)
            a.set(i2, lead, zero)

        state.pivots.append((r, lead))
        lead += 1

    return state
