"""
CPU reference backend for elimination.

Deterministic Gauss-Jordan elimination over any element type supporting
+, -, *, / and == (float, int, Fraction, complex, ...). This is the
reference implementation; the LAPACK backend is checked against it.
"""

from typing import Any

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.fill import FILL_IDENTITY
from pymatrix.core.result import Result
from pymatrix.dense.matrix import Matrix
from pymatrix.linalg._gauss_jordan import EliminationState, eliminate
from pymatrix.linalg.design import EliminationDesign
from pymatrix.linalg.solution import (
    DeterminantParams,
    InverseParams,
    ReductionParams,
    SolveParams,
)


def _require_full_rank(state: EliminationState, design: EliminationDesign) -> None:
    n = design.n_rows
    if state.rank < n:
        raise SingularMatrixError(
            f"{design.name} is singular: found {state.rank} pivots, need {n}",
            matrix_name=design.name,
            rank=state.rank,
            expected_rank=n,
        )


class GaussJordanBackend:
    """
    CPU backend using first-nonzero-pivot Gauss-Jordan elimination.

    Implements the EliminationBackend protocol for EliminationDesign.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def _run(
        self,
        design: EliminationDesign,
        rhs: Matrix | None,
        *,
        forward_only: bool = False,
    ) -> tuple[EliminationState, dict[str, float]]:
        timer = Timer()
        timer.start()
        with timer.section('materialize'):
            a = design.working_a()
        with timer.section('eliminate'):
            state = eliminate(a, rhs, forward_only=forward_only)
        timer.stop()
        return state, timer.result()

    def reduce(
        self,
        design: EliminationDesign,
        *,
        forward_only: bool = False,
    ) -> Result[ReductionParams]:
        """
        Row-reduce the design matrix, and its right-hand side if present.

        Rank-deficient input is reduced as far as it goes and reported in
        Result.warnings; it is not an error.
        """
        state, timing = self._run(design, design.working_rhs(), forward_only=forward_only)

        warn_list = []
        expected = min(design.n_rows, design.n_cols)
        if state.rank < expected:
            warn_list.append(f"Rank-deficient input: rank {state.rank} < {expected}")

        params = ReductionParams(
            reduced=state.a,
            rhs=state.b,
            pivots=tuple(state.pivots),
            sign=state.sign,
            pivot_product=state.product,
            forward_only=forward_only,
        )
        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivot_policy': 'first_nonzero',
            'rank': state.rank,
        }
        return Result(
            params=params,
            info=info,
            timing=timing,
            backend_name=self.name,
            warnings=tuple(warn_list),
        )

    def determinant(self, design: EliminationDesign) -> Result[DeterminantParams]:
        """
        Determinant by forward elimination.

        Returns the element type's zero when some row has no pivot.
        """
        state, timing = self._run(design, None, forward_only=True)
        params = DeterminantParams(determinant=state.determinant(), rank=state.rank)
        return Result(
            params=params,
            info={'method': 'gauss_jordan', 'mode': 'forward', 'rank': state.rank},
            timing=timing,
            backend_name=self.name,
            warnings=(),
        )

    def inverse(self, design: EliminationDesign) -> Result[InverseParams]:
        """
        Inverse by paired reduction of [A | I].

        Raises:
            SingularMatrixError: If fewer than n pivots are found
        """
        identity = Matrix(design.n_rows, design.n_rows, FILL_IDENTITY, element_type=design.working_type)
        state, timing = self._run(design, identity)
        _require_full_rank(state, design)
        params = InverseParams(inverse=state.b, rank=state.rank)
        return Result(
            params=params,
            info={'method': 'gauss_jordan', 'rank': state.rank},
            timing=timing,
            backend_name=self.name,
            warnings=(),
        )

    def solve_system(self, design: EliminationDesign) -> Result[SolveParams]:
        """
        Solve A X = B by paired reduction of [A | B].

        Raises:
            SingularMatrixError: If fewer than n pivots are found
        """
        state, timing = self._run(design, design.working_rhs())
        _require_full_rank(state, design)
        params = SolveParams(solution=state.b, rank=state.rank)
        return Result(
            params=params,
            info={'method': 'gauss_jordan', 'rank': state.rank},
            timing=timing,
            backend_name=self.name,
            warnings=(),
        )
