"""
CPU backend using LAPACK through SciPy.

Converts the design to a float64 (or complex128) NumPy array and uses LU
factorization. Faster than the reference engine for large float matrices,
but it pivots by magnitude and rounds, so results differ from the
reference engine by floating-point error. Exact element types (int,
Fraction) lose exactness here.
"""

import warnings
from typing import Any

import numpy as np
import scipy.linalg as sla

from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.result import Result
from pymatrix.dense.matrix import Matrix
from pymatrix.linalg.design import EliminationDesign
from pymatrix.linalg.solution import DeterminantParams, InverseParams, SolveParams


def _as_lapack_array(arr: np.ndarray, name: str) -> np.ndarray:
    if np.issubdtype(arr.dtype, np.floating) or np.issubdtype(arr.dtype, np.complexfloating):
        return arr
    warnings.warn(
        f"{name}: LAPACK backend converts {arr.dtype} elements to float64; "
        f"exact arithmetic is lost. Use backend='gauss_jordan' to keep it.",
        UserWarning,
        stacklevel=4,
    )
    return arr.astype(np.float64)


def _to_matrix(arr: np.ndarray) -> Matrix:
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    return Matrix.from_array(arr)


def _singular(design: EliminationDesign, rank: int | None, cause: Exception | None = None) -> SingularMatrixError:
    detail = f": {cause}" if cause is not None else ""
    return SingularMatrixError(
        f"{design.name} is singular{detail}",
        matrix_name=design.name,
        rank=rank,
        expected_rank=design.n_rows,
    )


class LapackBackend:
    """
    CPU backend using SciPy's LU factorization.

    Implements the EliminationBackend protocol for EliminationDesign.
    """

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def determinant(self, design: EliminationDesign) -> Result[DeterminantParams]:
        timer = Timer()
        timer.start()
        with timer.section('materialize'):
            a = _as_lapack_array(design.a_array(), design.name)
        with timer.section('factorize'):
            # An exactly singular factor is expected here; det is then zero
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', sla.LinAlgWarning)
                lu, piv = sla.lu_factor(a)
        timer.stop()

        diagonal = np.diag(lu)
        swaps = int(np.count_nonzero(piv != np.arange(len(piv))))
        det = np.prod(diagonal) * (-1) ** swaps
        rank = int(np.count_nonzero(diagonal))
        params = DeterminantParams(determinant=det.item(), rank=rank)
        return Result(
            params=params,
            info={'method': 'lu', 'pivot_policy': 'partial', 'rank': rank},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    def inverse(self, design: EliminationDesign) -> Result[InverseParams]:
        """
        Raises:
            SingularMatrixError: If LAPACK reports an exactly singular factor
        """
        timer = Timer()
        timer.start()
        with timer.section('materialize'):
            a = _as_lapack_array(design.a_array(), design.name)
        with timer.section('factorize'):
            try:
                inverse = sla.inv(a)
            except np.linalg.LinAlgError as e:
                raise _singular(design, None, e) from e
        timer.stop()

        n = design.n_rows
        params = InverseParams(inverse=_to_matrix(inverse), rank=n)
        return Result(
            params=params,
            info={'method': 'lu', 'pivot_policy': 'partial', 'rank': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    def solve_system(self, design: EliminationDesign) -> Result[SolveParams]:
        """
        Raises:
            SingularMatrixError: If LAPACK reports an exactly singular factor
        """
        timer = Timer()
        timer.start()
        with timer.section('materialize'):
            a = _as_lapack_array(design.a_array(), design.name)
            b = _as_lapack_array(design.rhs_array(), 'rhs')
        warn_list: list[str] = []
        with timer.section('factorize'):
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter('always', sla.LinAlgWarning)
                try:
                    solution = sla.solve(a, b)
                except np.linalg.LinAlgError as e:
                    raise _singular(design, None, e) from e
            warn_list.extend(str(w.message) for w in caught)
        timer.stop()

        n = design.n_rows
        info: dict[str, Any] = {'method': 'lu', 'pivot_policy': 'partial', 'rank': n}
        return Result(
            params=SolveParams(solution=_to_matrix(solution), rank=n),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_list),
        )
