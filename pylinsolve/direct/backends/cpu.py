"""
CPU reference backend for the direct solver.

Runs naive Gaussian elimination with back substitution in NumPy float64.
This is the reference implementation the GPU backend is validated against.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.linalg.elimination import (
    EliminationResult,
    gaussian_elimination_cpu,
)
from pylinsolve.direct.design import DirectDesign
from pylinsolve.direct.solution import DirectParams


class CPUGaussBackend:
    """
    CPU backend using naive Gaussian elimination.

    Implements the Backend protocol for DirectDesign -> DirectParams.

    Args:
        check_pivots: If True, raise SingularMatrixError on an exactly-zero
            pivot instead of letting inf/NaN propagate.
    """

    def __init__(self, check_pivots: bool = False):
        self._check_pivots = check_pivots

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def solve(self, design: DirectDesign) -> Result[DirectParams]:
        """
        Solve A x = b by elimination and back substitution.

        Algorithm:
            1. Eliminate below each diagonal pivot of [A | b], no row exchanges
            2. Back substitute from the last row upward
            3. Compute the residual A x - b

        Args:
            design: Validated direct design

        Returns:
            Result containing DirectParams

        Raises:
            SingularMatrixError: If check_pivots=True and a pivot is zero
        """
        timer = Timer()
        timer.start()

        with timer.section('elimination'):
            elim = gaussian_elimination_cpu(
                design.A, design.b, check_pivots=self._check_pivots
            )

        with timer.section('residual'):
            residual = design.residual(elim.x)
            residual_norm = float(np.linalg.norm(residual))

        timer.stop()

        params = DirectParams(
            x=elim.x,
            residual=residual,
            residual_norm=residual_norm,
            pivots=elim.pivots,
        )

        return Result(
            params=params,
            info=_build_info(elim),
            timing=timer.result(),
            backend_name=self.name,
            warnings=_collect_warnings(elim),
        )


def _build_info(elim: EliminationResult) -> dict[str, Any]:
    not_nan = elim.pivots[~np.isnan(elim.pivots)]
    min_abs = float(np.min(np.abs(not_nan))) if not_nan.size else float('nan')
    return {
        'method': 'gauss',
        'pivoting': 'none',
        'zero_pivot': elim.zero_pivot_index is not None,
        'zero_pivot_index': elim.zero_pivot_index,
        'min_abs_pivot': min_abs,
    }


def _collect_warnings(elim: EliminationResult) -> tuple[str, ...]:
    warnings_list = []
    x = elim.x
    if elim.zero_pivot_index is not None:
        warnings_list.append(
            f"Zero pivot encountered at row {elim.zero_pivot_index}; "
            f"naive elimination does not exchange rows"
        )
    if not np.all(np.isfinite(x)):
        n_bad = int(np.sum(~np.isfinite(x)))
        warnings_list.append(
            f"Solution contains {n_bad} non-finite value(s); A may be singular "
            f"or need pivoting"
        )
    return tuple(warnings_list)
