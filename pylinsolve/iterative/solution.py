"""
Conjugate gradient solution types.

Contains the outcome tag, the parameter payload and the user-facing
solution wrapper.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    ConvergenceError,
    NotSymmetricPositiveDefiniteError,
)

if TYPE_CHECKING:
    from pylinsolve.iterative.design import CGDesign


class CGStatus(str, Enum):
    """
    Outcome of a conjugate gradient solve.

    CONVERGED and MAX_ITERATIONS_EXCEEDED carry a solution vector;
    NOT_SPD means the matrix was rejected before any iteration.
    """
    CONVERGED = 'converged'
    MAX_ITERATIONS_EXCEEDED = 'max_iterations_exceeded'
    NOT_SPD = 'not_symmetric_positive_definite'


@dataclass(frozen=True)
class CGParams:
    """
    Parameter payload for conjugate gradient.

    x is None exactly when status is NOT_SPD.
    """
    x: NDArray[np.floating[Any]] | None
    status: CGStatus
    iterations: int
    residual_norm: float
    residual_history: tuple[float, ...]


@dataclass
class IterativeSolution:
    """
    User-facing conjugate gradient results.

    Branch on status (or converged) rather than on x: an unconverged
    solve still returns its last estimate.
    """
    _result: Result[CGParams]
    _design: 'CGDesign'

    @property
    def status(self) -> CGStatus:
        return self._result.params.status

    @property
    def converged(self) -> bool:
        return self.status is CGStatus.CONVERGED

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.x

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def residual_norm(self) -> float:
        """sqrt(r . r) of the final recurrence residual (nan if NOT_SPD)."""
        return self._result.params.residual_norm

    @property
    def residual_history(self) -> tuple[float, ...]:
        """Residual norm after each iteration, starting with the initial guess."""
        return self._result.params.residual_history

    @property
    def n(self) -> int:
        return self._design.n

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

    def raise_for_status(self) -> 'IterativeSolution':
        """
        Escalate a non-converged outcome to an exception.

        Returns:
            self, if the solve converged

        Raises:
            NotSymmetricPositiveDefiniteError: If A failed the SPD check
            ConvergenceError: If the iteration cap was reached
        """
        if self.status is CGStatus.NOT_SPD:
            raise NotSymmetricPositiveDefiniteError(
                _spd_message(self.info),
                matrix_name='A',
                reason=self.info.get('spd_failure'),
                failed_minor=self.info.get('failed_minor'),
                minor_value=self.info.get('minor_value'),
            )
        if self.status is CGStatus.MAX_ITERATIONS_EXCEEDED:
            raise ConvergenceError(
                f"Conjugate gradient did not converge after {self.iterations} "
                f"iterations (residual norm {self.residual_norm:.3e}, "
                f"tol {self.info['tol']:.3e})",
                iterations=self.iterations,
                final_change=self.residual_norm,
                reason='max_iterations',
                threshold=self.info['tol'],
            )
        return self

    def summary(self) -> str:
        """Plain-text report of the solve."""
        lines = [
            "Conjugate gradient",
            "",
            f"System size: {self.n} x {self.n}",
            f"Status: {self.status.value}",
        ]
        if self.x is None:
            lines.append(_spd_message(self.info))
        else:
            lines.append(f"Iterations: {self.iterations} (max {self.info['maxiter']})")
            lines.append("")
            lines.append("Solution:")
            for i, value in enumerate(self.x):
                lines.append(f"  x[{i}] = {value:12.6f}")
            lines.append("")
            lines.append(
                f"Residual norm: {self.residual_norm:.3e} (tol {self.info['tol']:.1e})"
            )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"IterativeSolution(status={self.status.value!r}, "
            f"iterations={self.iterations}, n={self.n})"
        )


def _spd_message(info: dict[str, Any]) -> str:
    if info.get('spd_failure') == 'not_symmetric':
        return "Matrix A is not symmetric; conjugate gradient requires an SPD matrix"
    k = info.get('failed_minor')
    value = info.get('minor_value')
    return (
        f"Matrix A is not positive definite: leading principal minor of "
        f"order {k} is {value!r}"
    )
