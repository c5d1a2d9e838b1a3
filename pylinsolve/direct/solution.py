"""
Direct solver solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.compute.precision import condition_number

if TYPE_CHECKING:
    from pylinsolve.direct.design import DirectDesign


@dataclass(frozen=True)
class DirectParams:
    """
    Parameter payload for the direct solver.

    This is the immutable data computed by backends.
    """
    x: NDArray[np.floating[Any]]
    residual: NDArray[np.floating[Any]]
    residual_norm: float
    pivots: NDArray[np.floating[Any]]


@dataclass
class DirectSolution:
    """
    User-facing direct solve results.

    Wraps the backend Result and provides accessors for the solution
    vector and its diagnostics. A zero pivot is NOT an error here: x
    then contains inf/NaN and is_finite is False.
    """
    _result: Result[DirectParams]
    _design: 'DirectDesign'

    # Cached computations
    _condition_number: float | None = None

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def residual(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residual

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        return self._result.params.pivots

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def is_finite(self) -> bool:
        """False if a zero or tiny pivot corrupted the solution."""
        return bool(np.all(np.isfinite(self.x)))

    @property
    def zero_pivot(self) -> bool:
        return bool(self._result.info.get('zero_pivot', False))

    @property
    def condition_number(self) -> float:
        """2-norm condition number of A, computed on first access."""
        if self._condition_number is None:
            self._condition_number = condition_number(self._design.A)
        return self._condition_number

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
        """Plain-text report of the solve."""
        lines = [
            "Gaussian elimination with back substitution",
            "",
            f"System size: {self.n} x {self.n}",
            "",
            "Solution:",
        ]
        for i, value in enumerate(self.x):
            lines.append(f"  x[{i}] = {value:12.6f}")
        lines.append("")
        lines.append(f"Residual norm ||Ax - b||: {self.residual_norm:.3e}")
        lines.append(f"Smallest |pivot|: {self.info['min_abs_pivot']:.3e}")
        if self.zero_pivot:
            lines.append(f"Zero pivot at row {self.info['zero_pivot_index']}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DirectSolution(n={self.n}, residual_norm={self.residual_norm:.3e})"
