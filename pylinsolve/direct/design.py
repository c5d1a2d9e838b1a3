"""
Direct-solve Design.

Design holds the validated coefficient matrix A and right-hand side b
of one square system. It is what backends consume; it never computes
anything itself beyond the residual of a candidate solution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    as_vector,
    check_array,
    check_consistent_length,
    check_square,
)


@dataclass(frozen=True)
class DirectDesign:
    """
    Square linear system for the direct solver.

    Immutable after construction. Inputs are copied, so a backend may
    never alias the caller's arrays.

    Construction:
        DirectDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> DirectDesign:
        """
        Build Design from array-likes.

        b may be given as (n,), (n, 1) or (1, n); it is normalized to (n,).

        Raises:
            ValidationError: If inputs are non-numeric
            DimensionError: If A is not square or b does not match A
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        return cls.build(A_arr, b_arr)

    @classmethod
    def build(cls, A: NDArray, b: NDArray) -> DirectDesign:
        """Internal builder with validation."""
        check_square(A, 'A')
        b = as_vector(b, 'b')
        check_consistent_length(A, b, names=('A', 'b'))

        return cls(
            _A=np.array(A, dtype=np.float64, copy=True),
            _b=np.array(b, dtype=np.float64, copy=True),
            _n=A.shape[0],
        )

    # === Properties ===

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """System dimension."""
        return self._n

    def residual(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """Compute A x - b."""
        with np.errstate(invalid='ignore', over='ignore'):
            return self._A @ x - self._b
