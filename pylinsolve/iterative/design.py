"""
Conjugate gradient Design.

Holds the validated system A x = b together with the initial guess x0.
Tolerance and iteration cap are solver settings, not data, and are
passed to the backend separately.
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
class CGDesign:
    """
    Square linear system plus initial guess for conjugate gradient.

    Immutable after construction. Inputs are copied.

    Construction:
        CGDesign.from_arrays(A, b, x0)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _x0: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike, x0: ArrayLike) -> CGDesign:
        """
        Build Design from array-likes.

        b and x0 may be row or column vectors; both are normalized to (n,).

        Raises:
            ValidationError: If inputs are non-numeric
            DimensionError: If A is not square or b/x0 do not match A
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        x0_arr = check_array(x0, 'x0')
        return cls.build(A_arr, b_arr, x0_arr)

    @classmethod
    def build(cls, A: NDArray, b: NDArray, x0: NDArray) -> CGDesign:
        """Internal builder with validation."""
        check_square(A, 'A')
        b = as_vector(b, 'b')
        x0 = as_vector(x0, 'x0')
        check_consistent_length(A, b, x0, names=('A', 'b', 'x0'))

        return cls(
            _A=np.array(A, dtype=np.float64, copy=True),
            _b=np.array(b, dtype=np.float64, copy=True),
            _x0=np.array(x0, dtype=np.float64, copy=True),
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
    def x0(self) -> NDArray[np.floating[Any]]:
        """Initial guess (n,)."""
        return self._x0

    @property
    def n(self) -> int:
        """System dimension."""
        return self._n
