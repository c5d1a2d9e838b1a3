"""
Solver dispatch for the direct solver.

This module provides the solve_direct() function (public API) and backend
selection.
"""

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinsolve.core.compute.device import select_device
from pylinsolve.direct.design import DirectDesign
from pylinsolve.direct.solution import DirectSolution
from pylinsolve.direct.backends.cpu import CPUGaussBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_gauss', 'gpu_gauss']


def solve_direct(
    A: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice = 'cpu',
    check_pivots: bool = False,
) -> DirectSolution:
    """
    Solve a square linear system by Gaussian elimination.

    Solves A x = b with naive elimination (the pivot is always the
    diagonal entry, no row exchanges) followed by back substitution.

    A zero pivot is NOT reported as an error unless check_pivots=True:
    the returned x then contains inf/NaN, a RuntimeWarning is issued,
    and solution.is_finite is False.

    Args:
        A: Square coefficient matrix (n x n). Can be any array-like.
        b: Right-hand side of length n, as (n,), (n, 1) or (1, n).
        backend: Computational backend to use:
            - 'cpu' / 'cpu_gauss': NumPy reference implementation (default)
            - 'gpu' / 'gpu_gauss': PyTorch on CUDA, float64
            - 'auto': GPU if a float64-capable one is available, else CPU
        check_pivots: If True, raise SingularMatrixError on a zero pivot.

    Returns:
        DirectSolution with x, residual diagnostics and summary()

    Raises:
        ValidationError: If inputs are non-numeric
        DimensionError: If A is not square or b does not match A
        SingularMatrixError: If check_pivots=True and a pivot is zero

    Example:
        >>> import numpy as np
        >>> from pylinsolve.direct import solve_direct
        >>>
        >>> A = np.array([[1, 2, 3], [2, 3, 1], [3, 1, 2]])
        >>> solution = solve_direct(A, [14, 11, 11])
        >>> solution.x  # approximately [1, 2, 3]
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = DirectDesign.from_arrays(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(backend, check_pivots)

    # === Solve ===
    result = backend_impl.solve(design)

    solution = DirectSolution(_result=result, _design=design)
    if not solution.is_finite:
        warnings.warn(
            "solve_direct produced non-finite values; "
            "check solution.warnings for the zero pivot location.",
            RuntimeWarning,
            stacklevel=2,
        )

    return solution


def _get_backend(choice: BackendChoice, check_pivots: bool):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from pylinsolve.direct.backends.gpu import GPUGaussBackend
            return GPUGaussBackend(device=device.device_type, check_pivots=check_pivots)
        return CPUGaussBackend(check_pivots=check_pivots)

    elif choice in ('cpu', 'cpu_gauss'):
        return CPUGaussBackend(check_pivots=check_pivots)

    elif choice in ('gpu', 'gpu_gauss'):
        from pylinsolve.direct.backends.gpu import GPUGaussBackend
        return GPUGaussBackend(check_pivots=check_pivots)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
