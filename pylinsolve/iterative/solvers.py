"""
Solver dispatch for conjugate gradient.

This module provides the solve_iterative() function (public API) and
backend selection.
"""

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinsolve.core.validation import (
    check_non_negative_float,
    check_positive_float,
    check_positive_int,
)
from pylinsolve.core.compute.device import select_device
from pylinsolve.iterative.design import CGDesign
from pylinsolve.iterative.solution import CGStatus, IterativeSolution
from pylinsolve.iterative.backends.cg import CGBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_cg', 'gpu_cg']


def solve_iterative(
    A: ArrayLike,
    b: ArrayLike,
    tol: float,
    maxiter: int,
    x0: ArrayLike,
    *,
    backend: BackendChoice = 'cpu',
    symmetry_atol: float = 0.0,
) -> IterativeSolution:
    """
    Solve a symmetric positive-definite system by conjugate gradient.

    A is first checked for symmetry and, via Sylvester's criterion, for
    positive definiteness. The outcome is reported through
    solution.status rather than raised:

        CGStatus.CONVERGED               x holds the converged estimate
        CGStatus.MAX_ITERATIONS_EXCEEDED x holds the last estimate
        CGStatus.NOT_SPD                 x is None, no iteration ran

    Call solution.raise_for_status() to turn the last two into exceptions.

    Args:
        A: Square coefficient matrix (n x n). Can be any array-like.
        b: Right-hand side of length n, row or column oriented.
        tol: Stop once the residual norm ||A x - b|| (as tracked by the
            recurrence) is below tol. Must be positive.
        maxiter: Maximum number of iterations. Must be a positive integer.
        x0: Initial guess of length n.
        backend: Computational backend to use:
            - 'cpu' / 'cpu_cg': NumPy (default)
            - 'gpu' / 'gpu_cg': PyTorch on CUDA, float64
            - 'auto': GPU if a float64-capable one is available, else CPU
        symmetry_atol: Absolute tolerance of the symmetry check. The
            default 0.0 requires A == A' exactly, so a matrix with
            rounding noise off the diagonal is rejected as NOT_SPD.

    Returns:
        IterativeSolution with status, x, iterations and diagnostics

    Raises:
        ValidationError: If tol, maxiter or symmetry_atol are invalid, or
            inputs are non-numeric
        DimensionError: If A is not square or b/x0 do not match A

    Example:
        >>> import numpy as np
        >>> from pylinsolve.iterative import solve_iterative
        >>>
        >>> A = np.array([[6, 0, 1, 2], [0, 7, 3, 4], [1, 3, 8, 5], [2, 4, 5, 9]])
        >>> b = np.array([17, 39, 51, 61])
        >>> solution = solve_iterative(A, b, 1e-6, 1000, np.zeros(4))
        >>> solution.status
        <CGStatus.CONVERGED: 'converged'>
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    tol = check_positive_float(tol, 'tol')
    maxiter = check_positive_int(maxiter, 'maxiter')
    symmetry_atol = check_non_negative_float(symmetry_atol, 'symmetry_atol')

    # === Construct Design ===
    design = CGDesign.from_arrays(A, b, x0)

    # === Select Backend ===
    backend_impl = _get_backend(backend, symmetry_atol)

    # === Solve ===
    result = backend_impl.solve(design, tol=tol, maxiter=maxiter)

    solution = IterativeSolution(_result=result, _design=design)
    if solution.status is CGStatus.MAX_ITERATIONS_EXCEEDED:
        warnings.warn(
            f"Conjugate gradient did not converge after {maxiter} iterations "
            f"(residual norm {solution.residual_norm:.2e}, tol {tol:.2e}). "
            f"Returning the last estimate.",
            RuntimeWarning,
            stacklevel=2,
        )

    return solution


def _get_backend(choice: BackendChoice, symmetry_atol: float) -> CGBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'auto':
        device = select_device('auto')
        return CGBackend(device=device.device_type, symmetry_atol=symmetry_atol)

    elif choice in ('cpu', 'cpu_cg'):
        return CGBackend(device='cpu', symmetry_atol=symmetry_atol)

    elif choice in ('gpu', 'gpu_cg'):
        return CGBackend(device='cuda', symmetry_atol=symmetry_atol)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
