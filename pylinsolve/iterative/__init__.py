"""
Iterative solver: conjugate gradient for symmetric positive-definite systems.

Public API:
    solve_iterative(A, b, tol, maxiter, x0, ...) -> IterativeSolution

Example:
    >>> from pylinsolve.iterative import solve_iterative, CGStatus
    >>> solution = solve_iterative(A, b, 1e-6, 1000, x0)
    >>> if solution.status is CGStatus.CONVERGED:
    ...     print(solution.x)
"""

from pylinsolve.iterative.design import CGDesign
from pylinsolve.iterative.solution import CGParams, CGStatus, IterativeSolution
from pylinsolve.iterative.solvers import solve_iterative

__all__ = [
    "solve_iterative",
    "CGDesign",
    "CGParams",
    "CGStatus",
    "IterativeSolution",
]
