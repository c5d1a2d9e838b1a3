"""
Direct solver: naive Gaussian elimination with back substitution.

Public API:
    solve_direct(A, b, ...) -> DirectSolution

The solve_direct() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinsolve.direct import solve_direct
    >>> solution = solve_direct(A, b)
    >>> print(solution.x)
    >>> print(solution.summary())
"""

from pylinsolve.direct.design import DirectDesign
from pylinsolve.direct.solution import DirectSolution, DirectParams
from pylinsolve.direct.solvers import solve_direct

__all__ = [
    "solve_direct",
    "DirectDesign",
    "DirectSolution",
    "DirectParams",
]
