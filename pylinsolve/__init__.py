"""
pylinsolve: direct and iterative solvers for square linear systems.

Two independent routines for A x = b:

    direct:    naive Gaussian elimination with back substitution
    iterative: conjugate gradient with symmetric positive-definite validation

Both run on CPU (NumPy) by default, with optional GPU execution via PyTorch.
"""

__version__ = "0.1.0"

from pylinsolve import direct
from pylinsolve import iterative
from pylinsolve.direct import solve_direct
from pylinsolve.iterative import solve_iterative, CGStatus

__all__ = [
    "__version__",
    "direct",
    "iterative",
    "solve_direct",
    "solve_iterative",
    "CGStatus",
]
