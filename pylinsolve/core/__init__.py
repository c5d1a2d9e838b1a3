"""
Core infrastructure for pylinsolve.

This module provides shared abstractions, utilities, and compute
infrastructure used by both solver domains (direct, iterative).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, timing, linear algebra kernels
"""

from pylinsolve.core.protocols import Backend
from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    NotSymmetricPositiveDefiniteError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSolveError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "NotSymmetricPositiveDefiniteError",
    "ConvergenceError",
]
