"""
Exception hierarchy for pylinsolve.

All exceptions inherit from PyLinSolveError to allow catching any
library-specific error. Solver-specific failures inherit from the
appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSolveError(Exception):
    """Base exception for all pylinsolve errors."""
    pass


class ValidationError(PyLinSolveError):
    """
    Input validation failed.

    Raised at the public API boundary when user-provided inputs fail
    validation checks (non-numeric data, non-positive tolerance, ...).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when A is not square, when b or x0 does not match the
    dimension of A, or when an array has the wrong number of axes.
    """
    pass


class NumericalError(PyLinSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Elimination met a zero pivot.

    Only raised when pivot checking is explicitly requested; the default
    direct solver lets inf/NaN propagate instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row index of the zero pivot, if known
        pivot_value: The offending pivot value, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        failed_minor: Order k of the first non-positive leading principal
            minor, if that is how the failure was detected
        minor_value: Value of that minor, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        failed_minor: int | None = None,
        minor_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.failed_minor = failed_minor
        self.minor_value = minor_value


class NotSymmetricPositiveDefiniteError(NotPositiveDefiniteError):
    """
    Matrix failed the symmetric positive-definite precondition of CG.

    Attributes:
        reason: 'not_symmetric' or 'non_positive_minor'
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        reason: str | None = None,
        failed_minor: int | None = None,
        minor_value: float | None = None,
    ):
        super().__init__(
            message,
            matrix_name=matrix_name,
            failed_minor=failed_minor,
            minor_value=minor_value,
        )
        self.reason = reason


class ConvergenceError(PyLinSolveError):
    """
    Iterative algorithm failed to converge.

    Raised on request (``IterativeSolution.raise_for_status()``) when the
    conjugate gradient loop hits its iteration cap before meeting the
    residual tolerance.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final residual norm
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
