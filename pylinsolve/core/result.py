"""
Generic result container for all pylinsolve computations.

The Result class provides a standardized envelope that both solver domains
use. Domains define their own parameter payloads (DirectParams, CGParams);
timing, backend identity and warnings live in the envelope.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (status, iterations, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear solves.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution vector, residual, ...)
        info: Structured metadata (method, status, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=DirectParams(x=x, residual=r, residual_norm=0.0, pivots=p),
        ...     info={'method': 'gauss', 'zero_pivot': False},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_gauss'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=CGParams(x=x, status=CGStatus.CONVERGED, ...),
        ...     info={'method': 'cg', 'status': 'converged', 'iterations': 4},
        ...     timing={'total_seconds': 0.001, 'iterations': 0.0008},
        ...     backend_name='cpu_cg'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
