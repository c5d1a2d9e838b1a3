"""
Core protocols for pylinsolve.

These define structural interfaces that solver backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
CPU and GPU backends need no common base class.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinsolve.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific Design and produce
    a domain-specific parameter payload. The backend handles all hardware-
    specific computation (CPU/GPU, precision).

    Backends are stateless: all problem data is passed via the Design and
    all hardware configuration at construction time. This makes them easy
    to test and swap.

    Type Parameters:
        D: The Design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss', 'gpu_gauss_fp64', 'cpu_cg'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the solve.

        Args:
            design: Validated domain-specific input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical checks were requested and failed
        """
        ...
