"""
Linear algebra kernels for pylinsolve.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Each operation returns a structured result dataclass

Submodules:
    elimination: Naive Gaussian elimination and back substitution
    spd: Symmetry and Sylvester-criterion checks
"""

from pylinsolve.core.compute.linalg.elimination import (
    EliminationResult,
    augment,
    back_substitute_cpu,
    forward_eliminate_cpu,
    gaussian_elimination_cpu,
    gaussian_elimination_gpu,
)
from pylinsolve.core.compute.linalg.spd import (
    SPDCheck,
    check_spd,
    is_symmetric,
    leading_principal_minors,
)

__all__ = [
    # Elimination
    "EliminationResult",
    "augment",
    "back_substitute_cpu",
    "forward_eliminate_cpu",
    "gaussian_elimination_cpu",
    "gaussian_elimination_gpu",
    # SPD checks
    "SPDCheck",
    "check_spd",
    "is_symmetric",
    "leading_principal_minors",
]
