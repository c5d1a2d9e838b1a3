"""
Tolerance tiers for comparing GPU solutions against the CPU reference.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Double precision on device; must agree with the float64 CPU path
GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)
