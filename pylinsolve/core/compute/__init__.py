"""
Shared compute infrastructure for pylinsolve.

This module provides hardware detection, timing utilities, and linear algebra
kernels that are shared by both solver domains.

IMPORTANT: This is NOT where solver backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    precision: Condition number
    tolerances: GPU-vs-CPU accuracy tiers
    linalg: Elimination and SPD kernels
"""

from pylinsolve.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pylinsolve.core.compute.timing import Timer

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
]
