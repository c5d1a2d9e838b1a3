"""
Direct solver backends.

Available backends:
    CPUGaussBackend: CPU reference implementation (NumPy)
    GPUGaussBackend: GPU implementation (PyTorch), imported lazily
"""

from pylinsolve.direct.backends.cpu import CPUGaussBackend

__all__ = [
    "CPUGaussBackend",
]
