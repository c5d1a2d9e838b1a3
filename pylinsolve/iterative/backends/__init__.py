"""
Conjugate gradient backends.

Available backends:
    CGBackend: CG with SPD validation; NumPy on CPU, PyTorch on CUDA/MPS
"""

from pylinsolve.iterative.backends.cg import CGBackend

__all__ = [
    "CGBackend",
]
