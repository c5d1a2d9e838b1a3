"""
Conditioning diagnostics.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """
    Compute condition number of a matrix using SVD.

    Args:
        A: Input matrix

    Returns:
        Condition number (ratio of largest to smallest singular value)
        Returns inf if matrix is singular or contains non-finite values.
    """
    if not np.all(np.isfinite(A)):
        return np.inf
    s = np.linalg.svd(A, compute_uv=False)
    if s[-1] == 0:
        return np.inf
    return float(s[0] / s[-1])
