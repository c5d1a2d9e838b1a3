"""
Gaussian elimination with back substitution.

Provides the naive (no pivoting) elimination kernel on CPU (NumPy) and
GPU (PyTorch). The pivot at step i is always the current diagonal entry
of the augmented matrix; no rows or columns are exchanged.

A zero pivot is not guarded by default. The multipliers become inf or
NaN and the corruption propagates into the returned vector. Callers that
want a signal instead pass check_pivots=True and get SingularMatrixError
at the first exactly-zero pivot.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.exceptions import SingularMatrixError

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of Gaussian elimination with back substitution.

    Attributes:
        x: Solution vector (n,)
        pivots: Diagonal entries used as divisors, in elimination order (n,)
        zero_pivot_index: Index of the first exactly-zero pivot, or None
    """
    x: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    zero_pivot_index: int | None


def _raise_zero_pivot(i: int, value: float) -> None:
    raise SingularMatrixError(
        f"Zero pivot at row {i} (value={value!r}); naive elimination cannot "
        f"proceed without row exchanges.",
        matrix_name='A',
        pivot_index=i,
        pivot_value=value,
    )


def augment(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Form the (n, n+1) augmented matrix [A | b] as a fresh array."""
    return np.hstack([A, b.reshape(-1, 1)]).astype(np.float64, copy=False)


def forward_eliminate_cpu(
    Ab: NDArray[np.floating[Any]],
    check_pivots: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Reduce the augmented matrix to upper-triangular form, in place.

    For each pivot row i, every row j > i is replaced by
    row_j - (Ab[j, i] / Ab[i, i]) * row_i. Each row j depends only on
    the unchanged pivot row, so the rows below the pivot are updated
    together.

    Args:
        Ab: Augmented matrix (n x n+1), modified in place
        check_pivots: If True, raise SingularMatrixError on a zero pivot

    Returns:
        Pivot values Ab[i, i] as seen at elimination step i (n,)

    Raises:
        SingularMatrixError: If check_pivots=True and a pivot is exactly zero
    """
    n = Ab.shape[0]
    pivots = np.empty(n, dtype=Ab.dtype)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for i in range(n - 1):
            pivot = Ab[i, i]
            pivots[i] = pivot
            if check_pivots and pivot == 0:
                _raise_zero_pivot(i, float(pivot))
            multipliers = Ab[i + 1:, i] / pivot
            Ab[i + 1:, :] -= multipliers[:, np.newaxis] * Ab[i, :]

    pivots[n - 1] = Ab[n - 1, n - 1]
    if check_pivots and pivots[n - 1] == 0:
        _raise_zero_pivot(n - 1, float(pivots[n - 1]))

    return pivots


def back_substitute_cpu(U: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Solve an upper-triangular augmented system by back substitution.

    x[n-1] = U[n-1, n] / U[n-1, n-1]
    x[i]   = (U[i, n] - U[i, i+1:n] . x[i+1:n]) / U[i, i]

    Args:
        U: Eliminated augmented matrix (n x n+1); only the upper triangle
           of the first n columns and the last column are read

    Returns:
        Solution vector (n,)
    """
    n = U.shape[0]
    x = np.zeros(n, dtype=U.dtype)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        x[n - 1] = U[n - 1, n] / U[n - 1, n - 1]
        for i in range(n - 2, -1, -1):
            x[i] = (U[i, n] - np.dot(U[i, i + 1:n], x[i + 1:n])) / U[i, i]

    return x


def gaussian_elimination_cpu(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    check_pivots: bool = False,
) -> EliminationResult:
    """
    Solve A x = b by naive Gaussian elimination (CPU).

    Args:
        A: Square coefficient matrix (n x n); not modified
        b: Right-hand side (n,); not modified
        check_pivots: If True, raise SingularMatrixError on a zero pivot

    Returns:
        EliminationResult with the solution and the pivots used
    """
    Ab = augment(A, b)
    pivots = forward_eliminate_cpu(Ab, check_pivots=check_pivots)
    x = back_substitute_cpu(Ab)
    return EliminationResult(x=x, pivots=pivots, zero_pivot_index=_first_zero(pivots))


def gaussian_elimination_gpu(
    A: 'torch.Tensor',
    b: 'torch.Tensor',
    check_pivots: bool = False,
) -> EliminationResult:
    """
    Solve A x = b by naive Gaussian elimination (GPU).

    Same recurrence as gaussian_elimination_cpu, run on torch tensors.

    Args:
        A: Square coefficient tensor (n x n), already on the target device
        b: Right-hand side tensor (n,), same device and dtype
        check_pivots: If True, raise SingularMatrixError on a zero pivot

    Returns:
        EliminationResult with x and pivots as NumPy arrays (moved to CPU)
    """
    import torch

    n = A.shape[0]
    Ab = torch.cat([A, b.reshape(-1, 1)], dim=1)
    pivots = torch.empty(n, dtype=Ab.dtype, device=Ab.device)

    for i in range(n - 1):
        pivot = Ab[i, i]
        pivots[i] = pivot
        if check_pivots and pivot.item() == 0:
            _raise_zero_pivot(i, float(pivot.item()))
        multipliers = Ab[i + 1:, i] / pivot
        Ab[i + 1:, :] -= multipliers.unsqueeze(1) * Ab[i, :]

    pivots[n - 1] = Ab[n - 1, n - 1]
    if check_pivots and pivots[n - 1].item() == 0:
        _raise_zero_pivot(n - 1, float(pivots[n - 1].item()))

    x = torch.zeros(n, dtype=Ab.dtype, device=Ab.device)
    x[n - 1] = Ab[n - 1, n] / Ab[n - 1, n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (Ab[i, n] - torch.dot(Ab[i, i + 1:n], x[i + 1:n])) / Ab[i, i]

    pivots_np = pivots.cpu().numpy().astype(np.float64)
    return EliminationResult(
        x=x.cpu().numpy().astype(np.float64),
        pivots=pivots_np,
        zero_pivot_index=_first_zero(pivots_np),
    )


def _first_zero(pivots: NDArray[np.floating[Any]]) -> int | None:
    zeros = np.flatnonzero(pivots == 0)
    return int(zeros[0]) if zeros.size else None
