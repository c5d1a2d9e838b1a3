"""
Symmetric positive-definiteness checks.

The conjugate gradient precondition is validated in two stages:
    1. Symmetry, A == A' (exact by default)
    2. Sylvester's criterion: every leading principal minor det(A[:k, :k]),
       k = 1..n, is strictly positive

The minors are computed one determinant at a time, O(n^4) overall. This
is the slow part of a CG solve for anything but small systems.

The sign of each minor comes from np.linalg.slogdet, so a minor whose
magnitude under- or overflows float64 (1e-3 * I for n >= 108, say) is
still judged by its true sign.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterator, Literal
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import issymmetric


SPDFailure = Literal['not_symmetric', 'non_positive_minor']


@dataclass(frozen=True)
class SPDCheck:
    """
    Outcome of check_spd().

    Attributes:
        is_spd: True if both checks passed
        reason: Which check failed, None when is_spd
        failed_minor: Order k of the first non-positive minor, if any
        minor_value: Value of that minor
        minors: Leading principal minors computed before stopping. Values
                beyond the float64 range are recorded as 0.0 or inf; the
                pass/fail decision does not use them.
    """
    is_spd: bool
    reason: SPDFailure | None
    failed_minor: int | None
    minor_value: float | None
    minors: tuple[float, ...]


def is_symmetric(A: NDArray[np.floating[Any]], atol: float = 0.0) -> bool:
    """
    Check A == A'.

    Args:
        A: Square matrix
        atol: Absolute tolerance on |A - A'|. 0.0 means exact equality, so
              a matrix with floating-point noise in its off-diagonal
              entries is rejected.

    Returns:
        True if A is symmetric within atol
    """
    if atol == 0.0:
        return bool(issymmetric(A))
    return bool(issymmetric(A, atol=atol, rtol=0.0))


def iter_leading_principal_minors(
    A: NDArray[np.floating[Any]],
) -> Iterator[tuple[float, float]]:
    """Yield (sign, log|det|) of A[:k, :k] for k = 1..n."""
    n = A.shape[0]
    for k in range(1, n + 1):
        with np.errstate(divide='ignore', invalid='ignore'):
            sign, logdet = np.linalg.slogdet(A[:k, :k])
        yield float(sign), float(logdet)


def _minor_value(sign: float, logdet: float) -> float:
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        return float(sign * np.exp(logdet))


def leading_principal_minors(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    All leading principal minors of A.

    Args:
        A: Square matrix (n x n)

    Returns:
        Array of n determinants, entry k-1 being det(A[:k, :k])
    """
    return np.fromiter(
        (_minor_value(sign, logdet) for sign, logdet in iter_leading_principal_minors(A)),
        dtype=np.float64,
        count=A.shape[0],
    )


def check_spd(A: NDArray[np.floating[Any]], symmetry_atol: float = 0.0) -> SPDCheck:
    """
    Validate the SPD precondition, stopping at the first failure.

    A minor passes when its sign is +1 and its log-magnitude is finite.
    Zero, negative and NaN minors all fail.

    Args:
        A: Square matrix
        symmetry_atol: Tolerance passed to is_symmetric()

    Returns:
        SPDCheck describing the outcome
    """
    if not is_symmetric(A, atol=symmetry_atol):
        return SPDCheck(
            is_spd=False,
            reason='not_symmetric',
            failed_minor=None,
            minor_value=None,
            minors=(),
        )

    minors: list[float] = []
    for k, (sign, logdet) in enumerate(iter_leading_principal_minors(A), start=1):
        minor = _minor_value(sign, logdet)
        minors.append(minor)
        if not (sign == 1.0 and math.isfinite(logdet)):
            return SPDCheck(
                is_spd=False,
                reason='non_positive_minor',
                failed_minor=k,
                minor_value=minor,
                minors=tuple(minors),
            )

    return SPDCheck(
        is_spd=True,
        reason=None,
        failed_minor=None,
        minor_value=None,
        minors=tuple(minors),
    )
