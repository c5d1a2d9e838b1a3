"""
Input validation utilities for pylinsolve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Non-finite entries are NOT rejected here; they propagate through
      the solvers as a documented failure mode
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsolve.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    # Double precision is the working precision of both solvers
    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(A: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify matrix is square and non-empty.

    Args:
        A: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If A is empty or has unequal row and column counts
    """
    check_2d(A, name)
    n_rows, n_cols = A.shape
    if n_rows == 0 or n_cols == 0:
        raise DimensionError(f"{name}: matrix is empty, shape {A.shape}")
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {A.shape}"
        )


def as_vector(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Normalize a row or column vector to shape (n,).

    Accepts shapes (n,), (n, 1) and (1, n). Anything else is rejected.

    Args:
        array: Array to normalize
        name: Parameter name for error messages

    Returns:
        1D view or copy of the input

    Raises:
        DimensionError: If the array is not vector-shaped
    """
    if array.ndim == 2 and 1 in array.shape:
        return array.ravel()
    check_ndim(array, 1, name)
    return array


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_positive_float(value: Any, name: str) -> float:
    """
    Verify value is a finite real number strictly greater than zero.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not real, not finite, or not positive
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be a finite positive number, got {value}")
    return value


def check_non_negative_float(value: Any, name: str) -> float:
    """
    Verify value is a finite real number greater than or equal to zero.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not real, not finite, or negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be a finite non-negative number, got {value}")
    return value


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer strictly greater than zero.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or not positive
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    value = int(value)
    if value <= 0:
        raise ValidationError(f"{name}: must be a positive integer, got {value}")
    return value
