"""
Input validation utilities for pymarkov.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. The one exception is row-sum
checking, which only warns: a slightly non-stochastic matrix still has a
meaningful best-effort answer.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymarkov.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New float64 numpy.ndarray (never a view of the caller's data)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric or complex dtype {result.dtype}, expected real numbers"
        )

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square and non-empty.

    Raises:
        DimensionError: If array is not n x n with n >= 1
    """
    check_2d(array, name)
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )
    if n_rows == 0:
        raise DimensionError(f"{name}: matrix must have at least one state")


def check_nonnegative(
    array: NDArray[np.floating[Any]],
    name: str,
    atol: float = 0.0,
) -> None:
    """
    Verify all entries are >= -atol.

    Raises:
        ValidationError: If any entry is negative beyond atol
    """
    min_value = float(np.min(array)) if array.size else 0.0
    if min_value < -atol:
        n_neg = int(np.sum(array < -atol))
        raise ValidationError(
            f"{name}: probabilities must be non-negative, found {n_neg} "
            f"negative entries (min={min_value:.3g})"
        )


def check_row_sums(
    array: NDArray[np.floating[Any]],
    name: str,
    atol: float,
) -> list[str]:
    """
    Check that every row sums to 1 within atol.

    Unlike the other validators this does not raise; the caller decides how
    to surface the problem.

    Returns:
        One message per offending row (empty if the matrix is stochastic)
    """
    row_sums = array.sum(axis=1)
    bad_rows = np.flatnonzero(np.abs(row_sums - 1.0) > atol)
    return [
        f"{name}: row {int(i)} sums to {row_sums[i]:.12g}, expected 1 (atol={atol:g})"
        for i in bad_rows
    ]


def check_labels(labels, n: int, name: str) -> tuple[str, ...]:
    """
    Validate state labels: exactly n distinct entries, converted to str.

    Raises:
        DimensionError: If the number of labels differs from n
        ValidationError: If labels are not unique
    """
    result = tuple(str(label) for label in labels)
    if len(result) != n:
        raise DimensionError(
            f"{name}: expected {n} labels, got {len(result)}"
        )
    if len(set(result)) != n:
        raise ValidationError(f"{name}: labels must be unique, got {list(result)}")
    return result
