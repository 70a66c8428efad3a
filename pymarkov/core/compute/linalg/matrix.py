"""
Dense matrix operations.

Small, pure helpers the stationary solvers are assembled from. Every
function converts its inputs to float64, checks shapes up front and returns
a new array; inputs are never modified.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymarkov.core.exceptions import DimensionError, ValidationError

if TYPE_CHECKING:
    from pymarkov.core.protocols import LinalgBackend


def _as_matrix(a: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = np.asarray(a, dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    return arr


def identity(n: int) -> NDArray[np.floating[Any]]:
    """
    n x n identity matrix.

    Raises:
        ValidationError: If n < 1
    """
    if n < 1:
        raise ValidationError(f"n: identity size must be >= 1, got {n}")
    return np.eye(n, dtype=np.float64)


def transpose(a: ArrayLike) -> NDArray[np.floating[Any]]:
    """Transpose as a new contiguous array."""
    return np.ascontiguousarray(_as_matrix(a, 'a').T)


def subtract(a: ArrayLike, b: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Element-wise a - b.

    Raises:
        DimensionError: If shapes differ (no broadcasting)
    """
    a_arr = _as_matrix(a, 'a')
    b_arr = _as_matrix(b, 'b')
    if a_arr.shape != b_arr.shape:
        raise DimensionError(
            f"Cannot subtract matrices of shape {a_arr.shape} and {b_arr.shape}"
        )
    return a_arr - b_arr


def multiply(
    a: ArrayLike,
    b: ArrayLike,
    *,
    backend: LinalgBackend | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Matrix product a @ b.

    Args:
        a: Left operand (m, k)
        b: Right operand (k, n)
        backend: Route the product through backend.matmul instead of NumPy

    Raises:
        DimensionError: If the inner dimensions differ
    """
    a_arr = _as_matrix(a, 'a')
    b_arr = _as_matrix(b, 'b')
    if a_arr.shape[1] != b_arr.shape[0]:
        raise DimensionError(
            f"Inner dimensions do not match: {a_arr.shape} @ {b_arr.shape}"
        )
    if backend is None:
        return a_arr @ b_arr
    return np.asarray(backend.matmul(a_arr, b_arr), dtype=np.float64)


def matrix_power(
    a: ArrayLike,
    k: int,
    *,
    backend: LinalgBackend | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Integer power a^k by repeated squaring.

    a^0 is the identity. For a row-stochastic matrix every power is
    row-stochastic, so entries stay in [0, 1] for any k.

    Args:
        a: Square matrix (n, n)
        k: Exponent, k >= 0
        backend: Optional backend used for the products

    Raises:
        DimensionError: If a is not square
        ValidationError: If k is not a non-negative integer
    """
    a_arr = _as_matrix(a, 'a')
    if a_arr.shape[0] != a_arr.shape[1]:
        raise DimensionError(f"a: matrix power needs a square matrix, got {a_arr.shape}")
    if isinstance(k, (bool, np.bool_)):
        raise ValidationError(f"k: exponent must be an integer, got {k!r}")
    try:
        k = operator.index(k)
    except TypeError:
        raise ValidationError(f"k: exponent must be an integer, got {k!r}") from None
    if k < 0:
        raise ValidationError(f"k: exponent must be >= 0, got {k}")

    result = identity(a_arr.shape[0])
    base = a_arr
    while k:
        if k & 1:
            result = multiply(result, base, backend=backend)
        k >>= 1
        if k:
            base = multiply(base, base, backend=backend)
    return result


def append_row(a: ArrayLike, row: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Stack a row vector under a matrix: (m, n) + (n,) -> (m + 1, n).

    Raises:
        DimensionError: If len(row) != number of columns of a
    """
    a_arr = _as_matrix(a, 'a')
    row_arr = np.asarray(row, dtype=np.float64).ravel()
    if row_arr.shape[0] != a_arr.shape[1]:
        raise DimensionError(
            f"row: expected length {a_arr.shape[1]}, got {row_arr.shape[0]}"
        )
    return np.vstack([a_arr, row_arr[np.newaxis, :]])
