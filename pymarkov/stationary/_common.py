"""
Helpers shared by the three stationary solvers.
"""

from __future__ import annotations

from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pymarkov.core.compute.linalg import identity, subtract, transpose, multiply
from pymarkov.core.compute.timing import Timer
from pymarkov.core.exceptions import DegenerateEigenvectorError, PyMarkovWarning
from pymarkov.core.protocols import LinalgBackend


def stationary_operator(P: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """(P - I)': mu P = mu  <=>  (P - I)' mu' = 0."""
    return transpose(subtract(P, identity(P.shape[0])))


def normalize_by_sum(
    v: NDArray[np.floating[Any]],
    *,
    method: str,
    degenerate_atol: float,
) -> NDArray[np.floating[Any]]:
    """
    Scale a real vector so its components sum to 1.

    Eigenvectors and null-space vectors are only defined up to a scalar.
    A negative sum means the vector came back negated; it is flipped
    before dividing.

    Raises:
        DegenerateEigenvectorError: If |sum(v)| <= degenerate_atol
    """
    total = float(np.sum(v))
    if not np.isfinite(total) or abs(total) <= degenerate_atol:
        raise DegenerateEigenvectorError(
            f"Cannot normalize {method} vector: components sum to {total:.3g}",
            vector_sum=total,
            method=method,
        )
    if total < 0:
        v = -v
        total = -total
    return v / total


def fixed_point_residual(
    mu: NDArray[np.floating[Any]],
    P: NDArray[np.floating[Any]],
    backend: LinalgBackend,
) -> float:
    """max |mu P - mu|."""
    mu_P = multiply(mu[np.newaxis, :], P, backend=backend).ravel()
    return float(np.max(np.abs(mu_P - mu)))


def make_timer(backend: LinalgBackend) -> Timer:
    """Timer synchronized with the backend's device, if it has one."""
    return Timer(sync=getattr(backend, 'synchronize', None))


def emit(
    message: str,
    category: type[PyMarkovWarning],
    collected: list[str],
) -> None:
    """
    Warn and record the message for Result.warnings.

    Called from a *_solve function, which the solvers module always reaches
    through _solve and one public function, so the caller is five frames up.
    """
    warnings.warn(message, category, stacklevel=5)
    collected.append(message)
