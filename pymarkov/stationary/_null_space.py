"""
Stationary distribution as a basis vector of null((P - I)').

The null space is one-dimensional exactly when the chain has a single
closed communicating class. Anything else is reported, not guessed at.
"""

from __future__ import annotations

import numpy as np

from pymarkov.core.compute.tolerances import SolverTolerances
from pymarkov.core.exceptions import NullSpaceDimensionError, NumericalError
from pymarkov.core.protocols import LinalgBackend
from pymarkov.core.result import Result
from pymarkov.stationary._common import (
    fixed_point_residual,
    make_timer,
    normalize_by_sum,
    stationary_operator,
)
from pymarkov.stationary.design import MarkovDesign
from pymarkov.stationary.solution import StationaryParams


def null_space_cutoff(design: MarkovDesign, tol: SolverTolerances) -> float:
    """
    Absolute singular value cutoff for null((P - I)').

    (P - I) 1 is the vector r of row-sum errors, so the smallest singular
    value of (P - I)' is at most |r| / sqrt(n) <= max |r|. A cutoff of
    sqrt(n) * max(stochastic_atol, max |r|) keeps that direction in the
    null space for every matrix the design accepted.
    """
    if tol.null_space_atol is not None:
        return tol.null_space_atol
    deviation = float(np.max(np.abs(design.P.sum(axis=1) - 1.0)))
    return float(np.sqrt(design.n)) * max(tol.stochastic_atol, deviation)


def null_space_solve(
    design: MarkovDesign,
    backend: LinalgBackend,
    tol: SolverTolerances,
) -> Result[StationaryParams]:
    """
    Solve via an orthonormal basis of the null space of (P - I)'.

    Raises:
        NumericalError: If the SVD fails
        NullSpaceDimensionError: If the null space is not one-dimensional
        DegenerateEigenvectorError: If the basis vector sums to ~0
    """
    timer = make_timer(backend)
    timer.start()
    warn_list: list[str] = list(design.warnings)
    cutoff = null_space_cutoff(design, tol)

    with timer.section('null_space'):
        A = stationary_operator(design.P)
        try:
            basis = backend.null_space(A, atol=cutoff, rcond=tol.null_space_rcond)
        except np.linalg.LinAlgError as e:
            raise NumericalError(f"Null-space computation of (P - I)' failed: {e}") from e

    basis = np.asarray(basis, dtype=np.float64)
    if basis.ndim == 1:
        basis = basis[:, np.newaxis]
    dimension = basis.shape[1]
    if dimension != 1:
        if dimension > 1:
            reason = "the chain is reducible and has no unique stationary distribution"
        else:
            reason = "P is not a valid transition matrix at this tolerance"
        raise NullSpaceDimensionError(
            f"Null space of (P - I)' has dimension {dimension}, expected 1: {reason}",
            dimension=dimension,
        )

    with timer.section('normalize'):
        mu = normalize_by_sum(
            basis[:, 0], method='null_space', degenerate_atol=tol.degenerate_atol
        )

    with timer.section('residual'):
        residual = fixed_point_residual(mu, design.P, backend)

    timer.stop()

    return Result(
        params=StationaryParams(distribution=mu, residual=residual, method='null_space'),
        info={
            'method': 'null_space',
            'null_space_dimension': dimension,
            'singular_value_cutoff': cutoff,
            'residual': residual,
        },
        timing=timer.result(),
        backend_name=backend.name,
        warnings=tuple(warn_list),
    )
