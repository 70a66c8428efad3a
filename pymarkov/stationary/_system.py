"""
Stationary distribution as the solution of a linear system.

mu P = mu with sum(mu) = 1 is rewritten as

    [ (P - I)' ]        [ 0 ]
    [  1 ... 1 ] mu' =  [ 1 ]

an (n + 1) x n system, consistent for an irreducible chain. It is solved
in the least-squares sense so the redundant row of (P - I)' does no harm.
"""

from __future__ import annotations

import numpy as np

from pymarkov.core.compute.linalg import append_row
from pymarkov.core.compute.tolerances import SolverTolerances
from pymarkov.core.exceptions import PrecisionWarning, SingularSystemError
from pymarkov.core.protocols import LinalgBackend
from pymarkov.core.result import Result
from pymarkov.stationary._common import (
    emit,
    fixed_point_residual,
    make_timer,
    stationary_operator,
)
from pymarkov.stationary.design import MarkovDesign
from pymarkov.stationary.solution import StationaryParams


def system_solve(
    design: MarkovDesign,
    backend: LinalgBackend,
    tol: SolverTolerances,
) -> Result[StationaryParams]:
    """
    Solve the augmented system A mu' = b by least squares.

    Raises:
        SingularSystemError: If the backend fails or returns non-finite
            values, or the solution sums to zero and cannot be re-normalized
    """
    timer = make_timer(backend)
    timer.start()
    warn_list: list[str] = list(design.warnings)
    n = design.n

    with timer.section('build_system'):
        A = append_row(stationary_operator(design.P), np.ones(n))
        b = np.zeros(n + 1)
        b[-1] = 1.0

    with timer.section('lstsq'):
        try:
            x, rank = backend.lstsq(A, b)
        except np.linalg.LinAlgError as e:
            raise SingularSystemError(
                f"Least-squares solve of the {n + 1}x{n} stationary system failed: {e}",
                expected_rank=n,
            ) from e

    x = np.asarray(x, dtype=np.float64).ravel()
    if x.shape != (n,) or not np.all(np.isfinite(x)):
        raise SingularSystemError(
            f"Least-squares solve returned an invalid solution "
            f"(shape {x.shape}, finite={bool(np.all(np.isfinite(x)))})",
            rank=rank,
            expected_rank=n,
        )

    with timer.section('normalize'):
        total = float(x.sum())
        if abs(total - 1.0) > tol.sum_atol:
            if abs(total) <= tol.degenerate_atol:
                raise SingularSystemError(
                    f"Least-squares solution sums to {total:.3g}; cannot re-normalize",
                    rank=rank,
                    expected_rank=n,
                )
            emit(
                f"System solution sums to {total:.12g}, not 1 "
                f"(atol={tol.sum_atol:g}); re-normalized",
                PrecisionWarning,
                warn_list,
            )
            x = x / total

    with timer.section('residual'):
        residual = fixed_point_residual(x, design.P, backend)

    timer.stop()

    return Result(
        params=StationaryParams(distribution=x, residual=residual, method='system'),
        info={
            'method': 'system',
            'rank': rank,
            'expected_rank': n,
            'residual': residual,
        },
        timing=timer.result(),
        backend_name=backend.name,
        warnings=tuple(warn_list),
    )
