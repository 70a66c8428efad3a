"""
Stationary distribution as the left eigenvector of P for eigenvalue 1.

A left eigenvector of P is a right eigenvector of P'. For an irreducible
aperiodic chain, 1 is a simple eigenvalue and every other eigenvalue has
modulus < 1.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymarkov.core.compute.linalg import transpose
from pymarkov.core.compute.tolerances import SolverTolerances
from pymarkov.core.exceptions import NumericalError, PrecisionWarning
from pymarkov.core.protocols import LinalgBackend
from pymarkov.core.result import Result
from pymarkov.stationary._common import (
    emit,
    fixed_point_residual,
    make_timer,
    normalize_by_sum,
)
from pymarkov.stationary.design import MarkovDesign
from pymarkov.stationary.solution import StationaryParams


def select_unit_eigenvalue(w: NDArray[np.complexfloating[Any, Any]]) -> int:
    """
    Index of the eigenvalue closest to 1.

    Ordered by |Re(w) - 1|, then |Im(w)|, then position.
    """
    w = np.asarray(w)
    keys = [(abs(z.real - 1.0), abs(z.imag), i) for i, z in enumerate(w)]
    return min(keys)[2]


def eigen_solve(
    design: MarkovDesign,
    backend: LinalgBackend,
    tol: SolverTolerances,
) -> Result[StationaryParams]:
    """
    Solve via eigen-decomposition of P'.

    Raises:
        NumericalError: If the decomposition fails
        DegenerateEigenvectorError: If the selected eigenvector sums to ~0
    """
    timer = make_timer(backend)
    timer.start()
    warn_list: list[str] = list(design.warnings)

    with timer.section('eig'):
        try:
            w, V = backend.eig(transpose(design.P))
        except np.linalg.LinAlgError as e:
            raise NumericalError(f"Eigen-decomposition of P' failed: {e}") from e

    w = np.asarray(w)
    V = np.asarray(V)

    with timer.section('select'):
        idx = select_unit_eigenvalue(w)
        eigenvalue = complex(w[idx])
        vec = V[:, idx]
        max_imag = float(np.max(np.abs(np.imag(vec))))
        if max_imag > tol.imag_atol:
            emit(
                f"Discarded imaginary parts up to {max_imag:.3g} of the "
                f"eigenvector for eigenvalue {eigenvalue:.6g} (atol={tol.imag_atol:g})",
                PrecisionWarning,
                warn_list,
            )
        vec = np.real(vec).astype(np.float64)

    with timer.section('normalize'):
        mu = normalize_by_sum(vec, method='eigen', degenerate_atol=tol.degenerate_atol)

    with timer.section('residual'):
        residual = fixed_point_residual(mu, design.P, backend)

    timer.stop()

    return Result(
        params=StationaryParams(distribution=mu, residual=residual, method='eigen'),
        info={
            'method': 'eigen',
            'eigenvalue': eigenvalue,
            'eigenvalue_index': idx,
            'max_discarded_imag': max_imag,
            'residual': residual,
        },
        timing=timer.result(),
        backend_name=backend.name,
        warnings=tuple(warn_list),
    )
