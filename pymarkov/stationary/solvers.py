"""
Solver dispatch for stationary distributions.

Public API:
    solve_by_system()      least-squares solve of the augmented linear system
    solve_by_eigen()       eigenvector of P' for eigenvalue 1
    solve_by_null_space()  basis vector of null((P - I)')
    solve()                any of the above, chosen by name
    cross_validate()       run several methods and compare them
    matrix_power()         P^k, for watching rows converge to mu
"""

from __future__ import annotations

from itertools import combinations
from logging import getLogger
from typing import Any, Callable, Literal, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymarkov.core.compute.device import select_device
from pymarkov.core.compute.linalg import matrix_power as _matrix_power
from pymarkov.core.compute.tolerances import SolverTolerances, DEFAULT_TOLERANCES
from pymarkov.core.exceptions import ValidationError
from pymarkov.core.protocols import LinalgBackend
from pymarkov.core.result import Result
from pymarkov.stationary._eigen import eigen_solve
from pymarkov.stationary._null_space import null_space_solve
from pymarkov.stationary._system import system_solve
from pymarkov.stationary.backends.cpu import CPULinalgBackend
from pymarkov.stationary.design import MarkovDesign
from pymarkov.stationary.solution import (
    CrossValidation,
    StationaryParams,
    StationarySolution,
)

log = getLogger(__name__)

Method = Literal['system', 'eigen', 'null_space']
BackendChoice = Union[Literal['auto', 'cpu', 'gpu'], LinalgBackend]

_METHODS: dict[str, Callable[..., Result[StationaryParams]]] = {
    'system': system_solve,
    'eigen': eigen_solve,
    'null_space': null_space_solve,
}


def _ensure_design(
    P: ArrayLike | MarkovDesign,
    states: Sequence[Any] | None,
    tol: SolverTolerances,
    *,
    stacklevel: int,
) -> MarkovDesign:
    """Convert raw array to MarkovDesign if needed."""
    if isinstance(P, MarkovDesign):
        if states is not None:
            raise ValidationError("states: cannot relabel an existing MarkovDesign")
        return P
    return MarkovDesign._validated(P, states, tol, stacklevel=stacklevel)


def _get_backend(choice: BackendChoice) -> LinalgBackend:
    """
    Resolve a backend choice to an instance.

    Raises:
        ValidationError: If the choice is unknown
        RuntimeError: If 'gpu' requested but unavailable
    """
    if not isinstance(choice, str):
        if isinstance(choice, LinalgBackend):
            return choice
        raise ValidationError(
            f"backend: {type(choice).__name__} does not implement LinalgBackend"
        )

    if choice == 'cpu':
        return CPULinalgBackend()

    if choice == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from pymarkov.stationary.backends.gpu import GPULinalgBackend
            return GPULinalgBackend(device=device)
        return CPULinalgBackend()

    if choice == 'gpu':
        device = select_device('gpu')
        from pymarkov.stationary.backends.gpu import GPULinalgBackend
        return GPULinalgBackend(device=device)

    raise ValidationError(f"Unknown backend: {choice!r}")


def _solve(
    P: ArrayLike | MarkovDesign,
    method: str,
    states: Sequence[Any] | None,
    backend: BackendChoice,
    tol: SolverTolerances,
) -> StationarySolution:
    """
    Shared body of the public solvers.

    Must be called directly from a public function: warnings raised while
    validating or solving are attributed two frames above this one.
    """
    if method not in _METHODS:
        raise ValidationError(
            f"method: expected one of {sorted(_METHODS)}, got {method!r}"
        )
    design = _ensure_design(P, states, tol, stacklevel=5)
    backend_impl = _get_backend(backend)
    log.debug("solving n=%d with method=%s on %s", design.n, method, backend_impl.name)
    result = _METHODS[method](design, backend_impl, tol)
    return StationarySolution(_result=result, _design=design)


def solve(
    P: ArrayLike | MarkovDesign,
    *,
    method: Method = 'system',
    states: Sequence[Any] | None = None,
    backend: BackendChoice = 'cpu',
    tol: SolverTolerances = DEFAULT_TOLERANCES,
) -> StationarySolution:
    """
    Compute the stationary distribution of a Markov chain.

    Args:
        P: Row-stochastic transition matrix (n x n) or a MarkovDesign
        method: 'system', 'eigen' or 'null_space'
        states: Optional state labels (only with an array P)
        backend: 'cpu' (default), 'gpu', 'auto', or a LinalgBackend instance
        tol: Solver tolerances

    Returns:
        StationarySolution whose distribution sums to 1

    Raises:
        ValidationError: If inputs are invalid or the method is unknown
        DimensionError: If P is not square
        NumericalError: If a numeric primitive fails
        UnsupportedChainError: If the chain has no unique stationary distribution
    """
    return _solve(P, method, states, backend, tol)


def solve_by_system(
    P: ArrayLike | MarkovDesign,
    *,
    states: Sequence[Any] | None = None,
    backend: BackendChoice = 'cpu',
    tol: SolverTolerances = DEFAULT_TOLERANCES,
) -> StationarySolution:
    """
    Stationary distribution from the linear system [(P - I)'; 1'] mu' = [0; 1].

    The (n + 1) x n system is solved by least squares. If the solution
    does not sum to 1 within tol.sum_atol it is re-normalized and a
    PrecisionWarning is issued.

    Raises:
        SingularSystemError: If the least-squares solve fails or is non-finite

    Example:
        >>> P = [[0.4, 0.4, 0.2], [0.0, 0.5, 0.5], [0.1, 0.3, 0.6]]
        >>> solve_by_system(P).distribution
        array([0.0877193 , 0.38596491, 0.52631579])
    """
    return _solve(P, 'system', states, backend, tol)


def solve_by_eigen(
    P: ArrayLike | MarkovDesign,
    *,
    states: Sequence[Any] | None = None,
    backend: BackendChoice = 'cpu',
    tol: SolverTolerances = DEFAULT_TOLERANCES,
) -> StationarySolution:
    """
    Stationary distribution as the eigenvector of P' for eigenvalue 1.

    The eigenvalue with real part closest to 1 is selected. Imaginary parts
    of its eigenvector are dropped (PrecisionWarning above tol.imag_atol)
    and the vector is scaled to sum to 1.

    Raises:
        DegenerateEigenvectorError: If the eigenvector sums to ~0
    """
    return _solve(P, 'eigen', states, backend, tol)


def solve_by_null_space(
    P: ArrayLike | MarkovDesign,
    *,
    states: Sequence[Any] | None = None,
    backend: BackendChoice = 'cpu',
    tol: SolverTolerances = DEFAULT_TOLERANCES,
) -> StationarySolution:
    """
    Stationary distribution from the null space of (P - I)'.

    Raises:
        NullSpaceDimensionError: If the null space is not one-dimensional,
            e.g. for a reducible (block-diagonal) P
    """
    return _solve(P, 'null_space', states, backend, tol)


def cross_validate(
    P: ArrayLike | MarkovDesign,
    *,
    methods: Sequence[Method] = ('system', 'eigen', 'null_space'),
    atol: float = 1e-4,
    states: Sequence[Any] | None = None,
    backend: BackendChoice = 'cpu',
    tol: SolverTolerances = DEFAULT_TOLERANCES,
) -> CrossValidation:
    """
    Solve with several methods and measure how far apart they are.

    Errors from any method propagate; a chain one method cannot handle is
    not silently dropped from the comparison.

    Args:
        methods: Methods to run (at least one)
        atol: Agreement threshold for CrossValidation.agree

    Returns:
        CrossValidation with per-method solutions and the largest
        element-wise discrepancy between any two of them
    """
    if not methods:
        raise ValidationError("methods: at least one method is required")
    design = _ensure_design(P, states, tol, stacklevel=4)
    backend_impl = _get_backend(backend)

    solutions = {
        m: _solve(design, m, None, backend_impl, tol) for m in methods
    }
    discrepancy = 0.0
    for a, b in combinations(solutions.values(), 2):
        discrepancy = max(
            discrepancy, float(np.max(np.abs(a.distribution - b.distribution)))
        )
    if discrepancy > atol:
        log.debug("methods disagree: max discrepancy %.3e > %.3e", discrepancy, atol)

    return CrossValidation(solutions=solutions, max_discrepancy=discrepancy, atol=atol)


def matrix_power(
    P: ArrayLike | MarkovDesign,
    k: int,
    *,
    backend: LinalgBackend | None = None,
) -> NDArray[np.floating[Any]]:
    """
    P raised to the k-th power.

    For an irreducible aperiodic chain every row of P^k approaches the
    stationary distribution as k grows.

    Raises:
        DimensionError: If P is not square
        ValidationError: If k < 0
    """
    matrix = P.P if isinstance(P, MarkovDesign) else P
    return _matrix_power(matrix, k, backend=backend)
