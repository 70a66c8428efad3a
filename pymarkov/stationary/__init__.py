"""
Stationary distributions of finite discrete-time Markov chains.

Three independent methods compute mu with mu P = mu and sum(mu) = 1 for an
irreducible aperiodic chain, so results can be cross-checked.

Public API:
    solve_by_system(P)      least squares on [(P - I)'; 1'] mu' = [0; 1]
    solve_by_eigen(P)       eigenvector of P' for eigenvalue 1
    solve_by_null_space(P)  basis of null((P - I)')
    solve(P, method=...)    dispatch by method name
    cross_validate(P)       run several methods and compare
    matrix_power(P, k)      P^k

Example:
    >>> from pymarkov.stationary import solve_by_eigen
    >>> P = [[0.9, 0.1], [0.5, 0.5]]
    >>> solve_by_eigen(P, states=['up', 'down']).as_dict()
    {'up': 0.8333333333333334, 'down': 0.16666666666666666}
"""

from pymarkov.stationary.design import MarkovDesign
from pymarkov.stationary.solution import (
    CrossValidation,
    StationaryParams,
    StationarySolution,
)
from pymarkov.stationary.solvers import (
    solve,
    solve_by_system,
    solve_by_eigen,
    solve_by_null_space,
    cross_validate,
    matrix_power,
)

__all__ = [
    "solve",
    "solve_by_system",
    "solve_by_eigen",
    "solve_by_null_space",
    "cross_validate",
    "matrix_power",
    "MarkovDesign",
    "StationaryParams",
    "StationarySolution",
    "CrossValidation",
]
