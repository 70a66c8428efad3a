"""
pymarkov: stationary distributions of finite Markov chains.

Submodules:
    stationary: linear-system, eigenvector and null-space solvers
    core: exceptions, validation, result envelope, backend protocol
"""

__version__ = "0.1.0"

from pymarkov import stationary
from pymarkov.stationary import (
    MarkovDesign,
    StationarySolution,
    solve,
    solve_by_system,
    solve_by_eigen,
    solve_by_null_space,
    cross_validate,
    matrix_power,
)

__all__ = [
    "__version__",
    "stationary",
    "MarkovDesign",
    "StationarySolution",
    "solve",
    "solve_by_system",
    "solve_by_eigen",
    "solve_by_null_space",
    "cross_validate",
    "matrix_power",
]
