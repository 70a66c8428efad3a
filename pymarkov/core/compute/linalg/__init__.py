"""
Dense matrix operations shared by all solvers.

All functions follow these conventions:
    - Inputs are array-likes, converted to float64
    - Shapes are validated first; DimensionError on mismatch
    - Outputs are new arrays; inputs are never modified
"""

from pymarkov.core.compute.linalg.matrix import (
    identity,
    transpose,
    subtract,
    multiply,
    matrix_power,
    append_row,
)

__all__ = [
    "identity",
    "transpose",
    "subtract",
    "multiply",
    "matrix_power",
    "append_row",
]
