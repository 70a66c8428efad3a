"""
Core infrastructure for pymarkov.

Shared abstractions used by the domain-specific submodules.

Key components:
    protocols: LinalgBackend protocol (the injected numeric backend)
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Input validators
    compute: Matrix operations, timing, tolerances, device detection
"""

from pymarkov.core.protocols import LinalgBackend
from pymarkov.core.result import Result
from pymarkov.core.exceptions import (
    PyMarkovError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularSystemError,
    DegenerateEigenvectorError,
    UnsupportedChainError,
    NullSpaceDimensionError,
    PyMarkovWarning,
    NotStochasticWarning,
    PrecisionWarning,
)

__all__ = [
    # Protocols
    "LinalgBackend",
    # Result
    "Result",
    # Exceptions
    "PyMarkovError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularSystemError",
    "DegenerateEigenvectorError",
    "UnsupportedChainError",
    "NullSpaceDimensionError",
    # Warnings
    "PyMarkovWarning",
    "NotStochasticWarning",
    "PrecisionWarning",
]
