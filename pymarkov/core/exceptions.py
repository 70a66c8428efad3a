"""
Exception and warning hierarchy for pymarkov.

All exceptions inherit from PyMarkovError so callers can catch any
library-specific error in one place. The hierarchy separates three kinds
of failure:

    ValidationError        the input itself is malformed
    NumericalError         the underlying numeric primitive failed
    UnsupportedChainError  the input is well-formed but the chain is outside
                           the supported domain (reducible or periodic)

Non-fatal problems are warnings (PyMarkovWarning subclasses). They are
emitted through the warnings module and also recorded on the Result, so a
best-effort answer is always returned alongside them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMarkovError(Exception):
    """Base exception for all pymarkov errors."""
    pass


class ValidationError(PyMarkovError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric,
    non-finite, negative probabilities, invalid exponents).
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a transition matrix is not square, or when two operands of
    a matrix operation have incompatible shapes.
    """
    pass


class NumericalError(PyMarkovError):
    """
    Numerical computation failed.

    Base class for errors arising inside a numeric primitive (least squares,
    eigen-decomposition, SVD) rather than from the chain itself.
    """
    pass


class SingularSystemError(NumericalError):
    """
    Least-squares solve of the stationary system failed.

    Raised when the backend cannot solve the augmented system or returns
    non-finite values.

    Attributes:
        rank: Numerical rank of the augmented system, if known
        expected_rank: Rank required for a unique solution (n)
    """

    def __init__(
        self,
        message: str,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateEigenvectorError(NumericalError):
    """
    Selected vector sums to (near) zero, so it cannot be normalized.

    Attributes:
        vector_sum: Sum of the vector's components
        method: Solver that produced the vector ('eigen' or 'null_space')
    """

    def __init__(
        self,
        message: str,
        vector_sum: float | None = None,
        method: str | None = None,
    ):
        super().__init__(message)
        self.vector_sum = vector_sum
        self.method = method


class UnsupportedChainError(PyMarkovError):
    """The chain is valid input but outside the irreducible/aperiodic domain."""
    pass


class NullSpaceDimensionError(UnsupportedChainError):
    """
    Null space of (P - I)' is not one-dimensional.

    A dimension greater than one means the chain has several closed
    classes (reducible) and no unique stationary distribution.

    Attributes:
        dimension: Computed null-space dimension
    """

    def __init__(self, message: str, dimension: int):
        super().__init__(message)
        self.dimension = dimension


class PyMarkovWarning(UserWarning):
    """Base class for all pymarkov warnings."""
    pass


class NotStochasticWarning(PyMarkovWarning):
    """A row of the transition matrix does not sum to 1 within tolerance."""
    pass


class PrecisionWarning(PyMarkovWarning):
    """
    Result needed a numerical correction larger than tolerance.

    Emitted when discarded imaginary parts are not negligible or when the
    solution had to be re-normalized to sum to one.
    """
    pass
