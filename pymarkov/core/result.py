"""
Generic result container for pymarkov computations.

Every solver returns its payload wrapped in a Result so that timing,
diagnostics and non-fatal warnings travel together with the answer.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, residual, diagnostics)
    - timing is optional (mock backends in tests need not be timed)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (e.g. StationaryParams)
        info: Structured metadata (method, residual, eigenvalue, rank, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the linear algebra backend used
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=StationaryParams(distribution=mu, residual=1e-16),
        ...     info={'method': 'eigen', 'eigenvalue': 1.0},
        ...     timing={'total_seconds': 0.001, 'eig': 0.0008},
        ...     backend_name='cpu_lapack',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
