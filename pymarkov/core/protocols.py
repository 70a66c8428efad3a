"""
Core protocols for pymarkov.

The stationary solvers never call NumPy, SciPy or PyTorch linear algebra
directly. They depend on the narrow LinalgBackend protocol below, so the
same algorithm runs on the CPU reference backend, the GPU backend, or a
mock backend in tests.

We use Protocol (structural typing) rather than ABC (nominal typing): any
object with the right methods is a backend, no registration needed.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class LinalgBackend(Protocol):
    """
    Dense linear algebra primitives consumed by the stationary solvers.

    All methods take and return NumPy arrays. Backends that compute
    elsewhere (GPU) convert on the way in and out. Backends must be
    stateless with respect to calls: two threads may share one instance.

    Failures inside a primitive should surface as numpy.linalg.LinAlgError
    (or a subclass); the solvers translate them into NumericalError.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{library}', e.g. 'cpu_lapack', 'gpu_torch'.
        """
        ...

    def matmul(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        """Matrix product a @ b. Shapes are checked by the caller."""
        ...

    def lstsq(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], int]:
        """
        Least-squares solution of a @ x = b.

        Must tolerate overdetermined and rank-deficient systems.

        Returns:
            (x, rank): solution vector and numerical rank of a
        """
        ...

    def eig(
        self, a: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.complexfloating[Any, Any]], NDArray[np.complexfloating[Any, Any]]]:
        """
        Eigen-decomposition of a square matrix.

        Returns:
            (w, V): eigenvalues (n,) and right eigenvectors as columns (n, n)
        """
        ...

    def null_space(
        self,
        a: NDArray[np.floating[Any]],
        atol: float = 0.0,
        rcond: float | None = None,
    ) -> NDArray[np.floating[Any]]:
        """
        Orthonormal basis of the null space of a.

        Singular values at or below max(atol, rcond * s_max) count as zero.

        Args:
            a: Matrix (m, n)
            atol: Absolute singular value cutoff
            rcond: Relative singular value cutoff; None uses the backend default

        Returns:
            Basis as columns, shape (n, k) with k the null-space dimension
        """
        ...
