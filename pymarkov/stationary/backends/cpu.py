"""
CPU reference backend for the stationary solvers.

Linear algebra via LAPACK through NumPy/SciPy. Implements the
LinalgBackend protocol.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sp_linalg


class CPULinalgBackend:
    """
    CPU backend using LAPACK.

    lstsq uses the SVD-based driver (gelsd), so rank-deficient and
    overdetermined systems return the minimum-norm least-squares solution
    instead of failing.
    """

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def matmul(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        return a @ b

    def lstsq(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], int]:
        x, _, rank, _ = sp_linalg.lstsq(a, b, lapack_driver='gelsd')
        return x, int(rank)

    def eig(self, a: NDArray[np.floating[Any]]):
        w, v = sp_linalg.eig(a, left=False, right=True)
        return w, v

    def null_space(
        self,
        a: NDArray[np.floating[Any]],
        atol: float = 0.0,
        rcond: float | None = None,
    ) -> NDArray[np.floating[Any]]:
        # scipy.linalg.null_space only takes a relative cutoff
        _, s, vh = sp_linalg.svd(a, full_matrices=True)
        m, n = a.shape
        if rcond is None:
            rcond = np.finfo(s.dtype).eps * max(m, n)
        cutoff = max(atol, float(np.max(s, initial=0.0)) * rcond)
        rank = int(np.sum(s > cutoff))
        return vh[rank:, :].T.conj()
