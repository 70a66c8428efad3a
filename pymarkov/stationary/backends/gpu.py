"""
GPU backend for the stationary solvers using PyTorch.

Implements the LinalgBackend protocol on CUDA (float64) or Apple MPS
(float32, since MPS has no double precision). Arrays are moved to the
device on entry and returned as NumPy arrays.

torch.linalg.eig has no MPS kernel, so on MPS the eigen-decomposition
runs on the CPU copy of the tensor.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymarkov.core.compute.device import DeviceInfo, select_device


class GPULinalgBackend:
    """
    PyTorch backend.

    lstsq is computed with the pseudo-inverse rather than torch.linalg.lstsq,
    whose CUDA driver ('gels') requires a full-rank matrix.
    """

    def __init__(self, device: DeviceInfo | None = None):
        import torch

        self._device_info = device if device is not None else select_device('gpu')
        if self._device_info.device_type == 'cuda':
            self._device = torch.device('cuda', self._device_info.device_index)
        else:
            self._device = torch.device(self._device_info.device_type)
        self._dtype = torch.float64 if self._device_info.supports_fp64 else torch.float32

    @property
    def name(self) -> str:
        return 'gpu_torch'

    @property
    def device(self) -> DeviceInfo:
        return self._device_info

    @property
    def is_fp32(self) -> bool:
        return not self._device_info.supports_fp64

    def synchronize(self) -> None:
        """Block until queued device work finishes (used for timing)."""
        import torch

        if self._device.type == 'cuda':
            torch.cuda.synchronize(self._device)
        elif self._device.type == 'mps':
            torch.mps.synchronize()

    def _to_device(self, a: NDArray[np.floating[Any]]):
        import torch

        return torch.as_tensor(np.asarray(a), dtype=self._dtype, device=self._device)

    def matmul(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        out = self._to_device(a) @ self._to_device(b)
        return out.cpu().numpy().astype(np.float64)

    def lstsq(
        self, a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], int]:
        import torch

        A = self._to_device(a)
        B = self._to_device(b)
        x = torch.linalg.pinv(A) @ B
        rank = int(torch.linalg.matrix_rank(A).item())
        return x.cpu().numpy().astype(np.float64), rank

    def eig(self, a: NDArray[np.floating[Any]]):
        import torch

        A = self._to_device(a)
        if A.device.type == 'mps':
            A = A.cpu()
        w, v = torch.linalg.eig(A)
        return w.cpu().numpy().astype(np.complex128), v.cpu().numpy().astype(np.complex128)

    def null_space(
        self,
        a: NDArray[np.floating[Any]],
        atol: float = 0.0,
        rcond: float | None = None,
    ) -> NDArray[np.floating[Any]]:
        import torch

        A = self._to_device(a)
        m, n = A.shape
        _, s, vh = torch.linalg.svd(A, full_matrices=True)
        if rcond is None:
            rcond = torch.finfo(self._dtype).eps * max(m, n)
        cutoff = max(atol, float(s.max().item()) * rcond if s.numel() else 0.0)
        rank = int((s > cutoff).sum().item())
        basis = vh[rank:, :].T.conj()
        return basis.cpu().numpy().astype(np.float64)
