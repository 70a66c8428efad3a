"""
Linear algebra backends for the stationary solvers.

Available backends:
    CPULinalgBackend: CPU reference implementation (NumPy/SciPy LAPACK)
    GPULinalgBackend: PyTorch implementation (imported lazily from .gpu)
"""

from pymarkov.stationary.backends.cpu import CPULinalgBackend

__all__ = [
    "CPULinalgBackend",
]
