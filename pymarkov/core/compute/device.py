"""
Hardware detection and device selection.

Used by backend dispatch to decide whether the PyTorch backend can run.
torch is imported lazily; without it only the CPU is reported.
"""

from dataclasses import dataclass
from typing import Literal
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about a compute device.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: Device index (None for CPU)
        name: Human-readable device name
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        return f"{self.device_type.upper()}:{self.device_index} ({self.name})"

    @property
    def is_gpu(self) -> bool:
        return self.device_type in ('cuda', 'mps')

    @property
    def supports_fp64(self) -> bool:
        """MPS has no double precision."""
        return self.device_type != 'mps'


def detect_gpu() -> DeviceInfo | None:
    """
    Detect an available GPU, preferring CUDA over MPS.

    Returns:
        DeviceInfo for the GPU, or None if torch is missing or no GPU exists
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=torch.cuda.get_device_name(idx),
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', device_index=0, name='Apple Silicon GPU')

    return None


def get_cpu_info() -> DeviceInfo:
    processor = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(device_type='cpu', device_index=None, name=processor)


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Select compute device based on preference and availability.

    Args:
        prefer: 'cpu' always CPU; 'gpu' requires a GPU; 'auto' uses one if present

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu':
        if gpu is None:
            raise RuntimeError(
                "GPU requested but no GPU available. "
                "Install PyTorch with CUDA/MPS support (pip install pymarkov[gpu])."
            )
        return gpu

    return gpu if gpu is not None else get_cpu_info()
