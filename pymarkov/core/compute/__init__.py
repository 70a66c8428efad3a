"""
Shared compute infrastructure for pymarkov.

This is NOT where linear algebra backends live; those go in
{domain}/backends/. This module holds numeric infrastructure shared by all
domains.

Submodules:
    device: Hardware detection and device selection
    timing: Stage timer
    tolerances: Solver thresholds and cross-backend tolerance tiers
    linalg: Dense matrix operations
"""

from pymarkov.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pymarkov.core.compute.timing import Timer
from pymarkov.core.compute.tolerances import (
    SolverTolerances,
    DEFAULT_TOLERANCES,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
    # Tolerances
    "SolverTolerances",
    "DEFAULT_TOLERANCES",
    "ToleranceTier",
    "select_tolerance",
]
