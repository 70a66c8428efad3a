"""
Numerical tolerances.

Two kinds of tolerance live here:

    SolverTolerances  thresholds the solvers act on (warn, raise, cut off)
    ToleranceTier     expected agreement between compute paths, used when
                      validating results (CPU FP64 vs GPU FP32)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverTolerances:
    """
    Thresholds applied while solving for a stationary distribution.

    Attributes:
        stochastic_atol: Allowed |row sum - 1| before NotStochasticWarning
        sum_atol: Allowed |sum(mu) - 1| before PrecisionWarning and re-normalizing
        imag_atol: Largest discarded imaginary part before PrecisionWarning
        degenerate_atol: |sum(v)| at or below which a vector cannot be normalized
        nonnegative_atol: How negative an input probability may be
        null_space_atol: Absolute singular value cutoff for the null space.
            None derives it from P as sqrt(n) * max(stochastic_atol,
            largest |row sum - 1|), an upper bound on the smallest singular
            value of (P - I)'
        null_space_rcond: Relative singular value cutoff for the null space
            (None uses the backend default, eps * max(m, n))
    """
    stochastic_atol: float = 1e-6
    sum_atol: float = 1e-6
    imag_atol: float = 1e-6
    degenerate_atol: float = 1e-12
    nonnegative_atol: float = 0.0
    null_space_atol: float | None = None
    null_space_rcond: float | None = None


DEFAULT_TOLERANCES = SolverTolerances()


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for comparing results across compute paths."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: LAPACK in double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

# GPU with FP64 (CUDA)
GPU_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

# GPU with FP32 (Apple MPS)
GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision',
)


def select_tolerance(backend_name: str, fp32: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a given backend."""
    if 'gpu' in backend_name:
        return GPU_FP32 if fp32 else GPU_FP64
    return CPU_FP64
