"""
GPU tests for the PyTorch linear algebra backend.

Validates GPULinalgBackend against the CPU reference. CUDA runs in FP64;
MPS runs in FP32, so tolerances come from select_tolerance().

Skipped automatically when no GPU is available.
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from pymarkov import cross_validate, solve
from pymarkov.core.compute.tolerances import select_tolerance
from pymarkov.core.exceptions import NullSpaceDimensionError


def _gpu_available():
    try:
        import torch
        return (torch.cuda.is_available() or
                (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()))
    except ImportError:
        return False


pytestmark = pytest.mark.skipif(
    not _gpu_available(), reason="No GPU available"
)


@pytest.fixture
def gpu_backend():
    from pymarkov.stationary.backends.gpu import GPULinalgBackend
    return GPULinalgBackend()


@pytest.fixture
def tier(gpu_backend):
    return select_tolerance(gpu_backend.name, fp32=gpu_backend.is_fp32)


@pytest.mark.parametrize("method", ['system', 'eigen', 'null_space'])
def test_example_chain_matches_cpu(example_chain, gpu_backend, tier, method):
    P, _ = example_chain
    cpu = solve(P, method=method, backend='cpu')
    gpu = solve(P, method=method, backend=gpu_backend)
    assert gpu.backend_name == 'gpu_torch'
    assert_allclose(gpu.distribution, cpu.distribution, rtol=tier.rtol * 100, atol=tier.atol * 100)


def test_gpu_choice_by_name(example_chain):
    P, mu = example_chain
    result = solve(P, backend='gpu')
    assert result.backend_name == 'gpu_torch'
    assert_allclose(result.distribution, mu, atol=1e-4)


def test_cross_validate_on_gpu(random_chain, gpu_backend):
    cv = cross_validate(random_chain, backend=gpu_backend)
    assert cv.max_discrepancy < 1e-4


def test_reducible_on_gpu(reducible_chain, gpu_backend):
    with pytest.raises(NullSpaceDimensionError):
        solve(reducible_chain, method='null_space', backend=gpu_backend)


def test_timing_synchronized(example_chain, gpu_backend):
    P, _ = example_chain
    result = solve(P, method='eigen', backend=gpu_backend)
    assert result.timing['total_seconds'] > 0
    assert np.all(np.isfinite(result.distribution))
