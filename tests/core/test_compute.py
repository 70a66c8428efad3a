"""
Tests for timing, tolerances and device selection.
"""

import time

import pytest

from pymarkov.core.compute import (
    DEFAULT_TOLERANCES,
    SolverTolerances,
    Timer,
    get_cpu_info,
    select_device,
    select_tolerance,
)


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            time.sleep(0.001)
        with timer.section('a'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert result['a'] >= 0.002
        assert result['total_seconds'] >= result['a']

    def test_sync_hook_called(self):
        calls = []
        timer = Timer(sync=lambda: calls.append(1))
        timer.start()
        with timer.section('x'):
            pass
        timer.stop()
        assert len(calls) == 4

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()


class TestTolerances:

    def test_defaults(self):
        assert DEFAULT_TOLERANCES.sum_atol == 1e-6
        assert DEFAULT_TOLERANCES.imag_atol == 1e-6
        assert DEFAULT_TOLERANCES.stochastic_atol == 1e-6
        assert DEFAULT_TOLERANCES.null_space_rcond is None
        assert DEFAULT_TOLERANCES.null_space_atol is None

    def test_override(self):
        tol = SolverTolerances(sum_atol=1e-3)
        assert tol.sum_atol == 1e-3
        assert tol.imag_atol == DEFAULT_TOLERANCES.imag_atol

    def test_select_tolerance(self):
        assert select_tolerance('cpu_lapack').name == 'cpu_fp64'
        assert select_tolerance('gpu_torch').name == 'gpu_fp64'
        assert select_tolerance('gpu_torch', fp32=True).name == 'gpu_fp32'


class TestDevice:

    def test_cpu_info(self):
        info = get_cpu_info()
        assert info.device_type == 'cpu'
        assert not info.is_gpu
        assert info.supports_fp64

    def test_select_cpu(self):
        assert select_device('cpu').device_type == 'cpu'

    def test_auto_returns_a_device(self):
        assert select_device('auto').device_type in ('cpu', 'cuda', 'mps')
