"""
Tests for solve_by_system (least squares on the augmented system).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pymarkov.stationary import MarkovDesign, StationarySolution, solve_by_system


class TestSolveBySystem:

    def test_example_chain(self, example_chain):
        P, mu = example_chain
        result = solve_by_system(P)
        assert isinstance(result, StationarySolution)
        assert_allclose(result.distribution, mu, atol=1e-10)
        assert_allclose(result.distribution, [0.0877, 0.3860, 0.5263], atol=1e-4)

    def test_two_state(self, two_state_chain):
        P, mu = two_state_chain
        assert_allclose(solve_by_system(P).distribution, mu, atol=1e-12)

    def test_single_state(self):
        result = solve_by_system([[1.0]])
        assert_allclose(result.distribution, [1.0])

    def test_info_and_timing(self, example_chain):
        P, _ = example_chain
        result = solve_by_system(P)
        assert result.method == 'system'
        assert result.info['rank'] == 3
        assert result.info['expected_rank'] == 3
        assert result.residual < 1e-12
        assert result.backend_name == 'cpu_lapack'
        assert {'total_seconds', 'build_system', 'lstsq', 'normalize'} <= set(result.timing)
        assert result.warnings == ()

    def test_random_chain(self, random_chain):
        mu = solve_by_system(random_chain).distribution
        assert_allclose(mu @ random_chain, mu, atol=1e-10)
        assert mu.sum() == pytest.approx(1.0, abs=1e-10)
        assert np.all(mu > 0)

    def test_accepts_design(self, example_chain):
        P, mu = example_chain
        design = MarkovDesign.from_array(P, states=["a", "b", "c"])
        result = solve_by_system(design)
        assert result.states == ("a", "b", "c")
        assert result["c"] == pytest.approx(mu[2])

    def test_does_not_modify_input(self, example_chain):
        P, _ = example_chain
        before = P.copy()
        solve_by_system(P)
        np.testing.assert_array_equal(P, before)

    def test_fresh_output(self, example_chain):
        P, _ = example_chain
        a = solve_by_system(P).distribution
        b = solve_by_system(P).distribution
        assert a is not b
        a[0] = -1.0
        assert b[0] > 0
