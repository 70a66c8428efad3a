"""
Tests for solve_by_eigen and eigenvalue selection.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pymarkov.stationary import solve_by_eigen
from pymarkov.stationary._eigen import select_unit_eigenvalue


class TestSelectUnitEigenvalue:

    def test_closest_real_part(self):
        assert select_unit_eigenvalue(np.array([0.3, 0.999, -1.0, 0.5])) == 1

    def test_tie_broken_by_imaginary_part(self):
        w = np.array([1.0 + 0.2j, 1.0 + 0.0j, 1.0 - 0.1j])
        assert select_unit_eigenvalue(w) == 1

    def test_tie_broken_by_position(self):
        w = np.array([0.2, 1.0, 1.0])
        assert select_unit_eigenvalue(w) == 1

    def test_complex_conjugate_pair_ignored(self):
        w = np.array([0.25 + 0.26j, 0.25 - 0.26j, 1.0 + 0j])
        assert select_unit_eigenvalue(w) == 2


class TestSolveByEigen:

    def test_example_chain(self, example_chain):
        P, mu = example_chain
        result = solve_by_eigen(P)
        assert_allclose(result.distribution, mu, atol=1e-10)
        assert result.info['eigenvalue'].real == pytest.approx(1.0)
        assert result.warnings == ()

    def test_distribution_is_real(self, example_chain):
        P, _ = example_chain
        result = solve_by_eigen(P)
        assert result.distribution.dtype == np.float64

    def test_single_state(self):
        assert_allclose(solve_by_eigen([[1.0]]).distribution, [1.0])

    def test_periodic_two_cycle(self):
        """Eigenvalues 1 and -1; the unit eigenvalue is still picked."""
        result = solve_by_eigen([[0.0, 1.0], [1.0, 0.0]])
        assert_allclose(result.distribution, [0.5, 0.5], atol=1e-12)

    def test_random_chain(self, random_chain):
        result = solve_by_eigen(random_chain)
        mu = result.distribution
        assert mu.sum() == pytest.approx(1.0, abs=1e-12)
        assert np.all(mu >= -1e-9)
        assert result.residual < 1e-10

    def test_timing_sections(self, example_chain):
        P, _ = example_chain
        assert {'eig', 'select', 'normalize'} <= set(solve_by_eigen(P).timing)
