"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, copy semantics, rejection of non-numeric data
    - check_finite: NaN/Inf detection
    - check_2d / check_square: shape checks
    - check_nonnegative: negative probabilities
    - check_row_sums: stochastic row check (returns messages, never raises)
    - check_labels: label count and uniqueness
"""

import numpy as np
import pytest

from pymarkov.core.exceptions import DimensionError, ValidationError
from pymarkov.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_labels,
    check_nonnegative,
    check_row_sums,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_nested_list_to_float64(self):
        result = check_array([[1, 0], [0, 1]], "P")
        assert result.dtype == np.float64
        assert result.shape == (2, 2)

    def test_returns_copy(self):
        original = np.array([[0.5, 0.5], [0.5, 0.5]])
        result = check_array(original, "P")
        result[0, 0] = 99.0
        assert original[0, 0] == 0.5

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "P")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "P")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([1 + 1j]), "P")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 0.0], [1.0]], "P")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapes:

    def test_check_2d_rejects_vector(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.ones(3), "P")

    def test_check_square_accepts_square(self):
        check_square(np.eye(3), "P")

    def test_check_square_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="square"):
            check_square(np.ones((2, 3)), "P")

    def test_check_square_rejects_empty(self):
        with pytest.raises(DimensionError, match="at least one state"):
            check_square(np.ones((0, 0)), "P")


# ═══════════════════════════════════════════════════════════════════════
# Value checks
# ═══════════════════════════════════════════════════════════════════════


class TestValues:

    def test_finite_passes(self):
        check_finite(np.eye(2), "P")

    def test_finite_reports_counts(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 0.0]), "P")

    def test_nonnegative_rejects_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_nonnegative(np.array([[1.1, -0.1], [0.0, 1.0]]), "P")

    def test_nonnegative_atol(self):
        check_nonnegative(np.array([[1.0 + 1e-12, -1e-12]]), "P", atol=1e-9)

    def test_row_sums_clean(self):
        assert check_row_sums(np.array([[0.3, 0.7], [1.0, 0.0]]), "P", atol=1e-6) == []

    def test_row_sums_reports_each_bad_row(self):
        messages = check_row_sums(np.array([[0.3, 0.6], [1.0, 0.0], [0.5, 0.6]]), "P", atol=1e-6)
        assert len(messages) == 2
        assert "row 0" in messages[0]
        assert "row 2" in messages[1]

    def test_row_sums_within_tolerance(self):
        assert check_row_sums(np.array([[0.5, 0.5 + 1e-9]]), "P", atol=1e-6) == []


# ═══════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════


class TestLabels:

    def test_labels_converted_to_str(self):
        assert check_labels([1, 2], 2, "states") == ("1", "2")

    def test_wrong_count(self):
        with pytest.raises(DimensionError, match="expected 3 labels"):
            check_labels(["a", "b"], 3, "states")

    def test_duplicates(self):
        with pytest.raises(ValidationError, match="unique"):
            check_labels(["a", "a"], 2, "states")
