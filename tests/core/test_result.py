"""
Tests for the Result[P] envelope.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymarkov.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=0.5),
            info={"method": "eigen"},
            timing={"total_seconds": 0.01, "eig": 0.008},
            backend_name="cpu_lapack",
        )
        assert result.params.value == 0.5
        assert result.info["method"] == "eigen"
        assert result.timing["eig"] == 0.008
        assert result.backend_name == "cpu_lapack"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("P: row 2 sums to 0.9", "re-normalized"),
        )
        assert result.has_warning("row 2")
        assert result.has_warning("re-normalized")
        assert not result.has_warning("imaginary")
