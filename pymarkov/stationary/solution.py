"""
Stationary distribution solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymarkov.core.result import Result

if TYPE_CHECKING:
    from pymarkov.stationary.design import MarkovDesign


@dataclass(frozen=True)
class StationaryParams:
    """
    Parameter payload for a stationary distribution.

    Attributes:
        distribution: mu, length n, sums to 1
        residual: max |mu P - mu|
        method: 'system', 'eigen' or 'null_space'
    """
    distribution: NDArray[np.floating[Any]]
    residual: float
    method: str


@dataclass
class StationarySolution:
    """
    User-facing stationary distribution.

    Wraps the solver Result and the design it was computed from, adding
    label-aware accessors and a printable summary.
    """
    _result: Result[StationaryParams]
    _design: MarkovDesign

    @property
    def distribution(self) -> NDArray[np.floating[Any]]:
        """Stationary probabilities in the same order as the rows of P."""
        return self._result.params.distribution

    @property
    def states(self) -> tuple[str, ...]:
        return self._design.states

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def residual(self) -> float:
        return self._result.params.residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def as_dict(self) -> dict[str, float]:
        """Map each state label to its long-run probability."""
        return {s: float(p) for s, p in zip(self.states, self.distribution)}

    def __getitem__(self, state: str) -> float:
        return float(self.distribution[self._design.state_index(state)])

    def summary(self) -> str:
        """Generate a human-readable table of the distribution."""
        width = max(8, max(len(s) for s in self.states))
        lines = [
            "Stationary Distribution",
            "=" * 60,
            f"States: {self._design.n}",
            f"Method: {self.method}",
            f"Residual max|muP - mu|: {self.residual:.3e}",
            "",
            f"{'State':<{width}} {'Probability':>14}",
            "-" * 60,
        ]
        for state, prob in zip(self.states, self.distribution):
            lines.append(f"{state:<{width}} {prob:14.6f}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  - {w}" for w in self.warnings)

        return "\n".join(lines)

    def __repr__(self) -> str:
        probs = np.array2string(self.distribution, precision=4, separator=', ')
        return (
            f"StationarySolution(method={self.method!r}, n={self._design.n}, "
            f"distribution={probs})"
        )


@dataclass(frozen=True)
class CrossValidation:
    """
    Results of several methods on the same chain.

    Attributes:
        solutions: method name -> StationarySolution
        max_discrepancy: largest element-wise difference between any two methods
        atol: agreement threshold used
    """
    solutions: dict[str, StationarySolution]
    max_discrepancy: float
    atol: float

    @property
    def agree(self) -> bool:
        """True if every pair of methods agrees within atol."""
        return self.max_discrepancy <= self.atol

    @property
    def distribution(self) -> NDArray[np.floating[Any]]:
        """Element-wise mean of all methods' distributions."""
        stacked = np.vstack([s.distribution for s in self.solutions.values()])
        return stacked.mean(axis=0)

    def __repr__(self) -> str:
        return (
            f"CrossValidation(methods={list(self.solutions)!r}, "
            f"max_discrepancy={self.max_discrepancy:.3e}, agree={self.agree})"
        )
