"""
MarkovDesign: validated transition matrix for the stationary solvers.

The design owns a private, read-only copy of the transition matrix plus the
state labels. Validation happens once, here; solvers trust a design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymarkov.core.compute.tolerances import SolverTolerances, DEFAULT_TOLERANCES
from pymarkov.core.exceptions import NotStochasticWarning, ValidationError
from pymarkov.core.validation import (
    check_array,
    check_finite,
    check_square,
    check_nonnegative,
    check_row_sums,
    check_labels,
)


@dataclass(frozen=True)
class MarkovDesign:
    """
    Row-stochastic transition matrix of a discrete-time Markov chain.

    Immutable after construction. Entry (i, j) is the probability of moving
    from state i to state j in one step.

    Construction:
        MarkovDesign.from_array(P)
        MarkovDesign.from_array(P, states=['sunny', 'cloudy', 'rainy'])
        MarkovDesign.from_transitions({'A': {'B': 1.0}, 'B': {'A': .5, 'B': .5}})

    Rows that do not sum to 1 within tolerance emit NotStochasticWarning;
    the messages are kept in `warnings` so solvers can attach them to
    their results.
    """
    _P: NDArray[np.floating[Any]]
    _states: tuple[str, ...]
    _warnings: tuple[str, ...] = ()

    @classmethod
    def from_array(
        cls,
        P: ArrayLike,
        *,
        states: Sequence[Any] | None = None,
        tol: SolverTolerances = DEFAULT_TOLERANCES,
    ) -> MarkovDesign:
        """
        Build a design from an n x n array-like.

        Args:
            P: Transition matrix. Copied; the caller's array is untouched.
            states: Optional labels, one per row. Defaults to '0'..'n-1'.
            tol: Tolerances for the stochastic and non-negativity checks

        Raises:
            ValidationError: Non-numeric, non-finite or negative entries
            DimensionError: Not a non-empty square matrix, or wrong label count
        """
        return cls._validated(P, states, tol, stacklevel=3)

    @classmethod
    def _validated(
        cls,
        P: ArrayLike,
        states: Sequence[Any] | None,
        tol: SolverTolerances,
        *,
        stacklevel: int,
    ) -> MarkovDesign:
        # stacklevel counts from this frame to the user's call
        P_arr = check_array(P, 'P')
        check_square(P_arr, 'P')
        check_finite(P_arr, 'P')
        check_nonnegative(P_arr, 'P', atol=tol.nonnegative_atol)

        n = P_arr.shape[0]
        if states is None:
            labels = tuple(str(i) for i in range(n))
        else:
            labels = check_labels(states, n, 'states')

        messages = check_row_sums(P_arr, 'P', atol=tol.stochastic_atol)
        for msg in messages:
            warnings.warn(msg, NotStochasticWarning, stacklevel=stacklevel)

        P_arr.setflags(write=False)
        return cls(_P=P_arr, _states=labels, _warnings=tuple(messages))

    @classmethod
    def from_transitions(
        cls,
        transitions: Mapping[str, Mapping[str, float]],
        *,
        tol: SolverTolerances = DEFAULT_TOLERANCES,
    ) -> MarkovDesign:
        """
        Build a design from a nested dictionary of transitions, e.g.

            {
                "A": {"B": .5, "C": .5},
                "B": {"A": .8, "C": .2},
                "C": {"C": 1.},
            }

        States are sorted by name; missing transitions have probability 0.

        Raises:
            ValidationError: Empty dict, or a transition towards an unknown state
        """
        if not transitions:
            raise ValidationError("transitions: a Markov chain cannot be empty")
        states = sorted(transitions.keys())
        index = {s: i for i, s in enumerate(states)}
        P = np.zeros((len(states), len(states)), dtype=np.float64)
        for source, targets in transitions.items():
            for target, prob in targets.items():
                if target not in index:
                    raise ValidationError(
                        f"transitions: state {source!r} has an outgoing transition "
                        f"towards unknown state {target!r}"
                    )
                P[index[source], index[target]] = prob
        return cls._validated(P, states, tol, stacklevel=3)

    # === Properties ===

    @property
    def P(self) -> NDArray[np.floating[Any]]:
        """Transition matrix (n x n), read-only."""
        return self._P

    @property
    def n(self) -> int:
        """Number of states."""
        return self._P.shape[0]

    @property
    def states(self) -> tuple[str, ...]:
        """State labels in row order."""
        return self._states

    @property
    def warnings(self) -> tuple[str, ...]:
        """Validation warnings raised while building the design."""
        return self._warnings

    def state_index(self, state: str) -> int:
        """
        Row index of a state label.

        Raises:
            KeyError: If the label is not a state of this chain
        """
        try:
            return self._states.index(state)
        except ValueError:
            raise KeyError(state) from None

    def __repr__(self) -> str:
        return f"MarkovDesign(n={self.n}, states={list(self._states)!r})"
