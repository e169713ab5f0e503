"""
Distance scoring between outside states.

The score of a state is the number of character positions where it differs
from the solved state: 0 means solved, 6 means nothing is in place.

Scores over the whole state universe are small enough to precompute once,
the same way seam costs are tabulated before a search.
"""

import numpy as np
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List

from core.shapes import STATE_LENGTH
from core.state_graph import all_states, validate_state


def _as_array(state: str) -> np.ndarray:
    """Encode a state as a uint8 array of its characters."""
    if len(state) != STATE_LENGTH:
        raise ValueError(f"State must have {STATE_LENGTH} characters, got {state!r}")
    return np.frombuffer(state.encode("ascii"), dtype=np.uint8)


def score(solved: str, state: str) -> int:
    """
    Compute a score [0, 6] of how solved a given outside state is.

    Args:
        solved: six-character string of the solved state, e.g. "stctcs"
        state: six-character string of the current state

    Returns:
        Number of positions that differ (lower = more solved)
    """
    return int(np.count_nonzero(_as_array(solved) != _as_array(state)))


def is_good_transition(solved: str, prev: str, curr: str) -> bool:
    """True if moving from `prev` to `curr` gets strictly closer to `solved`."""
    return score(solved, prev) > score(solved, curr)


@dataclass(frozen=True)
class ScoreTable:
    """
    Pairwise scores over every legal outside state.

    Attributes:
        states: State strings, in graph order
        index: State string -> row/column in `matrix`
        matrix: matrix[i, j] = score(states[i], states[j])
    """
    states: List[str]
    index: Dict[str, int]
    matrix: np.ndarray

    def lookup(self, solved: str, state: str) -> int:
        """Score of `state` against `solved`."""
        validate_state(solved)
        validate_state(state)
        return int(self.matrix[self.index[solved], self.index[state]])


def build_score_table() -> ScoreTable:
    """Precompute all pairwise state scores."""
    states = all_states()
    encoded = np.stack([_as_array(s) for s in states])  # (N, 6)

    # Broadcast (N, 1, 6) against (1, N, 6) and count mismatches
    matrix = np.count_nonzero(encoded[:, None, :] != encoded[None, :, :], axis=2)
    matrix.setflags(write=False)

    index = {state: i for i, state in enumerate(states)}
    return ScoreTable(states=states, index=index, matrix=matrix)


@lru_cache(maxsize=1)
def get_score_table() -> ScoreTable:
    """Shared score table, built on first use."""
    return build_score_table()
