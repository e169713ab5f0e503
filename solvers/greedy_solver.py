"""
Greedy Outside Solver

Walks the outside state graph from the called-out state towards the solved
state. At every step the neighbor with the lowest score is taken, as long as
it is strictly better than the current state. Ties keep the first neighbor
in graph order.

This is a heuristic, not a shortest-path search: no alternative branches are
explored once a move is taken.
"""

from dataclasses import dataclass
from typing import List, Optional

from core.state_graph import get_neighbors, validate_state
from .scoring import get_score_table, score
from .solved_state import get_solved_state


class SolverStuckError(RuntimeError):
    """Raised when no neighbor brings the panel closer to the solved state."""


@dataclass
class SolverConfig:
    """Greedy solver parameters."""
    # Upper bound on dissections; each accepted step lowers the score by >= 1
    max_steps: int = 6

    # Read scores from the precomputed table instead of comparing strings
    use_score_table: bool = True

    verbose: bool = False

    def __post_init__(self):
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")


DEFAULT_CONFIG = SolverConfig()


def _scorer(config: SolverConfig):
    if config.use_score_table:
        return get_score_table().lookup
    return score


def find_best_transition(solved: str, current: str,
                         config: Optional[SolverConfig] = None) -> Optional[str]:
    """
    Pick the next state on the way to `solved`.

    Returns:
        The neighbor with the lowest score strictly below the current score,
        first in graph order on ties; None if no neighbor improves.
    """
    config = config or DEFAULT_CONFIG
    score_fn = _scorer(config)

    best_score = score_fn(solved, current)
    best_state = None
    for candidate in get_neighbors(current):
        candidate_score = score_fn(solved, candidate)
        if candidate_score < best_score:
            best_score = candidate_score
            best_state = candidate

    return best_state


def solve(inside: str, outside: str, is_challenge: bool = False,
          config: Optional[SolverConfig] = None) -> List[str]:
    """
    Solve the outside panel given the inside and outside callouts.

    Args:
        inside: three-character inside callout, e.g. "cst"
        outside: six-character outside callout with alphabetized volumes,
                 e.g. "csctst" (not "scctst")
        is_challenge: whether challenge mode is active
        config: solver parameters (defaults to DEFAULT_CONFIG)

    Returns:
        States the outside panel goes through, starting with `outside` and
        ending with the solved state

    Raises:
        UnknownStateError: If `outside` is not a legal state
        SolverStuckError: If no improving move exists or max_steps is exceeded
    """
    config = config or DEFAULT_CONFIG
    validate_state(outside)

    solved = get_solved_state(inside, is_challenge)
    validate_state(solved)

    if config.verbose:
        print("=" * 50)
        print("Greedy Outside Solver" + (" (Challenge)" if is_challenge else ""))
        print("=" * 50)
        print(f"Inside: {inside}  Outside: {outside}  Solved: {solved}")

    states = [outside]
    current = outside
    while current != solved:
        if len(states) > config.max_steps:
            raise SolverStuckError(
                f"Exceeded {config.max_steps} steps solving {outside!r} -> {solved!r}"
            )

        next_state = find_best_transition(solved, current, config)
        if next_state is None:
            raise SolverStuckError(
                f"No improving transition from {current!r} towards {solved!r}"
            )

        if config.verbose:
            print(f"  Step {len(states)}: {current} -> {next_state} "
                  f"(score {score(solved, next_state)})")

        states.append(next_state)
        current = next_state

    if config.verbose:
        print(f"  Solved in {len(states) - 1} step(s)")

    return states
