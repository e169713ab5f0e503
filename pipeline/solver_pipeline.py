"""
Solver Pipeline

Orchestrates solving from the player's callouts:
1. Check the callout for issues (incomplete or invalid panels)
2. Solve the outside panel towards the inside panel's solved state
3. Derive and format the dissections for each step
"""

from typing import List, Optional, Tuple

from callouts import Callout
from solvers.greedy_solver import SolverConfig, solve
from solvers.swaps import Swap, derive_swaps

CHALLENGE_HEADER = "Challenge is active!"
ALREADY_SOLVED = "Already solved"


def solve_callout(callout: Callout, is_challenge: bool = False,
                  verbose: bool = False) -> Tuple[List[str], List[Swap]]:
    """
    Solve a fully called-out panel.

    Args:
        callout: Callout with no outstanding issues
        is_challenge: whether challenge mode is active
        verbose: Print progress info

    Returns:
        states: States the outside panel goes through
        swaps: (shape, position) dissections for each step

    Raises:
        ValueError: If the callout still has issues
    """
    if callout.has_issues():
        issues = "; ".join(msg for msg in callout.issues.values() if msg)
        raise ValueError(f"Cannot solve callout with issues: {issues}")

    config = SolverConfig(verbose=verbose)
    states = solve(callout.inside_state, callout.outside_state, is_challenge, config)
    return states, derive_swaps(states)


def prettify_solution(states: List[str], is_challenge: bool = False) -> List[str]:
    """
    Nicely format the steps taken to arrive at an outside solution.

    Args:
        states: states that outside went through
        is_challenge: whether challenge mode is active

    Returns:
        One line per step, preceded by a header in challenge mode
    """
    solution = []
    if is_challenge:
        solution.append(CHALLENGE_HEADER)

    swaps = derive_swaps(states)
    if not swaps:
        solution.append(ALREADY_SOLVED)

    for step, swap in enumerate(swaps, start=1):
        (first_shape, first_pos), (second_shape, second_pos) = swap
        solution.append(
            f"Step {step}: dissect {first_shape} from {first_pos}, "
            f"{second_shape} from {second_pos}"
        )
    return solution


def describe_callout(callout: Callout, is_challenge: bool = False,
                     verbose: bool = False,
                     states: Optional[List[str]] = None) -> Tuple[bool, List[str]]:
    """
    Text for the solution area: the steps if the callout can be solved,
    otherwise the outstanding issues.

    Args:
        callout: Current callouts
        is_challenge: whether challenge mode is active
        verbose: Print solver progress
        states: Precomputed solution path, to avoid solving twice

    Returns:
        solvable: False if the lines are issues
        lines: Steps or issue messages
    """
    if callout.has_issues():
        return False, [msg for msg in callout.issues.values() if msg]

    if states is None:
        states, _ = solve_callout(callout, is_challenge, verbose=verbose)
    return True, prettify_solution(states, is_challenge)
