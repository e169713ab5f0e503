"""
Outside panel solvers.

Usage:
    from solvers import solve, derive_swaps

    states = solve("cst", "ccsstt")          # ['ccsstt', ..., 'stctcs']
    swaps = derive_swaps(states)             # [[('Circle', 'Left'), ...], ...]
"""
from .scoring import (
    score,
    is_good_transition,
    build_score_table,
    get_score_table,
    ScoreTable
)
from .solved_state import get_solved_state
from .greedy_solver import solve, find_best_transition, SolverConfig, SolverStuckError
from .swaps import derive_swap, derive_swaps
