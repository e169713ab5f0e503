"""Test that all modules can be imported correctly."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_core_imports():
    """Test core module imports."""
    from core import SHAPES, POSITIONS, OUTSIDE_STATE_TRANSITIONS, get_neighbors
    from core.shapes import normalize_volume, shape_name
    from core.state_graph import UnknownStateError, is_transition, state_to_volumes
    print("✓ core imports OK")


def test_callouts_imports():
    """Test callouts module imports."""
    from callouts import Callout, InsideCallout, OutsideCallout, CalloutStatus
    from callouts.panel import PanelCallout
    print("✓ callouts imports OK")


def test_solvers_imports():
    """Test solvers module imports."""
    from solvers import solve, score, get_solved_state, derive_swaps
    from solvers.scoring import build_score_table, ScoreTable
    from solvers.greedy_solver import find_best_transition, SolverConfig, SolverStuckError
    from solvers.swaps import derive_swap
    print("✓ solvers imports OK")


def test_pipeline_imports():
    """Test pipeline module imports."""
    from pipeline import solve_callout, prettify_solution, describe_callout
    from pipeline.solver_pipeline import CHALLENGE_HEADER
    print("✓ pipeline imports OK")


def test_visualization_imports():
    """Test visualization module imports."""
    import matplotlib
    matplotlib.use("Agg")
    from visualization import display_solution, save_solution
    from visualization.display import draw_states, changed_positions
    print("✓ visualization imports OK")


def test_entry_point_imports():
    """Test script entry point imports."""
    from solve_panel import main, build_callout
    from batch_evaluate import evaluate_all, summarize
    print("✓ entry point imports OK")


if __name__ == "__main__":
    test_core_imports()
    test_callouts_imports()
    test_solvers_imports()
    test_pipeline_imports()
    test_visualization_imports()
    test_entry_point_imports()
    print("\n✓ All imports successful!")
