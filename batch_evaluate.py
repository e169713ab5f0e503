"""
Batch evaluation of the greedy outside solver.

Runs every legal outside state against every solved state an inside callout
can produce (normal and challenge mode) and reports step statistics.

Usage:
    python batch_evaluate.py            # summary
    python batch_evaluate.py --worst 5  # also list the 5 longest solutions
"""

import argparse
import sys
from itertools import permutations
from typing import Dict, List

import numpy as np

from core.shapes import INSIDE_SHAPES
from core.state_graph import OUTSIDE_STATE_TRANSITIONS, all_states
from solvers import SolverStuckError, get_solved_state, score, solve


def evaluate_all(verbose: bool = True) -> List[Dict]:
    """
    Solve every (inside, outside, challenge) combination.

    Returns:
        One result dict per combination with keys 'inside', 'outside',
        'challenge', 'solved', 'states', 'steps' and 'error'
    """
    results = []
    insides = ["".join(p) for p in permutations(INSIDE_SHAPES)]

    for is_challenge in (False, True):
        for inside in insides:
            solved = get_solved_state(inside, is_challenge)
            for outside in all_states():
                result = {
                    'inside': inside,
                    'outside': outside,
                    'challenge': is_challenge,
                    'solved': solved,
                    'states': [],
                    'steps': -1,
                    'error': None,
                }
                try:
                    states = solve(inside, outside, is_challenge)
                    result['states'] = states
                    result['steps'] = len(states) - 1
                except SolverStuckError as e:
                    result['error'] = str(e)
                    if verbose:
                        print(f"  STUCK: {e}")
                results.append(result)

    return results


def count_irregular_edges() -> int:
    """
    Count directed edges whose states differ in other than two characters.

    These are transitions where re-alphabetizing a volume shifts a shape that
    was not dissected.
    """
    return sum(
        1
        for state, neighbors in OUTSIDE_STATE_TRANSITIONS.items()
        for neighbor in neighbors
        if score(state, neighbor) != 2
    )


def summarize(results: List[Dict]) -> Dict:
    """Aggregate step statistics over a batch of results."""
    steps = np.array([r['steps'] for r in results if r['error'] is None])
    failures = [r for r in results if r['error'] is not None]

    return {
        'total': len(results),
        'failures': len(failures),
        'mean_steps': float(np.mean(steps)) if steps.size else 0.0,
        'max_steps': int(np.max(steps)) if steps.size else 0,
        'histogram': np.bincount(steps).tolist() if steps.size else [],
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate the greedy solver on all inputs")
    parser.add_argument("--worst", type=int, default=0, help="List the N longest solutions")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print the summary")
    args = parser.parse_args()

    verbose = not args.quiet
    if verbose:
        print("=" * 50)
        print("Greedy Solver Batch Evaluation")
        print("=" * 50)

    results = evaluate_all(verbose=verbose)
    summary = summarize(results)

    print(f"Combinations: {summary['total']}")
    print(f"Failures:     {summary['failures']}")
    print(f"Mean steps:   {summary['mean_steps']:.2f}")
    print(f"Max steps:    {summary['max_steps']}")
    for n_steps, count in enumerate(summary['histogram']):
        print(f"  {n_steps} step(s): {count}")
    print(f"Edges differing in != 2 characters: {count_irregular_edges()}")

    if args.worst > 0:
        print(f"\nLongest {args.worst} solutions:")
        ranked = sorted((r for r in results if r['error'] is None),
                        key=lambda r: r['steps'], reverse=True)
        for r in ranked[:args.worst]:
            mode = "challenge" if r['challenge'] else "normal"
            print(f"  {r['inside']} ({mode}): {' -> '.join(r['states'])}")

    return 1 if summary['failures'] else 0


if __name__ == "__main__":
    sys.exit(main())
