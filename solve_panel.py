#!/usr/bin/env python
"""
Verity Panel Solver

Usage:
    python solve_panel.py --inside <left> <middle> --outside <left> <middle>
                          [--challenge] [--output <output_path>]

Examples:
    python solve_panel.py --inside c s --outside cc ss
    python solve_panel.py --inside t c --outside st cs --challenge --output ./debug/solution.png

The Right callout of each panel is derived from Left and Middle.
"""

import argparse
import sys

from callouts import Callout
from core.shapes import normalize_volume
from pipeline import describe_callout, solve_callout


def build_callout(inside, outside) -> Callout:
    """Populate a callout from Left/Middle selections."""
    callout = Callout()
    for pos, shape in enumerate(inside):
        callout.populate(shape, pos, is_inside=True)
    for pos, volume in enumerate(outside):
        callout.populate(normalize_volume(volume), pos, is_inside=False)
    return callout


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Greedy solver for the Verity outside panel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Shapes: c (Circle), s (Square), t (Triangle)
Volumes: two shapes in any order, e.g. cs, tt, sc
        """
    )
    parser.add_argument("--inside", "-i", nargs=2, required=True, metavar="SHAPE",
                        choices=["c", "s", "t"], help="Left and Middle inside shapes")
    parser.add_argument("--outside", "-o", nargs=2, required=True, metavar="VOLUME",
                        help="Left and Middle outside volumes")
    parser.add_argument("--challenge", "-c", action="store_true",
                        help="Challenge mode is active")
    parser.add_argument("--output", help="Output path for the solution figure")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress solver output")
    parser.add_argument("--no-display", action="store_true", help="Don't display result")

    args = parser.parse_args(argv)
    verbose = not args.quiet

    try:
        callout = build_callout(args.inside, args.outside)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if callout.has_issues():
        _, lines = describe_callout(callout, args.challenge)
        for line in lines:
            print(line)
        return 1

    states, _ = solve_callout(callout, args.challenge, verbose=verbose)
    _, lines = describe_callout(callout, args.challenge, states=states)

    if verbose:
        print(f"\nInside: {callout.inside_state}  Outside: {callout.outside_state}")
    for line in lines:
        print(line)

    if args.output or not args.no_display:
        # Imported lazily so text-only runs don't need a display backend
        from visualization import display_solution, save_solution

        title = f"Inside {callout.inside_state}" + (" (Challenge)" if args.challenge else "")
        if args.output:
            save_solution(states, args.output, title=title)
            if verbose:
                print(f"\nSaved figure to {args.output}")
        if not args.no_display:
            display_solution(states, title=title)

    return 0


if __name__ == "__main__":
    sys.exit(main())
