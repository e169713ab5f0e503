"""
Pipeline orchestration modules.

Callout-first flow:
1. Callout.populate() - collect and validate the player's callouts
2. solve_callout() - solve the outside panel (requires a callout without issues)
3. prettify_solution() / describe_callout() - text for each step
"""
from .solver_pipeline import (
    solve_callout,
    prettify_solution,
    describe_callout
)
