"""Visualization utilities for panel solutions."""
from .display import (
    display_solution,
    save_solution,
    draw_states,
    changed_positions
)
