"""Display utilities for panel solutions."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import patches
from pathlib import Path
from typing import List, Optional

from core.shapes import POSITIONS
from core.state_graph import state_to_volumes

SHAPE_COLORS = {"c": "#1f77b4", "s": "#2ca02c", "t": "#d62728"}
HIGHLIGHT_COLOR = "#ffe08a"


def changed_positions(prev: str, curr: str) -> List[int]:
    """Positions (0-2) whose volume differs between two states."""
    return [pos for pos, (a, b) in enumerate(zip(state_to_volumes(prev),
                                                 state_to_volumes(curr)))
            if sorted(a) != sorted(b)]


def _shape_patch(shape: str, x: float, y: float, size: float = 0.35):
    color = SHAPE_COLORS[shape]
    if shape == "c":
        return patches.Circle((x, y), size / 2, color=color)
    if shape == "s":
        return patches.Rectangle((x - size / 2, y - size / 2), size, size, color=color)
    return patches.RegularPolygon((x, y), numVertices=3, radius=size / 1.6, color=color)


def draw_states(ax, states: List[str], title: Optional[str] = None):
    """
    Draw one row per state, each with its Left/Middle/Right volumes.

    Positions that change on the next step are highlighted.

    Args:
        ax: Matplotlib axes to draw on
        states: Solution path
        title: Optional axes title
    """
    n_states = len(states)

    for row, state in enumerate(states):
        y = n_states - 1 - row
        highlighted = []
        if row + 1 < n_states:
            highlighted = changed_positions(state, states[row + 1])

        for pos, volume in enumerate(state_to_volumes(state)):
            x = pos * 1.2
            if pos in highlighted:
                ax.add_patch(patches.Rectangle((x - 0.5, y - 0.4), 1.0, 0.8,
                                               color=HIGHLIGHT_COLOR, zorder=0))
            for slot, shape in enumerate(volume):
                ax.add_patch(_shape_patch(shape, x - 0.22 + slot * 0.44, y))

    ax.set_xlim(-0.7, 3.1)
    ax.set_ylim(-0.7, n_states - 0.3)
    ax.set_aspect('equal')
    ax.set_xticks(np.arange(3) * 1.2)
    ax.set_xticklabels([POSITIONS[pos] for pos in range(3)])
    ax.set_yticks(np.arange(n_states))
    # Row 0 sits at the top of the axes
    labels = []
    for row in reversed(range(n_states)):
        if row == 0:
            labels.append("Start")
        elif row == n_states - 1:
            labels.append("Solved")
        else:
            labels.append(f"Step {row}")
    ax.set_yticklabels(labels)
    for spine in ax.spines.values():
        spine.set_visible(False)

    if title:
        ax.set_title(title)


def _solution_figure(states: List[str], title: Optional[str] = None):
    fig, ax = plt.subplots(figsize=(5, 1.2 * len(states) + 0.8))
    draw_states(ax, states, title=title)
    plt.tight_layout()
    return fig


def display_solution(states: List[str], title: Optional[str] = None):
    """
    Display a solution path.

    Args:
        states: States the outside panel goes through
        title: Optional figure title
    """
    _solution_figure(states, title)
    plt.show()


def save_solution(states: List[str], output_path: str,
                  title: Optional[str] = None, dpi: int = 150):
    """
    Save a solution path figure to file.

    Args:
        states: States the outside panel goes through
        output_path: Path to save the figure
        title: Optional figure title
        dpi: Output DPI
    """
    fig = _solution_figure(states, title)

    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    try:
        fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    finally:
        plt.close(fig)
