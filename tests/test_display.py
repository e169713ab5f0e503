"""Tests for solution figures."""

import sys
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from visualization.display import changed_positions, draw_states, save_solution

PATH = ["ccsstt", "ctssct", "stcsct", "stctcs"]


def test_changed_positions():
    assert changed_positions("ccsstt", "ctssct") == [0, 2]
    assert changed_positions("stcsct", "stctcs") == [1, 2]
    assert changed_positions("stctcs", "stctcs") == []


def test_draw_states_labels_rows():
    fig, ax = plt.subplots()
    try:
        draw_states(ax, PATH, title="Inside cst")
        labels = [label.get_text() for label in ax.get_yticklabels()]
        assert labels == ["Solved", "Step 2", "Step 1", "Start"]
        assert ax.get_title() == "Inside cst"
        # 2 shapes per volume, 3 volumes per state, plus 2 highlights per step
        assert len(ax.patches) == len(PATH) * 6 + (len(PATH) - 1) * 2
    finally:
        plt.close(fig)


def test_draw_single_state():
    fig, ax = plt.subplots()
    try:
        draw_states(ax, ["stctcs"])
        assert [label.get_text() for label in ax.get_yticklabels()] == ["Start"]
    finally:
        plt.close(fig)


def test_save_solution_creates_directories(tmp_path):
    output = tmp_path / "nested" / "dir" / "solution.png"
    save_solution(PATH, str(output))
    assert output.exists()
    assert output.stat().st_size > 0
