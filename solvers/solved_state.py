"""Solved outside state for a given inside callout."""

from core.shapes import INSIDE_SHAPES

# Each inside shape is paired with the two shapes it is not
COMPLEMENTS = {"c": "st", "s": "ct", "t": "cs"}


def get_solved_state(inside: str, is_challenge: bool = False) -> str:
    """
    Retrieve the solved outside state for an inside callout.

    In challenge mode every shape is rotated once to the right and doubled.

    Args:
        inside: three-character inside callout, e.g. "cst"
        is_challenge: whether challenge mode is active

    Returns:
        six-character solved state, e.g. "stctcs" (or "ttccss" in challenge)

    Raises:
        ValueError: If `inside` is not a permutation of the three shapes
    """
    if len(inside) != 3 or sorted(inside) != sorted(INSIDE_SHAPES):
        raise ValueError(f"Inside callout must hold each shape once, got {inside!r}")

    if is_challenge:
        return inside[2] * 2 + inside[0] * 2 + inside[1] * 2

    return "".join(COMPLEMENTS[shape] for shape in inside)
