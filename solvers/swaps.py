"""Turn solver paths into dissection instructions."""

from collections import Counter
from typing import List, Tuple

from core.shapes import POSITIONS, SHAPES
from core.state_graph import is_transition, state_to_volumes

Swap = List[Tuple[str, str]]


def derive_swap(prev: str, curr: str) -> Swap:
    """
    Derive the dissection that transitions between two outside states.

    Volumes are compared as shape counts rather than character by character,
    since re-alphabetizing a volume can move a shape that was not dissected
    (e.g. "cs" -> "st" only loses the circle).

    Args:
        prev: six-character string of the previous state
        curr: six-character string of the current state

    Returns:
        (shape, position) tuples to dissect; two for any legal transition

    Raises:
        UnknownStateError: If `prev` is not a legal state
        ValueError: If `curr` is not one dissection away from `prev`
    """
    if not is_transition(prev, curr):
        raise ValueError(f"{prev!r} -> {curr!r} is not a single dissection")

    swap = []
    before_volumes = state_to_volumes(prev)
    after_volumes = state_to_volumes(curr)
    for pos, (before, after) in enumerate(zip(before_volumes, after_volumes)):
        removed = Counter(before) - Counter(after)
        for shape in sorted(removed.elements()):
            swap.append((SHAPES[shape], POSITIONS[pos]))
    return swap


def derive_swaps(states: List[str]) -> List[Swap]:
    """Derive the dissections between each consecutive pair of states."""
    return [derive_swap(prev, curr) for prev, curr in zip(states, states[1:])]
