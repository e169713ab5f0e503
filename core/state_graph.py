"""
Outside state graph.

Each key is a legal 6-character outside state: three alphabetized volumes
(Left, Middle, Right) holding two of each shape. Each value lists the states
reachable by dissecting one shape from each of two positions, in the order
the solver considers them.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .shapes import STATE_LENGTH


class UnknownStateError(ValueError):
    """Raised when a state is not part of the outside state graph."""


OUTSIDE_STATE_TRANSITIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Doubled volumes
    "ccsstt": ("cscstt", "ccstst", "ctssct"),
    "ttccss": ("ctctss", "stccst", "ttcscs"),
    "ttsscc": ("ststcc", "ctssct", "ttcscs"),
    "ccttss": ("ctctss", "csttcs", "ccstst"),
    "sscctt": ("cscstt", "stccst", "ssctct"),
    "ssttcc": ("ststcc", "csttcs", "ssctct"),
    # One doubled volume
    "ccstst": ("csctst", "ctcsst", "csstct", "ctstcs", "ccttss", "ccsstt"),
    "stccst": ("ctcsst", "csctst", "ttccss", "sscctt", "stcsct", "stctcs"),
    "ststcc": ("ttsscc", "ssttcc", "ctstcs", "csstct", "stctcs", "stcsct"),
    "ttcscs": ("ttccss", "ttsscc", "ctstcs", "stctcs", "ctcsst", "stcsct"),
    "csttcs": ("stctcs", "ctstcs", "ssttcc", "ccttss", "csctst", "csstct"),
    "cscstt": ("sscctt", "ccsstt", "stcsct", "ctcsst", "csstct", "csctst"),
    "ssctct": ("csstct", "stcsct", "csctst", "stctcs", "ssttcc", "sscctt"),
    "ctssct": ("stcsct", "csstct", "ttsscc", "ccsstt", "ctcsst", "ctstcs"),
    "ctctss": ("ttccss", "ccttss", "stctcs", "csctst", "ctstcs", "ctcsst"),
    # Mixed volumes
    "csctst": ("stccst", "ccstst", "ctcsst", "ssctct", "stctcs", "ctctss",
               "csstct", "csttcs", "cscstt"),
    "csstct": ("ssctct", "stcsct", "ctssct", "ststcc", "ccstst", "ctstcs",
               "csctst", "csttcs", "cscstt"),
    "ctcsst": ("stccst", "ccstst", "csctst", "stcsct", "ttcscs", "cscstt",
               "ctssct", "ctstcs", "ctctss"),
    "ctstcs": ("stctcs", "ttcscs", "csttcs", "ststcc", "ccstst", "csstct",
               "ctctss", "ctcsst", "ctssct"),
    "stcsct": ("ctssct", "csstct", "ssctct", "ctcsst", "ttcscs", "cscstt",
               "ststcc", "stccst", "stctcs"),
    "stctcs": ("ctstcs", "ttcscs", "csttcs", "ctctss", "csctst", "ssctct",
               "ststcc", "stccst", "stcsct"),
})


def validate_state(state: str) -> None:
    """
    Check that a state belongs to the graph.

    Raises:
        UnknownStateError: If the state is not a key of the graph
    """
    if state not in OUTSIDE_STATE_TRANSITIONS:
        raise UnknownStateError(f"Unknown outside state: {state!r}")


def get_neighbors(state: str) -> Tuple[str, ...]:
    """States one dissection away from `state`, in authored order."""
    validate_state(state)
    return OUTSIDE_STATE_TRANSITIONS[state]


def is_transition(prev: str, curr: str) -> bool:
    """True if `curr` is one dissection away from `prev`."""
    return curr in get_neighbors(prev)


def all_states() -> List[str]:
    """All legal outside states, in table order."""
    return list(OUTSIDE_STATE_TRANSITIONS.keys())


def state_to_volumes(state: str) -> List[str]:
    """Split a state into its (Left, Middle, Right) volumes."""
    if len(state) != STATE_LENGTH:
        raise ValueError(f"State must have {STATE_LENGTH} characters, got {state!r}")
    return [state[i:i + 2] for i in range(0, STATE_LENGTH, 2)]


def volumes_to_state(volumes) -> str:
    """Join three volumes into a state and check it is legal."""
    state = "".join(volumes)
    validate_state(state)
    return state
