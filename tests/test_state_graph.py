"""Tests for the outside state graph and naming tables."""

import sys
import os
from collections import Counter

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.shapes import SHAPES, POSITIONS, normalize_volume, shape_name
from core.state_graph import (
    OUTSIDE_STATE_TRANSITIONS,
    UnknownStateError,
    all_states,
    get_neighbors,
    is_transition,
    state_to_volumes,
    validate_state,
    volumes_to_state,
)


def test_universe_has_21_states():
    assert len(all_states()) == 21
    assert len(set(all_states())) == 21


def test_every_state_has_two_of_each_shape():
    for state in all_states():
        assert Counter(state) == {"c": 2, "s": 2, "t": 2}


def test_volumes_are_alphabetized():
    for state in all_states():
        for volume in state_to_volumes(state):
            assert volume == "".join(sorted(volume))


def test_neighbors_are_non_empty_legal_states():
    for state in all_states():
        neighbors = get_neighbors(state)
        assert len(neighbors) > 0
        assert state not in neighbors
        for neighbor in neighbors:
            assert neighbor in OUTSIDE_STATE_TRANSITIONS


def test_edges_are_symmetric():
    for state in all_states():
        for neighbor in get_neighbors(state):
            assert is_transition(neighbor, state)


def test_each_edge_dissects_one_shape_from_two_positions():
    for state in all_states():
        for neighbor in get_neighbors(state):
            removed = [
                sum((Counter(a) - Counter(b)).values())
                for a, b in zip(state_to_volumes(state), state_to_volumes(neighbor))
            ]
            assert sorted(removed) == [0, 1, 1]


def test_unknown_state_fails_fast():
    with pytest.raises(UnknownStateError):
        get_neighbors("cccsst")
    with pytest.raises(UnknownStateError):
        validate_state("scctst")  # unalphabetized volume
    # Still a ValueError for callers catching bad arguments
    with pytest.raises(ValueError):
        validate_state("")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        OUTSIDE_STATE_TRANSITIONS["ccsstt"] = ()
    with pytest.raises(TypeError):
        SHAPES["x"] = "Hexagon"


def test_volume_helpers():
    assert state_to_volumes("csctst") == ["cs", "ct", "st"]
    assert volumes_to_state(["cs", "ct", "st"]) == "csctst"
    with pytest.raises(UnknownStateError):
        volumes_to_state(["cc", "cc", "ss"])
    with pytest.raises(ValueError):
        state_to_volumes("cst")


def test_normalize_volume():
    assert normalize_volume("sc") == "cs"
    assert normalize_volume("tt") == "tt"
    with pytest.raises(ValueError):
        normalize_volume("cx")


def test_names():
    assert shape_name("t") == "Triangle"
    assert [POSITIONS[i] for i in range(3)] == ["Left", "Middle", "Right"]
    with pytest.raises(ValueError):
        shape_name("x")
