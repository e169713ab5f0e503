"""Panel tables: shapes, positions and the outside state graph."""
from .shapes import SHAPES, POSITIONS, STATE_LENGTH, normalize_volume
from .state_graph import (
    OUTSIDE_STATE_TRANSITIONS,
    UnknownStateError,
    get_neighbors,
    validate_state,
    all_states
)
