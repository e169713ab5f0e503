"""Shape and position naming tables for the Verity panel."""

from types import MappingProxyType
from typing import Mapping

# Number of characters in an outside state (3 positions x 2 shapes)
STATE_LENGTH = 6

SHAPES: Mapping[str, str] = MappingProxyType({
    "c": "Circle",
    "s": "Square",
    "t": "Triangle",
})

POSITIONS: Mapping[int, str] = MappingProxyType({
    0: "Left",
    1: "Middle",
    2: "Right",
})

# Callout vocabularies
INSIDE_SHAPES = ("c", "s", "t")
OUTSIDE_VOLUMES = ("cc", "cs", "ct", "ss", "st", "tt")


def normalize_volume(volume: str) -> str:
    """
    Alphabetize a two-shape volume, e.g. "sc" -> "cs".

    Raises:
        ValueError: If the result is not a known volume
    """
    normalized = "".join(sorted(volume))
    if normalized not in OUTSIDE_VOLUMES:
        raise ValueError(f"Unknown volume: {volume!r}")
    return normalized


def shape_name(shape: str) -> str:
    """Human-readable name of a single shape symbol."""
    if shape not in SHAPES:
        raise ValueError(f"Unknown shape: {shape!r}")
    return SHAPES[shape]
