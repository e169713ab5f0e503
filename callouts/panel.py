"""
Per-panel callout state machines.

A panel callout has three slots: Left and Middle are selected by the player,
Right is always derived from the other two. Selecting the token already held
by a slot clears it again.

    AWAITING --populate--> INCOMPLETE | INVALID | COMPLETE
    reset() returns to AWAITING

The derived slot is computed on every read from the two selected slots, so
it can never drift from them.
"""

from collections import Counter
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from core.shapes import INSIDE_SHAPES, OUTSIDE_VOLUMES


class CalloutStatus(Enum):
    AWAITING = auto()     # Nothing selected since creation/reset
    INCOMPLETE = auto()   # Fewer than two slots selected
    INVALID = auto()      # Two slots selected but no derivable third
    COMPLETE = auto()     # All three slots known


class PanelCallout:
    """Base class for a three-slot callout with a derived Right slot."""

    side: str = ""
    tokens: Tuple[str, ...] = ()
    messages: Dict[CalloutStatus, str] = {}

    def __init__(self):
        self.slots: List[str] = ["", ""]
        self.status = CalloutStatus.AWAITING

    def derive_third(self, first: str, second: str) -> Optional[str]:
        """Right slot for two selected slots, or None if they are inconsistent."""
        raise NotImplementedError

    def populate(self, token: str, pos: int) -> CalloutStatus:
        """
        Populate a slot, removing the token if it was already selected there.

        Args:
            token: shape or volume that was selected, e.g. "s" or "st"
            pos: 0 for Left, 1 for Middle

        Returns:
            The new status

        Raises:
            ValueError: If the token is not in this panel's vocabulary or the
                        position is not a selectable slot
        """
        if token not in self.tokens:
            raise ValueError(f"Unknown {self.side} token: {token!r}")
        if pos not in (0, 1):
            raise ValueError(f"Only slots 0 and 1 can be selected, got {pos!r}")

        if self.slots[pos] == token:
            self.slots[pos] = ""
        else:
            self.slots[pos] = token

        self.status = self._evaluate()
        return self.status

    def _evaluate(self) -> CalloutStatus:
        if "" in self.slots:
            return CalloutStatus.INCOMPLETE
        if self.derive_third(*self.slots) is None:
            return CalloutStatus.INVALID
        return CalloutStatus.COMPLETE

    @property
    def third(self) -> str:
        if "" in self.slots:
            return ""
        return self.derive_third(*self.slots) or ""

    @property
    def values(self) -> List[str]:
        """All three slots, empty string for unknown."""
        return [self.slots[0], self.slots[1], self.third]

    @property
    def issue(self) -> str:
        return self.messages[self.status]

    def has_values(self) -> bool:
        return any(self.values)

    def reset(self) -> None:
        self.slots = ["", ""]
        self.status = CalloutStatus.AWAITING

    def __str__(self) -> str:
        return "".join(self.values)


class InsideCallout(PanelCallout):
    """Inside panel: three distinct shapes."""

    side = "inside"
    tokens = INSIDE_SHAPES
    messages = {
        CalloutStatus.AWAITING: "Awaiting inside callouts",
        CalloutStatus.INCOMPLETE: "Inside callout requires two shapes",
        CalloutStatus.INVALID: "Inside callout must contain unique shapes",
        CalloutStatus.COMPLETE: "",
    }

    THIRD_SHAPE = {
        "cs": "t", "sc": "t",
        "ct": "s", "tc": "s",
        "st": "c", "ts": "c",
    }

    def derive_third(self, first: str, second: str) -> Optional[str]:
        return self.THIRD_SHAPE.get(first + second)


class OutsideCallout(PanelCallout):
    """Outside panel: three volumes holding two of each shape overall."""

    side = "outside"
    tokens = OUTSIDE_VOLUMES
    messages = {
        CalloutStatus.AWAITING: "Awaiting outside callouts",
        CalloutStatus.INCOMPLETE: "Outside callout requires two volumes",
        CalloutStatus.INVALID: "Outside callout must be valid",
        CalloutStatus.COMPLETE: "",
    }

    # Shape counts (c, s, t) across Left + Middle -> Right volume
    THIRD_VOLUME = {
        "022": "cc",
        "202": "ss",
        "220": "tt",
        "112": "cs",
        "121": "ct",
        "211": "st",
    }

    def derive_third(self, first: str, second: str) -> Optional[str]:
        counts = Counter(first + second)
        key = f"{counts['c']}{counts['s']}{counts['t']}"
        return self.THIRD_VOLUME.get(key)
