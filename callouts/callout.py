"""Container for the inside and outside callouts of one panel."""

from typing import Dict

from .panel import InsideCallout, OutsideCallout, PanelCallout


class Callout:
    """
    Tracks both callouts and the issues that keep them from being solved.

    Attributes:
        inside: Inside callout (three shapes)
        outside: Outside callout (three volumes)
    """

    def __init__(self):
        self.inside = InsideCallout()
        self.outside = OutsideCallout()

    def panel(self, is_inside: bool) -> PanelCallout:
        return self.inside if is_inside else self.outside

    def populate(self, token: str, pos: int, is_inside: bool) -> None:
        """
        Populate a given callout, removing it if it was already selected.

        Args:
            token: shape/volume that was selected, e.g. "s" or "st"
            pos: position of the token, 0 -> Left, 1 -> Middle
            is_inside: whether this is an inside or outside callout
        """
        self.panel(is_inside).populate(token, pos)

    @property
    def issues(self) -> Dict[str, str]:
        return {"inside": self.inside.issue, "outside": self.outside.issue}

    @property
    def inside_state(self) -> str:
        return str(self.inside)

    @property
    def outside_state(self) -> str:
        return str(self.outside)

    def has_issues(self) -> bool:
        return any(self.issues.values())

    def has_callouts(self) -> bool:
        return self.inside.has_values() or self.outside.has_values()

    def reset(self) -> None:
        self.inside.reset()
        self.outside.reset()
