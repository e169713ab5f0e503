"""Callout input validation."""
from .panel import CalloutStatus, PanelCallout, InsideCallout, OutsideCallout
from .callout import Callout
