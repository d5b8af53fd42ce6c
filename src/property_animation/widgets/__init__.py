"""
Panel widgets.

The star graphic, the container it lives in, and the panel controller
that wires trigger buttons to animations.
"""

from .star_item import StarItem, build_star_path
from .star_field import StarField
from .animation_panel import AnimationPanel, TRIGGER_NAMES

__all__ = [
    "StarItem",
    "build_star_path",
    "StarField",
    "AnimationPanel",
    "TRIGGER_NAMES",
]
