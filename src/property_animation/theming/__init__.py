"""
Theming and styling system.

Color schemes, palette management, and stylesheet generation
for the animation panel.
"""

from .color_scheme import ColorScheme
from .palette_manager import PaletteManager
from .style_generator import StyleSheetGenerator

__all__ = [
    "ColorScheme",
    "PaletteManager",
    "StyleSheetGenerator",
]
