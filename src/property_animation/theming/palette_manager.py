"""
QPalette integration for the animation panel.

Applies a ColorScheme to Qt's palette so plain widgets pick up the window and
button colours without per-widget stylesheets.
"""

import logging
from typing import Optional
from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class PaletteManager:
    """
    Manages QPalette integration with ColorScheme.
    """

    def __init__(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme
        self._original_palette = None

    def create_palette(self) -> QPalette:
        """
        Create a QPalette from the current color scheme.

        Returns:
            QPalette: Configured palette with color scheme colors
        """
        palette = QPalette()
        cs = self.color_scheme

        # Window colors
        palette.setColor(QPalette.ColorRole.Window, cs.to_qcolor(cs.window_bg))
        palette.setColor(QPalette.ColorRole.WindowText, cs.to_qcolor(cs.text_primary))

        # Button colors
        palette.setColor(QPalette.ColorRole.Button, cs.to_qcolor(cs.button_normal_bg))
        palette.setColor(QPalette.ColorRole.ButtonText, cs.to_qcolor(cs.button_text))

        # Disabled colors
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText,
                         cs.to_qcolor(cs.text_disabled))
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText,
                         cs.to_qcolor(cs.button_disabled_text))
        palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Button,
                         cs.to_qcolor(cs.button_disabled_bg))

        palette.setColor(QPalette.ColorRole.Mid, cs.to_qcolor(cs.border_color))

        return palette

    def apply_palette_to_application(self, app: Optional[QApplication] = None):
        """
        Apply the color scheme palette to the entire application.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
        """
        if app is None:
            app = QApplication.instance()

        if app is None:
            logger.warning("No QApplication instance found, cannot apply palette")
            return

        if self._original_palette is None:
            self._original_palette = app.palette()

        app.setPalette(self.create_palette())
        logger.debug("Applied color scheme palette to application")

    def restore_original_palette(self, app: Optional[QApplication] = None):
        """Restore the palette captured by the first apply call."""
        if app is None:
            app = QApplication.instance()

        if app is None or self._original_palette is None:
            logger.warning("Cannot restore original palette")
            return

        app.setPalette(self._original_palette)
        logger.debug("Restored original application palette")
