"""
QStyleSheet generation for the animation panel.

Builds stylesheet strings from a ColorScheme so the trigger buttons show a
visible disabled state while their animation runs.
"""

import logging
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.
    """

    def __init__(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def generate_button_style(self) -> str:
        """
        Generate QStyleSheet for trigger buttons.

        Returns:
            str: QStyleSheet covering normal, hover, pressed and disabled states
        """
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                border-radius: 3px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
            QPushButton:pressed {{
                background-color: {cs.to_hex(cs.button_pressed_bg)};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
            }}
        """

    def generate_panel_style(self) -> str:
        """
        Generate QStyleSheet for the panel window and its star field.

        Returns:
            str: Complete QStyleSheet for the animation panel
        """
        cs = self.color_scheme
        return f"""
            QWidget#AnimationPanel {{
                background-color: {cs.to_hex(cs.window_bg)};
                color: {cs.to_hex(cs.text_primary)};
            }}
            QGraphicsView#StarField {{
                border: none;
            }}
        """ + self.generate_button_style()
