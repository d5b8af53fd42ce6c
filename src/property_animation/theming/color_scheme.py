"""
Color scheme for the animation panel.

Centralizes the window colours: the star itself and the trigger buttons.
The star field background is animation state and lives in AnimationConfig.
Schemes can be loaded from and saved to JSON.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional, Tuple
from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)


def is_rgb_triplet(value) -> bool:
    """True for a list of at least three ints in 0..255 (extra entries ignored)."""
    if not isinstance(value, list) or len(value) < 3:
        return False
    return all(
        isinstance(channel, int) and not isinstance(channel, bool) and 0 <= channel <= 255
        for channel in value[:3]
    )


@dataclass
class ColorScheme:
    """Semantic colour names for the animation panel."""

    # ========== STAR ==========

    star_fill: Tuple[int, int, int] = (255, 204, 0)         # #ffcc00 - Star body
    star_outline: Tuple[int, int, int] = (255, 153, 0)      # #ff9900 - Star edge

    # ========== WINDOW AND BUTTONS ==========

    window_bg: Tuple[int, int, int] = (43, 43, 43)          # #2b2b2b - Main window background
    text_primary: Tuple[int, int, int] = (255, 255, 255)    # #ffffff - Primary text
    text_disabled: Tuple[int, int, int] = (102, 102, 102)   # #666666 - Disabled text

    button_normal_bg: Tuple[int, int, int] = (64, 64, 64)    # #404040 - Normal button background
    button_hover_bg: Tuple[int, int, int] = (80, 80, 80)     # #505050 - Button hover state
    button_pressed_bg: Tuple[int, int, int] = (48, 48, 48)   # #303030 - Button pressed state
    button_disabled_bg: Tuple[int, int, int] = (42, 42, 42)  # #2a2a2a - Disabled button background
    button_text: Tuple[int, int, int] = (255, 255, 255)      # #ffffff - Button text
    button_disabled_text: Tuple[int, int, int] = (102, 102, 102)  # #666666 - Disabled button text
    border_color: Tuple[int, int, int] = (85, 85, 85)        # #555555 - Button borders

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        """
        Convert RGB tuple to QColor object.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            QColor: Qt color object
        """
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple[:3]
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """Light window chrome around the same star."""
        return cls(
            window_bg=(245, 245, 245),
            text_primary=(0, 0, 0),
            text_disabled=(150, 150, 150),
            button_normal_bg=(225, 225, 225),
            button_hover_bg=(210, 210, 210),
            button_pressed_bg=(195, 195, 195),
            button_disabled_bg=(235, 235, 235),
            button_text=(0, 0, 0),
            button_disabled_text=(150, 150, 150),
            border_color=(180, 180, 180),
        )

    @classmethod
    def load_color_scheme_from_config(cls, config_path: Optional[str] = None) -> 'ColorScheme':
        """
        Load color scheme from a JSON file of ``name: [r, g, b]`` entries.

        Unknown keys and malformed colors are skipped with a warning. Returns the default scheme when the file is
        missing or unreadable.
        """
        if config_path and Path(config_path).exists():
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)

                if not isinstance(config, dict):
                    raise ValueError(f"expected a JSON object, got {type(config).__name__}")

                known = {f.name for f in fields(cls)}
                scheme_kwargs = {}
                for key, value in config.items():
                    if key not in known:
                        continue
                    if not is_rgb_triplet(value):
                        logger.warning(f"Ignoring color '{key}' in {config_path}: expected [r, g, b] ints in 0..255, got {value!r}")
                        continue
                    scheme_kwargs[key] = tuple(value[:3])

                logger.info(f"Loaded color scheme from {config_path} ({len(scheme_kwargs)} colors)")
                return cls(**scheme_kwargs)

            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load color scheme from {config_path}: {e}")
        elif config_path:
            logger.warning(f"Color scheme file not found: {config_path}")

        return cls()

    def get_color_dict(self) -> Dict[str, Tuple[int, int, int]]:
        """All colors keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_json(self, config_path: str) -> bool:
        """
        Save color scheme to JSON configuration file.

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            json_dict = {k: list(v) for k, v in self.get_color_dict().items()}
            with open(config_path, 'w') as f:
                json.dump(json_dict, f, indent=2, sort_keys=True)

            logger.info(f"Color scheme saved to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save color scheme to {config_path}: {e}")
            return False
