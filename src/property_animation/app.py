"""Command-line entry point that opens the animation panel window."""

import argparse
import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from property_animation import __version__
from property_animation.animation import AnimationConfig, set_animation_config
from property_animation.theming import ColorScheme, PaletteManager
from property_animation.widgets import AnimationPanel

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
WINDOW_TITLE = "Property Animation"
DEFAULT_WINDOW_SIZE = (420, 640)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="property-animation",
        description="Show rotate, translate, scale, fade, colorize and shower animations on a star.",
    )
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS, help="Logging verbosity")
    parser.add_argument("--theme", metavar="PATH", help="JSON color scheme to load")
    parser.add_argument("--light", action="store_true", help="Use the light window theme")
    parser.add_argument(
        "--duration-scale",
        type=float,
        default=1.0,
        help="Multiply every animation duration (0 = instant)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_color_scheme(theme_path: Optional[str], light: bool) -> ColorScheme:
    if theme_path:
        return ColorScheme.load_color_scheme_from_config(theme_path)
    return ColorScheme.create_light_theme() if light else ColorScheme()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = AnimationConfig(duration_scale=args.duration_scale)
    except ValueError as e:
        parser.error(str(e))
    set_animation_config(config)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    color_scheme = load_color_scheme(args.theme, args.light)
    PaletteManager(color_scheme).apply_palette_to_application(app)

    panel = AnimationPanel(config=config, color_scheme=color_scheme)
    panel.setWindowTitle(WINDOW_TITLE)
    panel.resize(*DEFAULT_WINDOW_SIZE)
    panel.show()
    logger.info(f"[App] {WINDOW_TITLE} {__version__} started")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
