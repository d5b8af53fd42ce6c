"""Animation panel: six trigger buttons driving animations on one star."""

import logging
import random
from typing import Callable, Dict, Optional

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QGridLayout, QPushButton, QVBoxLayout, QWidget

from property_animation.animation import (
    ACCELERATE,
    ACCELERATE_DECELERATE,
    LINEAR,
    AnimationConfig,
    PropertyTrack,
    RepeatMode,
    Timeline,
    TimelineConfig,
    TimelineEngine,
    disable_control_during,
    evaluate_argb,
    get_animation_config,
    plan_shower_star,
    remove_from_container_on_complete,
)
from property_animation.theming import ColorScheme, StyleSheetGenerator
from property_animation.widgets.star_field import StarField
from property_animation.widgets.star_item import StarItem

logger = logging.getLogger(__name__)

TRIGGER_NAMES = ("rotate", "translate", "scale", "fade", "colorize", "shower")

BUTTON_COLUMNS = 3


class AnimationPanel(QWidget):
    """
    Panel controller owning the star field and its trigger buttons.

    Every trigger except shower is disabled while its own animation runs, so
    each of them has at most one animation in flight. Shower spawns an
    independent falling star per click.

    Usage:
        panel = AnimationPanel()
        panel.show()

        panel.trigger("rotate")  # same as clicking the Rotate button
    """

    def __init__(
        self,
        config: Optional[AnimationConfig] = None,
        color_scheme: Optional[ColorScheme] = None,
        rng: Optional[random.Random] = None,
        engine: Optional[TimelineEngine] = None,
        parent=None,
    ):
        config = config or get_animation_config()
        # Fails fast before any widget is built when no QApplication exists
        owns_engine = engine is None
        engine = engine or TimelineEngine(config)

        super().__init__(parent)
        self.setObjectName("AnimationPanel")
        self._config = config
        self._color_scheme = color_scheme or ColorScheme()
        self._rng = rng or random.Random()
        self._engine = engine
        if owns_engine:
            self._engine.setParent(self)

        self._style_generator = StyleSheetGenerator(self._color_scheme)
        self._buttons: Dict[str, QPushButton] = {}
        self._actions: Dict[str, Callable[[], Timeline]] = {
            "rotate": self.rotate,
            "translate": self.translate,
            "scale": self.scale,
            "fade": self.fade,
            "colorize": self.colorize,
            "shower": self.shower,
        }

        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        button_grid = QGridLayout()
        button_grid.setSpacing(6)
        for index, name in enumerate(TRIGGER_NAMES):
            button = QPushButton(name.capitalize())
            button.setObjectName(f"{name}Button")
            button.clicked.connect(lambda checked=False, n=name: self.trigger(n))
            button_grid.addWidget(button, index // BUTTON_COLUMNS, index % BUTTON_COLUMNS)
            self._buttons[name] = button
        layout.addLayout(button_grid)

        self.star_field = StarField(self._config, self._color_scheme, parent=self)
        layout.addWidget(self.star_field, stretch=1)

        self.setStyleSheet(self._style_generator.generate_panel_style())

    # ---- accessors ----

    @property
    def star(self) -> StarItem:
        return self.star_field.subject

    @property
    def engine(self) -> TimelineEngine:
        return self._engine

    def button(self, name: str) -> QPushButton:
        if name not in self._buttons:
            raise KeyError(f"Unknown trigger '{name}', expected one of {TRIGGER_NAMES}")
        return self._buttons[name]

    # ---- triggers ----

    def trigger(self, name: str) -> Optional[Timeline]:
        """Activate a trigger by name.

        Returns the started timeline, or None when the trigger is disabled
        because its previous animation is still running.
        """
        button = self.button(name)
        if not button.isEnabled():
            logger.debug(f"[AnimationPanel] '{name}' is running, ignoring activation")
            return None
        logger.debug(f"[AnimationPanel] Trigger '{name}'")
        return self._actions[name]()

    def _play_gated(self, name: str, config: TimelineConfig) -> Timeline:
        return self._engine.play(disable_control_during(config, self._buttons[name]))

    def rotate(self) -> Timeline:
        cfg = self._config
        return self._play_gated("rotate", TimelineConfig(
            tracks=(PropertyTrack(self.star.set_rotation_deg, cfg.rotate_from_deg, cfg.rotate_to_deg, LINEAR),),
            duration_ms=cfg.rotate_duration_ms,
            name="rotate",
        ))

    def translate(self) -> Timeline:
        return self._play_gated("translate", TimelineConfig(
            tracks=(PropertyTrack(self.star.set_translation_x, 0.0, self._config.translate_distance),),
            repeat_count=1,
            repeat_mode=RepeatMode.REVERSE,
            name="translate",
        ))

    def scale(self) -> Timeline:
        # Both axes share one timeline so they stay equal at every frame
        target = self._config.scale_target
        return self._play_gated("scale", TimelineConfig(
            tracks=(
                PropertyTrack(self.star.set_scale_x, 1.0, target),
                PropertyTrack(self.star.set_scale_y, 1.0, target),
            ),
            repeat_count=1,
            repeat_mode=RepeatMode.REVERSE,
            name="scale",
        ))

    def fade(self) -> Timeline:
        return self._play_gated("fade", TimelineConfig(
            tracks=(PropertyTrack(self.star.set_alpha, 1.0, self._config.fade_target),),
            repeat_count=1,
            repeat_mode=RepeatMode.REVERSE,
            name="fade",
        ))

    def colorize(self) -> Timeline:
        cfg = self._config
        track = PropertyTrack(
            self.star_field.set_background_color,
            QColor(*cfg.colorize_from_rgb),
            QColor(*cfg.colorize_to_rgb),
            ACCELERATE_DECELERATE,
            evaluate_argb,
        )
        return self._play_gated("colorize", TimelineConfig(
            tracks=(track,),
            duration_ms=cfg.colorize_duration_ms,
            repeat_count=1,
            repeat_mode=RepeatMode.REVERSE,
            name="colorize",
        ))

    def shower(self) -> Timeline:
        field = self.star_field
        plan = plan_shower_star(
            self._rng,
            field.field_width(),
            field.field_height(),
            self.star.size,
            self.star.size,
            self._config,
        )

        new_star = field.create_star()
        new_star.set_scale_x(plan.scale)
        new_star.set_scale_y(plan.scale)
        new_star.set_translation_x(plan.translation_x)
        new_star.set_translation_y(plan.fall_from_y)
        field.add_star(new_star)

        config = TimelineConfig(
            tracks=(
                PropertyTrack(new_star.set_translation_y, plan.fall_from_y, plan.fall_to_y, ACCELERATE),
                PropertyTrack(new_star.set_rotation_deg, 0.0, plan.rotation_to_deg, LINEAR),
            ),
            duration_ms=plan.duration_ms,
            name="shower",
        )
        logger.debug(
            f"[AnimationPanel] Shower star scale={plan.scale:.2f} x={plan.translation_x:.1f} "
            f"spin={plan.rotation_to_deg:.0f} duration={plan.duration_ms}ms"
        )
        return self._engine.play(remove_from_container_on_complete(config, field, new_star))
