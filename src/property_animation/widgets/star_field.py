"""Container surface for the subject star and transient shower stars."""

import logging
from typing import List, Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter
from PyQt6.QtWidgets import QFrame, QGraphicsScene, QGraphicsView

from property_animation.animation import AnimationConfig, get_animation_config
from property_animation.theming import ColorScheme
from property_animation.widgets.star_item import StarItem

logger = logging.getLogger(__name__)

# --- Module-level constants ---
DEFAULT_FIELD_WIDTH = 360
DEFAULT_FIELD_HEIGHT = 480


class StarField(QGraphicsView):
    """
    Scene-backed container holding the subject star.

    The scene rect always matches the viewport, so ``field_width()`` and
    ``field_height()`` are the visible surface. ``background_color`` is a
    typed property; the colorize trigger animates it through its setter.
    """

    def __init__(
        self,
        config: Optional[AnimationConfig] = None,
        color_scheme: Optional[ColorScheme] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setObjectName("StarField")
        self._config = config or get_animation_config()
        self._color_scheme = color_scheme or ColorScheme()

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)

        self._background_color = QColor()
        self.background_color = QColor(*self._config.colorize_from_rgb)

        self._transient: List[StarItem] = []
        self.subject = StarItem(self._config.star_size, self._color_scheme)
        self._scene.addItem(self.subject)

        self.setMinimumSize(int(self._config.star_size * 2), int(self._config.star_size * 2))
        self.set_field_size(DEFAULT_FIELD_WIDTH, DEFAULT_FIELD_HEIGHT)

    # ---- background ----

    @property
    def background_color(self) -> QColor:
        return QColor(self._background_color)

    @background_color.setter
    def background_color(self, color: QColor) -> None:
        self._background_color = QColor(color)
        self._scene.setBackgroundBrush(QBrush(self._background_color))

    def set_background_color(self, color: QColor) -> None:
        self.background_color = color

    # ---- geometry ----

    def field_width(self) -> float:
        return self._scene.sceneRect().width()

    def field_height(self) -> float:
        return self._scene.sceneRect().height()

    def set_field_size(self, width: float, height: float) -> None:
        """Resize the scene and re-centre the subject star."""
        width = max(1.0, float(width))
        height = max(1.0, float(height))
        self._scene.setSceneRect(0.0, 0.0, width, height)
        half = self.subject.size / 2
        self.subject.set_base_position(QPointF(width / 2 - half, height / 2 - half))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        viewport = self.viewport().size()
        self.set_field_size(viewport.width(), viewport.height())

    # ---- children ----

    def create_star(self) -> StarItem:
        """New transient star styled like the subject, not yet in the field."""
        return StarItem(self._config.star_size, self._color_scheme)

    def add_star(self, star: StarItem) -> None:
        self._scene.addItem(star)
        self._transient.append(star)
        logger.debug(f"[StarField] Added star ({len(self._transient)} transient)")

    def remove_star(self, star: StarItem) -> bool:
        """Remove a transient star. Returns False if it is not in the field."""
        if star not in self._transient:
            logger.warning("[StarField] Ignoring removal of a star that is not in the field")
            return False
        self._transient.remove(star)
        self._scene.removeItem(star)
        logger.debug(f"[StarField] Removed star ({len(self._transient)} transient)")
        return True

    def transient_stars(self) -> List[StarItem]:
        return list(self._transient)

    def child_count(self) -> int:
        """Number of star items in the field, the subject included."""
        return len(self._scene.items())
