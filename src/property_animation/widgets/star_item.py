"""Animatable star graphic."""

import math
from typing import Optional

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QPainter, QPainterPath, QPen, QVector3D
from PyQt6.QtWidgets import QGraphicsObject, QGraphicsScale

from property_animation.theming import ColorScheme

STAR_POINTS = 5
INNER_RADIUS_RATIO = 0.45


def build_star_path(size: float) -> QPainterPath:
    """Five-pointed star inscribed in a ``size`` x ``size`` square, point up."""
    center = size / 2
    outer = size / 2
    inner = outer * INNER_RADIUS_RATIO
    path = QPainterPath()
    for i in range(STAR_POINTS * 2):
        radius = outer if i % 2 == 0 else inner
        angle = -math.pi / 2 + i * math.pi / STAR_POINTS
        point = QPointF(center + radius * math.cos(angle), center + radius * math.sin(angle))
        if i == 0:
            path.moveTo(point)
        else:
            path.lineTo(point)
    path.closeSubpath()
    return path


class StarItem(QGraphicsObject):
    """
    Star whose visual properties are set through typed setters.

    Rotation and scale pivot around the star's centre. Translation is an
    offset from the base position the container assigns, so animations never
    fight with layout.
    """

    def __init__(self, size: float, color_scheme: Optional[ColorScheme] = None, parent=None):
        super().__init__(parent)
        self._size = size
        self._color_scheme = color_scheme or ColorScheme()
        self._path = build_star_path(size)

        self._base_pos = QPointF(0.0, 0.0)
        self._translation_x = 0.0
        self._translation_y = 0.0

        self._scale = QGraphicsScale(self)
        self._scale.setOrigin(QVector3D(size / 2, size / 2, 0.0))
        self.setTransformations([self._scale])
        self.setTransformOriginPoint(size / 2, size / 2)

    # ---- geometry ----

    @property
    def size(self) -> float:
        return self._size

    def boundingRect(self) -> QRectF:
        return QRectF(0.0, 0.0, self._size, self._size)

    def paint(self, painter: QPainter, option, widget=None):
        cs = self._color_scheme
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        pen = QPen(cs.to_qcolor(cs.star_outline))
        pen.setWidthF(max(1.0, self._size / 24))
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(cs.to_qcolor(cs.star_fill))
        painter.drawPath(self._path)

    def set_base_position(self, point: QPointF) -> None:
        self._base_pos = QPointF(point)
        self._sync_position()

    def _sync_position(self) -> None:
        self.setPos(self._base_pos.x() + self._translation_x, self._base_pos.y() + self._translation_y)

    # ---- animatable properties ----

    @property
    def rotation_deg(self) -> float:
        return self.rotation()

    def set_rotation_deg(self, value: float) -> None:
        self.setRotation(value)

    @property
    def translation_x(self) -> float:
        return self._translation_x

    def set_translation_x(self, value: float) -> None:
        self._translation_x = value
        self._sync_position()

    @property
    def translation_y(self) -> float:
        return self._translation_y

    def set_translation_y(self, value: float) -> None:
        self._translation_y = value
        self._sync_position()

    @property
    def scale_x(self) -> float:
        return self._scale.xScale()

    def set_scale_x(self, value: float) -> None:
        self._scale.setXScale(value)

    @property
    def scale_y(self) -> float:
        return self._scale.yScale()

    def set_scale_y(self, value: float) -> None:
        self._scale.setYScale(value)

    @property
    def alpha(self) -> float:
        return self.opacity()

    def set_alpha(self, value: float) -> None:
        self.setOpacity(value)
