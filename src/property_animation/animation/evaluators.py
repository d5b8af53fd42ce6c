"""Value evaluators and easing helpers used by timeline tracks.

An evaluator maps ``(start, end, fraction)`` to the value a property should
hold at that eased fraction.
"""

from PyQt6.QtCore import QEasingCurve
from PyQt6.QtGui import QColor


def evaluate_float(start: float, end: float, fraction: float) -> float:
    """Linear interpolation between two floats."""
    return start + (end - start) * fraction


def _lerp_channel(start: int, end: int, fraction: float) -> int:
    return max(0, min(255, int(round(start + (end - start) * fraction))))


def evaluate_argb(start: QColor, end: QColor, fraction: float) -> QColor:
    """Interpolate each ARGB channel independently.

    Black -> red at 0.5 yields (128, 0, 0); no other channel moves.
    """
    return QColor(
        _lerp_channel(start.red(), end.red(), fraction),
        _lerp_channel(start.green(), end.green(), fraction),
        _lerp_channel(start.blue(), end.blue(), fraction),
        _lerp_channel(start.alpha(), end.alpha(), fraction),
    )


def evaluate_packed_int(start: int, end: int, fraction: float) -> int:
    """Interpolate packed 0xAARRGGBB integers as plain numbers.

    Kept for comparison with :func:`evaluate_argb`: carries between channels
    make intermediate colours drift through unrelated hues.
    """
    return int(start + (end - start) * fraction) & 0xFFFFFFFF


def easing_curve(curve_type: QEasingCurve.Type) -> QEasingCurve:
    """Build a QEasingCurve for ``curve_type``."""
    return QEasingCurve(curve_type)


# Curves the panel uses, by role
LINEAR = QEasingCurve.Type.Linear
ACCELERATE = QEasingCurve.Type.InQuad
ACCELERATE_DECELERATE = QEasingCurve.Type.InOutSine
