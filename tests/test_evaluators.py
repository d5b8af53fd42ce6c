"""Tests for value evaluators and easing helpers."""

import pytest
from PyQt6.QtGui import QColor


def test_evaluate_float():
    from property_animation.animation import evaluate_float

    assert evaluate_float(0.0, 200.0, 0.0) == 0.0
    assert evaluate_float(0.0, 200.0, 0.5) == pytest.approx(100.0)
    assert evaluate_float(-360.0, 0.0, 1.0) == 0.0


def test_argb_black_to_red_midpoint():
    """Component-wise interpolation keeps green and blue at zero."""
    from property_animation.animation import evaluate_argb

    color = evaluate_argb(QColor(0, 0, 0), QColor(255, 0, 0), 0.5)
    assert (color.red(), color.green(), color.blue(), color.alpha()) == (128, 0, 0, 255)


def test_argb_endpoints():
    from property_animation.animation import evaluate_argb

    black, red = QColor(0, 0, 0), QColor(255, 0, 0)
    assert evaluate_argb(black, red, 0.0) == black
    assert evaluate_argb(black, red, 1.0) == red


def test_argb_interpolates_alpha():
    from property_animation.animation import evaluate_argb

    color = evaluate_argb(QColor(0, 0, 0, 0), QColor(0, 0, 0, 200), 0.25)
    assert color.alpha() == 50


def test_packed_int_interpolation_drifts_through_green():
    """Plain integer interpolation leaks carries into the green channel."""
    from property_animation.animation import evaluate_packed_int

    black, red = 0xFF000000, 0xFFFF0000
    mid = evaluate_packed_int(black, red, 0.5)
    green = (mid >> 8) & 0xFF
    red_channel = (mid >> 16) & 0xFF
    assert green == 0x80
    assert red_channel == 0x7F


def test_easing_curves():
    from property_animation.animation import easing_curve, LINEAR, ACCELERATE

    linear = easing_curve(LINEAR)
    accelerate = easing_curve(ACCELERATE)
    assert linear.valueForProgress(0.5) == pytest.approx(0.5)
    # Quadratic-in: t^2
    assert accelerate.valueForProgress(0.5) == pytest.approx(0.25)
    assert accelerate.valueForProgress(1.0) == pytest.approx(1.0)
