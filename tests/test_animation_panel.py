"""Tests for the animation panel triggers."""

import pytest

GATED_TRIGGERS = ("rotate", "translate", "scale", "fade", "colorize")


def test_panel_builds_six_triggers(panel):
    from property_animation.widgets import TRIGGER_NAMES

    assert len(TRIGGER_NAMES) == 6
    for name in TRIGGER_NAMES:
        button = panel.button(name)
        assert button.isEnabled()
        assert button.text() == name.capitalize()


def test_unknown_trigger_raises(panel):
    with pytest.raises(KeyError):
        panel.trigger("explode")


@pytest.mark.parametrize("name", GATED_TRIGGERS)
def test_gated_trigger_disabled_until_complete(panel, name):
    """Re-activation has no effect for the whole run, including the reverse leg."""
    button = panel.button(name)
    timeline = panel.trigger(name)

    assert timeline is not None
    assert not button.isEnabled()
    assert panel.engine.active_count == 1

    # A second activation while running is ignored
    assert panel.trigger(name) is None
    button.click()
    assert panel.engine.active_count == 1

    total = timeline.total_duration_ms
    for t in (0, total // 4, total // 2, (3 * total) // 4, total - 1):
        timeline.seek(t)
        assert not button.isEnabled()

    timeline.seek(total)
    assert timeline.is_finished
    assert button.isEnabled()
    assert panel.engine.active_count == 0


def test_rotate_runs_from_minus_360_to_zero(panel):
    timeline = panel.trigger("rotate")
    assert timeline.total_duration_ms == 1000
    assert panel.star.rotation_deg == pytest.approx(-360.0)

    timeline.seek(500)
    assert panel.star.rotation_deg == pytest.approx(-180.0)

    timeline.seek(1000)
    assert panel.star.rotation_deg == pytest.approx(0.0)


def test_rotate_twice_gives_same_run(panel):
    for _ in range(2):
        timeline = panel.trigger("rotate")
        assert timeline is not None
        assert panel.star.rotation_deg == pytest.approx(-360.0)
        timeline.seek(timeline.total_duration_ms)
        assert panel.star.rotation_deg == pytest.approx(0.0)
        assert panel.button("rotate").isEnabled()


def test_translate_returns_to_start(panel):
    timeline = panel.trigger("translate")
    assert timeline.total_duration_ms == 600

    timeline.seek(300)
    assert panel.star.translation_x == pytest.approx(200.0)

    timeline.seek(600)
    assert panel.star.translation_x == pytest.approx(0.0)


def test_scale_axes_stay_equal(panel):
    timeline = panel.trigger("scale")
    total = timeline.total_duration_ms

    for t in range(0, total, 20):
        timeline.seek(t)
        assert panel.star.scale_x == panel.star.scale_y

    timeline.seek(total // 2)
    assert panel.star.scale_x == pytest.approx(4.0)

    timeline.seek(total)
    assert panel.star.scale_x == pytest.approx(1.0)
    assert panel.star.scale_y == pytest.approx(1.0)


def test_fade_returns_to_opaque(panel):
    timeline = panel.trigger("fade")

    timeline.seek(timeline.total_duration_ms // 2)
    assert panel.star.alpha == pytest.approx(0.0)

    timeline.seek(timeline.total_duration_ms)
    assert panel.star.alpha == pytest.approx(1.0)


def test_colorize_interpolates_channels(panel):
    field = panel.star_field
    timeline = panel.trigger("colorize")
    assert timeline.total_duration_ms == 1000

    timeline.seek(250)
    color = field.background_color
    assert abs(color.red() - 128) <= 1
    assert color.green() == 0
    assert color.blue() == 0

    timeline.seek(500)
    assert field.background_color.red() == 255

    timeline.seek(1000)
    assert field.background_color.red() == 0
    assert panel.button("colorize").isEnabled()


def test_shower_trigger_stays_enabled(panel):
    baseline = panel.star_field.child_count()

    timelines = [panel.trigger("shower") for _ in range(3)]

    assert all(t is not None for t in timelines)
    assert panel.button("shower").isEnabled()
    assert panel.star_field.child_count() == baseline + 3
    assert panel.engine.active_count == 3


def test_shower_star_starts_above_field(panel):
    panel.trigger("shower")
    star = panel.star_field.transient_stars()[0]

    assert star.scale_x == star.scale_y
    assert 0.1 <= star.scale_x < 1.6
    assert star.translation_y == pytest.approx(-panel.star.size * star.scale_y)
    assert star.rotation_deg == pytest.approx(0.0)


def test_shower_removes_each_star_exactly_once(panel, monkeypatch):
    field = panel.star_field
    baseline = field.child_count()

    removed = []
    original_remove = field.remove_star

    def counting_remove(star):
        removed.append(star)
        return original_remove(star)

    monkeypatch.setattr(field, "remove_star", counting_remove)

    timelines = [panel.trigger("shower") for _ in range(100)]
    stars = field.transient_stars()
    assert len(stars) == 100
    assert field.child_count() == baseline + 100

    # Finish in reverse order; completion order must not matter
    for index, timeline in enumerate(reversed(timelines)):
        timeline.seek(timeline.total_duration_ms)
        assert field.child_count() == baseline + 100 - index - 1

    assert len(removed) == 100
    assert len({id(star) for star in removed}) == 100
    assert {id(star) for star in removed} == {id(star) for star in stars}
    assert field.transient_stars() == []
    assert field.child_count() == baseline
    assert panel.engine.active_count == 0


def test_shower_star_not_removed_before_completion(panel):
    field = panel.star_field
    timeline = panel.trigger("shower")
    star = field.transient_stars()[0]

    timeline.seek(timeline.total_duration_ms - 1)
    assert star in field.transient_stars()
    assert star.scene() is field.scene()

    timeline.seek(timeline.total_duration_ms)
    assert star not in field.transient_stars()
    assert star.scene() is None


def test_independent_triggers_overlap(panel):
    rotate = panel.trigger("rotate")
    fade = panel.trigger("fade")
    panel.trigger("shower")

    assert panel.engine.active_count == 3
    fade.seek(fade.total_duration_ms)
    assert panel.button("fade").isEnabled()
    assert not panel.button("rotate").isEnabled()
    assert rotate.is_running


def test_panel_fails_fast_without_application(monkeypatch):
    from property_animation.animation import timeline as timeline_module
    from property_animation.animation import AnimationEngineUnavailableError
    from property_animation.widgets import AnimationPanel

    class NoApplication:
        @staticmethod
        def instance():
            return None

    monkeypatch.setattr(timeline_module, "QCoreApplication", NoApplication)
    with pytest.raises(AnimationEngineUnavailableError):
        AnimationPanel()


def test_on_start_attached_to_trigger_result_fires(panel):
    timeline = panel.trigger("rotate")

    started = []
    timeline.on_start(lambda: started.append(True))
    assert started == [True]


def test_trigger_result_survives_deferred_deletes(panel, qapp):
    from PyQt6.QtCore import QCoreApplication, QEvent

    timeline = panel.trigger("fade")
    timeline.seek(timeline.total_duration_ms)
    qapp.processEvents()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)

    completed = []
    timeline.on_complete(lambda: completed.append(True))
    assert completed == [True]
    assert timeline.is_finished
    assert timeline.total_duration_ms == 600
    assert panel.engine.active_count == 0


def test_colorize_endpoints_ignore_window_theme(qapp):
    import random
    from PyQt6.QtGui import QColor
    from property_animation.theming import ColorScheme
    from property_animation.widgets import AnimationPanel

    scheme = ColorScheme(window_bg=(0, 0, 255), button_normal_bg=(0, 255, 0))
    widget = AnimationPanel(color_scheme=scheme, rng=random.Random(1))
    field = widget.star_field
    assert field.background_color == QColor(0, 0, 0)

    timeline = widget.trigger("colorize")
    timeline.seek(500)
    assert field.background_color == QColor(255, 0, 0)

    timeline.seek(1000)
    assert field.background_color == QColor(0, 0, 0)
    widget.deleteLater()


def test_colorize_endpoints_come_from_animation_config(qapp):
    import random
    from PyQt6.QtGui import QColor
    from property_animation.animation import AnimationConfig
    from property_animation.widgets import AnimationPanel

    config = AnimationConfig(colorize_from_rgb=(10, 20, 30), colorize_to_rgb=(0, 0, 255))
    widget = AnimationPanel(config=config, rng=random.Random(1))
    field = widget.star_field
    assert field.background_color == QColor(10, 20, 30)

    timeline = widget.trigger("colorize")
    timeline.seek(500)
    assert field.background_color == QColor(0, 0, 255)

    timeline.seek(1000)
    assert field.background_color == QColor(10, 20, 30)
    widget.deleteLater()
