"""pytest configuration and fixtures for property-animation tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_animation_config():
    """Keep the global animation config from leaking between tests."""
    from property_animation.animation import set_animation_config

    set_animation_config(None)
    yield
    set_animation_config(None)


@pytest.fixture
def panel(qapp):
    """Animation panel with a seeded RNG and a fixed-size field."""
    import random
    from property_animation.widgets import AnimationPanel

    widget = AnimationPanel(rng=random.Random(1234))
    widget.star_field.set_field_size(400, 600)
    yield widget
    widget.deleteLater()
