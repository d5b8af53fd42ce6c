"""Higher-order wrappers that attach side effects to timeline configs."""

from typing import TYPE_CHECKING
import logging

from PyQt6.QtWidgets import QWidget

from property_animation.animation.timeline import TimelineConfig

if TYPE_CHECKING:
    from property_animation.widgets.star_field import StarField
    from property_animation.widgets.star_item import StarItem

logger = logging.getLogger(__name__)


def disable_control_during(config: TimelineConfig, control: QWidget) -> TimelineConfig:
    """Return ``config`` with hooks that disable ``control`` while it plays.

    The control is re-enabled once the final iteration (including any
    reversed repeat) has finished.
    """

    def disable():
        control.setEnabled(False)

    def enable():
        control.setEnabled(True)
        logger.debug(f"[Listeners] Re-enabled control for '{config.name}'")

    return config.with_hooks(on_start=disable, on_complete=enable)


def remove_from_container_on_complete(
    config: TimelineConfig,
    container: "StarField",
    star: "StarItem",
) -> TimelineConfig:
    """Return ``config`` with a hook that removes ``star`` when it completes."""

    def remove():
        container.remove_star(star)

    return config.with_hooks(on_complete=remove)
