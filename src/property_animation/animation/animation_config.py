"""Declarative configuration for the animation panel.

Applications can replace the global config before building the panel:

    set_animation_config(AnimationConfig(duration_scale=0.5))
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass
class AnimationConfig:
    """Animation tuning knobs for the six panel triggers."""

    # Platform default when an animation does not set its own duration
    default_duration_ms: int = 300

    # Rotate: single linear run
    rotate_from_deg: float = -360.0
    rotate_to_deg: float = 0.0
    rotate_duration_ms: int = 1000

    # Translate / scale / fade: one reversed repeat each
    translate_distance: float = 200.0
    scale_target: float = 4.0
    fade_target: float = 0.0

    # Colorize: the container rests at the start colour and animates to the
    # end colour and back. Fixed here, independent of the window theme.
    colorize_from_rgb: Tuple[int, int, int] = (0, 0, 0)
    colorize_to_rgb: Tuple[int, int, int] = (255, 0, 0)
    colorize_duration_ms: int = 500

    # Shower
    shower_min_scale: float = 0.1
    shower_scale_span: float = 1.5
    shower_max_rotation_deg: float = 1080.0
    shower_min_duration_ms: int = 500
    shower_duration_span_ms: int = 1500

    # Star geometry (logical pixels, unscaled)
    star_size: float = 48.0

    # Global multiplier applied to every duration, like the platform's
    # animator duration scale developer option. 0 makes animations instant.
    duration_scale: float = 1.0

    def __post_init__(self):
        for name in (
            "default_duration_ms",
            "rotate_duration_ms",
            "colorize_duration_ms",
            "shower_min_duration_ms",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.shower_duration_span_ms < 0:
            raise ValueError(f"shower_duration_span_ms must be >= 0, got {self.shower_duration_span_ms}")
        if self.shower_min_scale <= 0 or self.shower_scale_span < 0:
            raise ValueError(
                f"Invalid shower scale range: min={self.shower_min_scale}, span={self.shower_scale_span}"
            )
        if self.star_size <= 0:
            raise ValueError(f"star_size must be positive, got {self.star_size}")
        if self.duration_scale < 0:
            raise ValueError(f"duration_scale must be >= 0, got {self.duration_scale}")
        for name in ("colorize_from_rgb", "colorize_to_rgb"):
            rgb = tuple(getattr(self, name))
            if len(rgb) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
                raise ValueError(f"{name} must be three ints in 0..255, got {rgb}")
            setattr(self, name, rgb)

    def scaled(self, duration_ms: int) -> int:
        """Apply ``duration_scale`` to a duration in milliseconds."""
        return int(round(duration_ms * self.duration_scale))


_config: Optional[AnimationConfig] = None


def set_animation_config(config: Optional[AnimationConfig]) -> None:
    """Set the global animation config (``None`` restores defaults)."""
    global _config
    _config = config
    if config is not None:
        logger.info(f"[AnimationConfig] Using custom config (duration_scale={config.duration_scale})")


def get_animation_config() -> AnimationConfig:
    """Return singleton animation config."""
    global _config
    if _config is None:
        _config = AnimationConfig()
    return _config
