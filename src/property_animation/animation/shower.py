"""Randomized parameters for a single shower star."""

from dataclasses import dataclass
from typing import Optional
import random

from property_animation.animation.animation_config import AnimationConfig, get_animation_config


@dataclass(frozen=True)
class ShowerStarPlan:
    """Everything needed to spawn and animate one falling star."""

    scale: float
    translation_x: float
    fall_from_y: float
    fall_to_y: float
    rotation_to_deg: float
    duration_ms: int


def plan_shower_star(
    rng: random.Random,
    field_width: float,
    field_height: float,
    star_width: float,
    star_height: float,
    config: Optional[AnimationConfig] = None,
) -> ShowerStarPlan:
    """Draw a random plan for one shower star.

    The star is centred on a random x inside the field, so up to half of it
    can hang off either edge. It falls from fully above the field to fully
    below it.
    """
    config = config or get_animation_config()

    scale = rng.random() * config.shower_scale_span + config.shower_min_scale
    scaled_width = star_width * scale
    scaled_height = star_height * scale

    translation_x = rng.random() * field_width - scaled_width / 2
    rotation_to = rng.random() * config.shower_max_rotation_deg
    duration_ms = int(rng.random() * config.shower_duration_span_ms + config.shower_min_duration_ms)

    return ShowerStarPlan(
        scale=scale,
        translation_x=translation_x,
        fall_from_y=-scaled_height,
        fall_to_y=field_height + scaled_height,
        rotation_to_deg=rotation_to,
        duration_ms=duration_ms,
    )
