"""
Animation layer.

Timeline descriptions, the engine that plays them on Qt's animation timer,
value evaluators and the listener wrappers used by the panel triggers.
"""

from .animation_config import AnimationConfig, get_animation_config, set_animation_config
from .evaluators import (
    evaluate_float,
    evaluate_argb,
    evaluate_packed_int,
    easing_curve,
    LINEAR,
    ACCELERATE,
    ACCELERATE_DECELERATE,
)
from .exceptions import (
    PropertyAnimationError,
    AnimationEngineUnavailableError,
    InvalidTimelineError,
)
from .timeline import (
    PropertyTrack,
    RepeatMode,
    Timeline,
    TimelineConfig,
    TimelineEngine,
    TrackAnimation,
)
from .listeners import disable_control_during, remove_from_container_on_complete
from .shower import ShowerStarPlan, plan_shower_star

__all__ = [
    "AnimationConfig",
    "get_animation_config",
    "set_animation_config",
    "evaluate_float",
    "evaluate_argb",
    "evaluate_packed_int",
    "easing_curve",
    "LINEAR",
    "ACCELERATE",
    "ACCELERATE_DECELERATE",
    "PropertyAnimationError",
    "AnimationEngineUnavailableError",
    "InvalidTimelineError",
    "PropertyTrack",
    "RepeatMode",
    "Timeline",
    "TimelineConfig",
    "TimelineEngine",
    "TrackAnimation",
    "disable_control_during",
    "remove_from_container_on_complete",
    "ShowerStarPlan",
    "plan_shower_star",
]
