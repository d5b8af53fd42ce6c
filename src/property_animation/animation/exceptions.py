"""Animation exceptions."""


class PropertyAnimationError(Exception):
    """Base class for errors raised by the property animation package."""


class AnimationEngineUnavailableError(PropertyAnimationError):
    """Raised when no Qt application exists to drive animation timers."""


class InvalidTimelineError(PropertyAnimationError, ValueError):
    """Raised when a timeline description cannot be played."""
