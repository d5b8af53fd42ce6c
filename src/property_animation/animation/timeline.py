"""Event-driven timeline layer over Qt's animation framework.

A timeline is described by an immutable :class:`TimelineConfig` and played by
a :class:`TimelineEngine`, which hands back a :class:`Timeline` handle:

    engine = TimelineEngine()
    config = TimelineConfig(
        tracks=(PropertyTrack(star.set_alpha, 1.0, 0.0),),
        repeat_count=1,
        repeat_mode=RepeatMode.REVERSE,
        on_complete=(lambda: print("done"),),
    )
    timeline = engine.play(config)

Every track of one timeline runs on the same clock. Qt drives progress from
the GUI event loop, so ``play()`` returns immediately and hooks fire later on
the same thread.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from functools import partial
from typing import Any, Callable, List, Optional, Tuple
import logging

from PyQt6.QtCore import (
    QAbstractAnimation,
    QCoreApplication,
    QEasingCurve,
    QObject,
    QParallelAnimationGroup,
    QTimer,
    pyqtSignal,
)

from property_animation.animation.animation_config import AnimationConfig, get_animation_config
from property_animation.animation.evaluators import ACCELERATE_DECELERATE, easing_curve, evaluate_float
from property_animation.animation.exceptions import AnimationEngineUnavailableError, InvalidTimelineError

logger = logging.getLogger(__name__)

Hook = Callable[[], None]


class RepeatMode(Enum):
    """What a timeline does when it repeats."""
    RESTART = "restart"
    REVERSE = "reverse"


@dataclass(frozen=True)
class PropertyTrack:
    """One property animated from ``start`` to ``end``.

    ``setter`` receives each interpolated value. ``evaluator`` turns an eased
    fraction into that value.
    """

    setter: Callable[[Any], None]
    start: Any
    end: Any
    easing: QEasingCurve.Type = ACCELERATE_DECELERATE
    evaluator: Callable[[Any, Any, float], Any] = evaluate_float

    def value_at(self, fraction: float) -> Any:
        return self.evaluator(self.start, self.end, fraction)

    def apply(self, fraction: float) -> None:
        self.setter(self.value_at(fraction))


@dataclass(frozen=True)
class TimelineConfig:
    """Immutable description of a timeline.

    Attributes:
        tracks: Properties animated together, in lockstep
        duration_ms: Length of one iteration (None = engine default)
        repeat_count: Extra iterations after the first run
        repeat_mode: Restart or reverse on each repeat
        on_start: Hooks called when the timeline starts
        on_complete: Hooks called after the final iteration ends
        name: Label used in log messages
    """

    tracks: Tuple[PropertyTrack, ...]
    duration_ms: Optional[int] = None
    repeat_count: int = 0
    repeat_mode: RepeatMode = RepeatMode.RESTART
    on_start: Tuple[Hook, ...] = field(default_factory=tuple)
    on_complete: Tuple[Hook, ...] = field(default_factory=tuple)
    name: str = "timeline"

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))
        object.__setattr__(self, "on_start", tuple(self.on_start))
        object.__setattr__(self, "on_complete", tuple(self.on_complete))

        if not self.tracks:
            raise InvalidTimelineError(f"Timeline '{self.name}' has no tracks")
        if self.duration_ms is not None and self.duration_ms < 0:
            raise InvalidTimelineError(f"Timeline '{self.name}' has negative duration {self.duration_ms}")
        if self.repeat_count < 0:
            raise InvalidTimelineError(f"Timeline '{self.name}' has negative repeat count {self.repeat_count}")

    def with_hooks(
        self,
        on_start: Optional[Hook] = None,
        on_complete: Optional[Hook] = None,
    ) -> "TimelineConfig":
        """Return a copy with extra start/complete hooks appended."""
        return replace(
            self,
            on_start=self.on_start + ((on_start,) if on_start else ()),
            on_complete=self.on_complete + ((on_complete,) if on_complete else ()),
        )


def final_fraction(repeat_count: int, repeat_mode: RepeatMode) -> float:
    """Fraction a timeline rests at after its last iteration."""
    if repeat_mode is RepeatMode.REVERSE and repeat_count % 2 == 1:
        return 0.0
    return 1.0


class TrackAnimation(QAbstractAnimation):
    """Drives a single :class:`PropertyTrack` from Qt's animation timer."""

    def __init__(
        self,
        track: PropertyTrack,
        duration_ms: int,
        repeat_count: int = 0,
        repeat_mode: RepeatMode = RepeatMode.RESTART,
        parent=None,
    ):
        super().__init__(parent)
        self._track = track
        self._duration_ms = duration_ms
        self._repeat_mode = repeat_mode
        self._curve = easing_curve(track.easing)
        self.setLoopCount(repeat_count + 1)

    def duration(self) -> int:
        return self._duration_ms

    def updateCurrentTime(self, current_time: int) -> None:
        if self._duration_ms <= 0:
            return
        fraction = current_time / self._duration_ms
        if self._repeat_mode is RepeatMode.REVERSE and self.currentLoop() % 2 == 1:
            fraction = 1.0 - fraction
        self._track.apply(self._curve.valueForProgress(fraction))


class Timeline(QObject):
    """Handle for a playing timeline.

    ``started``/``completed`` signals fire after the config's own hooks, so
    listeners attached here observe the post-hook state.
    """

    started = pyqtSignal()
    completed = pyqtSignal()

    def __init__(self, config: TimelineConfig, animation: QAbstractAnimation, parent=None):
        super().__init__(parent)
        self.config = config
        self._animation = animation
        self._animation.setParent(self)
        self._running = False
        self._finished = False
        self._animation.finished.connect(self._on_finished)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def total_duration_ms(self) -> int:
        return self._animation.totalDuration()

    @property
    def animation(self) -> QAbstractAnimation:
        return self._animation

    def on_start(self, fn: Hook) -> None:
        """Listen for start. Called at once if the timeline has already started."""
        if self._running or self._finished:
            fn()
            return
        self.started.connect(fn)

    def on_complete(self, fn: Hook) -> None:
        """Listen for completion. Called at once if the timeline has already finished."""
        if self._finished:
            fn()
            return
        self.completed.connect(fn)

    def start(self) -> None:
        if self._running or self._finished:
            logger.warning(f"[Timeline] '{self.name}' already started, ignoring")
            return
        self._running = True
        for hook in self.config.on_start:
            hook()
        self.started.emit()

        if self.total_duration_ms == 0:
            # Qt skips zero-length group children, so settle final values here
            fraction = final_fraction(self.config.repeat_count, self.config.repeat_mode)
            for track in self.config.tracks:
                track.apply(fraction)
            self._on_finished()
            return
        self._animation.start()

    def seek(self, time_ms: int) -> None:
        """Jump to ``time_ms`` on the timeline's total clock.

        Seeking a running timeline to its end completes it synchronously.
        """
        self._animation.setCurrentTime(time_ms)

    def _on_finished(self) -> None:
        if self._finished:
            return
        self._running = False
        self._finished = True
        logger.debug(f"[Timeline] '{self.name}' completed")
        for hook in self.config.on_complete:
            hook()
        self.completed.emit()


class TimelineEngine(QObject):
    """Builds Qt animations from timeline configs and keeps them alive.

    Requires a running ``QCoreApplication``; construction fails fast without
    one because nothing would ever advance the animations.
    """

    def __init__(self, config: Optional[AnimationConfig] = None, parent=None):
        if QCoreApplication.instance() is None:
            raise AnimationEngineUnavailableError(
                "TimelineEngine requires a QApplication; create one before building the panel"
            )
        super().__init__(parent)
        self._config = config or get_animation_config()
        self._active: List[Timeline] = []

    @property
    def active_count(self) -> int:
        return len(self._active)

    def active_timelines(self) -> List[Timeline]:
        return list(self._active)

    def build(self, config: TimelineConfig) -> Timeline:
        """Create a stopped timeline for ``config``."""
        duration = config.duration_ms
        if duration is None:
            duration = self._config.default_duration_ms
        duration = self._config.scaled(duration)

        animations = [
            TrackAnimation(track, duration, config.repeat_count, config.repeat_mode)
            for track in config.tracks
        ]
        if len(animations) == 1:
            animation = animations[0]
        else:
            animation = QParallelAnimationGroup()
            for child in animations:
                animation.addAnimation(child)

        return Timeline(config, animation, parent=self)

    def play(self, config: TimelineConfig) -> Timeline:
        """Build and start a timeline, returning its handle."""
        timeline = self.build(config)
        self._active.append(timeline)
        timeline.completed.connect(self._on_timeline_completed)
        logger.debug(
            f"[TimelineEngine] Playing '{config.name}' ({len(config.tracks)} tracks, "
            f"{timeline.total_duration_ms}ms total)"
        )
        timeline.start()
        return timeline

    def _on_timeline_completed(self) -> None:
        timeline = self.sender()
        if timeline in self._active:
            self._active.remove(timeline)
        # Detach once the emission unwinds; callers holding the handle keep it alive
        QTimer.singleShot(0, partial(timeline.setParent, None))
