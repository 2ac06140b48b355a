"""
Entrance Transition
===================
Describes the grow-and-fade-in effect played when a new star is drawn.

The transition is purely visual. It never feeds back into geometry, and a
newer render simply supersedes one still in flight.

Classes:
    EntranceTransition: Timing of the effect and a pure `sample(elapsed)`.
    TransitionFrame: Scale/opacity to apply at one instant.
    TransitionHandle: A running transition that can be cancelled.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional
import time


def ease_out(t: float) -> float:
    """Cubic ease-out on [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return 1.0 - (1.0 - t) ** 3


@dataclass(frozen=True)
class TransitionFrame:
    scale: float
    opacity: float
    finished: bool = False


@dataclass(frozen=True)
class EntranceTransition:
    delay: float = 0.05  # seconds before the effect starts
    duration: float = 0.5
    start_scale: float = 0.0
    end_scale: float = 1.0
    start_opacity: float = 0.0
    end_opacity: float = 1.0

    def __post_init__(self) -> None:
        if self.delay < 0 or self.duration < 0:
            raise ValueError("Transition delay and duration must be non-negative.")

    @property
    def total_time(self) -> float:
        return self.delay + self.duration

    def final_frame(self) -> TransitionFrame:
        return TransitionFrame(self.end_scale, self.end_opacity, finished=True)

    def sample(self, elapsed: float) -> TransitionFrame:
        """Frame at `elapsed` seconds after the transition was requested."""
        if elapsed >= self.total_time:
            return self.final_frame()
        if elapsed <= self.delay or self.duration == 0:
            return TransitionFrame(self.start_scale, self.start_opacity)

        k = ease_out((elapsed - self.delay) / self.duration)
        return TransitionFrame(
            scale=self.start_scale + (self.end_scale - self.start_scale) * k,
            opacity=self.start_opacity + (self.end_opacity - self.start_opacity) * k,
        )


@dataclass
class TransitionHandle:
    """Running instance of a transition. Cancelling snaps it to the final frame."""
    transition: EntranceTransition
    clock: Callable[[], float] = time.monotonic
    started_at: float = field(init=False)
    cancelled: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.started_at = self.clock()

    def cancel(self) -> None:
        self.cancelled = True

    def frame(self, now: Optional[float] = None) -> TransitionFrame:
        if self.cancelled:
            return self.transition.final_frame()
        now = self.clock() if now is None else now
        return self.transition.sample(now - self.started_at)

    @property
    def finished(self) -> bool:
        return self.frame().finished
