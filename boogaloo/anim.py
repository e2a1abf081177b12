"""Piecewise animation curves played back over time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from boogaloo.vecmath import lerp


@dataclass(frozen=True)
class Segment:
    """Goes from begin to end over duration seconds, shaped by an easing f."""

    begin: float
    end: float
    duration: float
    f: Optional[Callable[[float], float]] = None


@dataclass
class AnimPlayer:
    """Plays a sequence of segments one after another."""

    segments: Sequence[Segment]
    segment_current: int = 0
    segment_time: float = 0.0

    def update(self, dt: float) -> float:
        """Advance by dt seconds and return the current value.

        A finished animation holds the end of its last segment.
        """
        count = len(self.segments)
        if self.segment_current < count:
            self.segment_time += dt
            while (
                self.segment_current < count
                and self.segment_time >= self.segments[self.segment_current].duration
            ):
                self.segment_time -= self.segments[self.segment_current].duration
                self.segment_current += 1

            if self.segment_current < count:
                segment = self.segments[self.segment_current]
                t = self.segment_time / segment.duration
                return lerp(segment.begin, segment.end, segment.f(t) if segment.f else t)

        if count == 0:
            raise ValueError("animation has no segments")
        return self.segments[-1].end

    def is_finished(self) -> bool:
        return self.segment_current >= len(self.segments)

    def reset(self) -> None:
        self.segment_current = 0
        self.segment_time = 0.0