"""Frame timing and time-span helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class FrameTime:
    """Tracks the time elapsed between consecutive frames."""

    def __init__(self, now_time: Optional[float] = None) -> None:
        self.last_frame_time = 0.0 if now_time is None else float(now_time)
        self.delta_time = 0.0

    def next_frame(self, now_time: float) -> None:
        """Record a new frame at ``now_time`` and update the delta."""
        self.delta_time = now_time - self.last_frame_time
        self.last_frame_time = float(now_time)


@dataclass(frozen=True)
class TimeStep:
    """A span of time stored in seconds, viewable in other units."""

    seconds: float = 0.0

    @property
    def milliseconds(self) -> float:
        return self.seconds * 1000.0

    @property
    def minutes(self) -> float:
        return self.seconds / 60.0

    @property
    def hours(self) -> float:
        return self.seconds / 3600.0

    @property
    def days(self) -> float:
        return self.seconds / 86400.0