"""Short-lived on-screen notifications that fade out after a few seconds."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

Color = tuple[float, float, float, float]

SUCCESS: Color = (0.3, 1.0, 0.3, 1.0)
ERROR: Color = (1.0, 0.3, 0.3, 1.0)
WARNING: Color = (1.0, 0.5, 0.2, 1.0)
INFO: Color = (0.4, 0.7, 1.0, 1.0)

DEFAULT_DURATION = 3.0
FADE_SECONDS = 1.0


@dataclass(frozen=True)
class Notification:
    """A message shown for ``duration`` seconds from ``start_time``."""

    title: str
    message: str
    color: Color
    start_time: float
    duration: float = DEFAULT_DURATION

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    def expired(self, now: float) -> bool:
        return now > self.end_time


@dataclass(frozen=True)
class VisibleNotification:
    """A notification as it should be drawn at a given moment."""

    notification: Notification
    slot: int
    time_left: float
    alpha: float
    progress: float


@dataclass
class NotificationCenter:
    """Collects notifications and reports which are still on screen."""

    clock: Callable[[], float] = time.monotonic
    notifications: list[Notification] = field(default_factory=list)

    def show(self, title: str, message: str, color: Color = INFO) -> Notification:
        """Queue a notification starting now and return it."""
        note = Notification(title, message, tuple(color), float(self.clock()))
        self.notifications.append(note)
        return note

    def visible(self, now: float | None = None) -> list[VisibleNotification]:
        """Drop expired notifications and describe the rest, oldest first."""
        if now is None:
            now = self.clock()
        self.notifications = [n for n in self.notifications if not n.expired(now)]
        result = []
        for slot, note in enumerate(self.notifications):
            time_left = note.end_time - now
            alpha = min(time_left, FADE_SECONDS)
            progress = 1.0 - time_left / note.duration
            result.append(VisibleNotification(note, slot, time_left, alpha, progress))
        return result

    def __len__(self) -> int:
        return len(self.notifications)