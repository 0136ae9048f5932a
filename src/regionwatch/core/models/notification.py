"""Notification state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class NotifierPhase(str, Enum):
    """Phases of the re-arming notification loop."""

    IDLE = "idle"
    ARMED = "armed"
    SHOWING = "showing"
    UNMOUNTED = "unmounted"


@dataclass(frozen=True)
class NotificationAction:
    """Single button offered by a notification surface."""

    label: str
    on_acknowledge: Callable[[], None]


@dataclass
class NotificationState:
    """Mutable state owned by one notifier instance."""

    has_shown_once: bool = False
    phase: NotifierPhase = NotifierPhase.IDLE
    display_count: int = 0
    acknowledge_count: int = 0
    torn_down: bool = False

    @property
    def redisplay_count(self) -> int:
        """Displays that followed a dismissal."""
        return max(0, self.display_count - 1)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "has_shown_once": self.has_shown_once,
            "phase": self.phase.value,
            "display_count": self.display_count,
            "acknowledge_count": self.acknowledge_count,
            "redisplay_count": self.redisplay_count,
            "torn_down": self.torn_down,
        }
