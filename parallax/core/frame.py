# parallax/core/frame.py
"""
Tick State

Immutable record produced by every Scene tick.
Contains scroll snapshot, direction and the resolved local time.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


class Transition(Enum):
    STAY = auto()
    ADVANCE = auto()
    RETREAT = auto()


@dataclass(frozen=True)
class TickState:
    """
    Immutable tick information, emitted with SIGNAL_TICK.
    """
    frame_id: int               # Monotonically increasing tick counter
    scroll_pos: float           # Scroll offset read this tick
    previous_scroll_pos: float  # Scroll offset read on the previous tick
    active_index: int           # Active keyframe after transition handling
    local_time: float           # scroll_pos - active keyframe start offset
    transition: Transition = Transition.STAY

    @property
    def is_scrolling_down(self) -> bool:
        """Ties count as forward."""
        return self.scroll_pos >= self.previous_scroll_pos

    @property
    def scroll_delta(self) -> float:
        return self.scroll_pos - self.previous_scroll_pos
