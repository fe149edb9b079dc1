# parallax/timeline/scene.py
"""
Scene - scroll-driven timeline over an ordered list of keyframes.

The scroll offset is split into consecutive keyframe spans, each
duration_fraction * viewport height long. One keyframe is active at a
time; crossing a span boundary finalizes the outgoing keyframe, hides
it, and shows the incoming one. Within the active span the local time
(scroll offset minus span start) drives every element.

Typical usage:

    host = HeadlessHost(width=1000, height=500)
    ...
    scene = Scene(host, load_scene("intro_scene.json"))
    # the host's timer now calls scene.tick() once per frame
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

import numpy as np

from parallax.core.easing import DEFAULT_EASING, Easing, clamp
from parallax.core.frame import TickState, Transition
from parallax.core.signal import (
    Connection,
    SIGNAL_KEYFRAME_CHANGED, SIGNAL_LAYOUT, SIGNAL_RESIZE, SIGNAL_TICK,
)
from parallax.host.base import Host
from parallax.host.scheduler import FrameScheduler
from parallax.timeline.keyframe import Keyframe
from parallax.timeline.schema import KeyframeDescriptor, coerce_keyframes

logger = logging.getLogger(__name__)


@dataclass
class SceneConfig:
    tick_interval: float = 0.010            # seconds between timer firings
    translate_precision: int = 2            # decimal places for translation
    easing: Easing = DEFAULT_EASING
    hide_inactive_on_layout: bool = True    # hide every keyframe but the first on layout
    settle_after_transition: bool = True    # force the update that follows a boundary crossing
    validate: bool = True
    coalesce_frames: bool = True            # at most one pending frame callback


class Scene:
    """Owns the keyframe sequence, the scroll snapshots and the boundary state machine."""

    def __init__(
        self,
        host: Host,
        keyframes: Sequence[Union[KeyframeDescriptor, Dict[str, Any]]],
        config: Optional[SceneConfig] = None,
    ):
        self.host = host
        self.config = config or SceneConfig()
        self.bridge = host.bridge

        descriptors = coerce_keyframes(list(keyframes))
        if not descriptors:
            raise ValueError("Scene needs at least one keyframe")
        if self.config.validate:
            for i, desc in enumerate(descriptors):
                desc.validate(f"keyframes[{i}]")

        self.keyframes: List[Keyframe] = [
            Keyframe(
                host,
                desc,
                easing=self.config.easing,
                translate_precision=self.config.translate_precision,
            )
            for desc in descriptors
        ]
        self.keyframes_max_index = len(self.keyframes) - 1

        self.viewport_width: float = 0.0
        self.viewport_height: float = 0.0
        self.total_extent: float = 0.0
        self.scroll_pos: float = 0.0
        self.previous_scroll_pos: float = 0.0
        self.active_index: int = 0
        self.active_start_offset: float = 0.0
        self.frame_id: int = 0
        self.last_tick: Optional[TickState] = None

        self.scheduler = FrameScheduler(
            host, self.tick,
            period=self.config.tick_interval,
            coalesce=self.config.coalesce_frames,
        )
        self._connections: List[Connection] = [
            self.bridge.connect(SIGNAL_RESIZE, self._on_resize),
        ]

        self.layout()
        logger.info(
            f"scene started: {len(self.keyframes)} keyframes, extent={self.total_extent:g}px"
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def active_keyframe(self) -> Keyframe:
        return self.keyframes[self.active_index]

    @property
    def durations(self) -> np.ndarray:
        return np.array([k.duration_px for k in self.keyframes], dtype=np.float64)

    @property
    def offsets(self) -> np.ndarray:
        """Start offset of every keyframe, plus the end of the last one."""
        return np.concatenate(([0.0], np.cumsum(self.durations)))

    def keyframe_index_at(self, scroll_pos: float) -> int:
        """
        Index of the keyframe whose span contains scroll_pos, clamped to the ends.

        A span owns its end offset: tick() only advances once the scroll
        offset passes start + duration, so the boundary belongs to the
        earlier keyframe.
        """
        idx = int(np.searchsorted(self.offsets, scroll_pos, side='left')) - 1
        return int(clamp(idx, 0, self.keyframes_max_index))

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def layout(self):
        """Recompute every span from the current viewport and restart at the top."""
        self.viewport_width, self.viewport_height = self.host.viewport_size()
        for keyframe in self.keyframes:
            keyframe.layout(self.viewport_height, self.viewport_width)

        self.total_extent = self.viewport_height + sum(k.duration_px for k in self.keyframes)
        self.host.set_document_height(self.total_extent)

        self.host.scroll_to(0)
        self.scroll_pos = 0.0
        self.previous_scroll_pos = 0.0

        self.active_index = 0
        self.active_start_offset = 0.0

        if self.config.hide_inactive_on_layout:
            for keyframe in self.keyframes[1:]:
                keyframe.hide()

        keyframe = self.active_keyframe
        keyframe.update(0, True, True)
        keyframe.show()

        logger.debug(
            f"layout {self.viewport_width:g}x{self.viewport_height:g}: "
            f"extent={self.total_extent:g}px"
        )
        self.bridge.emit(SIGNAL_LAYOUT, self.total_extent)

        self.scheduler.start()

    def _on_resize(self, width: float, height: float):
        self.layout()

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def tick(self) -> TickState:
        self.previous_scroll_pos = self.scroll_pos
        self.scroll_pos = self.host.scroll_position()
        is_scrolling_down = self.scroll_pos >= self.previous_scroll_pos

        old_index = self.active_index
        keyframe = self.active_keyframe
        transition = Transition.STAY

        if self.scroll_pos > self.active_start_offset + keyframe.duration_px:
            transition = Transition.ADVANCE
            # leave the outgoing keyframe at its finishing position
            keyframe.update(keyframe.duration_px, is_scrolling_down, True)
            keyframe.hide()

            if self.active_index < self.keyframes_max_index:
                self.active_index += 1
                self.active_start_offset += keyframe.duration_px

            keyframe = self.active_keyframe
            keyframe.update(0, True, True)
            keyframe.show()

        elif self.scroll_pos < self.active_start_offset:
            transition = Transition.RETREAT
            # leave the outgoing keyframe at its starting position
            keyframe.update(0, True, True)
            keyframe.hide()

            if self.active_index > 0:
                self.active_index -= 1
                self.active_start_offset -= self.active_keyframe.duration_px

            keyframe = self.active_keyframe
            keyframe.update(0, is_scrolling_down, True)
            keyframe.show()

        local_time = self.scroll_pos - self.active_start_offset
        force = transition is not Transition.STAY and self.config.settle_after_transition
        keyframe.update(local_time, is_scrolling_down, force)

        self.frame_id += 1
        state = TickState(
            frame_id=self.frame_id,
            scroll_pos=self.scroll_pos,
            previous_scroll_pos=self.previous_scroll_pos,
            active_index=self.active_index,
            local_time=local_time,
            transition=transition,
        )
        self.last_tick = state

        if transition is not Transition.STAY:
            logger.debug(
                f"{transition.name.lower()} {old_index} -> {self.active_index} "
                f"at scroll={self.scroll_pos:g} (start={self.active_start_offset:g})"
            )
            if self.active_index != old_index:
                self.bridge.emit(SIGNAL_KEYFRAME_CHANGED, old_index, self.active_index)
        self.bridge.emit(SIGNAL_TICK, state)
        return state

    # -------------------------------------------------------------------------
    # Teardown
    # -------------------------------------------------------------------------

    def destroy(self):
        self.scheduler.stop()
        for conn in self._connections:
            conn.disconnect()
        self._connections.clear()
        logger.info("scene destroyed")

    def __repr__(self) -> str:
        return (
            f"Scene(keyframes={len(self.keyframes)}, active={self.active_index}, "
            f"scroll={self.scroll_pos:g})"
        )
