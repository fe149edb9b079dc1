# parallax/host/scheduler.py
"""
FrameScheduler - recurring timer feeding frame-synchronized ticks.

Every timer firing asks the host for one frame callback. With coalescing
on, a firing that arrives while a frame is still pending is dropped, so
at most one tick is ever queued no matter how slow a tick runs.
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import logging

from parallax.host.base import Host

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Drives a callback from host.set_interval through host.request_frame."""

    def __init__(self, host: Host, callback: Callable[[], Any], period: float = 0.010, coalesce: bool = True):
        self.host = host
        self.callback = callback
        self.period = period
        self.coalesce = coalesce

        self._handle: Optional[Any] = None
        self._pending: int = 0
        self.frames_run: int = 0
        self.frames_dropped: int = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def pending(self) -> bool:
        return self._pending > 0

    def start(self) -> None:
        """Start the timer. Calling start() on a running scheduler does nothing."""
        if self._handle is not None:
            return
        self._handle = self.host.set_interval(self.period, self._on_interval)
        logger.debug(f"frame scheduler started (period={self.period}s)")

    def stop(self) -> None:
        if self._handle is None:
            return
        self.host.clear_interval(self._handle)
        self._handle = None
        logger.debug(
            f"frame scheduler stopped (run={self.frames_run}, dropped={self.frames_dropped})"
        )

    def _on_interval(self) -> None:
        if self.coalesce and self._pending:
            self.frames_dropped += 1
            return
        self._pending += 1
        self.host.request_frame(self._on_frame)

    def _on_frame(self) -> None:
        self._pending -= 1
        if self._handle is None:
            # stopped while the frame was queued
            return
        self.frames_run += 1
        self.callback()
