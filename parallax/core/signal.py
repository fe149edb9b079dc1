# parallax/core/signal.py
"""
Signals passed between a Host and the Scene it drives.

Each signal carries a fixed argument list:

    resize            (width, height)          host  -> scene
    scroll            (scroll_pos,)            host  -> listeners
    layout            (total_extent,)          scene -> listeners
    keyframe_changed  (old_index, new_index)   scene -> listeners
    tick              (state,)                 scene -> listeners, a TickState

Emitting with the wrong number of arguments, or naming a signal that is
not listed here, is a programming error and raises. A listener that
raises is logged and skipped, so the remaining listeners and the tick
that emitted still run.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Tuple
import logging

logger = logging.getLogger(__name__)

SIGNAL_RESIZE = 'resize'
SIGNAL_SCROLL = 'scroll'
SIGNAL_LAYOUT = 'layout'
SIGNAL_KEYFRAME_CHANGED = 'keyframe_changed'
SIGNAL_TICK = 'tick'

SIGNAL_ARGS: Dict[str, Tuple[str, ...]] = {
    SIGNAL_RESIZE: ('width', 'height'),
    SIGNAL_SCROLL: ('scroll_pos',),
    SIGNAL_LAYOUT: ('total_extent',),
    SIGNAL_KEYFRAME_CHANGED: ('old_index', 'new_index'),
    SIGNAL_TICK: ('state',),
}


def _check_signal(signal: str) -> Tuple[str, ...]:
    try:
        return SIGNAL_ARGS[signal]
    except KeyError:
        raise ValueError(f"Unknown signal: {signal!r}") from None


class Connection:
    """One listener on one signal. disconnect() is safe to call twice."""

    __slots__ = ('bridge', 'signal', 'handler')

    def __init__(self, bridge: SignalBridge, signal: str, handler: Callable):
        self.bridge = bridge
        self.signal = signal
        self.handler = handler

    @property
    def connected(self) -> bool:
        return self.bridge is not None

    def disconnect(self):
        if self.bridge is not None:
            self.bridge._listeners[self.signal].remove(self)
            self.bridge = None


class SignalBridge:
    """Routes the fixed set of signals from emitters to listeners."""

    def __init__(self):
        self._listeners: Dict[str, List[Connection]] = {name: [] for name in SIGNAL_ARGS}

    def connect(self, signal: str, handler: Callable) -> Connection:
        _check_signal(signal)
        conn = Connection(self, signal, handler)
        self._listeners[signal].append(conn)
        return conn

    def listener_count(self, signal: str) -> int:
        _check_signal(signal)
        return len(self._listeners[signal])

    def emit(self, signal: str, *args):
        expected = _check_signal(signal)
        if len(args) != len(expected):
            raise TypeError(
                f"{signal} takes ({', '.join(expected)}), got {len(args)} argument(s)"
            )

        # listeners removed mid-emit are skipped; ones added mid-emit wait for the next
        for conn in tuple(self._listeners[signal]):
            if not conn.connected:
                continue
            try:
                conn.handler(*args)
            except Exception as e:
                logger.error(f"Signal handler error [{signal}]: {e}")
