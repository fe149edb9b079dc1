"""
Core - signals, easing, tick records and errors shared by the timeline.
"""

from .signal import (
    SignalBridge,
    Connection,
    SIGNAL_ARGS,
    SIGNAL_RESIZE,
    SIGNAL_SCROLL,
    SIGNAL_LAYOUT,
    SIGNAL_KEYFRAME_CHANGED,
    SIGNAL_TICK,
)
from .easing import Easing, ease_in_out_sine, ease_linear, clamp, DEFAULT_EASING
from .frame import TickState, Transition
from .errors import ParallaxError, UnresolvedTargetError, DescriptorError

__all__ = [
    'SignalBridge', 'Connection', 'SIGNAL_ARGS',
    'SIGNAL_RESIZE', 'SIGNAL_SCROLL', 'SIGNAL_LAYOUT', 'SIGNAL_KEYFRAME_CHANGED', 'SIGNAL_TICK',
    'Easing', 'ease_in_out_sine', 'ease_linear', 'clamp', 'DEFAULT_EASING',
    'TickState', 'Transition',
    'ParallaxError', 'UnresolvedTargetError', 'DescriptorError',
]
