# parallax/__init__.py
"""
Parallax - Scroll-driven animation timeline.

Core components:
- Scene: Keyframe sequence and boundary state machine driven by scroll
- Keyframe: One page section with its own scroll duration
- Element: One animated target with an activation window
- Host: Capabilities the timeline consumes (targets, styles, timers)
- SignalBridge: Event routing system
"""

from .core import (
    # Signals
    SignalBridge,

    # Easing
    Easing,
    ease_in_out_sine,
    ease_linear,

    # Ticks
    TickState,
    Transition,

    # Errors
    ParallaxError,
    UnresolvedTargetError,
    DescriptorError,
)

from .timeline import (
    Scene,
    SceneConfig,
    Keyframe,
    Element,
    KeyframeDescriptor,
    ElementDescriptor,
    StylePatch,
    load_scene,
    parse_scene,
    to_pixels,
)

from .host import (
    Host,
    HeadlessHost,
    FrameScheduler,
)

__version__ = '0.1.0'

__all__ = [
    # Timeline
    'Scene',
    'SceneConfig',
    'Keyframe',
    'Element',
    'KeyframeDescriptor',
    'ElementDescriptor',
    'StylePatch',
    'load_scene',
    'parse_scene',
    'to_pixels',

    # Core
    'SignalBridge',
    'Easing',
    'ease_in_out_sine',
    'ease_linear',
    'TickState',
    'Transition',
    'ParallaxError',
    'UnresolvedTargetError',
    'DescriptorError',

    # Host
    'Host',
    'HeadlessHost',
    'FrameScheduler',
]
