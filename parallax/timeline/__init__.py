"""
Timeline - maps a scroll offset to element styles.

Example usage:

    from parallax.timeline import Scene, load_scene
    from parallax.host import HeadlessHost

    host = HeadlessHost(width=1000, height=500)
    scene = Scene(host, load_scene("examples/intro_scene.json"))
"""

from .units import to_pixels, is_percentage
from .schema import (
    ElementDescriptor,
    KeyframeDescriptor,
    parse_scene,
    load_scene,
    save_scene,
)
from .style import StylePatch
from .element import Element
from .keyframe import Keyframe
from .scene import Scene, SceneConfig

__all__ = [
    'to_pixels', 'is_percentage',
    'ElementDescriptor', 'KeyframeDescriptor', 'parse_scene', 'load_scene', 'save_scene',
    'StylePatch',
    'Element',
    'Keyframe',
    'Scene', 'SceneConfig',
]
