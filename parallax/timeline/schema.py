# parallax/timeline/schema.py
"""
Scene descriptors - the authored, immutable input to a Scene.

A scene document is a list of keyframe descriptors, each naming a page
section and the animations of elements inside it. Keys use the authored
camelCase spelling:

    [
        {
            "selector": "#intro",
            "duration": 1,
            "animations": [
                {"selector": ".name", "translateY": -150, "opacity": 0},
                {"selector": "#bg", "initialOpacity": 0, "startTime": 0.8, "opacity": 1}
            ]
        }
    ]

A property is animated only when its key is present.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional, Tuple, Union
import json

from parallax.core.errors import DescriptorError
from parallax.timeline.units import Length, is_length


# =============================================================================
# Element
# =============================================================================

# authored key -> dataclass attribute
_ELEMENT_KEYS = {
    'selector': 'selector',
    'startTime': 'start_time',
    'endTime': 'end_time',
    'translateX': 'translate_x',
    'translateY': 'translate_y',
    'opacity': 'opacity',
    'scale': 'scale',
    'rotate': 'rotate',
    'initialOpacity': 'initial_opacity',
    'initialScale': 'initial_scale',
    'initialRotation': 'initial_rotation',
}


@dataclass(frozen=True)
class ElementDescriptor:
    """One animated target inside a keyframe."""
    selector: str
    start_time: Optional[float] = None      # fraction of keyframe, default 0
    end_time: Optional[float] = None        # fraction of keyframe, default 1
    translate_x: Length = None              # px, "<n>px" or "<n>%" of viewport width
    translate_y: Length = None              # px, "<n>px" or "<n>%" of viewport height
    opacity: Optional[float] = None
    scale: Optional[float] = None
    rotate: Optional[float] = None          # degrees
    initial_opacity: float = 1.0
    initial_scale: float = 1.0
    initial_rotation: float = 0.0

    @property
    def is_global(self) -> bool:
        """Id selectors resolve document-wide, everything else within the keyframe."""
        return self.selector.startswith('#')

    @property
    def has_translate(self) -> bool:
        return self.translate_x is not None or self.translate_y is not None

    @property
    def has_opacity(self) -> bool:
        return self.opacity is not None

    @property
    def has_scale(self) -> bool:
        return self.scale is not None

    @property
    def has_rotation(self) -> bool:
        return self.rotate is not None

    @property
    def start_fraction(self) -> float:
        return 0.0 if self.start_time is None else self.start_time

    @property
    def end_fraction(self) -> float:
        return 1.0 if self.end_time is None else self.end_time

    def validate(self, path: str = "animation") -> None:
        _require_selector(self.selector, path)
        for name in ('start_time', 'end_time'):
            value = getattr(self, name)
            if value is None:
                continue
            _require_number(value, f"{path}.{name}")
            if not 0.0 <= value <= 1.0:
                raise DescriptorError(f"{name} must be a fraction in [0, 1], got {value}", path)
        if self.end_fraction < self.start_fraction:
            raise DescriptorError(
                f"end_time ({self.end_fraction}) is before start_time ({self.start_fraction})", path
            )
        for name in ('translate_x', 'translate_y'):
            if not is_length(getattr(self, name)):
                raise DescriptorError(
                    f"{name} must be a number or percentage, got {getattr(self, name)!r}", path
                )
        for name in ('opacity', 'scale', 'rotate'):
            value = getattr(self, name)
            if value is not None:
                _require_number(value, f"{path}.{name}")
        for name in ('initial_opacity', 'initial_scale', 'initial_rotation'):
            _require_number(getattr(self, name), f"{path}.{name}")

    def to_dict(self) -> dict:
        d = {}
        for key, attr in _ELEMENT_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                d[key] = value
        return d

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ElementDescriptor:
        if not isinstance(data, dict):
            raise DescriptorError(f"animation must be an object, got {type(data).__name__}")
        unknown = set(data) - set(_ELEMENT_KEYS)
        if unknown:
            raise DescriptorError(f"unknown animation keys: {', '.join(sorted(unknown))}")
        kwargs = {attr: data[key] for key, attr in _ELEMENT_KEYS.items() if key in data}
        if 'selector' not in kwargs:
            raise DescriptorError("animation is missing 'selector'")
        return ElementDescriptor(**kwargs)


# =============================================================================
# Keyframe
# =============================================================================

@dataclass(frozen=True)
class KeyframeDescriptor:
    """One page section and the animations played while it is on screen."""
    selector: str
    duration: float = 1.0                   # fraction of viewport height
    animations: Tuple[ElementDescriptor, ...] = field(default_factory=tuple)

    def validate(self, path: str = "keyframe") -> None:
        _require_selector(self.selector, path)
        _require_number(self.duration, f"{path}.duration")
        if self.duration < 0:
            raise DescriptorError(f"duration must not be negative, got {self.duration}", path)
        for i, anim in enumerate(self.animations):
            anim.validate(f"{path}.animations[{i}]")

    def to_dict(self) -> dict:
        return {
            'selector': self.selector,
            'duration': self.duration,
            'animations': [a.to_dict() for a in self.animations],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> KeyframeDescriptor:
        if not isinstance(data, dict):
            raise DescriptorError(f"keyframe must be an object, got {type(data).__name__}")
        if 'selector' not in data:
            raise DescriptorError("keyframe is missing 'selector'")
        duration = data.get('duration')
        animations = data.get('animations') or []
        return KeyframeDescriptor(
            selector=data['selector'],
            duration=1.0 if duration is None else duration,
            animations=tuple(ElementDescriptor.from_dict(a) for a in animations),
        )


# =============================================================================
# Scene documents
# =============================================================================

SceneDocument = Union[List[Dict[str, Any]], Dict[str, Any]]


def parse_scene(data: SceneDocument) -> List[KeyframeDescriptor]:
    """Build descriptors from a decoded document (list, or {"keyframes": [...]})."""
    if isinstance(data, dict):
        data = data.get('keyframes', [])
    if not isinstance(data, list):
        raise DescriptorError(f"scene must be a list of keyframes, got {type(data).__name__}")
    return [KeyframeDescriptor.from_dict(item) for item in data]


def load_scene(path: str) -> List[KeyframeDescriptor]:
    with open(path, 'r') as f:
        data = json.load(f)
    return parse_scene(data)


def save_scene(path: str, keyframes: List[KeyframeDescriptor]):
    with open(path, 'w') as f:
        json.dump([k.to_dict() for k in keyframes], f, indent=2)


def coerce_keyframes(
    keyframes: List[Union[KeyframeDescriptor, Dict[str, Any]]]
) -> List[KeyframeDescriptor]:
    return [k if isinstance(k, KeyframeDescriptor) else KeyframeDescriptor.from_dict(k) for k in keyframes]


# =============================================================================
# Helpers
# =============================================================================

def _require_selector(selector: Any, path: str):
    if not isinstance(selector, str) or not selector.strip():
        raise DescriptorError(f"selector must be a non-empty string, got {selector!r}", path)


def _require_number(value: Any, path: str):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise DescriptorError(f"expected a number, got {value!r}", path)
