# parallax/timeline/element.py
"""
Element - one animated target inside a keyframe.

An element owns a window [start_time, end_time] in keyframe-local scroll
pixels. Before the window every enabled property sits at its initial
value, after it at its authored target, and inside it the value follows
the easing curve. Windows are resolved from authored fractions on every
layout pass.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional

from parallax.core.easing import DEFAULT_EASING, Easing
from parallax.timeline.schema import ElementDescriptor
from parallax.timeline.style import StylePatch, rotate, scale, translate3d
from parallax.timeline.units import to_pixels

if TYPE_CHECKING:
    from parallax.host.base import Host


class Element:
    """Resolves one target's time window and turns local time into a StylePatch."""

    def __init__(
        self,
        host: Host,
        target: Any,
        description: ElementDescriptor,
        easing: Easing = DEFAULT_EASING,
        translate_precision: int = 2,
    ):
        self.host = host
        self.target = target
        self.description = description
        self.easing = easing
        self.translate_precision = translate_precision

        self.is_translate = description.has_translate
        self.is_opacity = description.has_opacity
        self.is_scale = description.has_scale
        self.is_rotation = description.has_rotation

        # Resolved by layout()
        self.translate_x_px: float = 0.0
        self.translate_y_px: float = 0.0
        self.start_time: float = 0.0
        self.end_time: float = 0.0
        self.duration: float = 0.0

        self.last_patch: Optional[StylePatch] = None

    @property
    def selector(self) -> str:
        return self.description.selector

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def layout(self, viewport_height: float, viewport_width: float, keyframe_duration_px: float):
        d = self.description
        self.translate_x_px = to_pixels(d.translate_x, viewport_width)
        self.translate_y_px = to_pixels(d.translate_y, viewport_height)

        self.start_time = d.start_fraction * keyframe_duration_px
        self.end_time = d.end_fraction * keyframe_duration_px
        self.duration = self.end_time - self.start_time

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def can_skip(self, time: float, is_scrolling_down: bool) -> bool:
        """
        True when the window has not been reached yet in the direction of travel.

        Moving forward before the window, or backward after it, the element
        already shows the value it will keep, so nothing needs recomputing.
        """
        if is_scrolling_down:
            return time < self.start_time
        return time > self.end_time

    def update(self, time: float, total_duration: float, is_scrolling_down: bool, force: bool) -> bool:
        """
        Recompute and apply the style at local time.

        Returns:
            True if a style was written
        """
        if not force and self.can_skip(time, is_scrolling_down):
            return False

        patch = self.style_at(time)
        if patch.empty:
            return False
        self.host.apply_style(self.target, patch)
        self.last_patch = patch
        return True

    def style_at(self, time: float) -> StylePatch:
        d = self.description
        parts = []

        if self.is_translate:
            x = self.calc_prop_value(self.translate_x_px, time, 0, True)
            y = self.calc_prop_value(self.translate_y_px, time, 0, True)
            parts.append(translate3d(x, y))
        if self.is_scale:
            parts.append(scale(self.calc_prop_value(d.scale, time, d.initial_scale)))
        if self.is_rotation:
            parts.append(rotate(self.calc_prop_value(d.rotate, time, d.initial_rotation)))

        opacity = None
        if self.is_opacity:
            opacity = self.calc_prop_value(d.opacity, time, d.initial_opacity)

        return StylePatch(transform=' '.join(parts) if parts else None, opacity=opacity)

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def calc_prop_value(self, target: float, time: float, default_value: float, use_rounding: bool = False) -> float:
        """
        Value of one property at local time.

        Clamped to default_value before the window and to target after it.
        Only translation is rounded (to translate_precision places).
        """
        if time < self.start_time:
            return default_value
        if time > self.end_time:
            return target

        elapsed = time - self.start_time
        # a collapsed window is a step that has already happened
        if self.duration <= 0 or elapsed >= self.duration:
            return target

        result = self.easing(elapsed, default_value, target - default_value, self.duration)
        if use_rounding:
            result = round(result, self.translate_precision)
        return result

    def __repr__(self) -> str:
        return (
            f"Element(selector={self.selector!r}, "
            f"window=[{self.start_time:g}, {self.end_time:g}])"
        )
