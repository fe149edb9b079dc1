# parallax/timeline/keyframe.py
"""
Keyframe - one page section with its own scroll duration.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List

from parallax.core.easing import DEFAULT_EASING, Easing
from parallax.timeline.element import Element
from parallax.timeline.schema import KeyframeDescriptor

if TYPE_CHECKING:
    from parallax.host.base import Host


class Keyframe:
    """
    Owns a section's elements in two orderings.

    elements_down is sorted by ascending window start and is walked while
    scrolling forward; elements_up is the descending order used while
    scrolling back. Both are stable sorts, so elements sharing a start
    keep their authored order.
    """

    def __init__(
        self,
        host: Host,
        description: KeyframeDescriptor,
        easing: Easing = DEFAULT_EASING,
        translate_precision: int = 2,
    ):
        self.host = host
        self.description = description
        self.target = host.resolve(description.selector)
        self.duration_fraction = description.duration
        self.duration_px: float = 0.0

        self.elements: List[Element] = [
            Element(
                host,
                host.resolve(anim.selector, None if anim.is_global else self.target),
                anim,
                easing=easing,
                translate_precision=translate_precision,
            )
            for anim in description.animations
        ]
        self.elements_down: List[Element] = list(self.elements)
        self.elements_up: List[Element] = list(self.elements)

    @property
    def selector(self) -> str:
        return self.description.selector

    def layout(self, viewport_height: float, viewport_width: float):
        self.duration_px = self.duration_fraction * viewport_height
        for element in self.elements:
            element.layout(viewport_height, viewport_width, self.duration_px)

        # sorted() is stable; ties keep authored order in both directions
        self.elements_down = sorted(self.elements, key=lambda e: e.start_time)
        self.elements_up = sorted(self.elements, key=lambda e: -e.start_time)

    def update(self, time: float, is_scrolling_down: bool, force: bool) -> int:
        """Dispatch local time to every element; returns how many wrote a style."""
        elements = self.elements_down if is_scrolling_down else self.elements_up
        written = 0
        for element in elements:
            if element.update(time, self.duration_px, is_scrolling_down, force):
                written += 1
        return written

    def show(self):
        self.host.set_visible(self.target, True)

    def hide(self):
        self.host.set_visible(self.target, False)

    def __repr__(self) -> str:
        return f"Keyframe(selector={self.selector!r}, duration_px={self.duration_px:g}, elements={len(self.elements)})"
