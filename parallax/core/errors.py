# parallax/core/errors.py
"""
Exceptions raised while building a scene.

The tick loop itself never raises; everything here surfaces from
construction or layout.
"""

from __future__ import annotations
from typing import Optional


class ParallaxError(Exception):
    """Base class for all parallax errors."""


class UnresolvedTargetError(ParallaxError):
    """A selector matched nothing on the page."""

    def __init__(self, selector: str, scope: Optional[str] = None):
        self.selector = selector
        self.scope = scope
        if scope:
            msg = f"No element selected with selector: {selector} in keyframe {scope}"
        else:
            msg = f"No element selected for this page with selector: {selector}"
        super().__init__(msg)


class DescriptorError(ParallaxError, ValueError):
    """An authored keyframe or element descriptor is malformed."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
