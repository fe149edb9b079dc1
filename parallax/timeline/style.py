# parallax/timeline/style.py
"""
Style patches written to animated targets.

A patch carries at most a transform string and an opacity. Both are
written to the target in one call, so a host never shows a frame where
only half the patch has landed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Union
import math


def format_number(value: float) -> str:
    """Print a number the way a browser serializes it: 2.0 -> '2', 0.5 -> '0.5'."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def translate3d(x: float, y: float) -> str:
    return f"translate3d({format_number(x)}px, {format_number(y)}px, 0)"


def scale(s: float) -> str:
    return f"scale({format_number(s)})"


def rotate(deg: float) -> str:
    return f"rotate({format_number(deg)}deg)"


@dataclass(frozen=True)
class StylePatch:
    transform: Optional[str] = None
    opacity: Optional[float] = None

    @property
    def empty(self) -> bool:
        return self.transform is None and self.opacity is None

    def to_css(self) -> Dict[str, Union[str, float]]:
        css = {}
        if self.transform is not None:
            css['transform'] = self.transform
        if self.opacity is not None:
            css['opacity'] = self.opacity
        return css
