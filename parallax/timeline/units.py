# parallax/timeline/units.py
"""Percentage / pixel conversion for authored offsets."""

from __future__ import annotations
from typing import Union
import re

from parallax.core.errors import DescriptorError

Length = Union[int, float, str, None]

_PERCENT_RE = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*%\s*$')
_PIXEL_RE = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:px)?\s*$')


def is_percentage(value: Length) -> bool:
    return isinstance(value, str) and _PERCENT_RE.match(value) is not None


def to_pixels(value: Length, reference_extent: float) -> float:
    """
    Resolve an authored length to absolute pixels.

    "50%" is taken against reference_extent. A number, "12px" or a bare
    "30" is already pixels, and an absent value means no offset.

        >>> to_pixels("50%", 400)
        200.0
        >>> to_pixels(120, 400)
        120
    """
    if not value:
        return 0
    if isinstance(value, str):
        m = _PERCENT_RE.match(value)
        if m:
            return (float(m.group(1)) / 100.0) * reference_extent
        m = _PIXEL_RE.match(value)
        if m:
            return float(m.group(1))
        raise DescriptorError(f"cannot convert {value!r} to pixels")
    return value


def is_length(value: Length) -> bool:
    """True for None, a number, "<n>%", "<n>px" or a bare numeric string."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and bool(_PERCENT_RE.match(value) or _PIXEL_RE.match(value))
