# parallax/core/easing.py
"""
Easing curves for windowed interpolation.

Every curve has the shape ``(elapsed, start, delta, duration) -> value``:
at ``elapsed == 0`` it returns ``start`` and at ``elapsed == duration`` it
returns ``start + delta``. The windowing logic in Element never looks at
the curve itself, so any function of this shape can be plugged in.
"""

from __future__ import annotations
from typing import Callable
import math

Easing = Callable[[float, float, float, float], float]


def ease_in_out_sine(elapsed: float, start: float, delta: float, duration: float) -> float:
    """Cosine ease-in-out: zero velocity at both ends of the window."""
    return -delta / 2.0 * (math.cos(math.pi * elapsed / duration) - 1.0) + start


def ease_linear(elapsed: float, start: float, delta: float, duration: float) -> float:
    return start + delta * (elapsed / duration)


DEFAULT_EASING: Easing = ease_in_out_sine


# =============================================================================
# Scalar helpers
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))
