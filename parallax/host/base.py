# parallax/host/base.py
"""
Host - the capabilities a Scene consumes from its environment.

The timeline never touches a page, a window or a clock directly. A host
resolves selectors to targets, writes styles and visibility, reports
viewport geometry and provides the timer and frame primitives. Hosts
emit SIGNAL_RESIZE on their bridge when the viewport changes size.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

from parallax.core.signal import SignalBridge
from parallax.timeline.style import StylePatch


class Host(ABC):
    """Abstract capability interface."""

    def __init__(self, bridge: Optional[SignalBridge] = None):
        self.bridge = bridge if bridge is not None else SignalBridge()

    # -------------------------------------------------------------------------
    # Targets
    # -------------------------------------------------------------------------

    @abstractmethod
    def resolve(self, selector: str, scope: Any = None) -> Any:
        """Return the unique target for selector, searched within scope if given.

        Raises:
            UnresolvedTargetError: nothing matches
        """
        pass

    @abstractmethod
    def apply_style(self, target: Any, patch: StylePatch) -> None:
        """Write transform and opacity in a single update."""
        pass

    @abstractmethod
    def set_visible(self, target: Any, visible: bool) -> None:
        pass

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @abstractmethod
    def viewport_size(self) -> Tuple[float, float]:
        """(width, height) in pixels."""
        pass

    @abstractmethod
    def scroll_position(self) -> float:
        pass

    @abstractmethod
    def scroll_to(self, pos: float) -> None:
        pass

    @abstractmethod
    def set_document_height(self, height: float) -> None:
        pass

    # -------------------------------------------------------------------------
    # Scheduling
    # -------------------------------------------------------------------------

    @abstractmethod
    def set_interval(self, period: float, callback: Callable[[], None]) -> Any:
        """Call callback every period seconds; returns a handle for clear_interval."""
        pass

    @abstractmethod
    def clear_interval(self, handle: Any) -> None:
        pass

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> None:
        """Run callback once, just before the next paint."""
        pass
