"""
Host - environment capabilities for a Scene.

- base: abstract Host interface
- scheduler: coalescing timer -> frame driver
- headless: in-memory page and manual clock
"""

from .base import Host
from .scheduler import FrameScheduler
from .headless import HeadlessHost, Node

__all__ = ['Host', 'FrameScheduler', 'HeadlessHost', 'Node']
