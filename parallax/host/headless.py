# parallax/host/headless.py
"""
Headless Host

In-memory page for running a Scene without a browser:
- Node tree with a small selector subset (tag, #id, .class, descendants)
- Recorded style writes and visibility
- Viewport geometry and a clamped scroll offset
- Manual clock driving intervals, plus an explicit frame queue

Example:

    host = HeadlessHost(width=1000, height=500)
    intro = host.add("section#intro")
    host.add("h1.name", parent=intro)

    scene = Scene(host, [{"selector": "#intro", "animations": [...]}])
    host.scroll_to(120)
    host.step(0.01)          # fire the timer and run the queued frame
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple
import re

from parallax.core.easing import clamp
from parallax.core.errors import UnresolvedTargetError
from parallax.core.signal import SIGNAL_RESIZE, SIGNAL_SCROLL, SignalBridge
from parallax.host.base import Host
from parallax.timeline.style import StylePatch


# =============================================================================
# Nodes and selectors
# =============================================================================

_COMPOUND_RE = re.compile(r'^([a-zA-Z][\w-]*)?((?:[#.][\w-]+)*)$')
_PART_RE = re.compile(r'([#.])([\w-]+)')


@dataclass(frozen=True)
class Compound:
    """One whitespace-separated part of a selector, e.g. 'h1#title.big'."""
    tag: Optional[str] = None
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()

    @staticmethod
    def parse(text: str) -> Compound:
        m = _COMPOUND_RE.match(text)
        if not m or not text:
            raise ValueError(f"Unsupported selector: {text!r}")
        tag, rest = m.group(1), m.group(2)
        node_id = None
        classes = []
        for kind, name in _PART_RE.findall(rest):
            if kind == '#':
                node_id = name
            else:
                classes.append(name)
        return Compound(tag=tag.lower() if tag else None, id=node_id, classes=tuple(classes))

    def matches(self, node: Node) -> bool:
        if self.tag and node.tag != self.tag:
            return False
        if self.id and node.id != self.id:
            return False
        return all(c in node.classes for c in self.classes)


def parse_selector(selector: str) -> List[Compound]:
    parts = selector.split()
    if not parts:
        raise ValueError(f"Unsupported selector: {selector!r}")
    return [Compound.parse(p) for p in parts]


@dataclass(eq=False)
class Node:
    """A renderable element in the headless page."""
    tag: str = "div"
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    parent: Optional[Node] = None
    children: List[Node] = field(default_factory=list)
    visible: bool = True
    style: Dict[str, Any] = field(default_factory=dict)
    writes: List[StylePatch] = field(default_factory=list)

    @staticmethod
    def from_selector(text: str) -> Node:
        c = Compound.parse(text)
        return Node(tag=c.tag or "div", id=c.id, classes=c.classes)

    def walk(self) -> Iterator[Node]:
        """Descendants in document order (self excluded)."""
        for child in self.children:
            yield child
            yield from child.walk()

    def ancestors(self) -> Iterator[Node]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def matches(self, compounds: List[Compound]) -> bool:
        if not compounds[-1].matches(self):
            return False
        remaining = compounds[:-1]
        for ancestor in self.ancestors():
            if not remaining:
                break
            if remaining[-1].matches(ancestor):
                remaining = remaining[:-1]
        return not remaining

    @property
    def label(self) -> str:
        s = self.tag
        if self.id:
            s += f"#{self.id}"
        for c in self.classes:
            s += f".{c}"
        return s

    def __repr__(self) -> str:
        return f"Node({self.label})"


# =============================================================================
# Headless Host
# =============================================================================

@dataclass
class _Interval:
    handle: int
    period: float
    callback: Callable[[], None]
    next_due: float


class HeadlessHost(Host):
    """Host backed by an in-memory node tree and a manual clock."""

    def __init__(
        self,
        width: float = 1280.0,
        height: float = 720.0,
        bridge: Optional[SignalBridge] = None,
        clamp_scroll: bool = True,
    ):
        super().__init__(bridge)
        self.root = Node(tag="body")
        self.width = width
        self.height = height
        self.clamp_scroll = clamp_scroll
        self.document_height: float = height
        self._scroll: float = 0.0

        self.time: float = 0.0
        self._intervals: Dict[int, _Interval] = {}
        self._next_handle: int = 1
        self._frames: List[Callable[[], None]] = []

    # -------------------------------------------------------------------------
    # Page building
    # -------------------------------------------------------------------------

    def add(self, selector: str, parent: Optional[Node] = None, visible: bool = True) -> Node:
        """Append a node described by 'tag#id.class' under parent (default: body)."""
        node = Node.from_selector(selector)
        node.visible = visible
        parent = parent or self.root
        node.parent = parent
        parent.children.append(node)
        return node

    def select_all(self, selector: str, scope: Optional[Node] = None) -> List[Node]:
        compounds = parse_selector(selector)
        return [n for n in (scope or self.root).walk() if n.matches(compounds)]

    # -------------------------------------------------------------------------
    # Host: targets
    # -------------------------------------------------------------------------

    def resolve(self, selector: str, scope: Any = None) -> Node:
        matches = self.select_all(selector, scope)
        if not matches:
            raise UnresolvedTargetError(selector, scope.label if scope is not None else None)
        return matches[0]

    def apply_style(self, target: Node, patch: StylePatch) -> None:
        target.style.update(patch.to_css())
        target.writes.append(patch)

    def set_visible(self, target: Node, visible: bool) -> None:
        target.visible = visible

    # -------------------------------------------------------------------------
    # Host: geometry
    # -------------------------------------------------------------------------

    def viewport_size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def scroll_position(self) -> float:
        return self._scroll

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.document_height - self.height)

    def scroll_to(self, pos: float) -> None:
        if self.clamp_scroll:
            pos = clamp(pos, 0.0, self.max_scroll)
        self._scroll = pos
        self.bridge.emit(SIGNAL_SCROLL, pos)

    def set_document_height(self, height: float) -> None:
        self.document_height = height

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.bridge.emit(SIGNAL_RESIZE, width, height)

    # -------------------------------------------------------------------------
    # Host: scheduling
    # -------------------------------------------------------------------------

    def set_interval(self, period: float, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._intervals[handle] = _Interval(handle, period, callback, self.time + period)
        return handle

    def clear_interval(self, handle: int) -> None:
        self._intervals.pop(handle, None)

    def request_frame(self, callback: Callable[[], None]) -> None:
        self._frames.append(callback)

    @property
    def interval_count(self) -> int:
        return len(self._intervals)

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due intervals in time order. Returns firings."""
        end = self.time + seconds
        fired = 0
        while True:
            due = [i for i in self._intervals.values() if i.next_due <= end + 1e-12]
            if not due:
                break
            interval = min(due, key=lambda i: (i.next_due, i.handle))
            self.time = interval.next_due
            interval.next_due += interval.period
            interval.callback()
            fired += 1
        self.time = end
        return fired

    def run_frames(self) -> int:
        """Run the frames queued so far; frames requested meanwhile wait for the next call."""
        frames, self._frames = self._frames, []
        for callback in frames:
            callback()
        return len(frames)

    def step(self, seconds: float = 0.010) -> int:
        self.advance(seconds)
        return self.run_frames()
