# examples/scroll_demo.py
"""
Scroll Demo - drives the intro scene through a headless page.

Demonstrates:
- Loading keyframe descriptors from JSON
- HeadlessHost standing in for a browser window
- Ticks firing from the host timer through the frame scheduler
- Keyframe transitions reported over the signal bridge

Run with:
    python examples/scroll_demo.py
"""

import logging
import sys
import os

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parallax.core.signal import SIGNAL_KEYFRAME_CHANGED
from parallax.host.headless import HeadlessHost
from parallax.timeline.scene import Scene
from parallax.timeline.schema import load_scene

logger = logging.getLogger("scroll_demo")

SCENE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "intro_scene.json")


def build_page(host: HeadlessHost):
    intro = host.add("section#intro")
    host.add("h1.name", parent=intro)
    host.add("p.byline", parent=intro)
    explain = host.add("div.intro-explain", parent=intro)
    host.add("i", parent=explain)
    host.add("div#bg-fields")

    lesson1 = host.add("section#lesson1")
    host.add("h2.name", parent=lesson1)

    lesson2 = host.add("section#lesson2")
    host.add("div.card", parent=lesson2)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    host = HeadlessHost(width=1000, height=500)
    build_page(host)

    def on_keyframe(old, new):
        logger.info(f"keyframe {old} -> {new}")

    host.bridge.connect(SIGNAL_KEYFRAME_CHANGED, on_keyframe)

    scene = Scene(host, load_scene(SCENE_FILE))

    # scroll down through everything, then back up
    positions = list(range(0, int(host.max_scroll) + 1, 50))
    for pos in positions + positions[::-1]:
        host.scroll_to(pos)
        host.step(scene.config.tick_interval)
        section = scene.active_keyframe
        styles = ", ".join(
            f"{e.selector}={e.target.style}" for e in section.elements_down
        )
        logger.info(f"scroll={pos:5d} keyframe={scene.active_index} {styles}")

    scene.destroy()


if __name__ == "__main__":
    main()
