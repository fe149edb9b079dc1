import numpy as np
import pytest

from parallax.core.errors import DescriptorError, UnresolvedTargetError
from parallax.core.frame import Transition
from parallax.core.signal import SIGNAL_KEYFRAME_CHANGED, SIGNAL_LAYOUT, SIGNAL_TICK
from parallax.host.headless import HeadlessHost
from parallax.timeline.scene import Scene, SceneConfig
from parallax.timeline.style import StylePatch


def scroll(scene, pos):
    scene.host.scroll_to(pos)
    return scene.tick()


def target(host, selector):
    return host.select_all(selector)[0]


# =============================================================================
# Construction / layout
# =============================================================================

def test_layout_extent_and_visibility(host, two_keyframes):
    scene = Scene(host, two_keyframes)

    assert scene.total_extent == 1500
    assert host.document_height == 1500
    assert scene.active_index == 0
    assert scene.active_start_offset == 0
    assert host.scroll_position() == 0

    assert host.resolve("#first").visible is True
    assert host.resolve("#second").visible is False


def test_layout_initializes_first_keyframe(host, two_keyframes):
    Scene(host, two_keyframes)
    title = target(host, "#first .title")
    assert title.writes == [StylePatch(transform="translate3d(0px, 0px, 0)", opacity=1.0)]
    # nothing written to keyframes that are not active yet
    assert target(host, "#second .title").writes == []


def test_inactive_keyframes_left_alone_when_configured(host, two_keyframes):
    Scene(host, two_keyframes, SceneConfig(hide_inactive_on_layout=False))
    assert host.resolve("#second").visible is True


def test_offsets(host, two_keyframes):
    two_keyframes[1]["duration"] = 0.5
    scene = Scene(host, two_keyframes)
    assert np.array_equal(scene.offsets, [0, 500, 750])
    assert scene.total_extent == 1250


def test_unresolved_target_aborts(host):
    with pytest.raises(UnresolvedTargetError):
        Scene(host, [{"selector": "#first"}, {"selector": "#missing"}])
    assert host.interval_count == 0


def test_invalid_descriptor_rejected(host):
    with pytest.raises(DescriptorError):
        Scene(host, [{"selector": "#first", "duration": -1}])
    with pytest.raises(DescriptorError):
        Scene(host, [{
            "selector": "#first",
            "animations": [{"selector": ".title", "opacity": 0, "startTime": 0.8, "endTime": 0.2}],
        }])


def test_validation_can_be_disabled(host):
    scene = Scene(host, [{
        "selector": "#first",
        "animations": [{"selector": ".title", "opacity": 0, "startTime": 0.8, "endTime": 0.2}],
    }], SceneConfig(validate=False))
    element = scene.keyframes[0].elements[0]
    assert element.start_time > element.end_time


def test_empty_scene_rejected(host):
    with pytest.raises(ValueError):
        Scene(host, [])


# =============================================================================
# Boundary transitions
# =============================================================================

def test_stay_inside_keyframe(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    state = scroll(scene, 250)
    assert state.transition is Transition.STAY
    assert state.active_index == 0
    assert state.local_time == 250
    assert state.is_scrolling_down


def test_tie_counts_as_forward(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    scroll(scene, 200)
    state = scroll(scene, 200)
    assert state.scroll_delta == 0
    assert state.is_scrolling_down is True
    assert state.transition is Transition.STAY


def test_advance(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    assert scroll(scene, 499).transition is Transition.STAY

    state = scroll(scene, 501)
    assert state.transition is Transition.ADVANCE
    assert state.active_index == 1
    assert scene.active_start_offset == 500
    assert state.local_time == 1

    # outgoing keyframe finalized at its end and hidden
    first_title = target(host, "#first .title")
    assert first_title.writes[-1] == StylePatch(transform="translate3d(0px, -100px, 0)", opacity=0)
    assert host.resolve("#first").visible is False

    # incoming keyframe initialized at local time 0 and shown
    second_title = target(host, "#second .title")
    assert second_title.writes[0] == StylePatch(opacity=0)
    assert host.resolve("#second").visible is True


def test_exactly_one_advance(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    changes = []
    host.bridge.connect(SIGNAL_KEYFRAME_CHANGED, lambda old, new: changes.append((old, new)))

    scroll(scene, 499)
    scroll(scene, 501)
    scroll(scene, 502)
    assert changes == [(0, 1)]


def test_retreat(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    scroll(scene, 400)
    scroll(scene, 510)
    assert scene.active_index == 1

    state = scroll(scene, 490)
    assert state.transition is Transition.RETREAT
    assert state.active_index == 0
    assert scene.active_start_offset == 0
    assert state.local_time == 490
    assert not state.is_scrolling_down
    assert state.scroll_delta == -20

    # outgoing keyframe finalized at its start and hidden
    assert target(host, "#second .title").writes[-1] == StylePatch(opacity=0)
    assert host.resolve("#second").visible is False
    assert host.resolve("#first").visible is True

    title = scene.keyframes[0].elements[0]
    assert title.last_patch == title.style_at(490)


def test_retreat_uses_previous_keyframe_duration(host, two_keyframes):
    two_keyframes[0]["duration"] = 0.5
    scene = Scene(host, two_keyframes)
    scroll(scene, 200)
    scroll(scene, 300)
    assert scene.active_start_offset == 250
    scroll(scene, 100)
    assert scene.active_index == 0
    assert scene.active_start_offset == 0


def test_index_clamped_at_the_end():
    host = HeadlessHost(width=1000, height=500, clamp_scroll=False)
    host.add("section#only")
    scene = Scene(host, [{"selector": "#only"}])

    state = scroll(scene, 600)
    assert state.transition is Transition.ADVANCE
    assert scene.active_index == 0
    assert scene.active_start_offset == 0
    # re-finalized, then shown again as the still-active keyframe
    assert host.resolve("#only").visible is True

    state = scroll(scene, -20)
    assert state.transition is Transition.RETREAT
    assert scene.active_index == 0
    assert scene.active_start_offset == 0


def test_active_index_tracks_span(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    positions = np.linspace(0, 999, 50)

    for pos in list(positions) + list(positions[::-1]):
        state = scroll(scene, float(pos))
        assert state.active_index == scene.keyframe_index_at(pos)
        assert scene.active_start_offset == scene.offsets[scene.active_index]


def test_keyframe_index_at_boundaries(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    assert scene.keyframe_index_at(0) == 0
    assert scene.keyframe_index_at(500) == 0
    assert scene.keyframe_index_at(500.5) == 1
    assert scene.keyframe_index_at(5000) == 1
    assert scene.keyframe_index_at(-5) == 0


# =============================================================================
# Direction independence
# =============================================================================

def section_styles(host, selector):
    return [dict(n.style) for n in host.resolve(selector).walk()]


def test_same_style_either_direction(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    for pos in range(0, 301, 50):
        scroll(scene, pos)
    forward = section_styles(host, "#first")

    for pos in range(300, 1001, 50):
        scroll(scene, pos)
    for pos in range(1000, 299, -50):
        scroll(scene, pos)
    backward = section_styles(host, "#first")

    assert scene.active_index == 0
    assert backward == forward
    assert target(host, "#first .sub").style == {"opacity": 0}


def test_without_settle_stale_windows_keep_initial_values(host, two_keyframes):
    scene = Scene(host, two_keyframes, SceneConfig(settle_after_transition=False))
    for pos in range(0, 1001, 100):
        scroll(scene, pos)
    for pos in range(1000, 299, -100):
        scroll(scene, pos)
    # .sub's window ended at 200; re-entering at 400 resets it and the
    # backward skip rule never revisits it
    assert target(host, "#first .sub").style == {"opacity": 1.0}


# =============================================================================
# Driving, signals, teardown
# =============================================================================

def test_host_timer_drives_ticks(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    ticks = []
    host.bridge.connect(SIGNAL_TICK, ticks.append)

    host.scroll_to(120)
    host.step(0.010)
    assert [t.scroll_pos for t in ticks] == [120]
    assert scene.last_tick is ticks[0]


def test_resize_relayouts_and_resets(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    extents = []
    host.bridge.connect(SIGNAL_LAYOUT, extents.append)

    scroll(scene, 700)
    assert scene.active_index == 1

    host.resize(800, 400)
    assert extents == [1200]
    assert scene.active_index == 0
    assert scene.active_start_offset == 0
    assert host.scroll_position() == 0
    assert scene.keyframes[0].duration_px == 400
    assert host.resolve("#second").visible is False
    # resize does not start a second timer
    assert host.interval_count == 1


def test_destroy(host, two_keyframes):
    scene = Scene(host, two_keyframes)
    scene.destroy()
    assert host.interval_count == 0

    host.resize(800, 400)
    assert scene.total_extent == 1500
