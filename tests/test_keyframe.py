import pytest

from parallax.core.errors import UnresolvedTargetError
from parallax.timeline.keyframe import Keyframe
from parallax.timeline.schema import KeyframeDescriptor


def make_keyframe(host, animations, duration=1.0, selector="#first"):
    desc = KeyframeDescriptor.from_dict({
        "selector": selector,
        "duration": duration,
        "animations": animations,
    })
    return Keyframe(host, desc)


def test_duration_px_from_viewport(host):
    kf = make_keyframe(host, [], duration=1.5)
    kf.layout(500, 1000)
    assert kf.duration_px == 750


def test_elements_laid_out_against_keyframe(host):
    kf = make_keyframe(host, [{"selector": ".title", "opacity": 0, "startTime": 0.5}], duration=2)
    kf.layout(500, 1000)
    (element,) = kf.elements
    assert element.start_time == 500
    assert element.end_time == 1000


def test_orderings_are_stable(host):
    kf = make_keyframe(host, [
        {"selector": ".title", "opacity": 0, "startTime": 0.5},   # a
        {"selector": ".sub", "opacity": 0},                       # b
        {"selector": ".title", "scale": 2, "startTime": 0.5},     # c
        {"selector": ".sub", "scale": 2, "startTime": 0.2},       # d
    ])
    kf.layout(500, 1000)
    a, b, c, d = kf.elements

    assert kf.elements_down == [b, d, a, c]
    assert kf.elements_up == [a, c, d, b]
    assert sorted(map(id, kf.elements_down)) == sorted(map(id, kf.elements_up))


def test_relayout_reorders(host):
    kf = make_keyframe(host, [
        {"selector": ".title", "opacity": 0, "startTime": 0.5},
        {"selector": ".sub", "opacity": 0},
    ])
    kf.layout(500, 1000)
    kf.layout(800, 1000)
    assert [e.start_time for e in kf.elements_down] == [0, 400]
    assert kf.duration_px == 800


def test_scoped_and_global_selectors(host):
    kf = make_keyframe(host, [
        {"selector": ".title", "opacity": 0},
        {"selector": "#backdrop", "opacity": 0},
    ], selector="#second")
    title, backdrop = kf.elements
    assert title.target is host.select_all("#second .title")[0]
    assert backdrop.target is host.resolve("#backdrop")


def test_unresolved_element_names_keyframe(host):
    with pytest.raises(UnresolvedTargetError) as exc:
        make_keyframe(host, [{"selector": ".missing", "opacity": 0}])
    assert exc.value.selector == ".missing"
    assert exc.value.scope == "section#first"


def test_unresolved_keyframe(host):
    with pytest.raises(UnresolvedTargetError):
        make_keyframe(host, [], selector="#nowhere")


def test_update_dispatches_and_skips(host):
    kf = make_keyframe(host, [
        {"selector": ".title", "opacity": 0},
        {"selector": ".sub", "opacity": 0, "startTime": 0.5},
    ])
    kf.layout(500, 1000)
    assert kf.update(100, True, False) == 1
    assert kf.update(100, True, True) == 2


def test_show_hide(host):
    kf = make_keyframe(host, [])
    kf.hide()
    assert host.resolve("#first").visible is False
    kf.show()
    assert host.resolve("#first").visible is True
