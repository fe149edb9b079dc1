import pytest

from parallax.host.headless import HeadlessHost


@pytest.fixture
def host():
    """1000x500 headless page with two sections."""
    host = HeadlessHost(width=1000, height=500)
    first = host.add("section#first")
    host.add("h1.title", parent=first)
    host.add("p.sub", parent=first)
    second = host.add("section#second")
    host.add("h1.title", parent=second)
    host.add("div#backdrop")
    return host


@pytest.fixture
def two_keyframes():
    return [
        {
            "selector": "#first",
            "animations": [
                {"selector": ".title", "translateY": -100, "opacity": 0},
                {"selector": ".sub", "opacity": 0, "endTime": 0.4},
            ],
        },
        {
            "selector": "#second",
            "animations": [
                {"selector": ".title", "initialOpacity": 0, "opacity": 1, "endTime": 0.5},
            ],
        },
    ]
