import pytest

from lorenzviz.config import DEFAULT_DIM, DEFAULT_SPEED
from lorenzviz.controller.commands import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, handle_key
from lorenzviz.model.colors import ColorMode


@pytest.mark.parametrize("key, attr, expected", [
    ("s", "sigma", 10.5),
    ("S", "sigma", 9.5),
    ("r", "rho", 29.0),
    ("R", "rho", 27.0),
    ("b", "beta", 2.7666),
    ("B", "beta", 2.5666),
])
def test_parameter_keys(state, key, attr, expected):
    before = state.current_trajectory()
    assert handle_key(state, key, now=0.0)
    assert getattr(state.current_parameters(), attr) == pytest.approx(expected)
    assert state.current_trajectory() is not before


@pytest.mark.parametrize("key, expected", [
    ("+", DEFAULT_SPEED - 1.0),
    ("=", DEFAULT_SPEED - 1.0),
    ("-", DEFAULT_SPEED + 1.0),
    ("_", DEFAULT_SPEED + 1.0),
])
def test_speed_keys(state, key, expected):
    handle_key(state, key, now=0.0)
    assert state.animation.speed_seconds == expected


def test_color_keys(state):
    handle_key(state, "c", now=0.0)
    assert state.color_mode is ColorMode.SINGLE
    handle_key(state, "C", now=0.0)
    handle_key(state, "C", now=0.0)
    assert state.color_mode is ColorMode.RAINBOW


def test_space_toggles_animation(state):
    handle_key(state, " ", now=3.0)
    assert not state.animation.enabled
    handle_key(state, " ", now=4.0)
    assert state.animation.enabled
    assert state.animation.last_timestamp == 4.0


@pytest.mark.parametrize("key, azimuth, elevation", [
    (KEY_RIGHT, 5, 15),
    (KEY_LEFT, 355, 15),
    (KEY_UP, 0, 20),
    (KEY_DOWN, 0, 10),
])
def test_arrow_keys(state, key, azimuth, elevation):
    handle_key(state, key, now=0.0)
    assert (state.view.azimuth, state.view.elevation) == (azimuth, elevation)


def test_zoom_and_reset_keys(state):
    handle_key(state, "z", now=0.0)
    assert state.view.dim == DEFAULT_DIM - 2.0
    handle_key(state, "Z", now=0.0)
    handle_key(state, "Z", now=0.0)
    assert state.view.dim == DEFAULT_DIM + 2.0

    handle_key(state, KEY_RIGHT, now=0.0)
    handle_key(state, "0", now=0.0)
    assert (state.view.azimuth, state.view.elevation) == (0, 15)


def test_unbound_key_is_ignored(state):
    before = state.current_trajectory()
    assert not handle_key(state, "x", now=0.0)
    assert not handle_key(state, "", now=0.0)
    assert state.current_trajectory() is before


def test_requires_state():
    with pytest.raises(ValueError):
        handle_key(None, "c", now=0.0)
