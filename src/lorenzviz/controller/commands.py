"""
Key Commands
============
Maps key presses to operations on the SimulationState.

Why is this file needed?
------------------------
The window only knows about Qt key events; this module knows what each key
*means*. Keeping the mapping free of Qt makes the bindings testable and
keeps the window a thin adapter.

Key bindings:
    SPACE   Toggle animation on/off
    c/C     Cycle color mode forward/backward (single/rainbow/fade)
    +/-     Increase/decrease animation speed
    s/S     Increase/decrease sigma
    r/R     Increase/decrease rho
    b/B     Increase/decrease beta
    z/Z     Zoom in/out
    arrows  Change view angle
    0       Reset view angle
"""
from __future__ import annotations

import logging
from typing import Callable, Dict

from lorenzviz.config import BETA_STEP, RHO_STEP, ROTATION_STEP, SIGMA_STEP, SPEED_STEP, ZOOM_STEP
from lorenzviz.model.state import Parameter, SimulationState

logger = logging.getLogger(__name__)

KEY_LEFT = "Left"
KEY_RIGHT = "Right"
KEY_UP = "Up"
KEY_DOWN = "Down"

Command = Callable[[SimulationState, float], None]


def _nudge(param: Parameter, delta: float) -> Command:
    return lambda state, now: state.set_parameter(param, delta)


def _rotate(d_azimuth: int, d_elevation: int) -> Command:
    return lambda state, now: state.rotate(d_azimuth, d_elevation)


KEY_COMMANDS: Dict[str, Command] = {
    " ": lambda state, now: state.toggle_animation(now),
    "0": lambda state, now: state.reset_view(),
    "c": lambda state, now: state.cycle_color_mode(+1),
    "C": lambda state, now: state.cycle_color_mode(-1),
    # Speed is the full-reveal duration: "+" means faster, i.e. fewer seconds
    "+": lambda state, now: state.adjust_speed(-SPEED_STEP),
    "=": lambda state, now: state.adjust_speed(-SPEED_STEP),
    "-": lambda state, now: state.adjust_speed(+SPEED_STEP),
    "_": lambda state, now: state.adjust_speed(+SPEED_STEP),
    "s": _nudge(Parameter.SIGMA, +SIGMA_STEP),
    "S": _nudge(Parameter.SIGMA, -SIGMA_STEP),
    "b": _nudge(Parameter.BETA, +BETA_STEP),
    "B": _nudge(Parameter.BETA, -BETA_STEP),
    "r": _nudge(Parameter.RHO, +RHO_STEP),
    "R": _nudge(Parameter.RHO, -RHO_STEP),
    "z": lambda state, now: state.zoom(-ZOOM_STEP),
    "Z": lambda state, now: state.zoom(+ZOOM_STEP),
    KEY_RIGHT: _rotate(+ROTATION_STEP, 0),
    KEY_LEFT: _rotate(-ROTATION_STEP, 0),
    KEY_UP: _rotate(0, +ROTATION_STEP),
    KEY_DOWN: _rotate(0, -ROTATION_STEP),
}


def handle_key(state: SimulationState, key: str, now: float) -> bool:
    """
    Dispatch one key press.

    Args:
        state: The application state to mutate.
        key: Printable character, or one of the KEY_* arrow names.
        now: Current clock reading in seconds (used when playback starts).

    Returns:
        True if the key is bound and was applied, False otherwise.
    """
    if state is None:
        raise ValueError("handle_key requires a SimulationState instance.")

    command = KEY_COMMANDS.get(key)
    if command is None:
        return False

    logger.debug(f"Key '{key}'")
    command(state, now)
    return True
