"""
Simulation State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the Lorenz parameters, the computed trajectory,
   the view angles and the animation progress in one place.
2. Single writer: Every mutation (key commands, frame ticks) goes through the
   methods below, so invariants such as "a parameter change replaces the
   trajectory and restarts the replay" cannot be bypassed.
3. Decoupling: Views read snapshots from this object; the controller layer
   writes to it. Nothing here imports Qt or PyVista.

Classes:
    LorenzParameters: sigma / rho / beta coefficients.
    AnimationState: Progressive reveal bookkeeping.
    ViewState: Rotation angles and orthographic zoom.
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
import logging
from typing import Optional, Union, TYPE_CHECKING

from lorenzviz.config import (
    DEFAULT_AZIMUTH, DEFAULT_BETA, DEFAULT_DIM, DEFAULT_ELEVATION, DEFAULT_RHO, DEFAULT_SIGMA,
    DEFAULT_SPEED, DT, LORENZ_POINTS, MIN_DIM, MIN_SPEED
)
from lorenzviz.model.colors import ColorMode, RGB, color_array, color_for
from lorenzviz.model.lorenz import Trajectory, compute_trajectory

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Parameter(StrEnum):
    """Lorenz coefficient selector, keyed by its one-letter name."""
    SIGMA = "s"
    RHO = "r"
    BETA = "b"


@dataclass
class LorenzParameters:
    sigma: float = DEFAULT_SIGMA
    rho: float = DEFAULT_RHO
    beta: float = DEFAULT_BETA


@dataclass
class AnimationState:
    """
    Progressive reveal of the precomputed trajectory.

    ``last_timestamp`` is None until the first frame after start-up (or after
    a trajectory replacement) captures the clock.
    """
    enabled: bool = True
    speed_seconds: float = DEFAULT_SPEED
    reveal_count: int = 0
    last_timestamp: Optional[float] = None


@dataclass
class ViewState:
    """
    Model rotation in degrees and orthographic half-extent.

    ``aspect`` mirrors the viewport (width / height) and is informational:
    PyVista derives the projection aspect from the widget size itself.
    """
    azimuth: int = DEFAULT_AZIMUTH
    elevation: int = DEFAULT_ELEVATION
    dim: float = DEFAULT_DIM
    aspect: float = 1.0


def normalize_angle(angle: int) -> int:
    """Wrap an angle in degrees into [0, 360)."""
    return ((angle % 360) + 360) % 360


@dataclass
class SimulationState:
    """
    Single source of truth for the visualizer.
    The host owns one instance and passes it to the controller and the views.
    Constructing it computes the initial trajectory.
    """
    parameters: LorenzParameters = field(default_factory=LorenzParameters)
    view: ViewState = field(default_factory=ViewState)
    animation: AnimationState = field(default_factory=AnimationState)
    color_mode: ColorMode = ColorMode.FADE

    n_points: int = LORENZ_POINTS
    dt: float = DT

    trajectory: Trajectory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.trajectory = compute_trajectory(self.parameters, self.n_points, self.dt)

    # ------------------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------------------

    def set_parameter(self, which: Union[Parameter, str], delta: float) -> None:
        """
        Nudge one Lorenz coefficient and recompute the trajectory.

        The reveal restarts from zero; while playing, the next frame tick
        re-captures the clock so the replay starts from the beginning.
        """
        try:
            param = Parameter(which)
        except ValueError:
            raise ValueError(f"Unknown Lorenz parameter '{which}'. Expected one of: s, r, b.") from None

        match param:
            case Parameter.SIGMA:
                self.parameters.sigma += delta
            case Parameter.RHO:
                self.parameters.rho += delta
            case Parameter.BETA:
                self.parameters.beta += delta

        logger.debug(f"Parameter {param.value} changed by {delta:+}: {self.parameters}")
        self._recompute()

    def toggle_animation(self, now: float) -> None:
        """Flip play/pause. Starting playback captures ``now`` and restarts the reveal."""
        self.animation.enabled = not self.animation.enabled
        if self.animation.enabled:
            self.animation.last_timestamp = now
            self.animation.reveal_count = 0
        logger.debug(f"Animation {'ON' if self.animation.enabled else 'OFF'}")

    def cycle_color_mode(self, direction: int) -> None:
        self.color_mode = self.color_mode.cycled(direction)
        logger.debug(f"Color mode: {self.color_mode.label}")

    def adjust_speed(self, delta: float) -> None:
        """Change the full-reveal duration in seconds; never below MIN_SPEED."""
        self.animation.speed_seconds = max(self.animation.speed_seconds + delta, MIN_SPEED)
        logger.debug(f"Animation speed: {self.animation.speed_seconds:.1f}s")

    def rotate(self, d_azimuth: int, d_elevation: int) -> None:
        self.view.azimuth = normalize_angle(self.view.azimuth + d_azimuth)
        self.view.elevation = normalize_angle(self.view.elevation + d_elevation)
        logger.debug(f"View: {self.view.azimuth},{self.view.elevation}")

    def reset_view(self) -> None:
        self.view.azimuth = DEFAULT_AZIMUTH
        self.view.elevation = DEFAULT_ELEVATION

    def zoom(self, delta: float) -> None:
        """Change the orthographic half-extent; negative delta zooms in."""
        self.view.dim = max(self.view.dim + delta, MIN_DIM)
        logger.debug(f"Zoom dim: {self.view.dim:.1f}")

    def resize_viewport(self, width: int, height: int) -> None:
        self.view.aspect = width / height if height > 0 else 1.0

    def _recompute(self) -> None:
        self.trajectory = compute_trajectory(self.parameters, self.n_points, self.dt)
        self.animation.reveal_count = 0
        self.animation.last_timestamp = None

    # ------------------------------------------------------------------------------
    # Read side (render path)
    # ------------------------------------------------------------------------------

    def current_trajectory(self) -> Trajectory:
        return self.trajectory

    def visible_prefix_length(self) -> int:
        """Number of points to draw: everything when paused, else the reveal count."""
        if not self.animation.enabled:
            return len(self.trajectory)
        return self.animation.reveal_count

    def color_for(self, index: int) -> RGB:
        return color_for(index, len(self.trajectory), self.color_mode)

    def colors(self, count: Optional[int] = None) -> npt.NDArray[np.float64]:
        """Colors of the first ``count`` points (all points by default)."""
        total = len(self.trajectory)
        if count is None:
            count = total
        return color_array(min(count, total), max(total, 1), self.color_mode)

    def current_parameters(self) -> LorenzParameters:
        return replace(self.parameters)

    def current_view_state(self) -> ViewState:
        return replace(self.view)

    def current_animation_state(self) -> AnimationState:
        return replace(self.animation)
