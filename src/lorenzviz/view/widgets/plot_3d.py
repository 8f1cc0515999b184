"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional, Tuple

import logging
import numpy as np
import numpy.typing as npt

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from lorenzviz.model.colors import ColorMode
from lorenzviz.model.lorenz import Trajectory
from lorenzviz.model.state import SimulationState
from lorenzviz.view.overlay import overlay_text
from lorenzviz.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)

# Axis extents (start, end) per axis and label positions
AXES: Tuple[Tuple[Tuple[float, float, float], Tuple[float, float, float]], ...] = (
    ((-30.0, 0.0, 0.0), (20.0, 0.0, 0.0)),
    ((0.0, -20.0, 0.0), (0.0, 20.0, 0.0)),
    ((0.0, 0.0, -10.0), (0.0, 0.0, 40.0)),
)
AXIS_LABELS: Tuple[str, ...] = ("X", "Y", "Z")
AXIS_LABEL_POSITIONS = np.array([[22.0, 0.0, 0.0], [0.0, 22.0, 0.0], [0.0, 0.0, 42.0]])

AXIS_COLOR = (0.8, 0.8, 0.8)
LINE_WIDTH = 1.5
CAMERA_DISTANCE = 100.0


class PyVistaWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._vtk_utils = VtkUtils()
        self._init_plotter()

        # --- Actors state ---
        self._trajectory_actor: Optional[pv.Actor] = None
        self._axes_actor: Optional[pv.Actor] = None

        # --- Data cache ---
        # Segment cells and colors depend only on the trajectory and the mode
        self._cached_trajectory: Optional[Trajectory] = None
        self._cached_mode: Optional[ColorMode] = None
        self._cells: Optional[npt.NDArray[np.int_]] = None
        self._rgb: Optional[npt.NDArray[np.uint8]] = None

        # Signatures of what is currently drawn
        self._drawn_count: Optional[int] = None
        self._view_signature: Optional[Tuple[int, int, float]] = None
        self._overlay: Optional[str] = None

        self._create_axes()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_scene(self, state: SimulationState) -> None:
        """
        Refreshes all layers from the current state:
        1. Trajectory prefix (only if trajectory, mode or visible count changed)
        2. View rotation and zoom
        3. Overlay text
        """
        self._update_color_cache(state)
        self._update_trajectory_layer(state)
        self._update_view(state)
        self._update_overlay(state)
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Layer Management
    # ------------------------------------------------------------------------------

    def _update_color_cache(self, state: SimulationState) -> None:
        trajectory = state.current_trajectory()
        if trajectory is self._cached_trajectory and state.color_mode == self._cached_mode:
            return

        if trajectory is not self._cached_trajectory:
            self._cells = self._vtk_utils.segment_cells(len(trajectory))
        # Segment i takes the color of its start point
        self._rgb = self._vtk_utils.to_rgb_bytes(state.colors(max(len(trajectory) - 1, 0)))

        self._cached_trajectory = trajectory
        self._cached_mode = state.color_mode
        self._drawn_count = None  # Force rebuild

    def _update_trajectory_layer(self, state: SimulationState) -> None:
        count = state.visible_prefix_length()
        if count == self._drawn_count:
            return
        self._drawn_count = count

        n_seg = max(count - 1, 0)
        if n_seg == 0:
            if self._trajectory_actor is not None:
                self._trajectory_actor.SetVisibility(False)
            return

        pd = self._vtk_utils.segments_to_polydata(
            self._cached_trajectory.points,
            self._cells[:n_seg],
            self._rgb[:n_seg]
        )

        if self._trajectory_actor is None:
            self._trajectory_actor = self.plotter.add_mesh(
                pd,
                scalars="rgb",
                rgb=True,
                line_width=LINE_WIDTH,
                lighting=False,
                pickable=False,
                show_scalar_bar=False,
                render_lines_as_tubes=False,
            )
            self._trajectory_actor.user_matrix = self._current_matrix(state)
        else:
            # Update existing data in-place to prevent blinking
            self._trajectory_actor.mapper.dataset.copy_from(pd)
        self._trajectory_actor.SetVisibility(True)

    def _update_view(self, state: SimulationState) -> None:
        view = state.current_view_state()
        sig = (view.azimuth, view.elevation, view.dim)
        if sig == self._view_signature:
            return
        self._view_signature = sig

        matrix = self._current_matrix(state)
        for actor in (self._trajectory_actor, self._axes_actor):
            if actor is not None:
                actor.user_matrix = matrix

        labels = self._vtk_utils.transform_points(AXIS_LABEL_POSITIONS, matrix)
        self.plotter.add_point_labels(
            labels,
            list(AXIS_LABELS),
            name="axis_labels",
            text_color="white",
            font_size=12,
            shape=None,
            show_points=False,
            always_visible=True,
        )

        self.plotter.camera.parallel_scale = view.dim
        self.plotter.renderer.ResetCameraClippingRange()

    def _update_overlay(self, state: SimulationState) -> None:
        text = overlay_text(state)
        if text == self._overlay:
            return
        self._overlay = text
        self.plotter.add_text(
            text,
            position="lower_left",
            font_size=8,
            color="white",
            name="overlay",
        )

    def _current_matrix(self, state: SimulationState) -> npt.NDArray[np.float64]:
        view = state.current_view_state()
        return self._vtk_utils.view_matrix(view.azimuth, view.elevation)

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("black")
        self.plotter.enable_parallel_projection()
        # Camera looks down -Z; rotation is applied to the model, not the camera
        self.plotter.camera.position = (0.0, 0.0, CAMERA_DISTANCE)
        self.plotter.camera.focal_point = (0.0, 0.0, 0.0)
        self.plotter.camera.up = (0.0, 1.0, 0.0)
        # The view is driven only by ViewState
        self.plotter.disable()
        self.plotter.iren.clear_key_event_callbacks()

    def _create_axes(self) -> None:
        axes = pv.merge([pv.Line(start, end) for start, end in AXES])
        self._axes_actor = self.plotter.add_mesh(
            axes,
            color=AXIS_COLOR,
            line_width=1.0,
            lighting=False,
            pickable=False,
            show_scalar_bar=False,
        )

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
