"""
VTK and Geometry Utilities
Helper functions for rotation matrices and PolyData conversion.
"""
import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def view_matrix(azimuth: float, elevation: float) -> npt.NDArray[np.float64]:
        """
        4x4 model rotation: first ``azimuth`` degrees about Y, then
        ``elevation`` degrees about X.
        """
        th = np.deg2rad(azimuth)
        ph = np.deg2rad(elevation)

        rot_y = np.array([
            [np.cos(th), 0.0, np.sin(th)],
            [0.0, 1.0, 0.0],
            [-np.sin(th), 0.0, np.cos(th)],
        ])
        rot_x = np.array([
            [1.0, 0.0, 0.0],
            [0.0, np.cos(ph), -np.sin(ph)],
            [0.0, np.sin(ph), np.cos(ph)],
        ])

        matrix = np.eye(4)
        matrix[:3, :3] = rot_x @ rot_y
        return matrix

    @staticmethod
    def transform_points(points: npt.NDArray[np.float64], matrix: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Apply the rotation part of a 4x4 matrix to (N, 3) points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        return pts @ matrix[:3, :3].T

    @staticmethod
    def segment_cells(n_points: int) -> npt.NDArray[np.int_]:
        """
        Line cells [2, i, i+1] for every consecutive pair, shape (n_points - 1, 3).
        Slicing the first k-1 rows gives the segments of a k point prefix.
        """
        n_seg = max(n_points - 1, 0)
        cells = np.empty((n_seg, 3), dtype=np.int_)
        cells[:, 0] = 2
        cells[:, 1] = np.arange(n_seg)
        cells[:, 2] = np.arange(1, n_seg + 1)
        return cells

    @staticmethod
    def to_rgb_bytes(colors: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
        """Float RGB in [0, 1] -> uint8 RGB for direct color mapping."""
        return np.round(np.clip(colors, 0.0, 1.0) * 255.0).astype(np.uint8)

    @staticmethod
    def segments_to_polydata(
        points: npt.NDArray[np.float64],
        cells: npt.NDArray[np.int_],
        rgb: npt.NDArray[np.uint8]
    ) -> pv.PolyData:
        """
        Build a PolyData of independent two-point segments.

        Args:
            points: (N, 3) vertex array (the whole trajectory).
            cells: (M, 3) segment cells to draw.
            rgb: (M, 3) per-segment colors.
        """
        pd = pv.PolyData(np.asarray(points, dtype=np.float64))
        pd.lines = np.ascontiguousarray(cells).ravel()
        pd.cell_data["rgb"] = rgb
        return pd
