"""
Trajectory Integrator
=====================
Fixed-step explicit (forward) Euler integration of the Lorenz system.

    dx/dt = s * (y - x)
    dy/dt = x * (r - z) - y
    dz/dt = x * y - b * z

Every run starts from the same seed and produces exactly ``n_points``
post-update states. Parameters that make the system diverge are not
guarded: the run still completes and the output simply contains Inf/NaN.

Classes:
    Point3D: Immutable (x, y, z) value.
    Trajectory: Read-only, fixed-length sequence of Point3D.

Functions:
    compute_trajectory: Parameters -> Trajectory.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Iterator, NamedTuple, Tuple, TYPE_CHECKING

import numpy as np
import numba as nb

from lorenzviz.config import DT, LORENZ_POINTS, SEED

if TYPE_CHECKING:
    import numpy.typing as npt
    from lorenzviz.model.state import LorenzParameters

logger = logging.getLogger(__name__)


class Point3D(NamedTuple):
    x: float
    y: float
    z: float


@dataclass(frozen=True, eq=False)
class Trajectory:
    """
    Ordered integration output, index order == simulated time order.

    The backing array has shape (N, 3) and is flagged read-only; a new
    Trajectory is created for every recomputation.
    """
    points: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        self.points.setflags(write=False)

    def __len__(self) -> int:
        return self.points.shape[0]

    def __getitem__(self, index: int) -> Point3D:
        x, y, z = self.points[index]
        return Point3D(float(x), float(y), float(z))

    def __iter__(self) -> Iterator[Point3D]:
        for x, y, z in self.points:
            yield Point3D(float(x), float(y), float(z))

    @property
    def is_finite(self) -> bool:
        """False once the integration has blown up to Inf/NaN."""
        return bool(np.isfinite(self.points).all())


# ---- JIT'd Euler kernel ----
# No fastmath here: it assumes finite values, and diverging runs must
# propagate Inf/NaN exactly as IEEE arithmetic does.

@nb.njit(cache=True)
def lorenz_derivatives(x: float, y: float, z: float, s: float, r: float, b: float) -> Tuple[float, float, float]:
    """Right-hand side of the Lorenz system at (x, y, z)."""
    dx = s * (y - x)
    dy = x * (r - z) - y
    dz = x * y - b * z
    return dx, dy, dz


@nb.njit(cache=True)
def _euler_kernel(
    x0: float, y0: float, z0: float,
    s: float, r: float, b: float,
    dt: float, n_points: int
) -> npt.NDArray[np.float64]:
    out = np.empty((n_points, 3), dtype=np.float64)
    x, y, z = x0, y0, z0
    for i in range(n_points):
        # All three derivatives come from the same pre-update snapshot
        dx, dy, dz = lorenz_derivatives(x, y, z, s, r, b)
        x += dt * dx
        y += dt * dy
        z += dt * dz
        out[i, 0] = x
        out[i, 1] = y
        out[i, 2] = z
    return out


def compute_trajectory(
    params: LorenzParameters,
    n_points: int = LORENZ_POINTS,
    dt: float = DT
) -> Trajectory:
    """
    Integrate the Lorenz system from the fixed seed.

    Args:
        params: Lorenz coefficients (sigma, rho, beta).
        n_points: Number of Euler steps, i.e. trajectory length.
        dt: Time step.

    Returns:
        Trajectory with exactly ``n_points`` points.
    """
    if n_points < 0:
        raise ValueError(f"Point count must be non-negative, got {n_points}.")
    if not dt > 0.0:
        raise ValueError(f"Time step must be positive, got {dt}.")

    start = time.perf_counter()
    x0, y0, z0 = SEED
    points = _euler_kernel(
        x0, y0, z0,
        float(params.sigma), float(params.rho), float(params.beta),
        float(dt), int(n_points)
    )
    trajectory = Trajectory(points)

    logger.info(
        f"Computed {n_points} points for s={params.sigma:.2f} r={params.rho:.2f} "
        f"b={params.beta:.4f} in {(time.perf_counter() - start) * 1000:.1f} ms"
    )
    if not trajectory.is_finite:
        logger.warning("Trajectory diverged (contains Inf/NaN) for the current parameters.")
    return trajectory
