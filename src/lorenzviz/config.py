"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (point counts, step sizes, key
   increments) from being scattered throughout the code.
2. Single source: The integrator, the state model and the GUI all read the
   same values, so e.g. the trajectory length is the same everywhere.

Exports:
    LORENZ_POINTS (int): Number of points in every computed trajectory.
    DT (float): Fixed Euler time step.
    SEED (tuple): Initial condition of every integration run.
"""
from typing import Tuple

# --- Integration ---
LORENZ_POINTS: int = 50000
DT: float = 0.001
SEED: Tuple[float, float, float] = (1.0, 1.0, 1.0)

# --- Lorenz parameters (defaults and key increments) ---
DEFAULT_SIGMA: float = 10.0
DEFAULT_RHO: float = 28.0
DEFAULT_BETA: float = 2.6666

SIGMA_STEP: float = 0.5
RHO_STEP: float = 1.0
BETA_STEP: float = 0.1

# --- Animation ---
DEFAULT_SPEED: float = 20.0  # seconds for a full reveal
MIN_SPEED: float = 1.0
SPEED_STEP: float = 1.0

# --- View ---
DEFAULT_AZIMUTH: int = 0
DEFAULT_ELEVATION: int = 15
ROTATION_STEP: int = 5  # degrees

DEFAULT_DIM: float = 60.0
ZOOM_STEP: float = 2.0
MIN_DIM: float = 2.0

# --- GUI ---
APP_NAME: str = "Lorenz Attractor"
WINDOW_SIZE: Tuple[int, int] = (800, 600)
FRAME_INTERVAL_MS: int = 16  # ~60 FPS

# --- Logging ---
LOG_LEVEL_ENV: str = "LORENZVIZ_LOG_LEVEL"
LOG_FILE_ENV: str = "LORENZVIZ_LOG_FILE"
