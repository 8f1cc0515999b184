"""Point coloring policy: index along the trajectory -> RGB."""
from __future__ import annotations

from enum import IntEnum
import math
from typing import Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

RGB = Tuple[float, float, float]

CYAN: RGB = (0.0, 1.0, 1.0)
FADE_GREEN: float = 0.2


class ColorMode(IntEnum):
    """Selectable coloring modes, in cycling order."""
    SINGLE = 0
    RAINBOW = 1
    FADE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def cycled(self, direction: int) -> ColorMode:
        """Step ``direction`` modes forward (or back), wrapping around."""
        count = len(ColorMode)
        index = int(self) + direction
        while index < 0:
            index += count
        while index >= count:
            index -= count
        return ColorMode(index)


def hue_to_rgb(hue: float) -> RGB:
    """
    Fully saturated, full value HSV -> RGB.

    Args:
        hue: Hue in degrees, expected in [0, 360).
    """
    c = 1.0
    x = c * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
    if hue < 60:
        return c, x, 0.0
    if hue < 120:
        return x, c, 0.0
    if hue < 180:
        return 0.0, c, x
    if hue < 240:
        return 0.0, x, c
    if hue < 300:
        return x, 0.0, c
    return c, 0.0, x


def color_for(index: int, total: int, mode: ColorMode) -> RGB:
    """
    Color of point ``index`` out of ``total`` under ``mode``.

    Single is constant cyan, Rainbow sweeps the hue circle once over the
    trajectory, Fade is a linear blue -> red ramp.
    """
    if total <= 0:
        raise ValueError(f"Total point count must be positive, got {total}.")

    match mode:
        case ColorMode.SINGLE:
            return CYAN
        case ColorMode.RAINBOW:
            return hue_to_rgb(index / total * 360.0)
        case ColorMode.FADE:
            ratio = index / total
            return ratio, FADE_GREEN, 1.0 - ratio
    raise ValueError(f"Unknown color mode: {mode!r}")


def color_array(count: int, total: int, mode: ColorMode) -> npt.NDArray[np.float64]:
    """
    Vectorised ``color_for`` for indices 0..count-1.

    Returns:
        Array of shape (count, 3); row i equals color_for(i, total, mode).
    """
    if total <= 0:
        raise ValueError(f"Total point count must be positive, got {total}.")

    count = max(int(count), 0)
    index = np.arange(count, dtype=np.float64)
    colors = np.empty((count, 3), dtype=np.float64)

    match mode:
        case ColorMode.SINGLE:
            colors[:] = CYAN
        case ColorMode.RAINBOW:
            hue = index / total * 360.0
            x = 1.0 - np.abs(np.fmod(hue / 60.0, 2.0) - 1.0)
            zero = np.zeros_like(hue)
            one = np.ones_like(hue)
            conditions = [hue < 60, hue < 120, hue < 180, hue < 240, hue < 300]
            colors[:, 0] = np.select(conditions, [one, x, zero, zero, x], default=one)
            colors[:, 1] = np.select(conditions, [x, one, one, x, zero], default=zero)
            colors[:, 2] = np.select(conditions, [zero, zero, x, one, one], default=x)
        case ColorMode.FADE:
            ratio = index / total
            colors[:, 0] = ratio
            colors[:, 1] = FADE_GREEN
            colors[:, 2] = 1.0 - ratio
        case _:
            raise ValueError(f"Unknown color mode: {mode!r}")
    return colors
