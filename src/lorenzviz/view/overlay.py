"""Status text drawn over the 3D scene."""
from __future__ import annotations

from typing import List

from lorenzviz.model.state import SimulationState

CONTROLS_HELP = (
    "Controls: s/S,b/B,r/R=params, SPACE=anim, c/C=cycle color, +/-=speed, "
    "z/Z=zoom, arrows=rotate, 0=reset view"
)


def overlay_lines(state: SimulationState) -> List[str]:
    """
    Build the overlay, top line first.
    The progress line is only present while the animation is playing.
    """
    params = state.current_parameters()
    view = state.current_view_state()
    anim = state.current_animation_state()

    lines = [
        CONTROLS_HELP,
        f"Params: s={params.sigma:.1f} b={params.beta:.2f} r={params.rho:.1f}",
    ]
    if anim.enabled:
        lines.append(f"Progress: {anim.reveal_count}/{len(state.trajectory)} points")
    lines.append(
        f"Animation: {'ON' if anim.enabled else 'OFF'} | Speed: {anim.speed_seconds:.1f}s | "
        f"Color: {state.color_mode.label}"
    )
    lines.append(f"Lorenz Attractor - View: {view.azimuth},{view.elevation}")
    return lines


def overlay_text(state: SimulationState) -> str:
    return "\n".join(overlay_lines(state))
