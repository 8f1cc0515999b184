"""
Animation Controller
====================
Turns wall-clock time into a reveal count over the precomputed trajectory.

Two logical states, read from ``AnimationState.enabled``:

* Paused:  the full trajectory is shown, ticks are no-ops.
* Playing: ``reveal_count = floor(elapsed / speed * N)``, clamped to [0, N].
  Once N is reached it holds there and the reference timestamp follows the
  clock, so ``elapsed`` stays bounded. There is no automatic loop.
"""
from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

from lorenzviz.model.state import SimulationState

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class AnimationController:
    def __init__(self, state: SimulationState, clock: Clock = time.monotonic) -> None:
        if state is None:
            raise ValueError("AnimationController requires a SimulationState instance.")
        self.state = state
        self.clock = clock

    @property
    def is_playing(self) -> bool:
        return self.state.animation.enabled

    def now(self) -> float:
        return self.clock()

    def toggle(self) -> None:
        self.state.toggle_animation(self.now())

    def tick(self, now: Optional[float] = None) -> int:
        """
        Advance the reveal for one host frame.

        Args:
            now: Timestamp in seconds; read from the clock when omitted.

        Returns:
            The number of visible points: the reveal count while playing,
            N while paused.
        """
        anim = self.state.animation
        if not anim.enabled:
            # Paused shows the whole trajectory
            return len(self.state.trajectory)

        if now is None:
            now = self.now()
        if anim.last_timestamp is None:
            anim.last_timestamp = now

        total = len(self.state.trajectory)
        elapsed = max(now - anim.last_timestamp, 0.0)
        progress = elapsed / anim.speed_seconds
        count = min(max(math.floor(progress * total), 0), total)

        # Monotonic while playing
        count = max(count, anim.reveal_count)

        if count >= total:
            if anim.reveal_count < total:
                logger.info(f"Animation complete: {total} points revealed.")
            count = total
            anim.last_timestamp = now

        anim.reveal_count = count
        return count
