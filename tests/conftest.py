# pytest specific configuration file containing eg fixtures.
import pytest

from lorenzviz.model.animation import AnimationController
from lorenzviz.model.state import SimulationState

SMALL_N = 1000


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def state():
    return SimulationState(n_points=SMALL_N)


@pytest.fixture
def controller(state, clock):
    return AnimationController(state, clock=clock)
