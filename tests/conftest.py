import math

import numpy as np
import pytest

from asteroids.config import GameConfig
from asteroids.sim.ship import ShipState
from asteroids.sim.world import Bounds


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def bounds():
    return Bounds(800.0, 600.0)


@pytest.fixture
def make_ship():
    def _make(pos=(400.0, 300.0), vel=(0.0, 0.0), a=math.pi / 2, r=10.0, **kwargs) -> ShipState:
        return ShipState(
            pos=np.array(pos, dtype=np.float64),
            vel=np.array(vel, dtype=np.float64),
            r=r,
            a=a,
            **kwargs,
        )

    return _make
