from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

from ..constants import NOSE_OFFSET_RADII, SHIP_START_HEADING_RAD
from .world import Bounds, wrap_margin

if TYPE_CHECKING:
    from ..config import GameConfig
    from ..controls import InputSnapshot


@dataclass
class ShipState:
    pos: np.ndarray  # float64[2], pixels
    vel: np.ndarray  # float64[2], pixels per frame
    r: float
    a: float  # heading, radians, counter-clockwise; never normalized

    rot: float = 0.0  # this frame's heading change
    thrusting: bool = False
    can_shoot: bool = True
    shoot_time: int = 0  # frames since the gun locked

    # Per-frame scratch.
    fire_requested: bool = False  # a spawn should be attempted this frame
    wrapped: bool = False

    def copy(self) -> ShipState:
        return replace(self, pos=self.pos.copy(), vel=self.vel.copy())

    @property
    def heading_vector(self) -> np.ndarray:
        # Screen space: y grows downward, so "up" is -sin.
        return np.asarray([math.cos(self.a), -math.sin(self.a)], dtype=np.float64)

    @property
    def nose(self) -> np.ndarray:
        return self.pos + self.heading_vector * (NOSE_OFFSET_RADII * self.r)

    @property
    def speed(self) -> float:
        return float(np.hypot(self.vel[0], self.vel[1]))


def new_ship(bounds: Bounds, config: GameConfig) -> ShipState:
    """A fresh ship at the centre of the world, at rest, facing up."""
    return ShipState(
        pos=bounds.center,
        vel=np.zeros(2, dtype=np.float64),
        r=config.ship.radius,
        a=SHIP_START_HEADING_RAD,
    )


class ShipController:
    """Per-frame ship kinematics and the shot cooldown latch.

    Order within a frame: cooldown tick, turn input, thrust or friction (using
    the heading from before this frame's turn), rotate, integrate, margin wrap,
    then the fire latch. The controller never spawns projectiles itself; it only
    sets `fire_requested` for the projectile manager.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def rotation_for(self, controls: InputSnapshot, dt: float) -> float:
        step = self.config.ship.turn_speed_rad_s * dt
        if controls.turn_left and not controls.turn_right:
            return step
        if controls.turn_right and not controls.turn_left:
            return -step
        return 0.0

    def tick_cooldown(self, ship: ShipState) -> None:
        if ship.can_shoot:
            return
        ship.shoot_time += 1
        if ship.shoot_time >= self.config.cooldown_frames:
            ship.can_shoot = True
            ship.shoot_time = 0

    def advance(self, ship: ShipState, controls: InputSnapshot, bounds: Bounds, dt: float | None = None) -> ShipState:
        """Return the ship one frame later. `ship` itself is left untouched."""
        if dt is None:
            dt = self.config.dt
        spec = self.config.ship
        out = ship.copy()
        out.fire_requested = False
        out.wrapped = False

        self.tick_cooldown(out)

        out.rot = self.rotation_for(controls, dt)
        out.thrusting = bool(controls.thrust)

        if out.thrusting:
            out.vel += out.heading_vector * (spec.thrust_px_s2 * dt)
        else:
            out.vel -= out.vel * (spec.friction * dt)

        out.a += out.rot
        out.pos += out.vel
        out.wrapped = wrap_margin(out.pos, out.r, bounds)

        if controls.fire and out.can_shoot:
            # One-shot latch: the attempt locks the gun even if the spawn is refused.
            out.fire_requested = True
            out.can_shoot = False
            out.shoot_time = 0
        return out
