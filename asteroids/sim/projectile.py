from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

from .world import Bounds, wrap_hard

if TYPE_CHECKING:
    from ..config import GameConfig
    from .ship import ShipState

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    pos: np.ndarray  # float64[2]
    vel: np.ndarray  # float64[2], pixels per frame; fixed at spawn

    # State
    dist: float = 0.0  # pixels travelled, only ever grows

    def copy(self) -> Projectile:
        return replace(self, pos=self.pos.copy(), vel=self.vel.copy())

    @property
    def speed(self) -> float:
        return float(np.hypot(self.vel[0], self.vel[1]))


class ProjectileManager:
    """Owns the projectiles in flight.

    Projectiles never interact with each other or with the ship, so processing
    order is irrelevant. Expiry is a filter pass that builds a new list.
    """

    def __init__(self, config: GameConfig, projectiles: list[Projectile] | None = None):
        self.config = config
        self.projectiles: list[Projectile] = [] if projectiles is None else projectiles

    def __len__(self) -> int:
        return len(self.projectiles)

    def __iter__(self):
        return iter(self.projectiles)

    @property
    def capacity(self) -> int:
        return self.config.gun.max_projectiles

    def max_travel(self, bounds: Bounds) -> float:
        return self.config.gun.max_travel_fraction * bounds.width

    def spawn(self, ship: ShipState) -> Projectile | None:
        """Fire from the ship's nose. Returns None (silently) when at capacity."""
        if len(self.projectiles) >= self.capacity:
            logger.debug("shot rejected: %d projectiles in flight", len(self.projectiles))
            return None
        speed = self.config.gun.speed_px_s * self.config.dt
        proj = Projectile(pos=ship.nose, vel=ship.heading_vector * speed)
        self.projectiles.append(proj)
        return proj

    def advance_all(self, bounds: Bounds) -> list[Projectile]:
        """Move every projectile one frame; drop and return the ones past max travel."""
        limit = self.max_travel(bounds)
        keep: list[Projectile] = []
        expired: list[Projectile] = []
        for p in self.projectiles:
            p.pos += p.vel
            p.dist += p.speed
            if p.dist > limit:
                expired.append(p)
                continue
            wrap_hard(p.pos, bounds)
            keep.append(p)
        self.projectiles = keep
        if expired:
            logger.debug("%d projectile(s) expired, %d in flight", len(expired), len(keep))
        return expired
