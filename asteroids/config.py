from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_HEIGHT_PX,
    DEFAULT_WIDTH_PX,
    FPS,
    FRAME_COUNT_EPS,
    PROJECTILE_MAX,
    PROJECTILE_MAX_TRAVEL_FRACTION,
    PROJECTILE_SPEED_PX_S,
    SHIP_FRICTION,
    SHIP_SIZE_PX,
    SHIP_THRUST_PX_S2,
    SHIP_TURN_SPEED_DEG_S,
    SHOT_COOLDOWN_S,
)


@dataclass(frozen=True)
class ShipConfig:
    size_px: float = SHIP_SIZE_PX
    thrust_px_s2: float = SHIP_THRUST_PX_S2
    turn_speed_deg_s: float = SHIP_TURN_SPEED_DEG_S
    friction: float = SHIP_FRICTION

    def __post_init__(self) -> None:
        if self.size_px <= 0.0:
            raise ValueError(f"size_px must be positive, got {self.size_px}")
        if self.friction < 0.0:
            raise ValueError(f"friction must be non-negative, got {self.friction}")

    @property
    def radius(self) -> float:
        return self.size_px / 2.0

    @property
    def turn_speed_rad_s(self) -> float:
        return math.radians(self.turn_speed_deg_s)


@dataclass(frozen=True)
class GunConfig:
    max_projectiles: int = PROJECTILE_MAX
    speed_px_s: float = PROJECTILE_SPEED_PX_S
    max_travel_fraction: float = PROJECTILE_MAX_TRAVEL_FRACTION  # of world width
    cooldown_s: float = SHOT_COOLDOWN_S

    def __post_init__(self) -> None:
        if self.max_projectiles < 0:
            raise ValueError(f"max_projectiles must be >= 0, got {self.max_projectiles}")
        if self.cooldown_s < 0.0:
            raise ValueError(f"cooldown_s must be >= 0, got {self.cooldown_s}")


@dataclass(frozen=True)
class GameConfig:
    fps: int = FPS
    width: float = DEFAULT_WIDTH_PX  # initial world bounds
    height: float = DEFAULT_HEIGHT_PX
    ship: ShipConfig = field(default_factory=ShipConfig)
    gun: GunConfig = field(default_factory=GunConfig)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.ship.friction * self.dt > 1.0:
            # Damping past 1 per frame would reverse velocity instead of slowing it.
            raise ValueError(
                f"friction {self.ship.friction} is too strong for {self.fps} fps (friction / fps must be <= 1)"
            )

    @property
    def dt(self) -> float:
        return 1.0 / float(self.fps)

    @property
    def cooldown_frames(self) -> int:
        """Frames the gun stays locked after a shot attempt."""
        return int(math.floor(self.gun.cooldown_s * self.fps + FRAME_COUNT_EPS))
