"""Runtime settings, overridable via environment variables (ASTEROIDS_*)."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constants as C
from .config import GameConfig, GunConfig, ShipConfig


class Settings(BaseSettings):
    """Game tuning read from the environment or a .env file."""

    # Frame timing
    FPS: int = Field(default=C.FPS, gt=0)

    # World
    WIDTH: float = Field(default=C.DEFAULT_WIDTH_PX, gt=0)
    HEIGHT: float = Field(default=C.DEFAULT_HEIGHT_PX, gt=0)

    # Ship
    SHIP_SIZE: float = Field(default=C.SHIP_SIZE_PX, gt=0)
    SHIP_THRUST: float = C.SHIP_THRUST_PX_S2
    SHIP_TURN_SPEED: float = C.SHIP_TURN_SPEED_DEG_S
    FRICTION: float = Field(default=C.SHIP_FRICTION, ge=0, le=1)

    # Gun
    PROJECTILE_MAX: int = Field(default=C.PROJECTILE_MAX, ge=0)
    PROJECTILE_SPEED: float = C.PROJECTILE_SPEED_PX_S
    PROJECTILE_DIST: float = Field(default=C.PROJECTILE_MAX_TRAVEL_FRACTION, gt=0)
    SHOT_COOLDOWN: float = Field(default=C.SHOT_COOLDOWN_S, ge=0)

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="ASTEROIDS_", env_file=".env", extra="ignore")

    def to_game_config(self) -> GameConfig:
        return GameConfig(
            fps=self.FPS,
            width=self.WIDTH,
            height=self.HEIGHT,
            ship=ShipConfig(
                size_px=self.SHIP_SIZE,
                thrust_px_s2=self.SHIP_THRUST,
                turn_speed_deg_s=self.SHIP_TURN_SPEED,
                friction=self.FRICTION,
            ),
            gun=GunConfig(
                max_projectiles=self.PROJECTILE_MAX,
                speed_px_s=self.PROJECTILE_SPEED,
                max_travel_fraction=self.PROJECTILE_DIST,
                cooldown_s=self.SHOT_COOLDOWN,
            ),
        )
