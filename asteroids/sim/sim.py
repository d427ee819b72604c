from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from ..config import GameConfig
from ..controls import IDLE, InputSnapshot
from .projectile import Projectile, ProjectileManager
from .ship import ShipController, ShipState, new_ship
from .world import Bounds

logger = logging.getLogger(__name__)


@dataclass
class SimState:
    ship: ShipState
    projectiles: list[Projectile] = field(default_factory=list)
    tick: int = 0
    time_s: float = 0.0


def initial_state(bounds: Bounds, config: GameConfig) -> SimState:
    return SimState(ship=new_ship(bounds, config))


def _pos(v) -> list[float]:
    return [float(v[0]), float(v[1])]


def step(
    state: SimState, controls: InputSnapshot, bounds: Bounds, config: GameConfig
) -> tuple[SimState, list[dict]]:
    """Advance the whole simulation by one frame.

    Pure: `state` is not modified, a new state is returned together with the
    events of this frame. A projectile spawned this frame is also advanced and
    distance-checked this frame.
    """
    events: list[dict] = []
    dt = config.dt

    ship = ShipController(config).advance(state.ship, controls, bounds, dt)
    if ship.wrapped:
        events.append({"type": "wrap", "entity": "ship", "pos": _pos(ship.pos)})

    gun = ProjectileManager(config, [p.copy() for p in state.projectiles])
    if ship.fire_requested:
        proj = gun.spawn(ship)
        if proj is None:
            events.append({"type": "shot_rejected", "reason": "capacity", "in_flight": len(gun)})
        else:
            events.append({"type": "shot", "pos": _pos(proj.pos), "vel": _pos(proj.vel)})

    for p in gun.advance_all(bounds):
        events.append({"type": "projectile_expired", "pos": _pos(p.pos), "dist": float(p.dist)})

    new_state = SimState(
        ship=ship,
        projectiles=gun.projectiles,
        tick=state.tick + 1,
        time_s=state.time_s + dt,
    )
    return new_state, events


def snapshot(state: SimState, bounds: Bounds) -> dict[str, Any]:
    """Read-only view for the renderer; plain floats, detached from live state."""
    ship = state.ship
    return {
        "tick": int(state.tick),
        "t": float(state.time_s),
        "bounds": [float(bounds.width), float(bounds.height)],
        "ship": {
            "x": float(ship.pos[0]),
            "y": float(ship.pos[1]),
            "r": float(ship.r),
            "a": float(ship.a),
            "thrusting": bool(ship.thrusting),
            "can_shoot": bool(ship.can_shoot),
        },
        "projectiles": [{"x": float(p.pos[0]), "y": float(p.pos[1])} for p in state.projectiles],
    }


class Sim:
    def __init__(self, config: GameConfig | None = None, record_replay: bool = False):
        self.config = config if config is not None else GameConfig()
        self.bounds = Bounds(self.config.width, self.config.height)
        self.record_replay = record_replay
        self.state = initial_state(self.bounds, self.config)
        self._replay: list[dict] | None = [] if record_replay else None

    @property
    def ship(self) -> ShipState:
        return self.state.ship

    @property
    def projectiles(self) -> list[Projectile]:
        return self.state.projectiles

    @property
    def tick(self) -> int:
        return self.state.tick

    @property
    def time_s(self) -> float:
        return self.state.time_s

    def reset(self) -> None:
        """New game: fresh ship in the centre, no projectiles, clock at zero."""
        self.state = initial_state(self.bounds, self.config)
        if self.record_replay:
            self._replay = []
        logger.info("new game on %.0fx%.0f", self.bounds.width, self.bounds.height)

    def resize(self, width: float, height: float) -> None:
        # Entities outside the new bounds are pulled back by their next wrap.
        if width <= 0 or height <= 0:
            # e.g. a minimized window; keep simulating in the last real bounds.
            logger.warning(
                "ignoring resize to %sx%s, keeping %.0fx%.0f", width, height, self.bounds.width, self.bounds.height
            )
            return
        self.bounds = Bounds(float(width), float(height))
        logger.info("world resized to %.0fx%.0f", self.bounds.width, self.bounds.height)

    def step(self, controls: InputSnapshot = IDLE, num_frames: int = 1) -> list[dict]:
        events: list[dict] = []
        for _ in range(int(num_frames)):
            self.state, frame_events = step(self.state, controls, self.bounds, self.config)
            if self._replay is not None:
                self._replay.append(self._replay_frame(frame_events))
            events.extend(frame_events)
            # Fire is an edge: it only applies to the first of several frames.
            if controls.fire:
                controls = replace(controls, fire=False)
        return events

    def snapshot(self) -> dict[str, Any]:
        return snapshot(self.state, self.bounds)

    def _replay_frame(self, events: list[dict]) -> dict:
        frame = self.snapshot()
        frame["events"] = events
        return frame

    def get_replay(self) -> dict | None:
        if self._replay is None:
            return None
        return {
            "config": asdict(self.config),
            "bounds": [float(self.bounds.width), float(self.bounds.height)],
            "frames": self._replay,
        }
