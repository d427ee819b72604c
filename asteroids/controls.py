from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class Control(str, Enum):
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    THRUST = "thrust"
    FIRE = "fire"


# Browser-style key codes; arrows and WASD both steer.
DEFAULT_BINDINGS: dict[str, Control] = {
    "ArrowLeft": Control.TURN_LEFT,
    "KeyA": Control.TURN_LEFT,
    "ArrowRight": Control.TURN_RIGHT,
    "KeyD": Control.TURN_RIGHT,
    "ArrowUp": Control.THRUST,
    "KeyW": Control.THRUST,
    "Space": Control.FIRE,
}


@dataclass(frozen=True)
class InputSnapshot:
    """Controls for one frame.

    turn_left/turn_right/thrust are level-triggered (held keys). fire is
    edge-triggered: True only on the frame a fire key went down.
    """

    turn_left: bool = False
    turn_right: bool = False
    thrust: bool = False
    fire: bool = False

    @classmethod
    def from_mapping(cls, keys: Mapping[str, object]) -> InputSnapshot:
        """Build from a loose mapping; missing or falsy entries are inactive."""
        return cls(
            turn_left=bool(keys.get(Control.TURN_LEFT.value, False)),
            turn_right=bool(keys.get(Control.TURN_RIGHT.value, False)),
            thrust=bool(keys.get(Control.THRUST.value, False)),
            fire=bool(keys.get(Control.FIRE.value, False)),
        )


IDLE = InputSnapshot()


class Keyboard:
    """Collects key events between frames and hands out one snapshot per frame.

    The host wires its key-down/key-up callbacks here and calls `sample()` once
    at the top of every frame. Auto-repeated key-downs never re-arm fire.
    """

    def __init__(self, bindings: Mapping[str, Control] | None = None):
        self.bindings = dict(DEFAULT_BINDINGS if bindings is None else bindings)
        self._held: set[str] = set()
        self._fire_pending = False

    def key_down(self, code: str, repeat: bool = False) -> None:
        control = self.bindings.get(code)
        if control is None:
            return
        if control is Control.FIRE and not repeat and code not in self._held:
            self._fire_pending = True
        self._held.add(code)

    def key_up(self, code: str) -> None:
        self._held.discard(code)

    def release_all(self) -> None:
        # e.g. window lost focus; key-ups will never arrive
        self._held.clear()
        self._fire_pending = False

    def _is_held(self, control: Control) -> bool:
        return any(self.bindings.get(code) is control for code in self._held)

    def sample(self) -> InputSnapshot:
        snap = InputSnapshot(
            turn_left=self._is_held(Control.TURN_LEFT),
            turn_right=self._is_held(Control.TURN_RIGHT),
            thrust=self._is_held(Control.THRUST),
            fire=self._fire_pending,
        )
        self._fire_pending = False
        return snap
