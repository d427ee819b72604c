from __future__ import annotations

import numpy as np

from .controls import Keyboard

_TURN_KEYS = (None, "ArrowLeft", "ArrowRight")


class RandomPilot:
    """Seeded stand-in for a human at the keyboard.

    Drives a `Keyboard` with key-down/key-up events so the sampled snapshots go
    through the same held-state and fire-edge handling as real input.
    """

    def __init__(self, keyboard: Keyboard, seed: int = 0, fire_prob: float = 0.15, switch_prob: float = 0.1):
        self.keyboard = keyboard
        self.rng = np.random.default_rng(seed)
        self.fire_prob = float(fire_prob)
        self.switch_prob = float(switch_prob)
        self._turn: str | None = None
        self._thrust = False

    def _set_held(self, code: str | None, held: bool) -> None:
        if code is None:
            return
        if held:
            self.keyboard.key_down(code)
        else:
            self.keyboard.key_up(code)

    def press(self) -> None:
        """Emit this frame's key events."""
        if self.rng.random() < self.switch_prob:
            self._set_held(self._turn, False)
            self._turn = _TURN_KEYS[int(self.rng.integers(len(_TURN_KEYS)))]
            self._set_held(self._turn, True)
        if self.rng.random() < self.switch_prob:
            self._thrust = not self._thrust
            self._set_held("ArrowUp", self._thrust)

        # Tap fire: down now, up right away so the next tap is a fresh edge.
        if self.rng.random() < self.fire_prob:
            self.keyboard.key_down("Space")
        self.keyboard.key_up("Space")
