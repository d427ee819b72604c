from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Bounds:
    """World extent in pixels. Replaced, never mutated, when the host resizes."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0.0 or self.height <= 0.0:
            raise ValueError(f"bounds must be positive, got {self.width}x{self.height}")

    @property
    def center(self) -> np.ndarray:
        return np.asarray([self.width * 0.5, self.height * 0.5], dtype=np.float64)


def wrap_margin(pos: np.ndarray, margin: float, bounds: Bounds) -> bool:
    """Carry each axis onto the opposite side once it is `margin` past an edge.

    Position is carried modulo the span (extent + 2 * margin) rather than snapped
    to the edge, so x = -r - e lands on width + r - e. Mutates `pos` in place and
    returns whether any axis wrapped.
    """
    wrapped = False
    for axis, extent in enumerate((bounds.width, bounds.height)):
        v = float(pos[axis])
        if v < -margin or v > extent + margin:
            span = extent + 2.0 * margin
            pos[axis] = (v + margin) % span - margin
            wrapped = True
    return wrapped


def wrap_hard(pos: np.ndarray, bounds: Bounds) -> None:
    # Entities without a rendered radius: jump straight to the opposite edge.
    for axis, extent in enumerate((bounds.width, bounds.height)):
        if pos[axis] < 0.0:
            pos[axis] = extent
        elif pos[axis] > extent:
            pos[axis] = 0.0
