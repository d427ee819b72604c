from __future__ import annotations

import math

# ==============================================================================
# Frame Timing
# ==============================================================================

# Simulation frames per second; dt = 1 / FPS
FPS = 60

# ==============================================================================
# Ship Physics
# ==============================================================================

# Ship height in pixels (collision/render radius is half of this)
SHIP_SIZE_PX = 20.0

# Acceleration in pixels per second per second while thrusting
SHIP_THRUST_PX_S2 = 5.0

# Turn speed in degrees per second
SHIP_TURN_SPEED_DEG_S = 360.0

# Friction coefficient applied when not thrusting (0 = none, 1 = max)
SHIP_FRICTION = 0.7

# New ships face straight up (screen space)
SHIP_START_HEADING_RAD = math.pi / 2

# Nose point sits this many radii ahead of the ship centre
NOSE_OFFSET_RADII = 4.0 / 3.0

# ==============================================================================
# Projectiles
# ==============================================================================

# Maximum number of projectiles in flight at once
PROJECTILE_MAX = 10

# Projectile speed in pixels per second
PROJECTILE_SPEED_PX_S = 500.0

# Max travel distance as a fraction of the world width
PROJECTILE_MAX_TRAVEL_FRACTION = 0.6

# Minimum time between shots
SHOT_COOLDOWN_S = 0.2

# Guard so that e.g. 0.29 * 100 = 28.999999999999996 still counts as 29 frames
FRAME_COUNT_EPS = 1e-9

# ==============================================================================
# World
# ==============================================================================

DEFAULT_WIDTH_PX = 800.0
DEFAULT_HEIGHT_PX = 600.0
