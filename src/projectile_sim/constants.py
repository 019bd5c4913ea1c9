# MIT License (see LICENSE)
"""
Physical constants used throughout the simulation.

All values are SI units and are process-wide, read-only configuration.
"""
from __future__ import annotations

import math

# Standard surface gravity, signed so that "up" is positive.
# Value: -9.80665 m/s² (exact, by definition)
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?gn
G0: float = -9.80665

# Mean radius of the Earth in meters.
EARTH_RADIUS: float = 6371000.0

# No horizontal force acts on the projectile in this model.
HORIZONTAL_ACCELERATION: float = 0.0

# Degrees -> radians conversion factor.
DEG2RAD: float = math.pi / 180.0
