# MIT License (see LICENSE)
"""
Launch configuration.

A run is fully described by five scalars: initial altitude, launch speed,
firing angle, time step and final time. LaunchParameters bundles them and
knows which combinations the simulation loop can handle.

The log level of the command-line tool can be preset through the
PROJECTILE_SIM_LOG_LEVEL environment variable.
"""
from __future__ import annotations
import math
import os
from dataclasses import dataclass, astuple

LOG_LEVEL_ENV = "PROJECTILE_SIM_LOG_LEVEL"

MIN_ANGLE_DEG: float = 0.0
MAX_ANGLE_DEG: float = 90.0


@dataclass(frozen=True)
class LaunchParameters:
    """
    Initial conditions and integration settings for one trajectory.

    Attributes:
        init_alt: Launch altitude in meters (any real value).
        init_vel: Launch speed in m/s.
        angle_deg: Firing angle above the horizontal, in degrees [0, 90].
        dt: Integration time step in seconds (> 0).
        final_time: Simulated time limit in seconds (>= 0).
    """
    init_alt: float
    init_vel: float
    angle_deg: float
    dt: float
    final_time: float

    def validate(self) -> "LaunchParameters":
        """
        Check the parameters and return self.

        Raises:
            ValueError: If any value is non-finite, the angle is outside
                [0, 90], dt is not positive or final_time is negative.
        """
        for name, value in zip(("init_alt", "init_vel", "angle_deg", "dt", "final_time"), astuple(self)):
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
        check_angle(self.angle_deg)
        check_time_step(self.dt)
        check_final_time(self.final_time)
        return self


def check_angle(angle_deg: float) -> float:
    """Raise ValueError unless the firing angle lies in [0, 90] degrees."""
    if not MIN_ANGLE_DEG <= angle_deg <= MAX_ANGLE_DEG:
        raise ValueError(f"angle_deg must be within [0, 90], got {angle_deg}")
    return angle_deg


def check_time_step(dt: float) -> float:
    """Raise ValueError unless dt is strictly positive."""
    if not dt > 0.0:
        raise ValueError(f"dt must be positive, got {dt}")
    return dt


def check_final_time(final_time: float) -> float:
    """Raise ValueError if final_time is negative."""
    if not final_time >= 0.0:
        raise ValueError(f"final_time must be non-negative, got {final_time}")
    return final_time


def default_log_level() -> str:
    """Log level from the environment, WARNING when unset."""
    return os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
