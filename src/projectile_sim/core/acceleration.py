# MIT License (see LICENSE)
"""
Acceleration model for the projectile.

The only force in the model is gravity, which weakens with altitude
following the inverse-square law:

    a_vert(h) = g0 * (R / (R + h))²

where g0 is standard surface gravity (negative, pointing down) and R is
the mean Earth radius. There is no horizontal force; horizontal_acceleration
is kept as its own function so that further forces slot in without
changing the shape of the derivative evaluation.

Both functions depend on the state only. Neither clamps its input: below
the ground (h < 0) the magnitude keeps growing, and at h = -R the result
is -inf. Stopping before such states is the caller's job.
"""
from __future__ import annotations

import numpy as np

from ..constants import G0, EARTH_RADIUS, HORIZONTAL_ACCELERATION
from ..types import State


def vertical_acceleration(state: State) -> float:
    """
    Gravitational acceleration at the state's altitude, in m/s².

    Implements a = g0 * (R / (R + h))². Equals G0 exactly at h = 0 and
    tends to 0 as h grows.

    Args:
        state: Current state; only vert_pos is used.

    Note:
        Division is done in numpy float64 so that R + h = 0 gives an
        infinite result instead of raising ZeroDivisionError.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = EARTH_RADIUS / np.float64(EARTH_RADIUS + state.vert_pos)
        return float(G0 * ratio * ratio)


def horizontal_acceleration(state: State) -> float:
    """Horizontal acceleration in m/s². Always zero (no drag, no wind)."""
    return HORIZONTAL_ACCELERATION
