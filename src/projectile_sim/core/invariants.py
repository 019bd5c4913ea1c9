# MIT License (see LICENSE)
"""
Conserved quantities and closed-form references for trajectory checks.

Gravity here is conservative, so the specific mechanical energy of the
projectile is constant along the exact trajectory. The numerical drift
of that quantity is a direct measure of integration error.

The flat-gravity formulas (constant g = |G0|, launch and landing at
altitude 0) are what the simulation should approach for low, short
flights where the inverse-square correction is negligible.
"""
from __future__ import annotations
import numpy as np

from ..constants import G0, EARTH_RADIUS, DEG2RAD
from ..types import State

# Gravitational parameter consistent with G0 at the surface: mu = |g0| R².
MU: float = -G0 * EARTH_RADIUS * EARTH_RADIUS


def potential_energy(altitude: float) -> float:
    """
    Specific potential energy in J/kg, zero at the ground.

    U(h) = mu/R - mu/(R + h), so that -dU/dh matches vertical_acceleration.
    """
    return MU / EARTH_RADIUS - MU / (EARTH_RADIUS + altitude)


def specific_energy(state: State) -> float:
    """
    Specific mechanical energy (kinetic + potential) in J/kg.

    E = ½ (vx² + vy²) + U(y)
    """
    v_sq = state.vert_vel * state.vert_vel + state.horz_vel * state.horz_vel
    return 0.5 * v_sq + potential_energy(state.vert_pos)


def classical_time_of_flight(velocity: float, angle_deg: float) -> float:
    """
    Flight time over flat ground under constant gravity.

    T = 2 v sin(θ) / |g0|
    """
    return float(2.0 * velocity * np.sin(angle_deg * DEG2RAD) / abs(G0))


def classical_range(velocity: float, angle_deg: float) -> float:
    """
    Horizontal range over flat ground under constant gravity.

    R = v² sin(2θ) / |g0|
    """
    return float(velocity * velocity * np.sin(2.0 * angle_deg * DEG2RAD) / abs(G0))
