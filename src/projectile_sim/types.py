# MIT License (see LICENSE)
"""
Core type definitions for the projectile simulation.

Defines the value types threaded through the integrator:
- State: position and velocity of the projectile at one instant.
- Derivative: rate of change of a State (velocity and acceleration).
- Sample: a State tagged with its tick number and elapsed time.

The equations of motion are the usual second-order system written as a
first-order one:
  dy/dt = vy        dvy/dt = a_vert(y)
  dx/dt = vx        dvx/dt = a_horz
"""
from __future__ import annotations
from dataclasses import dataclass


# =============================================================================
# Kinematic State
# =============================================================================

@dataclass(frozen=True)
class State:
    """
    Complete kinematic configuration of the projectile.

    Attributes:
        vert_pos: Altitude y in meters (0 = ground, up is positive).
        horz_pos: Downrange distance x in meters.
        vert_vel: Vertical velocity dy/dt in m/s.
        horz_vel: Horizontal velocity dx/dt in m/s.

    Note:
        States are immutable. The integrator returns a new State for
        every step; callers rebind their reference to the result.
    """
    vert_pos: float = 0.0
    horz_pos: float = 0.0
    vert_vel: float = 0.0
    horz_vel: float = 0.0


@dataclass(frozen=True)
class Derivative:
    """
    Rate of change of a State.

    Attributes:
        vert_vel: dy/dt, copied from the State it was evaluated at.
        horz_vel: dx/dt, copied from the State it was evaluated at.
        vert_acc: d²y/dt², from the acceleration model.
        horz_acc: d²x/dt², from the acceleration model.
    """
    vert_vel: float
    horz_vel: float
    vert_acc: float
    horz_acc: float


# =============================================================================
# Simulation output
# =============================================================================

@dataclass(frozen=True)
class Sample:
    """
    One tick of simulation output.

    Attributes:
        tick: 1-based index of the step that produced this sample.
        time: Elapsed simulated time in seconds after the step.
        state: State after the step.
    """
    tick: int
    time: float
    state: State
