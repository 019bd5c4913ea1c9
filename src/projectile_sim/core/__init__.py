# MIT License (see LICENSE)
"""
Core physics simulation components.

This subpackage provides:
    - Acceleration model: altitude-dependent gravity, zero horizontal force.
    - Integrators: derivative evaluation and fixed-step RK4.
    - Invariants: specific energy and flat-gravity reference formulas.

Typical usage:
    from projectile_sim.core import rk4_step
    from projectile_sim.types import State

    state = State(vert_pos=0.0, vert_vel=35.0, horz_vel=35.0)
    state = rk4_step(state, dt=0.1)
"""
from .acceleration import vertical_acceleration, horizontal_acceleration
from .integrators import evaluate_at_state, evaluate_at_offset, rk4_step
from .invariants import (
    potential_energy,
    specific_energy,
    classical_time_of_flight,
    classical_range,
)

__all__ = [
    # Acceleration model
    "vertical_acceleration",
    "horizontal_acceleration",
    # Integrators
    "evaluate_at_state",
    "evaluate_at_offset",
    "rk4_step",
    # Invariants
    "potential_energy",
    "specific_energy",
    "classical_time_of_flight",
    "classical_range",
]
