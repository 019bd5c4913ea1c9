# MIT License (see LICENSE)
"""
projectile_sim - 2D projectile motion under altitude-dependent gravity.

This package integrates a single projectile trajectory with a fixed-step
4th-order Runge-Kutta method. Gravity follows the inverse-square law
g(h) = g0 (R / (R + h))²; there is no drag and no horizontal force.

Main entry points:
    - State: Position and velocity of the projectile (immutable).
    - rk4_step: Advance a State by one timestep.
    - LaunchParameters: The five scalars describing a run.
    - Simulation / run_simulation: The tick loop and its stop policy.

Submodules:
    - core: Acceleration model, derivative evaluation, RK4, invariants.
    - renderer: Console, buffered and no-op trajectory output.
    - cli: Command-line tool (also `python -m projectile_sim`).

Example:
    from projectile_sim import LaunchParameters, run_simulation

    params = LaunchParameters(init_alt=0.0, init_vel=50.0, angle_deg=45.0,
                              dt=0.1, final_time=10.0)
    result = run_simulation(params)
    print(result.termination, result.impact_range)
"""
from .types import State, Derivative, Sample
from .config import LaunchParameters
from .core.integrators import rk4_step
from .simulation import Simulation, SimulationResult, run_simulation, initial_state

__all__ = [
    # Types
    "State",
    "Derivative",
    "Sample",
    # Configuration
    "LaunchParameters",
    # Integration
    "rk4_step",
    # Simulation loop
    "Simulation",
    "SimulationResult",
    "run_simulation",
    "initial_state",
]
