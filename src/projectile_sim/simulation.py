# MIT License (see LICENSE)
"""
The simulation loop around the RK4 integrator.

The Simulation class owns everything the pure integrator does not:
- Building the initial State from launch parameters.
- The tick counter and elapsed time.
- The termination policy: keep stepping while time < final_time and the
  projectile is at or above the ground. The check runs before each step,
  so the step that crosses the ground is still emitted.

run_simulation() wires a Simulation to a renderer and summarizes the run,
including a refined estimate of where the projectile met the ground.

Structure:
    - User builds LaunchParameters.
    - run_simulation(params, renderer) drives the loop, or
    - Simulation.from_launch(params).run() yields Samples one by one.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from .config import LaunchParameters
from .constants import DEG2RAD
from .core.acceleration import vertical_acceleration
from .core.integrators import rk4_step
from .renderer import RendererAdapter
from .types import State, Sample

logger = logging.getLogger(__name__)

GROUND_IMPACT = "ground_impact"
TIME_LIMIT = "time_limit"


def initial_state(params: LaunchParameters) -> State:
    """
    State at t = 0 for the given launch.

    y = h0, x = 0, vy = v sin(θ), vx = v cos(θ), with θ converted from
    degrees.
    """
    angle = params.angle_deg * DEG2RAD
    return State(
        vert_pos=params.init_alt,
        horz_pos=0.0,
        vert_vel=float(params.init_vel * np.sin(angle)),
        horz_vel=float(params.init_vel * np.cos(angle)),
    )


def estimate_impact(state: State) -> tuple[float, float]:
    """
    Refine the ground crossing from the last state at or above the ground.

    Solves y + vy t + ½ a t² = 0 for the first t >= 0, with a taken from
    the acceleration model at the state's altitude, and carries x along at
    constant horizontal speed.

    Args:
        state: Last State with vert_pos >= 0.

    Returns:
        Tuple (time_to_impact, horz_pos_at_impact).
    """
    y, vy = state.vert_pos, state.vert_vel
    a = vertical_acceleration(state)
    if a == 0.0:
        t = -y / vy
    else:
        t = float((-vy - np.sqrt(vy * vy - 2.0 * a * y)) / a)
    return t, state.horz_pos + state.horz_vel * t


@dataclass
class Simulation:
    """
    Single-trajectory simulation loop.

    Attributes:
        state: Current State. Rebound (never mutated) after every step.
        dt: Fixed timestep in seconds. Must be positive.
        final_time: Simulated time limit in seconds.
        ticks: Number of steps taken so far.
        previous: State before the last step (None before the first step).
    """
    state: State
    dt: float
    final_time: float
    ticks: int = 0
    previous: State | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")

    @classmethod
    def from_launch(cls, params: LaunchParameters) -> "Simulation":
        """Build a simulation from validated launch parameters."""
        params.validate()
        return cls(state=initial_state(params), dt=params.dt, final_time=params.final_time)

    @property
    def time(self) -> float:
        """Elapsed simulated time, ticks * dt."""
        return self.ticks * self.dt

    @property
    def termination(self) -> str | None:
        """
        Why the loop stopped: GROUND_IMPACT, TIME_LIMIT, or None while
        the simulation can still advance. Ground impact wins a tie.
        """
        if self.state.vert_pos < 0.0:
            return GROUND_IMPACT
        if self.time >= self.final_time:
            return TIME_LIMIT
        return None

    def should_continue(self) -> bool:
        return self.time < self.final_time and self.state.vert_pos >= 0.0

    def step(self) -> Sample:
        """Advance one tick regardless of the termination policy."""
        self.previous = self.state
        self.state = rk4_step(self.state, self.dt)
        self.ticks += 1
        return Sample(tick=self.ticks, time=self.time, state=self.state)

    def run(self) -> Iterator[Sample]:
        """Step until the termination policy says stop, yielding each tick."""
        while self.should_continue():
            sample = self.step()
            logger.debug(
                "tick %d t=%.5f y=%.6f x=%.6f",
                sample.tick, sample.time, sample.state.vert_pos, sample.state.horz_pos,
            )
            yield sample


@dataclass(frozen=True)
class SimulationResult:
    """
    Summary of a finished run.

    Attributes:
        ticks: Number of steps taken.
        time: Elapsed simulated time in seconds.
        final_state: State after the last step.
        termination: GROUND_IMPACT or TIME_LIMIT (None if the state went NaN).
        impact_time: Refined time of ground contact, or None.
        impact_range: Refined downrange distance at ground contact, or None.
    """
    ticks: int
    time: float
    final_state: State
    termination: str | None
    impact_time: float | None = None
    impact_range: float | None = None


def run_simulation(params: LaunchParameters, renderer: RendererAdapter | None = None) -> SimulationResult:
    """
    Run one trajectory to completion.

    Args:
        params: Launch parameters (validated here).
        renderer: Optional renderer receiving every tick, then finish().

    Returns:
        SimulationResult describing how and where the run ended.

    Raises:
        ValueError: If the launch parameters are invalid.
    """
    sim = Simulation.from_launch(params)
    logger.info(
        "Launch: alt=%.3f m vel=%.3f m/s angle=%.3f deg dt=%g s final_time=%g s",
        params.init_alt, params.init_vel, params.angle_deg, params.dt, params.final_time,
    )

    for sample in sim.run():
        if renderer is not None:
            renderer.render_sample(sample)
    if renderer is not None:
        renderer.finish()

    impact_time = impact_range = None
    if sim.termination == GROUND_IMPACT and sim.previous is not None:
        t, impact_range = estimate_impact(sim.previous)
        impact_time = (sim.ticks - 1) * sim.dt + t

    result = SimulationResult(
        ticks=sim.ticks,
        time=sim.time,
        final_state=sim.state,
        termination=sim.termination,
        impact_time=impact_time,
        impact_range=impact_range,
    )
    if impact_range is not None:
        logger.info(
            "Ground impact after %d ticks: t=%.5f s range=%.3f m",
            result.ticks, impact_time, impact_range,
        )
    else:
        logger.info("Stopped (%s) after %d ticks at t=%.5f s", result.termination, result.ticks, result.time)
    return result
