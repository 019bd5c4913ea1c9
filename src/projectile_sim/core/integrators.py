# MIT License (see LICENSE)
"""
Fixed-step 4th-order Runge-Kutta integration of the projectile state.

The state vector (y, x, vy, vx) obeys
    dy/dt = vy,   dvy/dt = a_vert(y)
    dx/dt = vx,   dvx/dt = a_horz

One RK4 step samples the derivative four times inside the interval and
blends the samples with weights (1, 2, 2, 1)/6:

    k1 = f(s)
    k2 = f(s + k1 * dt/2)
    k3 = f(s + k2 * dt/2)
    k4 = f(s + k3 * dt)
    s' = s + dt/6 * (k1 + 2 k2 + 2 k3 + k4)

Everything here is a pure function of its arguments: no step mutates a
State, and NaN/inf inputs propagate instead of raising.

Reference:
    https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
"""
from __future__ import annotations

from ..types import State, Derivative
from .acceleration import vertical_acceleration, horizontal_acceleration


def evaluate_at_state(state: State) -> Derivative:
    """
    Derivative at the start of a step (the k1 sample).

    Velocities are copied from the state; accelerations come from the
    acceleration model.
    """
    return Derivative(
        vert_vel=state.vert_vel,
        horz_vel=state.horz_vel,
        vert_acc=vertical_acceleration(state),
        horz_acc=horizontal_acceleration(state),
    )


def evaluate_at_offset(initial: State, time_slice: float, prior: Derivative) -> Derivative:
    """
    Derivative at an intermediate RK4 stage (the k2, k3, k4 samples).

    Advances `initial` by one explicit Euler step of length `time_slice`
    using `prior`, then evaluates the derivative there:
        y  = y0  + prior.vy * h        vy = vy0 + prior.ay * h
        x  = x0  + prior.vx * h        vx = vx0 + prior.ax * h

    Args:
        initial: State at the start of the RK4 step.
        time_slice: Offset h in seconds (dt/2 or dt during a step). A
            negative value extrapolates backward.
        prior: Derivative from the previous stage.
    """
    intermediate = State(
        vert_pos=initial.vert_pos + prior.vert_vel * time_slice,
        horz_pos=initial.horz_pos + prior.horz_vel * time_slice,
        vert_vel=initial.vert_vel + prior.vert_acc * time_slice,
        horz_vel=initial.horz_vel + prior.horz_acc * time_slice,
    )
    return evaluate_at_state(intermediate)


def rk4_step(state: State, dt: float) -> State:
    """
    Advance a state by dt using classical 4th-order Runge-Kutta.

    Local error is O(dt⁵), global error O(dt⁴). dt = 0 returns a State
    equal (==) to the input, though a -0.0 field may come back as +0.0;
    dt < 0 integrates backward. Validating dt is left to the caller.

    Args:
        state: State at time t.
        dt: Timestep in seconds.

    Returns:
        New State at time t + dt.
    """
    k1 = evaluate_at_state(state)
    k2 = evaluate_at_offset(state, dt / 2.0, k1)
    k3 = evaluate_at_offset(state, dt / 2.0, k2)
    k4 = evaluate_at_offset(state, dt, k3)

    # Weighted combination
    vert_vel = (k1.vert_vel + 2.0 * k2.vert_vel + 2.0 * k3.vert_vel + k4.vert_vel) / 6.0
    vert_acc = (k1.vert_acc + 2.0 * k2.vert_acc + 2.0 * k3.vert_acc + k4.vert_acc) / 6.0
    horz_vel = (k1.horz_vel + 2.0 * k2.horz_vel + 2.0 * k3.horz_vel + k4.horz_vel) / 6.0
    horz_acc = (k1.horz_acc + 2.0 * k2.horz_acc + 2.0 * k3.horz_acc + k4.horz_acc) / 6.0

    return State(
        vert_pos=state.vert_pos + vert_vel * dt,
        horz_pos=state.horz_pos + horz_vel * dt,
        vert_vel=state.vert_vel + vert_acc * dt,
        horz_vel=state.horz_vel + horz_acc * dt,
    )
