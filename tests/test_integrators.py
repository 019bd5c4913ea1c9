import math

import numpy as np
import pytest
from projectile_sim.constants import G0
from projectile_sim.core.acceleration import vertical_acceleration
from projectile_sim.core.integrators import evaluate_at_state, evaluate_at_offset, rk4_step
from projectile_sim.types import State, Derivative


def test_evaluate_copies_velocities():
    """dy/dt and dx/dt of the derivative mirror the state exactly."""
    for s in [
        State(),
        State(vert_pos=12.5, horz_pos=3.0, vert_vel=-7.25, horz_vel=1.0e3),
        State(vert_pos=4.0e5, horz_pos=-1.0, vert_vel=1.0e-9, horz_vel=-2.5),
    ]:
        d = evaluate_at_state(s)
        assert d.vert_vel == s.vert_vel
        assert d.horz_vel == s.horz_vel
        assert d.vert_acc == vertical_acceleration(s)
        assert d.horz_acc == 0.0


def test_evaluate_at_offset_euler_advances():
    """
    Intermediate state: y = y0 + vy' h, vy = vy0 + ay' h (same for x).
    With y0=100, prior vy=10, ay=-10, h=0.5: y=105, vy=5.
    """
    s = State(vert_pos=100.0, horz_pos=0.0, vert_vel=10.0, horz_vel=5.0)
    prior = Derivative(vert_vel=10.0, horz_vel=5.0, vert_acc=-10.0, horz_acc=0.0)
    d = evaluate_at_offset(s, 0.5, prior)

    assert d.vert_vel == 5.0
    assert d.horz_vel == 5.0
    assert d.vert_acc == vertical_acceleration(State(vert_pos=105.0))
    assert d.horz_acc == 0.0


def test_evaluate_at_zero_offset_matches_base():
    s = State(vert_pos=50.0, horz_pos=1.0, vert_vel=-3.0, horz_vel=2.0)
    k1 = evaluate_at_state(s)
    assert evaluate_at_offset(s, 0.0, k1) == k1


def test_evaluate_at_negative_offset_extrapolates_backward():
    s = State(vert_pos=0.0, vert_vel=10.0, horz_vel=1.0)
    k1 = evaluate_at_state(s)
    d = evaluate_at_offset(s, -1.0, k1)
    assert d.vert_vel == pytest.approx(10.0 - G0)
    assert d.horz_vel == 1.0


def test_zero_step_is_identity():
    s = State(vert_pos=123.456, horz_pos=-7.0, vert_vel=-9.5, horz_vel=33.3)
    assert rk4_step(s, 0.0) == s


def test_zero_step_keeps_signed_zero_equal():
    """A -0.0 coordinate may come back as +0.0; the States still compare equal."""
    s = State(vert_pos=-0.0, horz_pos=-0.0, vert_vel=2.0, horz_vel=1.0)
    s1 = rk4_step(s, 0.0)
    assert s1 == s
    assert s1.vert_pos == 0.0


def test_step_returns_new_state():
    s = State(vert_pos=10.0, vert_vel=1.0, horz_vel=1.0)
    s2 = rk4_step(s, 0.1)
    assert s2 is not s
    assert s == State(vert_pos=10.0, vert_vel=1.0, horz_vel=1.0)


def test_forward_backward_symmetry():
    """One step forward then one back returns to the start (O(dt⁵))."""
    s0 = State(vert_pos=250.0, horz_pos=40.0, vert_vel=12.0, horz_vel=30.0)
    s1 = rk4_step(rk4_step(s0, 0.01), -0.01)
    assert s1.vert_pos == pytest.approx(s0.vert_pos, rel=1e-12, abs=1e-9)
    assert s1.horz_pos == pytest.approx(s0.horz_pos, rel=1e-12, abs=1e-9)
    assert s1.vert_vel == pytest.approx(s0.vert_vel, rel=1e-12, abs=1e-9)
    assert s1.horz_vel == pytest.approx(s0.horz_vel, rel=1e-12, abs=1e-9)


def test_short_flight_matches_constant_gravity():
    """
    Near the ground gravity is almost constant:
      y(t) = y0 + v0 t + 1/2 g t²,   vy(t) = v0 + g t
    """
    v0, T, dt = 20.0, 1.0, 0.01
    s = State(vert_pos=0.0, vert_vel=v0, horz_vel=3.0)
    for _ in range(int(round(T / dt))):
        s = rk4_step(s, dt)

    y_exp = v0 * T + 0.5 * G0 * T * T
    v_exp = v0 + G0 * T
    y_err = abs(s.vert_pos - y_exp) / abs(y_exp)
    v_err = abs(s.vert_vel - v_exp) / abs(v_exp)
    print("y", s.vert_pos, "exp", y_exp, "relerr", y_err)
    print("vy", s.vert_vel, "exp", v_exp, "relerr", v_err)

    assert y_err <= 1e-4
    assert v_err <= 1e-4
    assert s.horz_pos == pytest.approx(3.0 * T)


def test_horizontal_motion_is_uniform():
    """No horizontal force: vx stays constant and x never decreases."""
    s = State(vert_pos=0.0, vert_vel=40.0, horz_vel=25.0)
    xs = [s.horz_pos]
    for _ in range(200):
        s = rk4_step(s, 0.05)
        xs.append(s.horz_pos)
        assert s.horz_vel == 25.0
    assert all(b >= a for a, b in zip(xs, xs[1:]))


def _integrate(s: State, dt: float, T: float) -> State:
    for _ in range(int(round(T / dt))):
        s = rk4_step(s, dt)
    return s


def test_fourth_order_convergence():
    """
    A fast vertical launch climbs thousands of km, so gravity changes a lot
    over the flight. Halving dt should cut the global error by about 2⁴.
    """
    s0 = State(vert_pos=0.0, vert_vel=8000.0, horz_vel=0.0)
    T = 1000.0
    ref = _integrate(s0, 1.0, T)
    err_coarse = abs(_integrate(s0, 50.0, T).vert_pos - ref.vert_pos)
    err_fine = abs(_integrate(s0, 25.0, T).vert_pos - ref.vert_pos)
    ratio = err_coarse / err_fine
    print("err dt=50", err_coarse, "err dt=25", err_fine, "ratio", ratio)

    assert err_fine < err_coarse
    assert ratio > 8.0


def test_nan_propagates_without_raising():
    s = State(vert_pos=float("nan"), vert_vel=1.0, horz_vel=1.0)
    s2 = rk4_step(s, 0.1)
    assert math.isnan(s2.vert_pos)
    assert math.isnan(s2.vert_vel)
    assert np.isfinite(s2.horz_pos)
