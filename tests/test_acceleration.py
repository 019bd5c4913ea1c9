import numpy as np
from projectile_sim.constants import G0, EARTH_RADIUS
from projectile_sim.core.acceleration import vertical_acceleration, horizontal_acceleration
from projectile_sim.types import State


def test_surface_gravity_is_exact():
    """At h = 0 the inverse-square factor is exactly 1."""
    assert vertical_acceleration(State(vert_pos=0.0)) == G0
    assert G0 == -9.80665


def test_gravity_weakens_with_altitude():
    """
    a(h) = g0 (R / (R + h))²  ->  a(R) = g0 / 4
    """
    assert vertical_acceleration(State(vert_pos=EARTH_RADIUS)) == G0 * 0.25

    altitudes = [0.0, 1.0e3, 1.0e5, 1.0e7, 1.0e12]
    mags = [abs(vertical_acceleration(State(vert_pos=h))) for h in altitudes]
    assert all(a > b for a, b in zip(mags, mags[1:]))
    assert mags[-1] < 1e-8


def test_below_ground_is_not_clamped():
    """Sub-zero altitude keeps following the formula (magnitude grows)."""
    a = vertical_acceleration(State(vert_pos=-1000.0))
    expected = G0 * (EARTH_RADIUS / (EARTH_RADIUS - 1000.0)) ** 2
    assert abs(a) > abs(G0)
    assert np.isclose(a, expected, rtol=1e-15, atol=0.0)


def test_earth_center_gives_infinity():
    """R + h = 0 is not defended against: the result is -inf, no exception."""
    a = vertical_acceleration(State(vert_pos=-EARTH_RADIUS))
    assert np.isinf(a) and a < 0


def test_nan_altitude_propagates():
    assert np.isnan(vertical_acceleration(State(vert_pos=float("nan"))))


def test_horizontal_acceleration_always_zero():
    states = [
        State(),
        State(vert_pos=1.0e6, horz_pos=-5.0, vert_vel=100.0, horz_vel=-3.0),
        State(vert_pos=-10.0, horz_pos=1.0e9, vert_vel=-1.0e4, horz_vel=1.0e4),
    ]
    for s in states:
        assert horizontal_acceleration(s) == 0.0
