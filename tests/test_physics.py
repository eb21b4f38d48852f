"""Tests for pendulum_core.physics: equations of motion, RK4, energy."""

import math

import pytest

from pendulum_core.data_models import PendulumParams, PendulumState
from pendulum_core.physics import bob_positions, derivatives, integrate, rk4_step, total_energy

PARAMS = PendulumParams(length1=1.0, length2=1.0, mass1=1.0, mass2=1.0, gravity=9.8)


def make_state(th1, w1, th2, w2, params=PARAMS):
    return PendulumState(theta1=th1, omega1=w1, theta2=th2, omega2=w2, params=params)


class TestDerivatives:
    def test_hanging_at_rest_is_equilibrium(self):
        d = derivatives((0.0, 0.0, 0.0, 0.0), PARAMS)
        assert d == (0.0, 0.0, 0.0, 0.0)

    def test_angle_rates_are_velocities(self):
        d = derivatives((0.3, 1.5, -0.2, -2.5), PARAMS)
        assert d[0] == 1.5
        assert d[2] == -2.5

    def test_gravity_pulls_back_toward_vertical(self):
        d = derivatives((0.2, 0.0, 0.2, 0.0), PARAMS)
        assert d[1] < 0.0

    def test_mirror_symmetry(self):
        """Reflecting the state through the vertical reflects the accelerations."""
        values = (0.7, 1.1, -1.3, 0.4)
        d = derivatives(values, PARAMS)
        m = derivatives(tuple(-v for v in values), PARAMS)
        for a, b in zip(d, m):
            assert a == pytest.approx(-b)

    def test_small_angle_single_mode(self):
        """With a tiny bob 2, bob 1 behaves like a simple pendulum: alpha ~ -g/l * theta."""
        params = PendulumParams(length1=2.0, length2=1.0, mass1=1.0, mass2=1e-9, gravity=9.8)
        d = derivatives((1e-3, 0.0, 1e-3, 0.0), params)
        assert d[1] == pytest.approx(-9.8 / 2.0 * 1e-3, rel=1e-4)

    def test_finite_in_every_configuration(self):
        for i in range(16):
            th1 = -math.pi + i * math.pi / 8
            for j in range(16):
                th2 = -math.pi + j * math.pi / 8
                d = derivatives((th1, 5.0, th2, -5.0), PARAMS)
                assert all(math.isfinite(v) for v in d)


class TestIntegrator:
    def test_returns_new_state(self):
        state = make_state(1.0, 0.0, 1.0, 0.0)
        new = rk4_step(state, 0.01)
        assert new is not state
        assert state.theta1 == 1.0
        assert new.params is state.params

    def test_all_four_variables_advance(self):
        new = integrate(make_state(1.0, 0.0, 0.5, 0.0), 1 / 60, 4)
        assert new.theta1 != 1.0
        assert new.omega1 != 0.0
        assert new.theta2 != 0.5
        assert new.omega2 != 0.0

    def test_substeps_match_repeated_steps(self):
        state = make_state(1.2, 0.3, -0.4, 0.1)
        expected = state
        for _ in range(5):
            expected = rk4_step(expected, 0.002)
        assert integrate(state, 0.01, 5) == expected

    def test_deterministic(self):
        a = b = make_state(2.0, 0.0, 2.5, 0.0)
        for _ in range(500):
            a = integrate(a, 1 / 240, 4)
            b = integrate(b, 1 / 240, 4)
        assert a.as_tuple() == b.as_tuple()

    def test_equilibrium_stays_put(self):
        state = integrate(make_state(0.0, 0.0, 0.0, 0.0), 1.0, 100)
        assert state.as_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_angles_are_not_wrapped(self):
        state = make_state(0.0, 20.0, 0.0, 20.0)
        for _ in range(60):
            state = integrate(state, 1 / 60, 8)
        assert abs(state.theta1) > math.pi or abs(state.theta2) > math.pi

    def test_chaotic_run_stays_finite(self):
        state = make_state(math.pi - 0.01, 0.0, math.pi, 0.0)
        for _ in range(2000):
            state = integrate(state, 1 / 240, 4)
        assert all(math.isfinite(v) for v in state.as_tuple())


class TestEnergy:
    def test_hanging_at_rest(self):
        state = make_state(0.0, 0.0, 0.0, 0.0)
        assert total_energy(state) == pytest.approx(-9.8 * (1.0 * 1.0 + 1.0 * 2.0))

    def test_kinetic_energy_of_rigid_rotation(self):
        """Both rods aligned and spinning together: KE = 1/2 w^2 (m1 l1^2 + m2 (l1+l2)^2)."""
        params = PendulumParams(1.0, 1.0, 1.0, 1.0, 0.0)
        state = make_state(0.4, 2.0, 0.4, 2.0, params)
        assert total_energy(state) == pytest.approx(0.5 * 4.0 * (1.0 + 4.0))

    def test_drift_bounded_over_ten_thousand_ticks(self):
        """Low-energy start, 240 Hz with 4 substeps: relative drift stays below 1e-6."""
        state = make_state(0.1, 0.0, 0.1, 0.0)
        e0 = total_energy(state)
        worst = 0.0
        for i in range(10000):
            state = integrate(state, 1 / 240, 4)
            if i % 100 == 0:
                worst = max(worst, abs(total_energy(state) - e0))
        worst = max(worst, abs(total_energy(state) - e0))
        assert worst / abs(e0) < 1e-6


class TestPositions:
    def test_hanging_straight_down(self):
        params = PendulumParams(1.5, 0.5, 1.0, 1.0, 9.8)
        bob1, bob2 = bob_positions(make_state(0.0, 0.0, 0.0, 0.0, params))
        assert bob1 == (0.0, 1.5)
        assert bob2 == (0.0, 2.0)

    def test_horizontal_rods(self):
        bob1, bob2 = bob_positions(make_state(math.pi / 2, 0.0, -math.pi / 2, 0.0))
        assert bob1 == pytest.approx((1.0, 0.0), abs=1e-12)
        assert bob2 == pytest.approx((0.0, 0.0), abs=1e-12)

    def test_rod_lengths_preserved(self):
        state = make_state(2.3, 0.0, -0.7, 0.0)
        (x1, y1), (x2, y2) = bob_positions(state)
        assert math.hypot(x1, y1) == pytest.approx(1.0)
        assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(1.0)
