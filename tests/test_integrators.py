"""Convergence of the fixed-step integrators on x' = -k x."""

import math

import numpy as np
import pytest

from physlab.physics import EulerIntegrator, HeunIntegrator, RK4Integrator


def _decay(x: np.ndarray, k: float, t: float) -> np.ndarray:
    return -k * x


def _global_error(integrator, dt: float) -> float:
    x = np.array([1.0])
    t = 0.0
    for _ in range(int(round(1.0 / dt))):
        x = integrator.step(_decay, x, 2.0, t, dt)
        t += dt
    return abs(float(x[0]) - math.exp(-2.0))


@pytest.mark.parametrize("integrator", [EulerIntegrator, HeunIntegrator, RK4Integrator])
def test_observed_order(integrator) -> None:
    coarse = _global_error(integrator, 0.02)
    fine = _global_error(integrator, 0.01)
    observed = math.log2(coarse / fine)
    assert observed == pytest.approx(integrator.order, abs=0.2)


def test_rk4_is_most_accurate() -> None:
    errors = [_global_error(i, 0.05) for i in (EulerIntegrator, HeunIntegrator, RK4Integrator)]
    assert errors[0] > errors[1] > errors[2]
    assert errors[2] < 1e-6


@pytest.mark.parametrize("integrator", [EulerIntegrator, HeunIntegrator, RK4Integrator])
def test_tableau_is_consistent(integrator) -> None:
    a, b, c = integrator.tableau
    assert sum(b) == pytest.approx(1.0)
    for row, ci in zip(a, c):
        assert sum(row) == pytest.approx(ci)


def test_rk4_matches_hand_written_stages() -> None:
    def f(x, params, t):
        return np.array([x[1], -params * np.sin(x[0]) + t])

    x = np.array([0.4, -0.2])
    dt, t = 0.1, 0.3
    k1 = f(x, 2.0, t)
    k2 = f(x + 0.5 * dt * k1, 2.0, t + 0.5 * dt)
    k3 = f(x + 0.5 * dt * k2, 2.0, t + 0.5 * dt)
    k4 = f(x + dt * k3, 2.0, t + dt)
    expected = x + dt / 6.0 * (k1 + 2 * k2 + 2 * k3 + k4)
    np.testing.assert_allclose(RK4Integrator.step(f, x, 2.0, t, dt), expected, rtol=1e-14)
