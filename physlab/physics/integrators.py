"""
Explicit fixed-step Runge-Kutta schemes.

Each scheme is a Butcher tableau (a, b, c) applied by explicit_rk_step():

    k_i     = f(x + dt * sum_j a_ij k_j, params, t + c_i dt)
    x_next  = x + dt * sum_i b_i k_i

The right-hand side has the signature f(x, params, t) -> dx/dt, where params
is the model's parameter object (PulleyParameters for the weighted pulley).
The pulley runs on RK4; Euler and Heun exist to compare energy drift.
"""

from typing import Any, Callable, Sequence, Tuple

import numpy as np

# (x, params, t) -> dx/dt
RHS = Callable[[np.ndarray, Any, float], np.ndarray]

Tableau = Tuple[Sequence[Sequence[float]], Sequence[float], Sequence[float]]

EULER_TABLEAU: Tableau = (((),), (1.0,), (0.0,))
HEUN_TABLEAU: Tableau = (((), (1.0,)), (0.5, 0.5), (0.0, 1.0))
RK4_TABLEAU: Tableau = (
    ((), (0.5,), (0.0, 0.5), (0.0, 0.0, 1.0)),
    (1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0),
    (0.0, 0.5, 0.5, 1.0),
)


def explicit_rk_step(
    tableau: Tableau,
    f: RHS,
    x: np.ndarray,
    params: Any,
    t: float,
    dt: float,
) -> np.ndarray:
    """One step of the explicit scheme given by tableau (a must be strictly lower triangular)."""
    a, b, c = tableau
    slopes = []
    for row, ci in zip(a, c):
        xi = x
        for aij, kj in zip(row, slopes):
            if aij:
                xi = xi + dt * aij * kj
        slopes.append(np.asarray(f(xi, params, t + ci * dt), dtype=float))
    incr = sum(bi * ki for bi, ki in zip(b, slopes))
    return x + dt * incr


def euler_step(f: RHS, x: np.ndarray, params: Any, t: float, dt: float) -> np.ndarray:
    return explicit_rk_step(EULER_TABLEAU, f, x, params, t, dt)


def heun_step(f: RHS, x: np.ndarray, params: Any, t: float, dt: float) -> np.ndarray:
    return explicit_rk_step(HEUN_TABLEAU, f, x, params, t, dt)


def rk4_step(f: RHS, x: np.ndarray, params: Any, t: float, dt: float) -> np.ndarray:
    """Classic RK4: slopes at t, twice at t + dt/2, and at t + dt."""
    return explicit_rk_step(RK4_TABLEAU, f, x, params, t, dt)


class ExplicitRungeKutta:
    """
    Integrator object accepted by ODEModel: step(f, x, params, t, dt).
    Subclasses only set the tableau and the order of accuracy.
    """

    tableau: Tableau = RK4_TABLEAU
    order = 4

    @classmethod
    def step(cls, f: RHS, x: np.ndarray, params: Any, t: float, dt: float) -> np.ndarray:
        return explicit_rk_step(cls.tableau, f, x, params, t, dt)


class EulerIntegrator(ExplicitRungeKutta):
    """Forward Euler. Energy grows steadily on the pulley."""

    tableau = EULER_TABLEAU
    order = 1


class HeunIntegrator(ExplicitRungeKutta):
    tableau = HEUN_TABLEAU
    order = 2


class RK4Integrator(ExplicitRungeKutta):
    """Default integrator of every ODEModel."""

    tableau = RK4_TABLEAU
    order = 4
