"""
Physics models.

Hierarchy:
  - integrators: fixed-step numerical integration (Euler, Heun, RK4)
  - ode: base ODE model (ODEModel)
  - pulley: weighted pulley, torque balance integrated with RK4
  - analysis: measured period and energy drift of recorded runs
"""

from physlab.physics.analysis import energy_drift, measure_period
from physlab.physics.integrators import (
    EulerIntegrator,
    ExplicitRungeKutta,
    HeunIntegrator,
    RK4Integrator,
    euler_step,
    explicit_rk_step,
    heun_step,
    rk4_step,
)
from physlab.physics.ode import ODEModel
from physlab.physics.pulley import (
    DT,
    GRAVITY,
    MASS_RADIUS,
    PULLEY_RADIUS,
    RAD,
    PulleyEnergies,
    PulleyParameters,
    PulleyState,
    WeightedPulley,
    compute_angular_acceleration,
    compute_energies,
    compute_equilibrium_angle,
    compute_period,
    step_rk4,
)

__all__ = [
    # Integrators
    "EulerIntegrator",
    "ExplicitRungeKutta",
    "HeunIntegrator",
    "RK4Integrator",
    "euler_step",
    "explicit_rk_step",
    "heun_step",
    "rk4_step",
    # Base
    "ODEModel",
    # Pulley
    "DT",
    "GRAVITY",
    "MASS_RADIUS",
    "PULLEY_RADIUS",
    "RAD",
    "PulleyEnergies",
    "PulleyParameters",
    "PulleyState",
    "WeightedPulley",
    "compute_angular_acceleration",
    "compute_energies",
    "compute_equilibrium_angle",
    "compute_period",
    "step_rk4",
    # Analysis
    "measure_period",
    "energy_drift",
]
