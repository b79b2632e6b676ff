"""
Weighted pulley: a pulley of moment of inertia Ip carries a hanging mass M on
its rim (radius R) and a mass m on an arm (radius r) at angle phi from the
vertical.

    I_eff * phi'' = g * (M R - m r sin(phi)),   I_eff = Ip + m r^2 + M R^2

The constant drive M R makes this a forced pendulum with no general closed
form, so the state is advanced with RK4. Energies and the small-oscillation
period are recomputed from (phi, dphi) after every step, never integrated.

All quantities are SI (kg, m, s, rad). Conversion from the UI's grams and
degrees happens in physlab.units.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np

from physlab.errors import InvalidParameterError
from physlab.numerics import OverflowPolicy, clamp_angular_overflow, require_finite
from physlab.physics.integrators import rk4_step
from physlab.physics.ode import ODEModel

logger = logging.getLogger(__name__)

GRAVITY = 9.81  # m/s^2
RAD = math.pi / 180.0  # degrees -> radians
DT = 0.015  # s

PULLEY_RADIUS = 0.80  # R (m)
MASS_RADIUS = 0.40  # r (m)

MAX_ANGLE = math.pi
MIN_ANGLE = -math.pi


@dataclass(frozen=True)
class PulleyParameters:
    """Per-step inputs in SI units. Immutable; a change means a new session state."""

    inertia: float  # kg m^2
    mass_M: float  # hanging mass (kg)
    mass_m: float  # arm mass (kg)

    def __post_init__(self) -> None:
        for name in ("inertia", "mass_M", "mass_m"):
            object.__setattr__(self, name, require_finite(name, getattr(self, name)))
        if self.inertia <= 0.0:
            raise InvalidParameterError("inertia", self.inertia, "moment of inertia must be positive")
        if self.mass_M < 0.0:
            raise InvalidParameterError("mass_M", self.mass_M, "mass cannot be negative")
        if self.mass_m < 0.0:
            raise InvalidParameterError("mass_m", self.mass_m, "mass cannot be negative")

    @property
    def effective_inertia(self) -> float:
        return self.inertia + self.mass_m * MASS_RADIUS ** 2 + self.mass_M * PULLEY_RADIUS ** 2

    @property
    def drive_moment(self) -> float:
        """M R: lever of the constant torque of the hanging mass (kg m)."""
        return self.mass_M * PULLEY_RADIUS

    @property
    def restoring_moment(self) -> float:
        """m r: lever of the restoring torque of the arm mass (kg m)."""
        return self.mass_m * MASS_RADIUS


@dataclass(frozen=True)
class PulleyEnergies:
    potential_energy: float
    kinetic_energy: float

    @property
    def total_energy(self) -> float:
        return self.potential_energy + self.kinetic_energy


@dataclass(frozen=True)
class PulleyState:
    """
    Angular state of the pulley plus quantities derived from it.

    period is None when the system does not oscillate (no real equilibrium).
    clamped is True when the last step was replaced by the overflow policy.
    """

    time: float
    phi: float
    dphi: float
    potential_energy: float
    kinetic_energy: float
    period: Optional[float]
    is_running: bool = False
    clamped: bool = False

    @property
    def total_energy(self) -> float:
        return self.potential_energy + self.kinetic_energy


def compute_angular_acceleration(phi: float, dphi: float, params: PulleyParameters) -> float:
    """d2phi/dt2 = (g / I_eff) * (M R - m r sin(phi)). No friction, so dphi is unused."""
    return GRAVITY / params.effective_inertia * (
        params.drive_moment - params.restoring_moment * math.sin(phi)
    )


def _pulley_rhs(x: np.ndarray, params: PulleyParameters, t: float) -> np.ndarray:
    return np.array([x[1], compute_angular_acceleration(x[0], x[1], params)])


def step_rk4(
    state: Any,
    params: PulleyParameters,
    dt: float = DT,
    overflow_policy: OverflowPolicy = clamp_angular_overflow,
) -> Tuple[float, float]:
    """
    One RK4 step of (phi, dphi).

    If phi is already at or beyond +-pi the step is skipped and the overflow
    policy decides the new state; the default policy pins phi to the bound
    and zeroes dphi.

    Args:
        state: anything with phi and dphi attributes (usually a PulleyState)
        params: pulley parameters
        dt: time step (s)
        overflow_policy: see physlab.numerics

    Returns:
        (phi, dphi) after the step.
    """
    phi, dphi, _ = _next_angles(
        state.phi, state.dphi, params, getattr(state, "time", 0.0), dt,
        overflow_policy, _rk4_pulley,
    )
    return phi, dphi


def _rk4_pulley(x: np.ndarray, params: PulleyParameters, t: float, dt: float) -> np.ndarray:
    return rk4_step(_pulley_rhs, x, params, t, dt)


def _next_angles(
    phi: float,
    dphi: float,
    params: PulleyParameters,
    t: float,
    dt: float,
    overflow_policy: OverflowPolicy,
    integrate: Callable[[np.ndarray, PulleyParameters, float, float], np.ndarray],
) -> Tuple[float, float, bool]:
    """(phi, dphi, replaced): the overflow policy first, the integrator otherwise."""
    replaced = overflow_policy(phi, dphi, MIN_ANGLE, MAX_ANGLE)
    if replaced is not None:
        logger.debug("angular overflow at t=%.3f phi=%.6f -> phi=%.6f dphi=%.6f",
                     t, phi, replaced[0], replaced[1])
        return replaced[0], replaced[1], True
    x = integrate(np.array([phi, dphi], dtype=float), params, t, dt)
    return float(x[0]), float(x[1]), False


def compute_energies(phi: float, dphi: float, params: PulleyParameters) -> PulleyEnergies:
    """
    Ep = g (m r (1 - cos phi) - M R phi)  (the hanging mass drops as phi grows)
    Ek = 1/2 I_eff dphi^2
    """
    potential = GRAVITY * (
        params.restoring_moment * (1.0 - math.cos(phi)) - params.drive_moment * phi
    )
    kinetic = 0.5 * params.effective_inertia * dphi * dphi
    return PulleyEnergies(potential_energy=potential, kinetic_energy=kinetic)


def compute_equilibrium_angle(mass_M: float, mass_m: float) -> Optional[float]:
    """
    Angle where M R = m r sin(phi), i.e. asin(M R / m r).

    Returns None when the drive torque exceeds the largest restoring torque
    (the UI shows "balance not possible"). Exactly pi/2 when the two moments
    are equal.
    """
    mass_M = require_finite("mass_M", mass_M)
    mass_m = require_finite("mass_m", mass_m)
    if mass_M < 0.0 or mass_m < 0.0:
        raise InvalidParameterError("mass", (mass_M, mass_m), "mass cannot be negative")
    drive = mass_M * PULLEY_RADIUS
    restoring = mass_m * MASS_RADIUS
    if drive > restoring:
        return None
    if restoring == 0.0:
        # nothing hangs anywhere: every angle balances, report the rest position
        return 0.0
    return math.asin(drive / restoring)


def compute_period(params: PulleyParameters) -> Optional[float]:
    """
    Small-oscillation period about the equilibrium angle:

        T = 2 pi sqrt(I_eff / (g sqrt(z))),   z = (m r)^2 - (M R)^2

    None when z <= 0 (no stable equilibrium to oscillate about).
    """
    drive = params.drive_moment
    restoring = params.restoring_moment
    if not restoring > drive:
        return None
    z = (restoring - drive) * (restoring + drive)
    return 2.0 * math.pi * math.sqrt(params.effective_inertia / (GRAVITY * math.sqrt(z)))


class WeightedPulley(ODEModel):
    """
    Pulley model as a pure transition (state, params, dt) -> state.

    Usable in a SimulationSession; the session passes `angle` (rad) as the
    initial condition.
    """

    default_dt = DT

    def __init__(
        self,
        integrator: Optional[Any] = None,
        overflow_policy: OverflowPolicy = clamp_angular_overflow,
    ) -> None:
        """
        Args:
            integrator: ODE integrator (default: RK4Integrator).
            overflow_policy: what happens at phi = +-pi (default: clamp and stop).
        """
        super().__init__(integrator=integrator)
        self.overflow_policy = overflow_policy

    def rhs(self, x: np.ndarray, params: PulleyParameters, t: float) -> np.ndarray:
        return _pulley_rhs(x, params, t)

    def _derived(
        self,
        time: float,
        phi: float,
        dphi: float,
        params: PulleyParameters,
        is_running: bool,
        clamped: bool,
    ) -> PulleyState:
        energies = compute_energies(phi, dphi, params)
        return PulleyState(
            time=time,
            phi=phi,
            dphi=dphi,
            potential_energy=energies.potential_energy,
            kinetic_energy=energies.kinetic_energy,
            period=compute_period(params),
            is_running=is_running,
            clamped=clamped,
        )

    def initial_state(self, params: PulleyParameters, angle: float = 0.0, **kwargs: Any) -> PulleyState:
        """Rest at `angle` radians, time 0, stopped."""
        if not isinstance(params, PulleyParameters):
            raise TypeError(f"expected PulleyParameters, got {type(params).__name__}")
        phi0 = require_finite("angle", angle)
        return self._derived(0.0, phi0, 0.0, params, is_running=False, clamped=False)

    def step(
        self,
        *,
        state: PulleyState,
        params: PulleyParameters,
        dt: float,
        **kwargs: Any,
    ) -> PulleyState:
        phi, dphi, clamped = _next_angles(
            state.phi, state.dphi, params, state.time, dt,
            self.overflow_policy, self.advance,
        )
        return self._derived(
            state.time + dt, phi, dphi, params,
            is_running=state.is_running,
            clamped=clamped,
        )

    def observables(self, state: PulleyState) -> Dict[str, Any]:
        out = super().observables(state)
        out["total_energy"] = state.total_energy
        return out

    def state_dict(self) -> Dict[str, Any]:
        return {
            "integrator": type(self.integrator).__name__,
            "overflow_policy": getattr(self.overflow_policy, "__name__", repr(self.overflow_policy)),
        }
