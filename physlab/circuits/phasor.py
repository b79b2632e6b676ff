"""
Steady-state analysis of a series RLC circuit driven by V sin(w t).

Each element is reduced to a phasor: the impedance is Z = R + j(XL - XC) with
XL = w L and XC = 1 / (w C). Everything here is algebraic and stateless; a
call depends only on its arguments.

Conventions: `omega` is the angular frequency in rad/s and is used directly in
the reactances (no 2 pi factor). Amplitudes are peak values; RMS conversion is
a display concern (see physlab.formatting). No rounding happens here.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np

from physlab import config
from physlab.errors import InvalidParameterError
from physlab.numerics import approx_equal, require_finite


class CircuitCharacter(Enum):
    INDUCTIVE = "inductive"  # XL > XC, voltage leads current
    CAPACITIVE = "capacitive"  # XL < XC, current leads voltage
    RESONANT = "resonant"  # XL == XC, in phase


@dataclass(frozen=True)
class CircuitParameters:
    """Inputs in SI units: V, rad/s, ohm, F, H."""

    voltage: float
    omega: float
    resistance: float
    capacitance: float
    inductance: float

    def __post_init__(self) -> None:
        for name in ("voltage", "omega", "resistance", "capacitance", "inductance"):
            object.__setattr__(self, name, require_finite(name, getattr(self, name)))
        if self.voltage < 0.0:
            raise InvalidParameterError("voltage", self.voltage, "amplitude cannot be negative")
        if self.omega <= 0.0:
            raise InvalidParameterError("omega", self.omega, "driving frequency must be positive")
        if self.resistance < 0.0:
            raise InvalidParameterError("resistance", self.resistance, "cannot be negative")
        if self.capacitance <= 0.0:
            raise InvalidParameterError("capacitance", self.capacitance, "must be positive")
        if self.inductance < 0.0:
            raise InvalidParameterError("inductance", self.inductance, "cannot be negative")


@dataclass(frozen=True)
class CircuitValues:
    """Magnitudes (peak) and phase of the steady state."""

    omega: float  # rad/s
    XL: float  # ohm
    XC: float  # ohm
    Z: float  # ohm
    phase: float  # rad, positive = inductive
    current: float  # A
    VR: float  # V
    VC: float  # V
    VL: float  # V

    @property
    def reactance(self) -> float:
        """Net reactance XL - XC (ohm)."""
        return self.XL - self.XC

    @property
    def impedance(self) -> complex:
        """Complex impedance R + jX, with R recovered as Z cos(phase)."""
        return complex(self.Z * math.cos(self.phase), self.reactance)

    @property
    def character(self) -> CircuitCharacter:
        return classify(self)


@dataclass(frozen=True)
class InstantaneousValues:
    """Time-domain values of the steady state at one instant."""

    time: float
    source: float
    current: float
    VR: float
    VL: float
    VC: float


def inductive_reactance(omega: float, inductance: float) -> float:
    return omega * inductance


def capacitive_reactance(omega: float, capacitance: float) -> float:
    """1 / (w C). Raises for w <= 0 or C <= 0 instead of returning inf."""
    if omega <= 0.0:
        raise InvalidParameterError("omega", omega, "driving frequency must be positive")
    if capacitance <= 0.0:
        raise InvalidParameterError("capacitance", capacitance, "must be positive")
    return 1.0 / (omega * capacitance)


def solve(params: CircuitParameters) -> CircuitValues:
    """
    Impedance, phase, current and element voltages for one set of parameters.

    Raises:
        InvalidParameterError: if the impedance is zero (R = 0 at resonance),
            where the current amplitude is unbounded.
    """
    XL = inductive_reactance(params.omega, params.inductance)
    XC = capacitive_reactance(params.omega, params.capacitance)
    z = complex(params.resistance, XL - XC)
    Z = abs(z)
    if Z == 0.0:
        raise InvalidParameterError(
            "resistance", params.resistance, "zero impedance: current is unbounded at resonance"
        )
    phase = math.atan2(XL - XC, params.resistance)
    current = params.voltage / Z
    return CircuitValues(
        omega=params.omega,
        XL=XL,
        XC=XC,
        Z=Z,
        phase=phase,
        current=current,
        VR=current * params.resistance,
        VC=current * XC,
        VL=current * XL,
    )


def classify(values: CircuitValues, rtol: Optional[float] = None) -> CircuitCharacter:
    """
    Inductive, capacitive or resonant, comparing XL and XC with a relative
    tolerance (default: config.RESONANCE_RTOL).
    """
    tol = config.RESONANCE_RTOL if rtol is None else rtol
    if approx_equal(values.XL, values.XC, rtol=tol):
        return CircuitCharacter.RESONANT
    if values.XL > values.XC:
        return CircuitCharacter.INDUCTIVE
    return CircuitCharacter.CAPACITIVE


def _check_lc(inductance: float, capacitance: float) -> None:
    if not inductance > 0.0:
        raise InvalidParameterError("inductance", inductance, "must be positive")
    if not capacitance > 0.0:
        raise InvalidParameterError("capacitance", capacitance, "must be positive")


def resonance_frequency(inductance: float, capacitance: float) -> float:
    """f0 = 1 / (2 pi sqrt(L C)) in Hz (L in H, C in F)."""
    _check_lc(inductance, capacitance)
    return 1.0 / (2.0 * math.pi * math.sqrt(inductance * capacitance))


def resonance_angular_frequency(inductance: float, capacitance: float) -> float:
    """w0 = 1 / sqrt(L C) in rad/s: the drive at which XL == XC."""
    _check_lc(inductance, capacitance)
    return 1.0 / math.sqrt(inductance * capacitance)


def quality_factor(resistance: float, inductance: float, capacitance: float) -> float:
    """Q = (1 / R) sqrt(L / C)."""
    _check_lc(inductance, capacitance)
    if not resistance > 0.0:
        raise InvalidParameterError("resistance", resistance, "must be positive for a finite Q")
    return math.sqrt(inductance / capacitance) / resistance


def frequency_response(params: CircuitParameters, omegas: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Sweep the drive frequency, keeping the other parameters.

    Returns:
        Dict of arrays: omega, XL, XC, Z, phase, current.
    """
    w = np.atleast_1d(np.asarray(omegas, dtype=float))
    if not np.all(np.isfinite(w)) or np.any(w <= 0.0):
        raise InvalidParameterError("omegas", omegas, "all frequencies must be finite and positive")
    XL = w * params.inductance
    XC = 1.0 / (w * params.capacitance)
    z = params.resistance + 1j * (XL - XC)
    Z = np.abs(z)
    if np.any(Z == 0.0):
        raise InvalidParameterError("resistance", params.resistance, "zero impedance inside the sweep")
    return {
        "omega": w,
        "XL": XL,
        "XC": XC,
        "Z": Z,
        "phase": np.angle(z),
        "current": params.voltage / Z,
    }


def instantaneous(values: CircuitValues, t: float) -> InstantaneousValues:
    """
    Snapshot at time t of the source voltage V sin(w t) and the response
    i = I sin(w t - phase). Element voltages sum to the source voltage.
    """
    theta = values.omega * t - values.phase
    s, c = math.sin(theta), math.cos(theta)
    vr = values.VR * s
    vl = values.VL * c
    vc = -values.VC * c
    return InstantaneousValues(
        time=t,
        source=values.current * values.Z * math.sin(values.omega * t),
        current=values.current * s,
        VR=vr,
        VL=vl,
        VC=vc,
    )
