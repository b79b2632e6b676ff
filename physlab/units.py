"""
Conversion boundary between UI controls and the SI-only core.

The tables reproduce the experiment controls: which range each slider has,
which unit it displays, and which factor takes it to SI. Nothing else in the
package converts units.
"""

import math
from typing import Dict

from physlab.circuits.phasor import CircuitParameters
from physlab.core.signals import ParameterSpec
from physlab.physics.pulley import RAD, PulleyParameters

GRAMS_PER_KG = 1000.0


def grams_to_kg(grams: float) -> float:
    return grams / GRAMS_PER_KG


def degrees_to_radians(degrees: float) -> float:
    return degrees * RAD


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


PULLEY_CONTROLS: Dict[str, ParameterSpec] = {
    "inertia": ParameterSpec(
        "inertia", unit="kg.m2", si_unit="kg.m2",
        options=(0.10, 0.25, 0.50, 1.00),
        description="moment of inertia of the pulley",
    ),
    "mass_M": ParameterSpec(
        "mass_M", 150, 800, step=1, unit="g", si_unit="kg", scale=1.0 / GRAMS_PER_KG,
        description="hanging mass on the rim",
    ),
    "mass_m": ParameterSpec(
        "mass_m", 100, 1000, step=1, unit="g", si_unit="kg", scale=1.0 / GRAMS_PER_KG,
        description="mass on the arm",
    ),
    "angle": ParameterSpec(
        "angle", 0, 90, step=1, unit="deg", si_unit="rad", scale=RAD,
        description="initial angle of the arm",
    ),
}

CIRCUIT_CONTROLS: Dict[str, ParameterSpec] = {
    "voltage": ParameterSpec("voltage", 2, 9, step=0.1, unit="V", si_unit="V"),
    # labelled "Hz" on some screens, but used as angular frequency
    "omega": ParameterSpec("omega", 10, 1000, step=1, unit="rad/s", si_unit="rad/s"),
    "resistance": ParameterSpec("resistance", 10, 500, step=1, unit="", si_unit="ohm", scale=0.1),
    "capacitance": ParameterSpec("capacitance", 10, 1000, step=1, unit="uF", si_unit="F", scale=1e-6),
    "inductance": ParameterSpec("inductance", 10, 1000, step=1, unit="mH", si_unit="H", scale=1e-3),
}


def pulley_parameters_from_controls(inertia: float, mass_M: float, mass_m: float) -> PulleyParameters:
    """UI values (kg.m2 menu, grams, grams) -> PulleyParameters in SI."""
    return PulleyParameters(
        inertia=PULLEY_CONTROLS["inertia"].to_si(inertia),
        mass_M=PULLEY_CONTROLS["mass_M"].to_si(mass_M),
        mass_m=PULLEY_CONTROLS["mass_m"].to_si(mass_m),
    )


def initial_angle_from_controls(angle: float) -> float:
    """Slider degrees -> radians."""
    return PULLEY_CONTROLS["angle"].to_si(angle)


def circuit_parameters_from_controls(
    voltage: float,
    omega: float,
    resistance: float,
    capacitance: float,
    inductance: float,
) -> CircuitParameters:
    """
    UI values -> CircuitParameters in SI.

    resistance is the raw slider position (x 0.1 ohm), capacitance in uF,
    inductance in mH.
    """
    c = CIRCUIT_CONTROLS
    return CircuitParameters(
        voltage=c["voltage"].to_si(voltage),
        omega=c["omega"].to_si(omega),
        resistance=c["resistance"].to_si(resistance),
        capacitance=c["capacitance"].to_si(capacitance),
        inductance=c["inductance"].to_si(inductance),
    )
