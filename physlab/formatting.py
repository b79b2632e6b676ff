"""Display helpers: rounding, RMS and labels for absent results."""

import math
from typing import Optional

from physlab.circuits.phasor import CircuitCharacter, CircuitValues, classify
from physlab.units import radians_to_degrees

RMS_FACTOR = 0.7071
BALANCE_NOT_POSSIBLE = "balance not possible"
NOT_APPLICABLE = "n/a"


def round_half_up(x: float, decimals: int = 1) -> float:
    """Round like the experiment screens do: halves go toward +inf (JavaScript Math.round)."""
    k = 10.0 ** decimals
    return math.floor(x * k + 0.5) / k


def rms(amplitude: float) -> float:
    return amplitude * RMS_FACTOR


def phase_degrees(values: CircuitValues) -> float:
    """Unsigned phase angle in degrees; the sign is given by the character."""
    return abs(radians_to_degrees(values.phase))


def pulley_angle_degrees(phi: float) -> float:
    """Arm angle as drawn on the dial (0 deg points right, so phi + 90)."""
    return radians_to_degrees(phi) + 90.0


def describe_equilibrium(angle: Optional[float]) -> str:
    if angle is None:
        return BALANCE_NOT_POSSIBLE
    return f"phi_e = {radians_to_degrees(angle):.1f} deg"


def describe_period(period: Optional[float]) -> str:
    if period is None:
        return NOT_APPLICABLE
    return f"T = {period:.2f} s"


def describe_character(values: CircuitValues) -> str:
    character = classify(values)
    deg = phase_degrees(values)
    if character is CircuitCharacter.INDUCTIVE:
        return f"inductive circuit: voltage leads current by {deg:.1f} deg"
    if character is CircuitCharacter.CAPACITIVE:
        return f"capacitive circuit: current leads voltage by {deg:.1f} deg"
    return "resonance: voltage and current in phase"
