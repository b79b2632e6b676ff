"""Electrical circuits: series RLC phasor analysis."""

from physlab.circuits.phasor import (
    CircuitCharacter,
    CircuitParameters,
    CircuitValues,
    InstantaneousValues,
    capacitive_reactance,
    classify,
    frequency_response,
    inductive_reactance,
    instantaneous,
    quality_factor,
    resonance_angular_frequency,
    resonance_frequency,
    solve,
)
from physlab.circuits.rlc import CIRCUIT_DT, CircuitState, RlcCircuit, tune_to_resonance

__all__ = [
    "CircuitCharacter",
    "CircuitParameters",
    "CircuitValues",
    "InstantaneousValues",
    "capacitive_reactance",
    "classify",
    "frequency_response",
    "inductive_reactance",
    "instantaneous",
    "quality_factor",
    "resonance_angular_frequency",
    "resonance_frequency",
    "solve",
    "CIRCUIT_DT",
    "CircuitState",
    "RlcCircuit",
    "tune_to_resonance",
]
