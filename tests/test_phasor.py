"""Tests for the series RLC phasor analysis."""

import math

import numpy as np
import pytest

from physlab.circuits import (
    CircuitCharacter,
    CircuitParameters,
    capacitive_reactance,
    classify,
    frequency_response,
    instantaneous,
    quality_factor,
    resonance_angular_frequency,
    resonance_frequency,
    solve,
    tune_to_resonance,
)
from physlab.errors import InvalidParameterError

L_100MH = 0.1
C_100UF = 100e-6


def _params(omega: float, voltage: float = 10.0, resistance: float = 100.0) -> CircuitParameters:
    return CircuitParameters(
        voltage=voltage,
        omega=omega,
        resistance=resistance,
        capacitance=C_100UF,
        inductance=L_100MH,
    )


def test_low_frequency_scenario() -> None:
    v = solve(_params(10.0))
    assert v.XC == pytest.approx(1000.0)
    assert v.XL == pytest.approx(1.0)
    assert v.Z == pytest.approx(math.hypot(100.0, 999.0))
    assert v.Z == pytest.approx(1003.99, abs=0.01)
    assert v.current == pytest.approx(10.0 / math.hypot(100.0, 999.0))
    assert v.current == pytest.approx(0.00996, abs=1e-5)
    assert v.phase < 0.0
    assert classify(v) is CircuitCharacter.CAPACITIVE
    assert v.VR == pytest.approx(v.current * 100.0)
    assert v.VC == pytest.approx(v.current * v.XC)
    assert v.VL == pytest.approx(v.current * v.XL)


def test_voltage_drops_across_capacitor_as_omega_vanishes() -> None:
    v = solve(_params(1e-3))
    assert v.current < 1e-5
    assert v.VC == pytest.approx(10.0, rel=1e-6)
    assert v.phase == pytest.approx(-math.pi / 2, abs=1e-4)


def test_no_rounding_in_core() -> None:
    params = CircuitParameters(voltage=1.0, omega=10.0, resistance=5.0, capacitance=1e-3, inductance=0.123456)
    assert solve(params).XL == pytest.approx(1.23456, abs=1e-12)


def test_resonance_frequency_formula() -> None:
    f0 = resonance_frequency(L_100MH, C_100UF)
    assert f0 == pytest.approx(1.0 / (2 * math.pi * math.sqrt(L_100MH * C_100UF)))
    assert f0 == pytest.approx(50.33, abs=0.01)
    assert resonance_angular_frequency(L_100MH, C_100UF) == pytest.approx(2 * math.pi * f0)


def test_solution_at_resonance() -> None:
    w0 = resonance_angular_frequency(L_100MH, C_100UF)
    assert w0 == pytest.approx(316.2278, abs=1e-3)
    v = solve(_params(w0))
    assert v.XL == pytest.approx(v.XC, rel=1e-9)
    assert v.phase == pytest.approx(0.0, abs=1e-9)
    assert v.Z == pytest.approx(100.0)
    assert v.current == pytest.approx(0.1)
    assert classify(v) is CircuitCharacter.RESONANT
    assert v.character is CircuitCharacter.RESONANT


def test_tune_to_resonance_keeps_other_parameters() -> None:
    params = _params(50.0)
    tuned = tune_to_resonance(params)
    assert tuned.omega == pytest.approx(resonance_angular_frequency(L_100MH, C_100UF))
    assert tuned.resistance == params.resistance
    assert solve(tuned).character is CircuitCharacter.RESONANT


def test_inductive_above_resonance() -> None:
    v = solve(_params(1000.0))
    assert v.XL == pytest.approx(100.0)
    assert v.XC == pytest.approx(10.0)
    assert v.phase > 0.0
    assert classify(v) is CircuitCharacter.INDUCTIVE


def test_classification_tolerance() -> None:
    w0 = resonance_angular_frequency(L_100MH, C_100UF)
    v = solve(_params(w0 * (1 + 1e-4)))
    assert classify(v) is CircuitCharacter.INDUCTIVE
    assert classify(v, rtol=1e-2) is CircuitCharacter.RESONANT


@pytest.mark.parametrize(
    "kwargs",
    [
        {"omega": 0.0},
        {"omega": -5.0},
        {"capacitance": 0.0},
        {"resistance": -1.0},
        {"inductance": -0.1},
        {"voltage": float("nan")},
    ],
)
def test_invalid_parameters_rejected(kwargs) -> None:
    base = {"voltage": 5.0, "omega": 100.0, "resistance": 10.0, "capacitance": 1e-4, "inductance": 0.1}
    base.update(kwargs)
    with pytest.raises(InvalidParameterError):
        CircuitParameters(**base)


def test_capacitive_reactance_guards_zero() -> None:
    with pytest.raises(InvalidParameterError):
        capacitive_reactance(0.0, 1e-4)
    with pytest.raises(InvalidParameterError):
        capacitive_reactance(10.0, 0.0)


def test_zero_impedance_is_an_error() -> None:
    params = CircuitParameters(voltage=1.0, omega=1.0, resistance=0.0, capacitance=1.0, inductance=1.0)
    with pytest.raises(InvalidParameterError):
        solve(params)


def test_quality_factor() -> None:
    assert quality_factor(10.0, L_100MH, C_100UF) == pytest.approx(math.sqrt(1000.0) / 10.0)
    with pytest.raises(InvalidParameterError):
        quality_factor(0.0, L_100MH, C_100UF)
    with pytest.raises(InvalidParameterError):
        resonance_frequency(0.0, C_100UF)


def test_frequency_response_peaks_at_resonance() -> None:
    params = _params(100.0, resistance=10.0)
    omegas = np.linspace(10.0, 1000.0, 991)
    resp = frequency_response(params, omegas)
    assert resp["current"].shape == (991,)
    peak = resp["omega"][np.argmax(resp["current"])]
    assert peak == pytest.approx(resonance_angular_frequency(L_100MH, C_100UF), abs=1.0)
    assert np.all(np.diff(resp["phase"]) > 0.0)
    single = solve(_params(250.0, resistance=10.0))
    i = int(np.argmin(np.abs(omegas - 250.0)))
    assert resp["Z"][i] == pytest.approx(single.Z)
    assert resp["phase"][i] == pytest.approx(single.phase)


def test_frequency_response_rejects_non_positive_omega() -> None:
    with pytest.raises(InvalidParameterError):
        frequency_response(_params(100.0), np.array([0.0, 10.0]))


@pytest.mark.parametrize("omega", [10.0, 316.0, 900.0])
def test_instantaneous_voltages_sum_to_source(omega: float) -> None:
    v = solve(_params(omega, voltage=7.0))
    for t in np.linspace(0.0, 0.1, 13):
        snap = instantaneous(v, float(t))
        assert snap.VR + snap.VL + snap.VC == pytest.approx(snap.source, abs=1e-9)
        assert snap.source == pytest.approx(7.0 * math.sin(omega * t), abs=1e-9)
        assert abs(snap.current) <= v.current + 1e-12
