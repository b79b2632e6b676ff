"""RLC circuit as a session component: a clock over the phasor steady state."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict

from physlab.circuits.phasor import (
    CircuitParameters,
    CircuitValues,
    InstantaneousValues,
    classify,
    instantaneous,
    resonance_angular_frequency,
    solve,
)
from physlab.core.component import LabComponent

CIRCUIT_DT = 0.05  # s per animation frame


@dataclass(frozen=True)
class CircuitState:
    time: float
    values: CircuitValues
    is_running: bool = False


class RlcCircuit(LabComponent):
    """
    The circuit has no dynamics of its own (steady state only); stepping just
    advances the clock that drives the waveform display.
    """

    default_dt = CIRCUIT_DT

    def initial_state(self, params: CircuitParameters, **kwargs: Any) -> CircuitState:
        if not isinstance(params, CircuitParameters):
            raise TypeError(f"expected CircuitParameters, got {type(params).__name__}")
        return CircuitState(time=0.0, values=solve(params))

    def step(
        self,
        *,
        state: CircuitState,
        params: CircuitParameters,
        dt: float,
        **kwargs: Any,
    ) -> CircuitState:
        return CircuitState(time=state.time + dt, values=solve(params), is_running=state.is_running)

    def waveform(self, state: CircuitState) -> InstantaneousValues:
        return instantaneous(state.values, state.time)

    def observables(self, state: CircuitState) -> Dict[str, Any]:
        out: Dict[str, Any] = {"time": state.time}
        out.update(dataclasses.asdict(state.values))
        out["character"] = classify(state.values).value
        out["is_running"] = state.is_running
        return out


def tune_to_resonance(params: CircuitParameters) -> CircuitParameters:
    """Same circuit driven at w0 = 1 / sqrt(L C)."""
    return dataclasses.replace(
        params, omega=resonance_angular_frequency(params.inductance, params.capacitance)
    )
