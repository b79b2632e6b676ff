"""Base interface for experiment models driven by a SimulationSession."""

import dataclasses
import numbers
from abc import ABC, abstractmethod
from typing import Any, Dict


class LabComponent(ABC):
    """
    Interface for every experiment model (pulley, RLC circuit, ...).

    A component is a pure state-transition function: it never keeps the
    evolving state itself. The caller (normally SimulationSession) holds the
    state and feeds each returned state into the next step.
    """

    #: Fixed time step used when the session does not pass one (s).
    default_dt: float = 0.015

    @abstractmethod
    def initial_state(self, params: Any, **kwargs: Any) -> Any:
        """Fresh state for the given parameters (time = 0, not running)."""

    @abstractmethod
    def step(self, *, state: Any, params: Any, dt: float, **kwargs: Any) -> Any:
        """
        Advance one time step.

        Args:
            state: current state (not modified)
            params: model parameters in SI units
            dt: time step (s)
            **kwargs: extra arguments for extensions

        Returns:
            The next state.
        """

    def observables(self, state: Any) -> Dict[str, Any]:
        """
        Scalar quantities of a state to record in a SimulationHistory.
        Default: every numeric or None field of a dataclass state.
        """
        if not dataclasses.is_dataclass(state):
            return {}
        out: Dict[str, Any] = {}
        for f in dataclasses.fields(state):
            value = getattr(state, f.name)
            if value is None or isinstance(value, (numbers.Number, bool)):
                out[f.name] = value
        return out

    def state_dict(self) -> Dict[str, Any]:
        """Component configuration for checkpoints. Override for configurable components."""
        return {}
