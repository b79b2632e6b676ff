"""Simulation session: owns one experiment's state and applies steps in order."""

import dataclasses
import logging
from typing import Any, Dict, Optional

from physlab.core.component import LabComponent
from physlab.core.history import SimulationHistory
from physlab.errors import InvalidParameterError

logger = logging.getLogger(__name__)


class SimulationSession:
    """
    Driver-facing handle on a single experiment instance.

    The session holds the only reference to the evolving state. The UI (or any
    external clock) calls tick() once per frame and reads `state`; it never
    mutates the state directly. Every parameter change is a full reset.
    Sessions share nothing: run independent experiments in separate sessions.
    """

    def __init__(
        self,
        model: LabComponent,
        params: Any,
        dt: Optional[float] = None,
        history: Optional[SimulationHistory] = None,
        **initial: Any,
    ) -> None:
        """
        Args:
            model: experiment model (e.g. WeightedPulley, RlcCircuit)
            params: model parameters in SI units
            dt: fixed time step (default: model.default_dt)
            history: optional buffer receiving the observables of every state
            **initial: initial-condition arguments for model.initial_state
                (e.g. angle=0.3 for the pulley)
        """
        self.model = model
        self.dt = float(model.default_dt if dt is None else dt)
        if not self.dt > 0.0:
            raise InvalidParameterError("dt", dt, "time step must be positive")
        self.history = history
        self._params = params
        self._initial: Dict[str, Any] = dict(initial)
        self._state = self.model.initial_state(self._params, **self._initial)
        self._record()

    def _record(self) -> None:
        if self.history is not None:
            self.history.append(**self.model.observables(self._state))

    def _set_running(self, running: bool) -> Any:
        self._state = dataclasses.replace(self._state, is_running=running)
        return self._state

    def reset(self) -> Any:
        """Back to the fresh initial state for the current parameters (stopped)."""
        self._state = self.model.initial_state(self._params, **self._initial)
        if self.history is not None:
            self.history.clear()
        self._record()
        logger.debug("%s reset: %s", type(self.model).__name__, self._state)
        return self._state

    def set_parameters(self, params: Optional[Any] = None, **initial: Any) -> Any:
        """
        Replace parameters and/or initial conditions, then reset.
        The new values are validated before anything is replaced.
        """
        new_params = self._params if params is None else params
        new_initial = {**self._initial, **initial}
        state = self.model.initial_state(new_params, **new_initial)
        self._params = new_params
        self._initial = new_initial
        self._state = state
        if self.history is not None:
            self.history.clear()
        self._record()
        logger.debug("%s parameters changed: %s", type(self.model).__name__, new_params)
        return self._state

    def start(self) -> Any:
        return self._set_running(True)

    def stop(self) -> Any:
        return self._set_running(False)

    def toggle(self) -> Any:
        """Start/stop button."""
        return self._set_running(not self._state.is_running)

    def step(self) -> Any:
        """Advance exactly one fixed step, whether or not the session is running."""
        self._state = self.model.step(state=self._state, params=self._params, dt=self.dt)
        self._record()
        return self._state

    def tick(self) -> Any:
        """Frame callback: one step while running, otherwise the unchanged state."""
        if not self._state.is_running:
            return self._state
        return self.step()

    def run(self, n_steps: int) -> Any:
        """Apply n_steps sequential steps and return the final state."""
        if n_steps < 0:
            raise ValueError("n_steps must be non-negative")
        for _ in range(n_steps):
            self.step()
        return self._state

    @property
    def state(self) -> Any:
        return self._state

    @property
    def params(self) -> Any:
        return self._params

    @property
    def time(self) -> float:
        return float(self._state.time)

    @property
    def is_running(self) -> bool:
        return bool(self._state.is_running)

    def state_dict(self) -> Dict[str, Any]:
        """Full session state for checkpointing (see physlab.io.save_config)."""
        return {
            "model": type(self.model).__name__,
            "dt": self.dt,
            "params": dataclasses.asdict(self._params),
            "initial": dict(self._initial),
            "state": self.model.observables(self._state),
            "component": self.model.state_dict(),
        }
