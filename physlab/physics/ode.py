"""Base class for models described by an ODE dx/dt = f(x, params, t)."""

from typing import Any, Dict, Optional

import numpy as np

from physlab.core.component import LabComponent
from physlab.physics.integrators import RK4Integrator


class ODEModel(LabComponent):
    """
    LabComponent whose dynamics are an explicit ODE.
    Subclasses implement rhs(); advance() applies the configured integrator.
    """

    def __init__(self, integrator: Optional[Any] = None) -> None:
        """
        Args:
            integrator: object with method step(f, x, params, t, dt). Default: RK4.
        """
        self.integrator = integrator or RK4Integrator()

    def rhs(self, x: np.ndarray, params: Any, t: float) -> np.ndarray:
        """
        Right-hand side of the ODE: dx/dt = rhs(x, params, t).
        To be implemented in subclasses.
        """
        raise NotImplementedError("Subclasses must implement rhs(x, params, t).")

    def advance(self, x: np.ndarray, params: Any, t: float, dt: float) -> np.ndarray:
        """One integrator step from x at time t."""
        x_arr = np.atleast_1d(np.asarray(x, dtype=float))
        return self.integrator.step(self.rhs, x_arr, params, t, dt)

    def state_dict(self) -> Dict[str, Any]:
        return {"integrator": type(self.integrator).__name__}
