"""
physlab: numerical core of an interactive physics-experiment catalog
(weighted pulley with RK4, series RLC phasor analysis).
"""

__version__ = "0.1.0"

from physlab.core.session import SimulationSession
from physlab.core.component import LabComponent
from physlab.core.history import SimulationHistory
from physlab.errors import InvalidParameterError, PhyslabError
from physlab.physics.pulley import PulleyParameters, PulleyState, WeightedPulley
from physlab.circuits.phasor import CircuitParameters, CircuitValues
from physlab.circuits.rlc import RlcCircuit

__all__ = [
    "__version__",
    "SimulationSession",
    "LabComponent",
    "SimulationHistory",
    "PhyslabError",
    "InvalidParameterError",
    "PulleyParameters",
    "PulleyState",
    "WeightedPulley",
    "CircuitParameters",
    "CircuitValues",
    "RlcCircuit",
]
