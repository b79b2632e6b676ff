"""Core: component interface, session driver and history."""

from physlab.core.component import LabComponent
from physlab.core.history import SimulationHistory
from physlab.core.session import SimulationSession
from physlab.core.signals import ParameterSpec

__all__ = ["LabComponent", "SimulationSession", "SimulationHistory", "ParameterSpec"]
