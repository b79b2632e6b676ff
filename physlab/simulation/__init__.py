"""
Plotting of simulation results (matplotlib, optional).

All functions accept a SimulationHistory or raw arrays and return the
matplotlib axes or figure they drew on.
"""

from physlab.simulation._utils import (
    plot_energy,
    plot_frequency_response,
    plot_phase_portrait,
)

__all__ = [
    "plot_energy",
    "plot_frequency_response",
    "plot_phase_portrait",
]
