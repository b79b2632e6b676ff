"""Plotting helpers (requires matplotlib, skipped if not installed)."""

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from physlab.circuits import CircuitParameters, frequency_response  # noqa: E402
from physlab.core import SimulationHistory, SimulationSession  # noqa: E402
from physlab.physics import PulleyParameters, WeightedPulley  # noqa: E402
from physlab.simulation import plot_energy, plot_frequency_response, plot_phase_portrait  # noqa: E402


@pytest.fixture
def history() -> SimulationHistory:
    h = SimulationHistory()
    session = SimulationSession(WeightedPulley(), PulleyParameters(0.1, 0.2, 0.6), history=h, angle=0.2)
    session.run(100)
    return h


def test_plot_phase_portrait(history: SimulationHistory) -> None:
    ax = plot_phase_portrait(history, equilibrium=0.73)
    assert len(ax.lines) == 2
    plt.close("all")


def test_plot_phase_portrait_raw_arrays() -> None:
    ax = plot_phase_portrait(phi=np.zeros(3), dphi=np.ones(3))
    assert ax.get_xlabel() == "phi (rad)"
    plt.close("all")
    with pytest.raises(ValueError):
        plot_phase_portrait()


def test_plot_energy(history: SimulationHistory) -> None:
    ax = plot_energy(history)
    assert len(ax.lines) == 3
    plt.close("all")


def test_plot_frequency_response() -> None:
    params = CircuitParameters(voltage=5.0, omega=100.0, resistance=10.0, capacitance=1e-4, inductance=0.1)
    fig = plot_frequency_response(frequency_response(params, np.linspace(10, 1000, 50)))
    assert len(fig.axes) == 2
    plt.close(fig)
