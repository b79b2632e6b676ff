"""
Visualization utilities: phase portrait and energies of the pulley, resonance
curve of the RLC circuit.

Matplotlib is optional; functions raise ImportError when it is not installed.
"""

from typing import Any, Dict, Optional

import numpy as np

from physlab.core.history import SimulationHistory


def _pyplot() -> Any:
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plotting (pip install physlab[plot]).")
    return plt


def _series(history: Optional[SimulationHistory], key: str, raw: Optional[np.ndarray]) -> np.ndarray:
    if raw is not None:
        return np.asarray(raw, dtype=float).ravel()
    if history is None:
        raise ValueError(f"Provide either history= or {key}=.")
    arr = history.get(key)
    if arr.size == 0:
        raise ValueError(f"History has no '{key}' key.")
    return arr


def plot_phase_portrait(
    history: Optional[SimulationHistory] = None,
    phi: Optional[np.ndarray] = None,
    dphi: Optional[np.ndarray] = None,
    equilibrium: Optional[float] = None,
    ax: Optional[Any] = None,
    title: str = "Phase portrait",
    **kwargs: Any,
) -> Any:
    """
    Plot dphi against phi.

    Args:
        history: SimulationHistory with 'phi' and 'dphi'.
        phi, dphi: raw arrays if history is not used.
        equilibrium: equilibrium angle to mark (None = not drawn).
        ax: matplotlib axes (if None, creates new figure).
        **kwargs: passed to ax.plot().
    """
    plt = _pyplot()
    x = _series(history, "phi", phi)
    v = _series(history, "dphi", dphi)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 5))
    ax.plot(x, v, **kwargs)
    if equilibrium is not None:
        ax.axvline(equilibrium, color="red", linestyle="--", linewidth=1, label="equilibrium")
        ax.legend(loc="upper right", fontsize=8)
    ax.set_xlabel("phi (rad)")
    ax.set_ylabel("dphi/dt (rad/s)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    return ax


def plot_energy(
    history: SimulationHistory,
    ax: Optional[Any] = None,
    title: str = "Energy",
) -> Any:
    """Potential, kinetic and total energy against time."""
    plt = _pyplot()
    t = _series(history, "time", None)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 4))
    for key, label in (
        ("potential_energy", "Ep"),
        ("kinetic_energy", "Ek"),
        ("total_energy", "Et"),
    ):
        ax.plot(t, _series(history, key, None), label=label)
    ax.set_xlabel("time (s)")
    ax.set_ylabel("energy (J)")
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax


def plot_frequency_response(
    response: Dict[str, np.ndarray],
    title: str = "Frequency response",
) -> Any:
    """
    Current amplitude and phase against omega, from
    physlab.circuits.frequency_response().
    """
    plt = _pyplot()
    fig, (ax_i, ax_p) = plt.subplots(2, 1, sharex=True, figsize=(8, 6))
    w = response["omega"]
    ax_i.plot(w, response["current"])
    ax_i.set_ylabel("current (A)")
    ax_i.grid(True, alpha=0.3)
    ax_p.plot(w, np.degrees(response["phase"]))
    ax_p.set_ylabel("phase (deg)")
    ax_p.set_xlabel("omega (rad/s)")
    ax_p.grid(True, alpha=0.3)
    if title:
        fig.suptitle(title)
    return fig
