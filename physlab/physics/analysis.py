"""Post-processing of recorded trajectories: measured period, energy drift."""

from typing import Optional

import numpy as np


def measure_period(
    times: np.ndarray,
    angles: np.ndarray,
    center: float = 0.0,
) -> Optional[float]:
    """
    Mean spacing between upward crossings of `center` (e.g. the equilibrium angle).

    Crossing times are located by linear interpolation between samples.
    Returns None with fewer than two crossings.
    """
    t = np.asarray(times, dtype=float).ravel()
    y = np.asarray(angles, dtype=float).ravel() - center
    if t.shape != y.shape:
        raise ValueError(f"times and angles differ in shape: {t.shape} vs {y.shape}")
    idx = np.nonzero((y[:-1] < 0.0) & (y[1:] >= 0.0))[0]
    if idx.size < 2:
        return None
    frac = -y[idx] / (y[idx + 1] - y[idx])
    crossings = t[idx] + frac * (t[idx + 1] - t[idx])
    return float(np.mean(np.diff(crossings)))


def energy_drift(total_energies: np.ndarray) -> float:
    """Largest deviation of the total energy from its initial value, max |E_k - E_0|."""
    e = np.asarray(total_energies, dtype=float).ravel()
    if e.size == 0:
        return 0.0
    return float(np.max(np.abs(e - e[0])))
