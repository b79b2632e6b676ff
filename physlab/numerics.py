"""
Shared numeric helpers: angle normalization, angular overflow policies and
tolerant float comparison.

An overflow policy has the signature policy(phi, dphi, lower, upper) and
returns the replacement (phi, dphi) when the state is out of range, or None to
let the integrator step normally.
"""

import math
from typing import Callable, Optional, Tuple

import numpy as np

from physlab.errors import InvalidParameterError

AngularState = Tuple[float, float]
OverflowPolicy = Callable[[float, float, float, float], Optional[AngularState]]


def normalize_angle(phi: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return float((phi + math.pi) % (2.0 * math.pi) - math.pi)


def clamp_angular_overflow(
    phi: float,
    dphi: float,
    lower: float = -math.pi,
    upper: float = math.pi,
) -> Optional[AngularState]:
    """
    Hard clamp: at or past a bound the state sticks to that bound with zero
    angular velocity. Inside the range returns None.
    """
    if phi >= upper:
        return float(upper), 0.0
    if phi <= lower:
        return float(lower), 0.0
    return None


def wrap_angular_overflow(
    phi: float,
    dphi: float,
    lower: float = -math.pi,
    upper: float = math.pi,
) -> Optional[AngularState]:
    """Periodic boundary: the angle re-enters from the opposite bound, velocity kept."""
    if lower < phi < upper:
        return None
    span = upper - lower
    return float(lower + (phi - lower) % span), float(dphi)


def reflect_angular_overflow(
    phi: float,
    dphi: float,
    lower: float = -math.pi,
    upper: float = math.pi,
) -> Optional[AngularState]:
    """Elastic bounce: the overshoot is mirrored and the velocity reversed."""
    if phi > upper:
        return float(2.0 * upper - phi), -abs(float(dphi))
    if phi < lower:
        return float(2.0 * lower - phi), abs(float(dphi))
    return None


def approx_equal(a: float, b: float, rtol: float = 1e-6, atol: float = 1e-12) -> bool:
    """Symmetric tolerant comparison used for classification decisions."""
    return bool(np.isclose(a, b, rtol=rtol, atol=atol) and np.isclose(b, a, rtol=rtol, atol=atol))


def require_finite(name: str, value: float) -> float:
    """Return value as float; raise InvalidParameterError if NaN or infinite."""
    v = float(value)
    if not math.isfinite(v):
        raise InvalidParameterError(name, value, "must be finite")
    return v
