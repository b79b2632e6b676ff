"""Description of a user-facing control: name, range, step, unit and SI scale."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from physlab.errors import InvalidParameterError


@dataclass(frozen=True)
class ParameterSpec:
    """
    A slider or option menu of the UI.

    Values are given in the UI unit; to_si() multiplies by `scale`. When
    `options` is set the control is a discrete menu and min/max/step are
    ignored.
    """

    name: str
    minimum: float = -math.inf
    maximum: float = math.inf
    step: Optional[float] = None
    unit: str = ""
    si_unit: str = ""
    scale: float = 1.0
    options: Tuple[float, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.options, list):
            object.__setattr__(self, "options", tuple(self.options))
        if self.minimum > self.maximum:
            raise ValueError(f"{self.name}: minimum > maximum")

    def validate(self, value: float) -> float:
        """Return value as float if the control can produce it, else raise InvalidParameterError."""
        v = float(value)
        if not math.isfinite(v):
            raise InvalidParameterError(self.name, value, "must be finite")
        if self.options:
            if not any(math.isclose(v, o, rel_tol=1e-9, abs_tol=1e-12) for o in self.options):
                raise InvalidParameterError(self.name, value, f"must be one of {self.options}")
            return v
        if v < self.minimum or v > self.maximum:
            raise InvalidParameterError(
                self.name, value, f"outside [{self.minimum}, {self.maximum}] {self.unit}".rstrip()
            )
        return v

    def to_si(self, value: float) -> float:
        """Validate and convert from the UI unit to SI."""
        return self.validate(value) * self.scale

    def from_si(self, value: float) -> float:
        return float(value) / self.scale
