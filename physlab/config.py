"""
Runtime settings for physlab.

Values come from environment variables (PHYSLAB_*) and can be overridden by a
JSON file through load_settings(). apply_settings() makes a Settings bundle
the active configuration: classify() reads RESONANCE_RTOL, SimulationHistory()
reads HISTORY_MAX_LENGTH and setup_logging() reads LOG_LEVEL / LOG_FORMAT at
call time. Physical constants live in the model modules, not here.
"""

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from physlab.io.serializers import load_config, save_config

# Logging settings
LOG_LEVEL = os.getenv("PHYSLAB_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("PHYSLAB_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Relative tolerance used to call XL == XC a resonance
RESONANCE_RTOL = float(os.getenv("PHYSLAB_RESONANCE_RTOL", "1e-6"))

# 0 = unlimited
HISTORY_MAX_LENGTH = int(os.getenv("PHYSLAB_HISTORY_MAX_LENGTH", "0"))


@dataclass
class Settings:
    """Settings bundle, serializable to JSON."""

    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    resonance_rtol: float = RESONANCE_RTOL
    history_max_length: Optional[int] = HISTORY_MAX_LENGTH or None

    def __post_init__(self) -> None:
        if not self.resonance_rtol >= 0.0:
            raise ValueError(f"resonance_rtol must be non-negative, got {self.resonance_rtol!r}")
        if self.history_max_length is not None and self.history_max_length < 0:
            raise ValueError(f"history_max_length must be non-negative, got {self.history_max_length!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build from a dict; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown settings: {sorted(unknown)}")
        return cls(**data)


def current_settings() -> Settings:
    """The active configuration as a Settings bundle."""
    return Settings(
        log_level=LOG_LEVEL,
        log_format=LOG_FORMAT,
        resonance_rtol=RESONANCE_RTOL,
        history_max_length=HISTORY_MAX_LENGTH or None,
    )


def apply_settings(settings: Settings) -> None:
    """Make settings the active configuration for the whole package."""
    global LOG_LEVEL, LOG_FORMAT, RESONANCE_RTOL, HISTORY_MAX_LENGTH
    LOG_LEVEL = settings.log_level
    LOG_FORMAT = settings.log_format
    RESONANCE_RTOL = float(settings.resonance_rtol)
    HISTORY_MAX_LENGTH = int(settings.history_max_length or 0)


def load_settings(path: Optional[Union[str, Path]] = None, apply: bool = False) -> Settings:
    """
    Settings from the environment, updated with the JSON file at path if given.

    Args:
        path: JSON file with a subset of the Settings fields
        apply: also make the result the active configuration
    """
    settings = Settings()
    if path is not None:
        data = settings.to_dict()
        data.update(load_config(path))
        settings = Settings.from_dict(data)
    if apply:
        apply_settings(settings)
    return settings


def save_settings(settings: Settings, path: Union[str, Path]) -> None:
    save_config(settings.to_dict(), path)
