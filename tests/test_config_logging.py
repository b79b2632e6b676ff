"""Tests for settings files and logging setup."""

import logging

import pytest

from physlab import config
from physlab.circuits import CircuitCharacter, CircuitParameters, classify, solve
from physlab.config import Settings, apply_settings, load_settings, save_settings
from physlab.core import SimulationHistory
from physlab.io import save_config
from physlab.logging_config import setup_logging


def test_settings_defaults_from_environment() -> None:
    settings = load_settings()
    assert settings.resonance_rtol > 0.0
    assert isinstance(settings.log_level, str)


def test_settings_file_overrides(tmp_path) -> None:
    path = tmp_path / "settings.json"
    save_config({"resonance_rtol": 1e-3, "history_max_length": 500}, path)
    settings = load_settings(path)
    assert settings.resonance_rtol == 1e-3
    assert settings.history_max_length == 500


def test_settings_roundtrip(tmp_path) -> None:
    path = tmp_path / "s.json"
    original = Settings(log_level="DEBUG", resonance_rtol=1e-8, history_max_length=None)
    save_settings(original, path)
    assert load_settings(path) == original


def test_unknown_setting_rejected(tmp_path) -> None:
    path = tmp_path / "bad.json"
    save_config({"gravity": 1.6}, path)
    with pytest.raises(ValueError):
        load_settings(path)


def test_setup_logging_is_idempotent() -> None:
    name = "physlab.test_logging"
    logger = setup_logging(name, level="DEBUG")
    assert logger.level == logging.DEBUG
    n_handlers = len(logger.handlers)
    logger = setup_logging(name, level="ERROR")
    assert len(logger.handlers) == n_handlers == 1
    assert logger.level == logging.ERROR
    assert logger.handlers[0].level == logging.ERROR


@pytest.fixture
def restore_config(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "RESONANCE_RTOL", "HISTORY_MAX_LENGTH"):
        monkeypatch.setattr(config, name, getattr(config, name))


def test_applied_tolerance_changes_classification(tmp_path, restore_config) -> None:
    values = solve(CircuitParameters(voltage=5.0, omega=300.0, resistance=10.0, capacitance=1e-4, inductance=0.1))
    assert classify(values) is CircuitCharacter.CAPACITIVE
    path = tmp_path / "loose.json"
    save_config({"resonance_rtol": 0.5}, path)
    load_settings(path, apply=True)
    assert config.current_settings().resonance_rtol == 0.5
    assert classify(values) is CircuitCharacter.RESONANT


def test_applied_history_length_is_default(tmp_path, restore_config) -> None:
    path = tmp_path / "short.json"
    save_config({"history_max_length": 5}, path)
    load_settings(path, apply=True)
    h = SimulationHistory()
    for i in range(20):
        h.append(step=i)
    assert h.max_length == 5
    assert len(h) == 5
    assert SimulationHistory(max_length=0).max_length is None


def test_setup_logging_uses_settings(restore_config) -> None:
    logger = setup_logging("physlab.test_settings", settings=Settings(log_level="ERROR", log_format="%(message)s"))
    assert logger.level == logging.ERROR
    assert logger.handlers[0].formatter._fmt == "%(message)s"
    apply_settings(Settings(log_level="DEBUG"))
    assert setup_logging("physlab.test_settings").level == logging.DEBUG


def test_invalid_settings_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(resonance_rtol=-1.0)
    with pytest.raises(ValueError):
        Settings(history_max_length=-3)
