"""Persistence of experiment parameters and session snapshots."""

from physlab.io.serializers import load_config, load_snapshot, save_config, save_snapshot

__all__ = ["save_config", "load_config", "save_snapshot", "load_snapshot"]
