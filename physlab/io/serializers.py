"""
Persistence of experiment setups and session snapshots.

Setups (parameters, settings, run summaries) are JSON. A snapshot keeps the
recorded series of a run (SimulationHistory.to_dict()) in a .npz archive and
the rest of SimulationSession.state_dict() in a sibling .meta.json file.
"""

import dataclasses
import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import numpy as np

PathLike = Union[str, Path]


def _to_builtin(obj: Any) -> Any:
    """Convert numpy values, dataclasses and enums to JSON-friendly builtins."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _to_builtin(dataclasses.asdict(obj))
    if isinstance(obj, dict):
        return {k: _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(x) for x in obj]
    return obj


def _snapshot_paths(path: PathLike) -> Tuple[Path, Path]:
    """run/pulley -> (run/pulley.npz, run/pulley.meta.json)."""
    path = Path(path)
    return path.with_suffix(".npz"), path.with_suffix(path.suffix + ".meta.json")


def save_config(config: Dict[str, Any], path: PathLike) -> None:
    """
    Write an experiment setup to JSON, creating parent directories.
    PulleyParameters / CircuitParameters become dicts, CircuitCharacter its
    value, numpy scalars and arrays plain numbers and lists.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(_to_builtin(config), indent=2, ensure_ascii=False), encoding="utf-8")


def load_config(path: PathLike) -> Dict[str, Any]:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def save_snapshot(state_dict: Dict[str, Any], path: PathLike) -> None:
    """
    Save a run: array entries go to <path>.npz, everything else (model name,
    dt, parameters, final state) to <path>.meta.json.

    Example:
        snapshot = {**session.state_dict(), **history.to_dict()}
        save_snapshot(snapshot, "runs/pulley")
    """
    npz_path, meta_path = _snapshot_paths(path)
    npz_path.parent.mkdir(parents=True, exist_ok=True)
    arrays = {k: v for k, v in state_dict.items() if isinstance(v, np.ndarray)}
    # text columns are stored as unicode so loading needs no pickle
    arrays = {k: v.astype(str) if v.dtype == object else v for k, v in arrays.items()}
    meta = {k: v for k, v in state_dict.items() if k not in arrays}
    np.savez(npz_path, **arrays)
    save_config(meta, meta_path)


def load_snapshot(path: PathLike) -> Dict[str, Any]:
    """Inverse of save_snapshot; the metadata file is optional."""
    npz_path, meta_path = _snapshot_paths(path)
    with np.load(npz_path) as npz:
        data: Dict[str, Any] = {k: npz[k] for k in npz.files}
    if meta_path.exists():
        data.update(load_config(meta_path))
    return data
