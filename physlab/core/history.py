"""In-memory record of simulation quantities with CSV and numpy export."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from physlab import config


class SimulationHistory:
    """
    Buffer of per-step quantities (time, phi, energies, ...).
    Missing values (e.g. an undefined period) are stored as NaN in numeric
    arrays. Text columns (the circuit character) come back as object arrays.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Args:
            max_length: maximum number of steps to keep. None takes
                config.HISTORY_MAX_LENGTH; 0 means unlimited.
        """
        if max_length is None:
            max_length = config.HISTORY_MAX_LENGTH
        if max_length < 0:
            raise ValueError("max_length must be non-negative (0 = unlimited)")
        self._max_length = max_length or None
        self._data: Dict[str, List[Any]] = {}
        self._step_count = 0

    @property
    def max_length(self) -> Optional[int]:
        return self._max_length

    def append(self, **kwargs: Any) -> None:
        """Add one record (key -> value). Keys absent from a record get None."""
        for key in kwargs:
            if key not in self._data:
                self._data[key] = [None] * self._step_count
        for key, column in self._data.items():
            column.append(kwargs.get(key))
        self._step_count += 1
        if self._max_length is not None and self._step_count > self._max_length:
            for key in self._data:
                self._data[key] = self._data[key][-self._max_length:]
            self._step_count = self._max_length

    def clear(self) -> None:
        self._data.clear()
        self._step_count = 0

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def get(self, key: str) -> np.ndarray:
        """Series for a key: float array (None -> NaN), or object array for text."""
        if key not in self._data:
            return np.array([])
        column = self._data[key]
        if any(isinstance(v, str) for v in column):
            return np.array(column, dtype=object)
        return np.array([np.nan if v is None else v for v in column], dtype=float)

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {k: self.get(k) for k in self._data}

    def to_csv(
        self,
        path: Union[str, Path],
        keys: Optional[List[str]] = None,
        delimiter: str = ",",
    ) -> None:
        """
        Export to CSV. Keys become columns; one row per step; None is an empty cell.
        """
        path = Path(path)
        keys = keys or self.keys()
        if not keys:
            path.write_text("")
            return
        rows = []
        for i in range(self._step_count):
            row = []
            for k in keys:
                v = self._data.get(k, [None] * self._step_count)[i]
                row.append("" if v is None else repr(float(v)) if isinstance(v, (float, np.floating)) else str(v))
            rows.append(delimiter.join(row))
        header = delimiter.join(keys)
        path.write_text(header + "\n" + "\n".join(rows) + "\n", encoding="utf-8")

    def __len__(self) -> int:
        return self._step_count
