from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Wave:
    """
    In-memory representation of one recorded wave (one column of a wave file).

    Notes
    - 'data' is always a 1D float64 array, exactly as read (no detrending, no filtering).
    - 'dt' is the sample interval in seconds, taken from the time column of the file.
    - The record length is ndata * dt.
    """
    name: str
    dt: float
    data: np.ndarray
    source_path: Optional[Path] = None
    warnings: Tuple[str, ...] = ()

    @property
    def ndata(self) -> int:
        return int(len(self.data))

    @property
    def length(self) -> float:
        return float(self.ndata * self.dt)
