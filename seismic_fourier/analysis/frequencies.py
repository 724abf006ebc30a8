from __future__ import annotations

from typing import Tuple

import numpy as np

from seismic_fourier.errors import DegenerateInputError


def frequencies(n: int, dt: float) -> Tuple[np.ndarray, np.ndarray]:
    """Frequency [Hz] and period [s] for bins ``k = 0..n/2``.

    ``f[k] = k/(n*dt)`` uses the padded length ``n``. The DC bin has no finite
    period and is reported as ``f[0] = T[0] = 0``.
    """
    n = int(n)
    if n < 2 or n % 2 != 0:
        raise ValueError(f"n must be even and >= 2, got {n}")
    dt = float(dt)
    if not np.isfinite(dt) or dt <= 0:
        raise DegenerateInputError(f"sample interval must be > 0, got {dt}")

    nfold = n // 2
    k = np.arange(nfold + 1, dtype=np.float64)
    f = k / (n * dt)

    t = np.zeros_like(f)
    t[1:] = 1.0 / f[1:]
    return f, t
