"""Zero-padding of a wave to a power-of-two length."""

from __future__ import annotations

import numpy as np

from seismic_fourier.errors import DegenerateInputError
from seismic_fourier.models.spectrum import PaddedSignal


def padded_length(ndata: int) -> int:
    """Smallest power of two ``n >= ndata``, with ``n >= 2``.

    A power-of-two ``ndata >= 2`` is returned unchanged.
    """
    ndata = int(ndata)
    if ndata <= 2:
        return 2
    return 1 << (ndata - 1).bit_length()


def make_data(data: np.ndarray) -> PaddedSignal:
    """Copy ``data`` into a complex buffer of length :func:`padded_length`, zeros after the samples."""
    x = np.asarray(data, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"data must be 1D, got shape {x.shape}")
    ndata = int(x.size)
    if ndata < 1:
        raise DegenerateInputError("wave has no samples")

    n = padded_length(ndata)
    buf = np.zeros(n, dtype=np.complex128)
    buf[:ndata] = x
    return PaddedSignal(x=buf, ndata=ndata)
