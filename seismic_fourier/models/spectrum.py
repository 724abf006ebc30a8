from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PaddedSignal:
    """Zero-padded complex copy of a wave, ready for the FFT.

    Attributes
    ----------
    x:
        Complex array of length ``n``. ``x[:ndata]`` holds the samples (imaginary part zero),
        ``x[ndata:]`` holds exact zeros.
    ndata:
        Number of original samples.
    """

    x: np.ndarray
    ndata: int

    @property
    def n(self) -> int:
        return int(len(self.x))


@dataclass(frozen=True)
class SpectrumBins:
    """One-sided Fourier spectrum, bins ``k = 0..nfold`` with ``nfold = n/2``.

    All arrays have shape ``(nfold + 1,)``.

    Attributes
    ----------
    n:
        Padded length used for the FFT (power of two).
    ndata:
        Number of samples in the source wave.
    dt:
        Sample interval [s].
    a, b:
        Fourier cosine / sine coefficients. ``b[0] == b[nfold] == 0``.
    amplitude:
        ``sqrt(a**2 + b**2) * length / 2``.
    phase:
        ``atan2(-b, a)`` in radians, within ``(-pi, pi]``.
    freq, period:
        Frequency [Hz] and period [s]. ``freq[0] == period[0] == 0`` for the DC bin.
    """

    n: int
    ndata: int
    dt: float

    a: np.ndarray
    b: np.ndarray
    amplitude: np.ndarray
    phase: np.ndarray
    freq: np.ndarray
    period: np.ndarray

    @property
    def nfold(self) -> int:
        return self.n // 2

    @property
    def k(self) -> np.ndarray:
        return np.arange(self.nfold + 1, dtype=int)

    @property
    def df(self) -> float:
        """Frequency resolution [Hz]."""
        return 1.0 / (self.n * self.dt)

    @property
    def omega(self) -> np.ndarray:
        """Angular frequency [rad/s] per bin."""
        return 2.0 * np.pi * self.freq
