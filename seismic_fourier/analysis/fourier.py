"""FFT-based one-sided Fourier coefficients, amplitude and phase.

Conventions
-----------
forward_fft
    ``c = FFT(x)/n`` (numpy sign convention, ``exp(-2j*pi*k*m/n)``).
discrete_fourier_coeff
    ``A[k] = 2*Re(c[k])``, ``B[k] = -2*Im(c[k])`` for ``k = 0..n/2``, so that
    ``x[m] ~ sum_k A[k] cos(2 pi k m/n) + B[k] sin(2 pi k m/n)`` on the one-sided grid.
    ``B[0]`` and ``B[n/2]`` are forced to zero.
amplitude_and_phase
    ``AMP = sqrt(A**2 + B**2) * length/2`` and ``PHASE = atan2(-B, A)``.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from seismic_fourier.errors import DegenerateInputError


def forward_fft(x: np.ndarray) -> np.ndarray:
    """Forward DFT of a power-of-two length sequence, normalised by ``1/n``."""
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"x must be 1D, got shape {x.shape}")
    n = int(x.size)
    if n < 2 or (n & (n - 1)) != 0:
        raise ValueError(f"FFT length must be a power of two >= 2, got {n}")
    return np.fft.fft(x) / float(n)


def discrete_fourier_coeff(c: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Fourier cosine/sine coefficients ``(A, B)`` for bins ``0..n/2``.

    Parameters
    ----------
    c:
        Output of :func:`forward_fft`, length ``n``.

    Returns
    -------
    (a, b)
        Two float arrays of shape ``(n/2 + 1,)``.
    """
    c = np.asarray(c)
    if c.ndim != 1:
        raise ValueError(f"c must be 1D, got shape {c.shape}")
    n = int(c.size)
    if n < 2 or n % 2 != 0:
        raise ValueError(f"transform length must be even and >= 2, got {n}")

    nfold = n // 2
    a = 2.0 * c[: nfold + 1].real
    b = -2.0 * c[: nfold + 1].imag

    # real input: no sine term at DC or Nyquist, the raw values are rounding noise
    b[0] = 0.0
    b[nfold] = 0.0
    return a, b


def amplitude_and_phase(a: np.ndarray, b: np.ndarray, length: float) -> Tuple[np.ndarray, np.ndarray]:
    """Spectral amplitude and phase angle per bin.

    Parameters
    ----------
    a, b:
        Cosine / sine coefficients from :func:`discrete_fourier_coeff`.
    length:
        Record duration [s]. The raw magnitude is scaled by ``length/2``.

    Returns
    -------
    (amplitude, phase)
        ``amplitude >= 0``; ``phase`` in radians within ``(-pi, pi]``.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape or a.ndim != 1:
        raise ValueError(f"a and b must be 1D with equal shape, got {a.shape} and {b.shape}")

    length = float(length)
    if not np.isfinite(length) or length <= 0:
        raise DegenerateInputError(f"record length must be > 0, got {length}")

    x = np.hypot(a, b)
    amplitude = x * (length / 2.0)

    # "+ 0.0" turns -0.0 into +0.0 so atan2 never returns -pi
    phase = np.arctan2(-b + 0.0, a)
    return amplitude, phase
