"""End-to-end spectrum of one wave.

``Wave -> PaddedSignal -> FFT -> SpectrumBins``, single pass, nothing retained
between calls.
"""

from __future__ import annotations

import logging

import numpy as np

from seismic_fourier.errors import DegenerateInputError
from seismic_fourier.models.spectrum import SpectrumBins
from seismic_fourier.models.wave import Wave

from .fourier import amplitude_and_phase, discrete_fourier_coeff, forward_fft
from .frequencies import frequencies
from .padding import make_data

logger = logging.getLogger(__name__)


def _check_wave(wave: Wave) -> None:
    if wave.ndata < 1:
        raise DegenerateInputError(f"wave {wave.name!r} has no samples")
    dt = float(wave.dt)
    if not np.isfinite(dt) or dt <= 0:
        raise DegenerateInputError(f"wave {wave.name!r}: sample interval must be > 0, got {dt}")
    if not np.all(np.isfinite(wave.data)):
        bad = int(np.argmax(~np.isfinite(wave.data)))
        raise DegenerateInputError(f"wave {wave.name!r}: non-finite sample at index {bad}")


def compute_spectrum(wave: Wave) -> SpectrumBins:
    """Compute the one-sided Fourier spectrum of ``wave``.

    Raises
    ------
    DegenerateInputError
        Empty wave, non-positive or non-finite ``dt``, or non-finite samples.
    """
    _check_wave(wave)

    padded = make_data(wave.data)
    n = padded.n
    c = forward_fft(padded.x)
    a, b = discrete_fourier_coeff(c)
    amplitude, phase = amplitude_and_phase(a, b, wave.length)
    f, t = frequencies(n, wave.dt)

    logger.debug(
        "wave %r: ndata=%d padded to n=%d, nfold=%d, df=%.6g Hz",
        wave.name, padded.ndata, n, n // 2, 1.0 / (n * wave.dt),
    )
    for arr in (a, b, amplitude, phase, f, t):
        arr.flags.writeable = False

    return SpectrumBins(
        n=n,
        ndata=padded.ndata,
        dt=float(wave.dt),
        a=a,
        b=b,
        amplitude=amplitude,
        phase=phase,
        freq=f,
        period=t,
    )


def dominant_bin(spectrum: SpectrumBins, *, skip_dc: bool = True) -> int:
    """Index ``k`` of the largest amplitude (first one on ties)."""
    amp = np.asarray(spectrum.amplitude)
    start = 1 if skip_dc else 0
    if amp.size <= start:
        return 0
    return start + int(np.argmax(amp[start:]))
