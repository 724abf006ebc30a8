"""Spectral analysis package.

Design principle:
  - Ingest produces validated :class:`~seismic_fourier.models.wave.Wave` objects.
  - Analysis consumes a Wave and produces a :class:`~seismic_fourier.models.spectrum.SpectrumBins`.

The core is a chain of free functions on 1D numpy arrays:

  make_data -> forward_fft -> discrete_fourier_coeff -> amplitude_and_phase
  frequencies (axis only depends on n and dt)

Frequency resolution is tied to the padded length ``n``, never to the sample count.
"""

from .padding import make_data, padded_length
from .fourier import amplitude_and_phase, discrete_fourier_coeff, forward_fft
from .frequencies import frequencies
from .pipeline import compute_spectrum, dominant_bin

__all__ = [
    "make_data",
    "padded_length",
    "forward_fft",
    "discrete_fourier_coeff",
    "amplitude_and_phase",
    "frequencies",
    "compute_spectrum",
    "dominant_bin",
]
