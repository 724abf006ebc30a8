"""Seismic Fourier -- Fourier amplitude and phase spectra of recorded ground motion.

This package provides tools for:
- Loading digitized acceleration/velocity waves from CSV files
- Zero-padding a wave to a power-of-two length
- Recovering one-sided Fourier cosine/sine coefficients from the FFT
- Deriving amplitude and phase per frequency bin
- Building the companion frequency and period axes
- Rendering the spectrum as a fixed-width table or CSV

Key principles:
- No windowing, filtering or detrending: the recorded samples are used as-is
- Frequency resolution follows the padded length, not the sample count
- DC and Nyquist bins carry no sine component

Main subpackages:
- analysis: Padding, coefficient extraction, amplitude/phase, frequency axis
- ingest: Wave file readers
- models: Data models (Wave, PaddedSignal, SpectrumBins)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
