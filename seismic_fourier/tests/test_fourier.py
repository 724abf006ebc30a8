"""Tests for coefficient extraction, amplitude and phase.

Covers:
- 1/n FFT normalisation and power-of-two guard
- B forced to zero at DC and Nyquist
- Cosine / sine inputs recover A / B
- length/2 amplitude scaling
- atan2 phase: A == 0, negative A, range (-pi, pi]
"""

from __future__ import annotations

import numpy as np
import pytest

from seismic_fourier.analysis.fourier import (
    amplitude_and_phase,
    discrete_fourier_coeff,
    forward_fft,
)
from seismic_fourier.errors import DegenerateInputError


def _grid(n: int) -> np.ndarray:
    return 2.0 * np.pi * np.arange(n) / float(n)


# -----------------------------------------------------------------------
# forward_fft
# -----------------------------------------------------------------------


def test_forward_fft_normalisation() -> None:
    n = 16
    x = np.ones(n, dtype=complex)
    c = forward_fft(x)
    assert c[0] == pytest.approx(1.0 + 0j)
    assert np.allclose(c[1:], 0.0, atol=1e-15)


@pytest.mark.parametrize("n", [0, 1, 3, 6, 12])
def test_forward_fft_rejects_non_power_of_two(n: int) -> None:
    with pytest.raises(ValueError):
        forward_fft(np.zeros(n, dtype=complex))


# -----------------------------------------------------------------------
# discrete_fourier_coeff
# -----------------------------------------------------------------------


def test_coeff_cosine_and_sine() -> None:
    n = 32
    th = _grid(n)
    x = 1.5 * np.cos(3 * th) - 0.75 * np.sin(5 * th) + 0.25
    a, b = discrete_fourier_coeff(forward_fft(x.astype(complex)))

    assert a.shape == (n // 2 + 1,)
    assert b.shape == (n // 2 + 1,)
    assert a[3] == pytest.approx(1.5, abs=1e-12)
    assert b[5] == pytest.approx(-0.75, abs=1e-12)
    # DC is doubled like every other bin
    assert a[0] == pytest.approx(0.5, abs=1e-12)
    others = [k for k in range(n // 2 + 1) if k not in (0, 3, 5)]
    assert np.allclose(a[others], 0.0, atol=1e-12)
    assert np.allclose(b[others], 0.0, atol=1e-12)


def test_coeff_edge_sine_terms_are_zero() -> None:
    # Complex input with imaginary parts at DC and Nyquist: raw B would be non-zero.
    n = 8
    c = np.full(n, 0.3 + 0.7j)
    a, b = discrete_fourier_coeff(c)
    assert b[0] == 0.0
    assert b[n // 2] == 0.0
    assert np.allclose(b[1:-1], -1.4)
    assert np.allclose(a, 0.6)


def test_coeff_rejects_odd_length() -> None:
    with pytest.raises(ValueError):
        discrete_fourier_coeff(np.zeros(5, dtype=complex))


# -----------------------------------------------------------------------
# amplitude_and_phase
# -----------------------------------------------------------------------


def test_amplitude_scaled_by_half_length() -> None:
    a = np.array([3.0, 0.0, -1.0])
    b = np.array([0.0, 2.0, 0.0])
    amp, _ = amplitude_and_phase(a, b, length=10.0)
    assert np.allclose(amp, np.array([3.0, 2.0, 1.0]) * 5.0)


def test_phase_with_zero_cosine_term() -> None:
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([0.0, 1.0, -1.0])
    _, phase = amplitude_and_phase(a, b, length=2.0)
    assert np.all(np.isfinite(phase))
    assert phase[0] == 0.0
    assert phase[1] == pytest.approx(-np.pi / 2)
    assert phase[2] == pytest.approx(np.pi / 2)


def test_phase_quadrants() -> None:
    a = np.array([1.0, -1.0, -1.0, 1.0])
    b = np.array([-1.0, -1.0, 1.0, 1.0])
    _, phase = amplitude_and_phase(a, b, length=1.0)
    expected = np.array([np.pi / 4, 3 * np.pi / 4, -3 * np.pi / 4, -np.pi / 4])
    assert np.allclose(phase, expected)


@pytest.mark.parametrize("bval", [0.0, -0.0])
def test_phase_negative_cosine_is_plus_pi(bval: float) -> None:
    _, phase = amplitude_and_phase(np.array([-2.0]), np.array([bval]), length=1.0)
    assert phase[0] == np.pi


def test_amplitude_and_phase_ranges_random() -> None:
    rng = np.random.default_rng(1234)
    a = rng.normal(size=500)
    b = rng.normal(size=500)
    b[::7] = 0.0
    a[::11] = 0.0
    amp, phase = amplitude_and_phase(a, b, length=3.0)
    assert np.all(amp >= 0.0)
    assert np.all(phase > -np.pi)
    assert np.all(phase <= np.pi)


def test_amplitude_and_phase_guards() -> None:
    with pytest.raises(ValueError):
        amplitude_and_phase(np.zeros(3), np.zeros(4), length=1.0)
    with pytest.raises(DegenerateInputError):
        amplitude_and_phase(np.zeros(3), np.zeros(3), length=0.0)
