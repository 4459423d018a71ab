"""
Additive synthesis of modal waveforms.

Each mode contributes a sinusoid whose frequency is its eigenvalue and whose
gain is its spatial amplitude at the strike point. The sum is shaped by an
exponential envelope and normalised to unit peak:

    w[t] = e^(d·t) · Σ α_mn sin(2π λ_mn k t)

Bilbao, S. (2009) Numerical Sound Synthesis, pp.65-66.

Example:
    >>> from drumhead.modes import series, amplitudes
    >>> S = series("circular", 4, 4)
    >>> A = amplitudes("circular", (0.4, 0.3), 4, 4)
    >>> waveform = additive_synthesis(S * 100.0, A, -1e-4, 1 / 48000, 48000)
    >>> float(abs(waveform).max())
    1.0
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


def normalise(waveform: ArrayLike) -> NDArray[np.float64]:
    """Scale a waveform so that its peak magnitude is 1.

    An all-zero (or empty) waveform is returned unchanged.
    """
    waveform = np.array(waveform, dtype=np.float64)
    peak = np.max(np.abs(waveform)) if waveform.size else 0.0
    if peak == 0.0:
        return waveform
    return waveform / peak


def additive_synthesis(
    series: ArrayLike,
    amplitudes: ArrayLike,
    decay: float,
    sample_interval: float,
    sample_count: int,
) -> NDArray[np.float64]:
    """Sum damped sinusoids, one per mode, into a normalised waveform.

    Args:
        series: Mode frequencies (1D or 2D grid)
        amplitudes: Mode gains, same shape as series
        decay: Natural log of the per-sample envelope gain. Negative values
            decay, 0 holds the level constant.
        sample_interval: Sample length k (1 / sample rate) in seconds
        sample_count: Length of the waveform in samples

    Returns:
        Array of shape (sample_count,) with peak magnitude 1, or all zeros
        when every amplitude is zero

    Raises:
        ValueError: If series and amplitudes differ in shape, are not 1D or
            2D, or sample_count is negative
    """
    series = np.asarray(series, dtype=np.float64)
    amplitudes = np.asarray(amplitudes, dtype=np.float64)
    if series.shape != amplitudes.shape:
        raise ValueError(
            f"series and amplitudes differ in shape: {series.shape} != {amplitudes.shape}"
        )
    if series.ndim not in (1, 2):
        raise ValueError(f"mode grids must be 1D or 2D, got {series.ndim}D")
    if sample_count < 0:
        raise ValueError(f"sample_count must be non-negative, got {sample_count}")

    omega = series.ravel() * (2.0 * math.pi * sample_interval)
    alpha = amplitudes.ravel()
    waveform = np.zeros(sample_count, dtype=np.float64)

    # Envelope is advanced multiplicatively, one factor per sample
    step_gain = math.exp(decay)
    envelope = 1.0
    for t in range(sample_count):
        waveform[t] = envelope * np.dot(np.sin(omega * t), alpha)
        envelope *= step_gain

    return normalise(waveform)
