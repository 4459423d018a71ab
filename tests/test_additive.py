"""
Unit tests for additive synthesis.

Tests verify:
- Output is peak normalised, or all zero for silent amplitude grids
- 1D and 2D mode grids are both accepted
- Exponential envelope decays monotonically
- Single-mode output matches a closed-form damped sinusoid
- Shape and argument validation
"""

import math

import numpy as np
import pytest

from drumhead import additive_synthesis, amplitudes, normalise, series, series_to_frequencies

SAMPLE_RATE = 48000
K = 1.0 / SAMPLE_RATE


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def circular_modes():
    """Frequencies and strike gains of a small circular drum."""
    S = series_to_frequencies(series("circular", 4, 4), 120.0)
    A = amplitudes("circular", (0.35, 0.4), 4, 4)
    return S, A


# =============================================================================
# Normalisation
# =============================================================================


class TestNormalise:
    def test_peak_is_one(self):
        w = normalise([0.5, -2.0, 1.0])
        np.testing.assert_allclose(w, [0.25, -1.0, 0.5])

    def test_silence_unchanged(self):
        np.testing.assert_array_equal(normalise(np.zeros(8)), np.zeros(8))

    def test_empty(self):
        assert normalise([]).shape == (0,)


# =============================================================================
# Synthesis
# =============================================================================


class TestAdditiveSynthesis:
    def test_peak_is_one(self, circular_modes):
        S, A = circular_modes
        w = additive_synthesis(S, A, -1e-4, K, 4800)
        assert w.shape == (4800,)
        assert np.max(np.abs(w)) == pytest.approx(1.0)

    def test_silent_amplitudes_give_zeros(self, circular_modes):
        S, _ = circular_modes
        w = additive_synthesis(S, np.zeros_like(S), -1e-4, K, 1000)
        assert np.max(np.abs(w)) == 0.0

    def test_one_dimensional_grid(self):
        S = series_to_frequencies(series("linear", 0, 8), 220.0)
        A = amplitudes("linear", 0.2, 0, 8)
        w = additive_synthesis(S, A, 0.0, K, 2000)
        assert np.max(np.abs(w)) == pytest.approx(1.0)

    def test_single_mode_closed_form(self):
        f, d, T = 440.0, -1e-3, 500
        w = additive_synthesis([f], [1.0], d, K, T)
        t = np.arange(T)
        expected = np.exp(d * t) * np.sin(2 * math.pi * f * K * t)
        expected /= np.max(np.abs(expected))
        np.testing.assert_allclose(w, expected, atol=1e-9)

    def test_envelope_decays(self):
        w = additive_synthesis([1000.0], [1.0], -5e-4, K, 24000)
        first = np.max(np.abs(w[:2400]))
        last = np.max(np.abs(w[-2400:]))
        assert last < first

    def test_rigid_body_mode_is_silent(self):
        """A zero-frequency mode contributes sin(0) = 0."""
        w = additive_synthesis([0.0], [1.0], 0.0, K, 100)
        np.testing.assert_array_equal(w, 0.0)

    def test_zero_samples(self):
        assert additive_synthesis([100.0], [1.0], 0.0, K, 0).shape == (0,)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="differ in shape"):
            additive_synthesis(np.ones((2, 3)), np.ones((3, 2)), 0.0, K, 10)

    def test_three_dimensional_grid_rejected(self):
        with pytest.raises(ValueError, match="1D or 2D"):
            additive_synthesis(np.ones((2, 2, 2)), np.ones((2, 2, 2)), 0.0, K, 10)

    def test_negative_sample_count(self):
        with pytest.raises(ValueError, match="non-negative"):
            additive_synthesis([1.0], [1.0], 0.0, K, -1)
