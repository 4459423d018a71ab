"""
Unit tests for circular membrane modes.

Tests verify:
- Eigenvalues are Bessel zeros (fixed edge) or Bessel derivative zeros (free edge)
- Series stay exact up to high orders
- Unit-area scaling by 1/√π
- Mode shapes at polar strike locations against scipy reference
- Cymatic fields are confined to the unit disc
"""

import math
import warnings

import numpy as np
import pytest
from scipy.special import jn_zeros, jnp_zeros, jv

from drumhead.core.bessel import NumericalApproximationWarning
from drumhead.modes import circular_amplitudes, circular_cymatics, circular_series
from drumhead.modes.circular import angular

# =============================================================================
# Series
# =============================================================================


class TestCircularSeries:
    def test_first_eigenvalue(self):
        """circular_series(1, 1) is the first zero of J_0."""
        S = circular_series(1, 1, "fixed-fixed")
        assert S.shape == (1, 1)
        assert S[0, 0] == pytest.approx(2.4048, abs=1e-3)

    def test_fixed_matches_scipy(self):
        S = circular_series(4, 5, "fixed-fixed")
        for m in range(4):
            np.testing.assert_allclose(S[m], jn_zeros(m, 5), rtol=1e-10)

    def test_free_matches_scipy(self):
        """Free edge uses J'_m zeros; the rigid-body mode is excluded."""
        S = circular_series(3, 4, "free-free")
        np.testing.assert_allclose(S[0], jn_zeros(1, 4), rtol=1e-10)
        for m in range(1, 3):
            np.testing.assert_allclose(S[m], jnp_zeros(m, 4), rtol=1e-10)
        assert np.all(S > 0)

    def test_unit_area_scaling(self):
        raw = circular_series(2, 3)
        scaled = circular_series(2, 3, unit_area=True)
        np.testing.assert_allclose(scaled, raw / math.sqrt(math.pi))

    def test_ascending_along_n(self):
        S = circular_series(5, 6)
        assert np.all(np.diff(S, axis=1) > 0)

    def test_mixed_rejected(self):
        with pytest.raises(ValueError, match="single edge"):
            circular_series(2, 2, "fixed-free")

    @pytest.mark.parametrize("bc", ["fixed-fixed", "free-free"])
    def test_high_orders_complete(self, bc):
        """Sixty orders resolve without approximation warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericalApproximationWarning)
            S = circular_series(60, 2, bc)
        assert np.all(np.diff(S[1:, 0]) > 0)
        assert np.all(np.diff(S, axis=1) > 0)
        expected = jn_zeros(59, 2) if bc == "fixed-fixed" else jnp_zeros(59, 2)
        np.testing.assert_allclose(S[59], expected, rtol=1e-10)


# =============================================================================
# Amplitudes
# =============================================================================


class TestCircularAmplitudes:
    def test_centre_strike_excites_only_order_zero(self):
        """J_m(0) = 0 for m > 0, J_0(0) = 1."""
        A = circular_amplitudes(0.0, 0.0, 3, 3)
        np.testing.assert_allclose(A[0], 1.0)
        np.testing.assert_allclose(A[1:], 0.0, atol=1e-12)

    def test_edge_strike_is_silent_when_fixed(self):
        A = circular_amplitudes(1.0, 0.7, 3, 4)
        np.testing.assert_allclose(A, 0.0, atol=1e-10)

    def test_matches_scipy(self):
        r, theta = 0.4, 1.1
        A = circular_amplitudes(r, theta, 3, 3)
        for m in range(3):
            expected = jv(m, jn_zeros(m, 3) * r) * angular(m, theta)
            np.testing.assert_allclose(A[m], expected, atol=1e-10)

    def test_angular_factor(self):
        assert angular(0, 2.0) == 1.0
        assert angular(2, 0.0) == pytest.approx(1.0)

    def test_precomputed_series_reused(self):
        S = circular_series(2, 3)
        np.testing.assert_allclose(
            circular_amplitudes(0.3, 0.2, 2, 3, series=S),
            circular_amplitudes(0.3, 0.2, 2, 3),
        )


# =============================================================================
# Cymatics
# =============================================================================


class TestCircularCymatics:
    def test_outside_disc_is_zero(self):
        U = circular_cymatics(1, 1, 41)
        assert U.shape == (41, 41)
        assert U[0, 0] == 0.0
        assert U[-1, -1] == 0.0

    def test_fundamental_peaks_at_centre(self):
        U = circular_cymatics(0, 0, 41)
        assert U[20, 20] == pytest.approx(1.0)

    def test_fixed_rim_is_near_zero(self):
        U = circular_cymatics(0, 0, 41)
        assert abs(U[20, 40]) < 1e-10

    def test_fractional_order_blends_neighbours(self):
        half = circular_cymatics(0.5, 0, 21)
        blend = 0.5 * circular_cymatics(0, 0, 21) + 0.5 * circular_cymatics(1, 0, 21)
        np.testing.assert_allclose(half, blend, atol=1e-12)

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            circular_cymatics(0, -1, 11)
