"""
Unit tests for Bessel functions and their zeros.

Tests verify:
- J_n(x) accuracy against scipy reference and published values
- Negative arguments and orders via parity relations
- Dirichlet zeros (J_n) against scipy.special.jn_zeros
- Neumann zeros (J'_n) against scipy.special.jnp_zeros, rigid-body root excluded
- Configurable refinement budget and approximation warning
- High orders stay total: correct roots, no exceptions
- Recurrence memory scales with the requested orders only
"""

import tracemalloc
import warnings

import numpy as np
import pytest
from scipy.special import jn_zeros, jnp_zeros, jv, jvp

from drumhead.core.bessel import (
    NumericalApproximationWarning,
    bessel_j,
    bessel_j_prime,
    bessel_j_prime_zero,
    bessel_j_prime_zeros,
    bessel_j_zero,
    bessel_table,
)
from drumhead.core.bessel import _bisect_prime, _miller, _starting_order

# =============================================================================
# Bessel Function Values
# =============================================================================


class TestBesselJ:
    """Test J_n(x) evaluation by downward recurrence."""

    def test_published_values(self):
        """Reference values of J_0 and J_1."""
        assert bessel_j(0, 4.2) == pytest.approx(-0.37655, abs=0.01)
        assert bessel_j(1, 1.2) == pytest.approx(0.498289, abs=0.01)

    @pytest.mark.parametrize("order", [0, 1, 2, 5, 10, 20])
    def test_matches_scipy(self, order):
        """Values agree with scipy.special.jv over a wide argument range."""
        x = np.linspace(0.0, 40.0, 401)
        np.testing.assert_allclose(bessel_j(order, x), jv(order, x), atol=1e-10)

    def test_scalar_returns_float(self):
        """Scalar input gives a Python float."""
        assert isinstance(bessel_j(0, 1.0), float)

    def test_array_shape_preserved(self):
        """Array input keeps its shape."""
        x = np.linspace(0.1, 5.0, 12).reshape(3, 4)
        assert bessel_j(2, x).shape == (3, 4)

    def test_value_at_origin(self):
        """J_0(0) = 1 and J_n(0) = 0 for n > 0."""
        assert bessel_j(0, 0.0) == pytest.approx(1.0)
        assert bessel_j(3, 0.0) == pytest.approx(0.0)

    def test_negative_argument(self):
        """J_n(-x) = (-1)^n J_n(x)."""
        assert bessel_j(1, -2.0) == pytest.approx(-bessel_j(1, 2.0))
        assert bessel_j(2, -2.0) == pytest.approx(bessel_j(2, 2.0))

    def test_negative_order(self):
        """J_{-n}(x) = (-1)^n J_n(x)."""
        assert bessel_j(-3, 2.5) == pytest.approx(-bessel_j(3, 2.5))
        assert bessel_j(-2, 2.5) == pytest.approx(bessel_j(2, 2.5))

    def test_table_rows(self):
        """bessel_table returns J_0 ... J_{order+1}."""
        x = np.array([0.5, 3.0, 9.0])
        table = bessel_table(3, x)
        assert table.shape == (5, 3)
        for n in range(5):
            np.testing.assert_allclose(table[n], jv(n, x), atol=1e-12)

    @pytest.mark.parametrize("order", [0, 1, 4])
    def test_derivative_matches_scipy(self, order):
        """J'_n agrees with scipy.special.jvp."""
        x = np.linspace(0.0, 20.0, 81)
        np.testing.assert_allclose(bessel_j_prime(order, x), jvp(order, x), atol=1e-10)


# =============================================================================
# Dirichlet Zeros
# =============================================================================


class TestBesselJZero:
    """Test McMahon + Newton zeros of J_n."""

    def test_first_zeros_of_j0(self):
        """First three zeros of J_0 match published values."""
        zeros = [bessel_j_zero(0, k) for k in (1, 2, 3)]
        np.testing.assert_allclose(zeros, [2.4048, 5.5201, 8.6537], atol=1e-3)

    @pytest.mark.parametrize("order", [0, 1, 2, 3, 7])
    def test_matches_scipy(self, order):
        """Zeros agree with scipy.special.jn_zeros."""
        expected = jn_zeros(order, 6)
        actual = [bessel_j_zero(order, k) for k in range(1, 7)]
        np.testing.assert_allclose(actual, expected, rtol=1e-10)

    def test_residual_is_small(self):
        """J_n vanishes at the computed zero."""
        z = bessel_j_zero(2, 3)
        assert abs(bessel_j(2, z)) < 1e-12

    def test_zero_index_is_origin(self):
        """k = 0 returns the trivial root."""
        assert bessel_j_zero(0, 0) == 0.0

    def test_negative_index_rejected(self):
        """Negative k raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            bessel_j_zero(0, -1)

    def test_zero_iterations_returns_estimate(self):
        """Without Newton refinement the McMahon seed is still close."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NumericalApproximationWarning)
            z = bessel_j_zero(0, 1, iterations=0)
        assert z == pytest.approx(2.404825557695773, abs=1e-2)

    def test_warns_when_under_converged(self):
        """A poor seed without refinement reports an approximation."""
        with pytest.warns(NumericalApproximationWarning):
            bessel_j_zero(3, 1, iterations=0)


# =============================================================================
# Neumann Zeros
# =============================================================================


class TestBesselJPrimeZero:
    """Test bisection zeros of J'_n."""

    @pytest.mark.parametrize("order", [1, 2, 3, 5])
    def test_matches_scipy(self, order):
        """Zeros agree with scipy.special.jnp_zeros."""
        expected = jnp_zeros(order, 5)
        actual = [bessel_j_prime_zero(order, k) for k in range(1, 6)]
        np.testing.assert_allclose(actual, expected, rtol=1e-10)

    def test_order_zero_skips_rigid_body_root(self):
        """For J'_0 the root at x = 0 is excluded; k = 1 is 3.8317..."""
        assert bessel_j_prime_zero(0, 1) == pytest.approx(3.831705970207512, rel=1e-10)
        np.testing.assert_allclose(
            [bessel_j_prime_zero(0, k) for k in range(1, 5)],
            jn_zeros(1, 4),
            rtol=1e-10,
        )

    def test_zero_index_is_dc(self):
        """k = 0 is the rigid-body mode at 0."""
        assert bessel_j_prime_zero(0, 0) == 0.0

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            bessel_j_prime_zero(1, -2)

    @pytest.mark.parametrize("order", [0, 1, 4])
    def test_ascending_fold_matches_single_zeros(self, order):
        """bessel_j_prime_zeros agrees with k-by-k evaluation."""
        zeros = bessel_j_prime_zeros(order, 5)
        singles = [bessel_j_prime_zero(order, k) for k in range(1, 6)]
        np.testing.assert_allclose(zeros, singles, rtol=1e-12)
        assert np.all(np.diff(zeros) > 0)

    def test_derivative_vanishes(self):
        """J'_n vanishes at the computed zero."""
        z = bessel_j_prime_zero(3, 2)
        assert abs(bessel_j_prime(3, z)) < 1e-10

    def test_looser_tolerance(self):
        """A coarse tolerance still lands near the root."""
        z = bessel_j_prime_zero(1, 1, rtol=1e-4)
        assert z == pytest.approx(jnp_zeros(1, 1)[0], rel=1e-3)


# =============================================================================
# High Orders
# =============================================================================


class TestHighOrders:
    """Zeros stay correct and exception-free at large orders."""

    @pytest.mark.parametrize("order", [48, 50, 60, 120])
    def test_dirichlet_zeros_match_scipy(self, order):
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericalApproximationWarning)
            zeros = [bessel_j_zero(order, k) for k in (1, 2, 3)]
        np.testing.assert_allclose(zeros, jn_zeros(order, 3), rtol=1e-10)
        assert min(zeros) > order

    @pytest.mark.parametrize("order", [48, 59])
    def test_neumann_zeros_match_scipy(self, order):
        with warnings.catch_warnings():
            warnings.simplefilter("error", NumericalApproximationWarning)
            zeros = bessel_j_prime_zeros(order, 3)
        np.testing.assert_allclose(zeros, jnp_zeros(order, 3), rtol=1e-10)

    def test_values_match_scipy(self):
        x = np.linspace(0.0, 90.0, 181)
        np.testing.assert_allclose(bessel_j(50, x), jv(50, x), atol=1e-10)

    def test_bracket_without_sign_change_warns(self):
        """J'_1 has no zero in [5.0, 5.1]; an estimate is returned instead of raising."""
        with pytest.warns(NumericalApproximationWarning, match="No sign change"):
            z = _bisect_prime(1, 5.0, 5.1, 1e-12)
        assert z in (5.0, 5.1)


# =============================================================================
# Recurrence Memory
# =============================================================================


class TestRecurrenceMemory:
    def test_only_requested_rows_returned(self):
        x = np.linspace(0.5, 30.0, 7)
        table = _miller(_starting_order(3, 30.0), x, 4)
        assert table.shape == (4, 7)
        for n in range(4):
            np.testing.assert_allclose(table[n], jv(n, x), atol=1e-12)

    def test_peak_memory_independent_of_start_order(self):
        """A low order over many large arguments needs only a few grid-sized buffers."""
        x = np.linspace(0.0, 70.0, 100_000)
        tracemalloc.start()
        try:
            bessel_j(3, x)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        # The recurrence starts above order 130 here; one row per order
        # would need well over 100 grid-sized buffers.
        assert peak < 40 * x.nbytes
