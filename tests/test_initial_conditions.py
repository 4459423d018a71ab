"""
Unit tests for FDTD initial conditions.

Tests verify:
- Raised cosine and raised triangle peak at the requested position
- Profiles vanish outside their support
- 2D profiles are separable or radially symmetric as documented
- Invalid widths and sizes are rejected
"""

import numpy as np
import pytest

from drumhead import (
    Point,
    raised_cosine_1d,
    raised_cosine_2d,
    raised_triangle_1d,
    raised_triangle_2d,
)


class TestRaisedCosine:
    def test_1d_peak(self):
        u = raised_cosine_1d(0.5, 0.1, 11)
        assert u.shape == (11,)
        assert u[5] == pytest.approx(1.0)

    def test_1d_support(self):
        u = raised_cosine_1d(0.5, 0.2, 101)
        assert np.all(u[:30] == 0.0)
        assert np.all(u[71:] == 0.0)
        assert u[40] == pytest.approx(0.5)

    def test_2d_peak(self):
        u = raised_cosine_2d(Point(0.5, 0.5), 0.1, 11, 11)
        assert u.shape == (11, 11)
        assert u[5, 5] == pytest.approx(1.0)

    def test_2d_tuple_centre_and_radial_symmetry(self):
        u = raised_cosine_2d((0.5, 0.5), 0.3, 21, 21)
        np.testing.assert_allclose(u, u.T)
        np.testing.assert_allclose(u, u[::-1, :])

    def test_2d_rectangular_grid(self):
        u = raised_cosine_2d((0.25, 0.75), 0.2, 9, 5)
        assert u.shape == (9, 5)
        assert u[2, 3] == pytest.approx(1.0)

    def test_invalid_sigma(self):
        with pytest.raises(ValueError, match="sigma"):
            raised_cosine_1d(0.5, 0.0, 11)


class TestRaisedTriangle:
    def test_1d_peak(self):
        u = raised_triangle_1d(0.5, 0.1, 0.1, 11)
        assert u[5] == pytest.approx(1.0)
        assert u[4] == pytest.approx(0.0)
        assert u[6] == pytest.approx(0.0)

    def test_1d_asymmetric(self):
        u = raised_triangle_1d(0.5, 0.2, 0.4, 11)
        assert u[4] == pytest.approx(0.5)
        assert u[7] == pytest.approx(0.5)
        assert u[2] == 0.0

    def test_2d_peak(self):
        u = raised_triangle_2d(Point(0.5, 0.5), 0.1, 0.1, 0.1, 0.1, 11, 11)
        assert u.shape == (11, 11)
        assert u[5, 5] == pytest.approx(1.0)

    def test_2d_separable(self):
        u = raised_triangle_2d((0.4, 0.6), 0.2, 0.3, 0.1, 0.4, 21, 11)
        expected = np.outer(
            raised_triangle_1d(0.4, 0.2, 0.3, 21),
            raised_triangle_1d(0.6, 0.1, 0.4, 11),
        )
        np.testing.assert_allclose(u, expected)

    @pytest.mark.parametrize("left,right", [(0.0, 0.1), (0.1, -0.1)])
    def test_invalid_widths(self, left, right):
        with pytest.raises(ValueError, match="must be positive"):
            raised_triangle_1d(0.5, left, right, 11)

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="size"):
            raised_triangle_1d(0.5, 0.1, 0.1, 0)
