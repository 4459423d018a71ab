"""
Family-agnostic entry points for modal analysis.

A family selector picks one of the canonical domains:

    linear       unit interval, 1D result of length N (M is ignored)
    circular     unit disc, strike given as polar (r, θ)
    rectangular  unit-area rectangle of aspect ratio ε, strike given as (x, y)
    triangular   equilateral triangle, strike given as trilinear (u, v, w)

Example:
    >>> from drumhead.modes import amplitudes, series
    >>> S = series("rectangular", 4, 4, epsilon=1.5)
    >>> A = amplitudes("rectangular", (0.3, 0.4), 4, 4, epsilon=1.5)
    >>> S.shape == A.shape
    True
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

import numpy as np
from numpy.typing import NDArray

from ._boundary import BoundarySpec
from .circular import circular_amplitudes, circular_series
from .linear import linear_amplitudes, linear_series
from .rectangular import rectangular_amplitudes, rectangular_series
from .triangular import equilateral_triangle_amplitudes, equilateral_triangle_series

Family = Literal["linear", "circular", "rectangular", "triangular"]

FAMILIES: tuple[str, ...] = ("linear", "circular", "rectangular", "triangular")


def _check_family(family: str) -> None:
    if family not in FAMILIES:
        raise ValueError(f"Unknown family '{family}'. Valid families: {list(FAMILIES)}")


def series(
    family: Family,
    M: int,
    N: int,
    epsilon: float = 1.0,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Eigenvalue grid of a canonical domain.

    Args:
        family: Domain family
        M: Number of modal orders (ignored for 'linear')
        N: Number of modes per order
        epsilon: Aspect ratio, used by 'rectangular' only
        boundary_conditions: Edge conditions

    Returns:
        Array of shape (N,) for 'linear', (M, N) otherwise
    """
    _check_family(family)
    if family == "linear":
        return linear_series(N, boundary_conditions)
    if family == "circular":
        return circular_series(M, N, boundary_conditions)
    if family == "rectangular":
        return rectangular_series(M, N, epsilon, boundary_conditions)
    return equilateral_triangle_series(M, N, boundary_conditions)


def amplitudes(
    family: Family,
    strike: float | Sequence[float],
    M: int,
    N: int,
    epsilon: float = 1.0,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Mode shapes of a canonical domain at a strike location.

    Args:
        family: Domain family
        strike: x for 'linear', (r, θ) for 'circular', (x, y) for
            'rectangular' and (u, v, w) for 'triangular'
        M: Number of modal orders (ignored for 'linear')
        N: Number of modes per order
        epsilon: Aspect ratio, used by 'rectangular' only
        boundary_conditions: Edge conditions

    Returns:
        Array with the same shape as series(family, M, N, ...)
    """
    _check_family(family)
    if family == "linear":
        return linear_amplitudes(float(strike), N, boundary_conditions)
    if family == "circular":
        r, theta = strike
        return circular_amplitudes(r, theta, M, N, boundary_conditions)
    if family == "rectangular":
        x, y = strike
        return rectangular_amplitudes(x, y, M, N, epsilon, boundary_conditions)
    u, v, w = strike
    return equilateral_triangle_amplitudes(u, v, w, M, N, boundary_conditions)


def series_to_frequencies(
    series: NDArray[np.floating], fundamental: float
) -> NDArray[np.float64]:
    """Scale an eigenvalue grid so that its lowest non-zero mode sits at `fundamental` Hz.

    Zero eigenvalues (rigid-body modes) stay at 0 Hz. An all-zero series is
    returned unchanged.
    """
    series = np.asarray(series, dtype=np.float64)
    positive = series[series > 0]
    if positive.size == 0:
        return series.copy()
    return series * (fundamental / positive.min())
