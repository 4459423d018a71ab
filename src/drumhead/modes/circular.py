"""
Modes of a circular membrane (disc).

The (m, n) eigenvalue of a disc is the (n + 1)-th zero of J_m for a fixed
edge, or of J'_m for a free edge. The mode shape at polar position (r, θ)
on the unit disc is

    φ_mn(r, θ) = J_m(z_mn · r) · angular(m, θ)

where angular(0, θ) = 1 and angular(m, θ) = √2 sin(mθ + π/4) for m > 0.

A disc has a single edge, so only fixed or free boundaries are defined.

Example:
    >>> S = circular_series(1, 3)
    >>> [round(z, 4) for z in S[0]]
    [2.4048, 5.5201, 8.6537]
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from drumhead.core.bessel import (
    bessel_j,
    bessel_j_prime_zero,
    bessel_j_prime_zeros,
    bessel_j_zero,
)

from ._boundary import BoundaryConditions, BoundarySpec

SQRT_PI = math.sqrt(math.pi)


def _edge_is_fixed(boundary_conditions: BoundarySpec) -> bool:
    bc = BoundaryConditions.parse(boundary_conditions)
    if bc.kind == "mixed":
        raise ValueError(
            "A disc has a single edge; use 'fixed-fixed' or 'free-free' boundary conditions"
        )
    return bc.is_fixed


def angular(m: int, theta: ArrayLike) -> float | NDArray[np.float64]:
    """Angular factor of a circular mode of order m."""
    if m == 0:
        return np.ones_like(theta, dtype=np.float64) if np.ndim(theta) else 1.0
    return math.sqrt(2.0) * np.sin(m * np.asarray(theta, dtype=np.float64) + math.pi / 4)


def circular_series(
    M: int,
    N: int,
    boundary_conditions: BoundarySpec = "fixed-fixed",
    unit_area: bool = False,
) -> NDArray[np.float64]:
    """Eigenvalues of the unit disc.

    Args:
        M: Number of modal orders m
        N: Number of modes per order n
        boundary_conditions: 'fixed-fixed' (J_m zeros) or 'free-free'
            (J'_m zeros, rigid-body mode excluded)
        unit_area: If True, scale by 1/√π so that eigenvalues refer to a disc
            of unit area rather than unit radius

    Returns:
        Array of shape (M, N), ascending along n
    """
    fixed = _edge_is_fixed(boundary_conditions)
    S = np.zeros((M, N), dtype=np.float64)
    for m in range(M):
        if fixed:
            S[m] = [bessel_j_zero(m, n + 1) for n in range(N)]
        else:
            S[m] = bessel_j_prime_zeros(m, N)
    if unit_area:
        S /= SQRT_PI
    return S


def circular_amplitudes(
    r: float,
    theta: float,
    M: int,
    N: int,
    boundary_conditions: BoundarySpec = "fixed-fixed",
    series: NDArray[np.float64] | None = None,
) -> NDArray[np.float64]:
    """Mode shapes of the unit disc at a polar strike location.

    Args:
        r: Radial strike position in [0, 1]
        theta: Angular strike position in radians
        M: Number of modal orders
        N: Number of modes per order
        boundary_conditions: 'fixed-fixed' or 'free-free'
        series: Precomputed unit-radius series of shape (M, N), skips
            recomputing the Bessel zeros

    Returns:
        Array of shape (M, N); signs are preserved
    """
    if series is None:
        series = circular_series(M, N, boundary_conditions)
    A = np.zeros((M, N), dtype=np.float64)
    for m in range(M):
        A[m] = bessel_j(m, series[m, :N] * r) * angular(m, theta)
    return A


def _interpolated_zero(order: int, index: float, fixed: bool) -> float:
    """Zero of J_order (or J'_order) for a fractional zero-based index."""
    root = bessel_j_zero if fixed else bessel_j_prime_zero
    lower = math.floor(index)
    fraction = index - lower
    z = root(order, lower + 1)
    if fraction:
        z += fraction * (root(order, lower + 2) - z)
    return z


def circular_cymatics(
    m: float,
    n: float,
    size: int,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Displacement of mode (m, n) over a size × size grid covering [-1, 1]².

    Only cells inside the unit disc (r <= 1) are populated, the rest stay 0.
    A fractional n interpolates between neighbouring zeros, a fractional m
    blends the fields of the two neighbouring orders.

    Args:
        m: Modal order
        n: Zero-based mode index within the order
        size: Grid size in cells along each axis
        boundary_conditions: 'fixed-fixed' or 'free-free'

    Returns:
        Array of shape (size, size)
    """
    if m < 0 or n < 0:
        raise ValueError(f"mode indices must be non-negative, got ({m}, {n})")
    fixed = _edge_is_fixed(boundary_conditions)

    axis = np.linspace(-1.0, 1.0, size)
    x, y = np.meshgrid(axis, axis, indexing="ij")
    r = np.hypot(x, y)
    inside = r <= 1.0
    r_in = r[inside]
    theta_in = np.arctan2(y[inside], x[inside])

    def field(order: int) -> NDArray[np.float64]:
        z = _interpolated_zero(order, n, fixed)
        return bessel_j(order, z * r_in) * angular(order, theta_in)

    lower = math.floor(m)
    fraction = m - lower
    values = field(lower)
    if fraction:
        values = (1.0 - fraction) * values + fraction * field(lower + 1)

    U = np.zeros((size, size), dtype=np.float64)
    U[inside] = values
    return U
