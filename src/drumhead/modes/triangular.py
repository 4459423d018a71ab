"""
Modes of an equilateral triangular membrane with fixed edges.

Lamé's formula gives the eigenvalues of the equilateral triangle as

    λ_mn = √(p² + q² + pq),   p = m + 1, q = n + 1

Seth (1940) Transverse Vibrations of Triangular Membranes.

No closed form is used here for free or mixed edges; those raise.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from ._boundary import BoundaryConditions, BoundarySpec


def _require_fixed(boundary_conditions: BoundarySpec) -> None:
    if not BoundaryConditions.parse(boundary_conditions).is_fixed:
        raise ValueError(
            "Equilateral triangle modes are only defined for fixed edges"
        )


def equilateral_triangle_series(
    M: int, N: int, boundary_conditions: BoundarySpec = "fixed-fixed"
) -> NDArray[np.float64]:
    """Eigenvalues of the equilateral triangle.

    Args:
        M: Number of modal orders
        N: Number of modes per order
        boundary_conditions: Must be 'fixed-fixed'

    Returns:
        Array of shape (M, N), ascending along both axes
    """
    _require_fixed(boundary_conditions)
    p = np.arange(1, M + 1, dtype=np.float64)[:, np.newaxis]
    q = np.arange(1, N + 1, dtype=np.float64)[np.newaxis, :]
    return np.sqrt(p**2 + q**2 + p * q)


def equilateral_triangle_amplitudes(
    u: float,
    v: float,
    w: float,
    M: int,
    N: int,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Mode magnitudes at a trilinear strike location.

    The symmetric Lamé mode |sin(pπu) sin(pπv) sin(pπw)| depends on the
    modal order only, so each row of the result is constant.

    Args:
        u, v, w: Trilinear coordinates normalised so that u + v + w = 1
        M: Number of modal orders
        N: Number of modes per order
        boundary_conditions: Must be 'fixed-fixed'

    Returns:
        Array of shape (M, N) of non-negative magnitudes
    """
    _require_fixed(boundary_conditions)
    p = np.arange(1, M + 1, dtype=np.float64) * np.pi
    order = np.abs(np.sin(p * u) * np.sin(p * v) * np.sin(p * w))
    return np.repeat(order[:, np.newaxis], N, axis=1)
