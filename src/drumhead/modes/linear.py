"""
Modes of a one-dimensional domain (string, bar, single axis of a rectangle).

For a unit interval the eigenvalues and eigenfunctions are:

    boundary      λ_n        φ_n(x)
    dirichlet     n + 1      sin((n + 1)πx)
    neumann       n          cos(nπx)
    mixed         n + 0.5    sin((n + 0.5)πx)

with zero-based n. The neumann n = 0 entry is the rigid-body mode; its
eigenvalue is 0 so it never contributes to additive synthesis.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ._boundary import BoundaryConditions, BoundarySpec

_OFFSET = {"dirichlet": 1.0, "neumann": 0.0, "mixed": 0.5}


def linear_mode_shape(
    index: ArrayLike,
    phase: ArrayLike,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Evaluate the 1D eigenfunction of (possibly fractional) index at a phase.

    Args:
        index: Zero-based mode index (broadcast against phase)
        phase: x·π for a position x on the unit interval
        boundary_conditions: Edge conditions of the axis

    Returns:
        Eigenfunction values, broadcast shape of index and phase
    """
    bc = BoundaryConditions.parse(boundary_conditions)
    wavenumber = np.asarray(index, dtype=np.float64) + _OFFSET[bc.kind]
    argument = wavenumber * np.asarray(phase, dtype=np.float64)
    if bc.kind == "neumann":
        return np.cos(argument)
    return np.sin(argument)


def linear_series(
    N: int, boundary_conditions: BoundarySpec = "fixed-fixed"
) -> NDArray[np.float64]:
    """Eigenvalues of the unit interval.

    Args:
        N: Number of modes
        boundary_conditions: Edge conditions (default: fixed-fixed)

    Returns:
        Array of shape (N,), strictly increasing

    Example:
        >>> linear_series(3).tolist()
        [1.0, 2.0, 3.0]
    """
    bc = BoundaryConditions.parse(boundary_conditions)
    return np.arange(N, dtype=np.float64) + _OFFSET[bc.kind]


def linear_amplitudes(
    x: float, N: int, boundary_conditions: BoundarySpec = "fixed-fixed"
) -> NDArray[np.float64]:
    """Spatial eigenfunction of each mode at a strike location.

    Signs are preserved so that the relative phase of each mode survives
    into additive synthesis.

    Args:
        x: Strike location on the unit interval
        N: Number of modes
        boundary_conditions: Edge conditions (default: fixed-fixed)

    Returns:
        Array of shape (N,)
    """
    return linear_mode_shape(np.arange(N), x * np.pi, boundary_conditions)


def linear_cymatics(
    n: float, H: int, boundary_conditions: BoundarySpec = "fixed-fixed"
) -> NDArray[np.float64]:
    """Displacement of mode n sampled at H evenly spaced points on [0, 1].

    Samples are taken at the phases np.linspace(0, π, H), so both edges are
    included and the last sample lies on the right edge rather than one step
    short of it.

    Args:
        n: Zero-based mode index, fractional values are allowed
        H: Number of samples (both edges included)
        boundary_conditions: Edge conditions (default: fixed-fixed)

    Returns:
        Array of shape (H,)
    """
    if n < 0:
        raise ValueError(f"mode index must be non-negative, got {n}")
    return linear_mode_shape(n, np.linspace(0.0, np.pi, H), boundary_conditions)
