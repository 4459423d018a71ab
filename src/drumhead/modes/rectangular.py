"""
Modes of a rectangular membrane.

The rectangle has unit area and aspect ratio ε, i.e. sides √ε along x and
1/√ε along y. Its modes separate into a product of two 1D modes, one per
axis, each with its own pair of edge conditions:

    λ_mn = √(X_m / ε + Y_n · ε)

where X_m and Y_n are the squared 1D eigenvalues of each axis.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ._boundary import BoundarySpec
from .linear import linear_cymatics, linear_mode_shape, linear_series


def _check_aspect_ratio(epsilon: float) -> None:
    if not epsilon > 0:
        raise ValueError(f"aspect ratio must be positive, got {epsilon}")


def rectangular_series(
    M: int,
    N: int,
    epsilon: float = 1.0,
    boundary_conditions: BoundarySpec = "fixed-fixed",
    boundary_conditions_y: BoundarySpec | None = None,
) -> NDArray[np.float64]:
    """Eigenvalues of a unit-area rectangle.

    Args:
        M: Number of modes along x
        N: Number of modes along y
        epsilon: Aspect ratio (default: 1.0, a square)
        boundary_conditions: Edge conditions along x (and y, unless
            boundary_conditions_y is given)
        boundary_conditions_y: Edge conditions along y

    Returns:
        Array of shape (M, N), ascending along both axes
    """
    _check_aspect_ratio(epsilon)
    if boundary_conditions_y is None:
        boundary_conditions_y = boundary_conditions
    X = linear_series(M, boundary_conditions) ** 2
    Y = linear_series(N, boundary_conditions_y) ** 2
    return np.sqrt(X[:, np.newaxis] / epsilon + Y[np.newaxis, :] * epsilon)


def rectangular_amplitudes(
    x: float,
    y: float,
    M: int,
    N: int,
    epsilon: float = 1.0,
    boundary_conditions: BoundarySpec = "fixed-fixed",
    boundary_conditions_y: BoundarySpec | None = None,
) -> NDArray[np.float64]:
    """Mode shapes of a unit-area rectangle at a cartesian strike location.

    Args:
        x: Strike position along x
        y: Strike position along y
        M: Number of modes along x
        N: Number of modes along y
        epsilon: Aspect ratio
        boundary_conditions: Edge conditions along x (and y by default)
        boundary_conditions_y: Edge conditions along y

    Returns:
        Array of shape (M, N); signs are preserved
    """
    _check_aspect_ratio(epsilon)
    if boundary_conditions_y is None:
        boundary_conditions_y = boundary_conditions
    root_epsilon = math.sqrt(epsilon)
    along_x = linear_mode_shape(np.arange(M), x * math.pi / root_epsilon, boundary_conditions)
    along_y = linear_mode_shape(np.arange(N), y * math.pi * root_epsilon, boundary_conditions_y)
    return np.outer(along_x, along_y)


def rectangular_cymatics(
    m: float,
    n: float,
    size_x: int,
    size_y: int | None = None,
    boundary_conditions: BoundarySpec = "fixed-fixed",
    boundary_conditions_y: BoundarySpec | None = None,
) -> NDArray[np.float64]:
    """Displacement of mode (m, n) over a size_x × size_y grid.

    Args:
        m: Zero-based mode index along x, fractional values are allowed
        n: Zero-based mode index along y, fractional values are allowed
        size_x: Cells along x
        size_y: Cells along y (default: size_x)
        boundary_conditions: Edge conditions along x (and y by default)
        boundary_conditions_y: Edge conditions along y

    Returns:
        Array of shape (size_x, size_y)
    """
    if size_y is None:
        size_y = size_x
    if boundary_conditions_y is None:
        boundary_conditions_y = boundary_conditions
    return np.outer(
        linear_cymatics(m, size_x, boundary_conditions),
        linear_cymatics(n, size_y, boundary_conditions_y),
    )
