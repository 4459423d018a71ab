"""
Initial displacement profiles for FDTD simulations.

Positions and widths are normalised to the grid: 0 is the first cell and 1
the last, so a profile keeps its shape when the grid is refined.

Example:
    >>> import numpy as np
    >>> u = raised_cosine_2d((0.5, 0.5), 0.1, 11, 11)
    >>> float(u[5, 5])
    1.0
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def _point(mu: Sequence[float]) -> tuple[float, float]:
    if hasattr(mu, "x") and hasattr(mu, "y"):
        return float(mu.x), float(mu.y)
    x, y = mu
    return float(x), float(y)


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")


def _positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def raised_cosine_1d(mu: float, sigma: float, size: int) -> NDArray[np.float64]:
    """Raised cosine bump centred on `mu` with half-width `sigma`.

        u(x) = 0.5 (1 + cos(π (x - μ) / σ))   for |x - μ| <= σ, else 0

    Args:
        mu: Centre, normalised to [0, 1]
        sigma: Half-width, normalised
        size: Number of cells

    Returns:
        Array of shape (size,) with peak 1 at the cell nearest to mu
    """
    _check_size(size)
    _positive("sigma", sigma)
    x = np.linspace(0.0, 1.0, size) if size > 1 else np.zeros(1)
    distance = np.abs(x - mu) / sigma
    return np.where(distance <= 1.0, 0.5 * (1.0 + np.cos(np.pi * distance)), 0.0)


def raised_cosine_2d(
    mu: Sequence[float], sigma: float, size_x: int, size_y: int
) -> NDArray[np.float64]:
    """Radially symmetric raised cosine over a 2D grid.

    Args:
        mu: Centre (x, y) or a Point, normalised to [0, 1]
        sigma: Radius, normalised
        size_x: Cells along x (first axis)
        size_y: Cells along y (second axis)

    Returns:
        Array of shape (size_x, size_y)
    """
    _check_size(size_x)
    _check_size(size_y)
    _positive("sigma", sigma)
    mx, my = _point(mu)
    x = np.linspace(0.0, 1.0, size_x) if size_x > 1 else np.zeros(1)
    y = np.linspace(0.0, 1.0, size_y) if size_y > 1 else np.zeros(1)
    X, Y = np.meshgrid(x, y, indexing="ij")
    distance = np.sqrt((X - mx) ** 2 + (Y - my) ** 2) / sigma
    return np.where(distance <= 1.0, 0.5 * (1.0 + np.cos(np.pi * distance)), 0.0)


def raised_triangle_1d(
    mu: float, left: float, right: float, size: int
) -> NDArray[np.float64]:
    """Asymmetric triangular bump, like a plucked string.

    Rises linearly from 0 at mu - left to 1 at mu, then falls back to 0 at
    mu + right.

    Args:
        mu: Peak position, normalised to [0, 1]
        left: Width of the rising side
        right: Width of the falling side
        size: Number of cells

    Returns:
        Array of shape (size,)
    """
    _check_size(size)
    _positive("left", left)
    _positive("right", right)
    x = np.linspace(0.0, 1.0, size) if size > 1 else np.zeros(1)
    return np.interp(x, [mu - left, mu, mu + right], [0.0, 1.0, 0.0], left=0.0, right=0.0)


def raised_triangle_2d(
    mu: Sequence[float],
    left_x: float,
    right_x: float,
    left_y: float,
    right_y: float,
    size_x: int,
    size_y: int,
) -> NDArray[np.float64]:
    """Pyramid-shaped bump: the product of one triangle per axis.

    Args:
        mu: Peak (x, y) or a Point, normalised to [0, 1]
        left_x, right_x: Rising and falling widths along x
        left_y, right_y: Rising and falling widths along y
        size_x: Cells along x (first axis)
        size_y: Cells along y (second axis)

    Returns:
        Array of shape (size_x, size_y)
    """
    mx, my = _point(mu)
    return np.outer(
        raised_triangle_1d(mx, left_x, right_x, size_x),
        raised_triangle_1d(my, left_y, right_y, size_y),
    )
