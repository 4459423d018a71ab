"""
Cymatic fields and Chladni patterns.

A cymatic field is the displacement of a single standing wave evaluated
over a grid. Sand sprinkled on a vibrating plate collects where that
displacement is close to zero, tracing the nodal lines known as a Chladni
pattern.

Typical usage:
    >>> field = cymatics("rectangular", 2, 3, 128)
    >>> pattern = chladni_pattern(field, tolerance=0.05)
    >>> pattern.dtype
    dtype('bool')
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from drumhead.modes._boundary import BoundarySpec
from drumhead.modes.circular import circular_cymatics
from drumhead.modes.linear import linear_cymatics
from drumhead.modes.rectangular import rectangular_cymatics

CYMATIC_FAMILIES: tuple[str, ...] = ("linear", "circular", "rectangular")


def cymatics(
    family: str,
    mode_a: float,
    mode_b: float,
    grid_size: int,
    boundary_conditions: BoundarySpec = "fixed-fixed",
) -> NDArray[np.float64]:
    """Displacement field of one mode of a canonical domain.

    Mode indices may be fractional; the field then varies continuously
    between the neighbouring integer modes, which allows smooth animation
    across mode numbers.

    Args:
        family: 'linear', 'circular' or 'rectangular'
        mode_a: First mode index (order m for 'circular', x index for
            'rectangular', the mode index for 'linear')
        mode_b: Second mode index (ignored for 'linear')
        grid_size: Cells along each axis
        boundary_conditions: Edge conditions

    Returns:
        Array of shape (grid_size,) for 'linear', (grid_size, grid_size)
        otherwise

    Raises:
        ValueError: If the family has no cymatic renderer
    """
    if family == "linear":
        return linear_cymatics(mode_a, grid_size, boundary_conditions)
    if family == "circular":
        return circular_cymatics(mode_a, mode_b, grid_size, boundary_conditions)
    if family == "rectangular":
        return rectangular_cymatics(
            mode_a, mode_b, grid_size, grid_size, boundary_conditions
        )
    raise ValueError(
        f"No cymatics renderer for family '{family}'. "
        f"Valid families: {list(CYMATIC_FAMILIES)}"
    )


def chladni_pattern(field: ArrayLike, tolerance: float) -> NDArray[np.bool_]:
    """Mark the near-nodal cells of a cymatic field.

    Args:
        field: Displacement field of any shape
        tolerance: Cells with |field| strictly below this are marked

    Returns:
        Boolean array shaped like field
    """
    return np.abs(np.asarray(field, dtype=np.float64)) < tolerance
