"""Closed-form modal analysis of canonical membranes.

Modules:
    linear: Unit interval (strings, bars, single axis)
    circular: Unit disc, Bessel zero eigenvalues
    rectangular: Unit-area rectangle of aspect ratio ε
    triangular: Equilateral triangle, Lamé's formula
    api: Family-agnostic series() / amplitudes() dispatch
"""

from drumhead.modes._boundary import BoundaryConditions, BoundaryKind, BoundarySpec
from drumhead.modes.api import (
    FAMILIES,
    Family,
    amplitudes,
    series,
    series_to_frequencies,
)
from drumhead.modes.circular import (
    circular_amplitudes,
    circular_cymatics,
    circular_series,
)
from drumhead.modes.linear import (
    linear_amplitudes,
    linear_cymatics,
    linear_mode_shape,
    linear_series,
)
from drumhead.modes.rectangular import (
    rectangular_amplitudes,
    rectangular_cymatics,
    rectangular_series,
)
from drumhead.modes.triangular import (
    equilateral_triangle_amplitudes,
    equilateral_triangle_series,
)

__all__ = [
    # Boundary conditions
    "BoundaryConditions",
    "BoundaryKind",
    "BoundarySpec",
    # Dispatch
    "FAMILIES",
    "Family",
    "series",
    "amplitudes",
    "series_to_frequencies",
    # Linear
    "linear_series",
    "linear_amplitudes",
    "linear_cymatics",
    "linear_mode_shape",
    # Circular
    "circular_series",
    "circular_amplitudes",
    "circular_cymatics",
    # Rectangular
    "rectangular_series",
    "rectangular_amplitudes",
    "rectangular_cymatics",
    # Triangular
    "equilateral_triangle_series",
    "equilateral_triangle_amplitudes",
]
