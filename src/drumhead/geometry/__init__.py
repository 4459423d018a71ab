"""Points and coordinate conversions."""

from drumhead.geometry.points import (
    Point,
    cartesian_to_polar,
    cartesian_to_trilinear,
    polar_to_cartesian,
    trilinear_to_cartesian,
)

__all__ = [
    "Point",
    "cartesian_to_polar",
    "polar_to_cartesian",
    "cartesian_to_trilinear",
    "trilinear_to_cartesian",
]
