"""
Points and coordinate conversions for strike and readout locations.

Circular membranes are addressed in polar coordinates (r, θ), triangular
ones in trilinear coordinates: the perpendicular distance from the point to
each of the triangle's three sides.

Example:
    >>> p = Point.from_polar(1.0, 0.0)
    >>> (round(p.x, 12), round(p.y, 12))
    (1.0, 0.0)
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on the plane in Cartesian coordinates."""

    x: float
    y: float

    @property
    def r(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    @property
    def theta(self) -> float:
        """Angle from the positive x axis, in (-π, π]."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> Point:
        """Point at distance r from the origin and angle theta."""
        return cls(r * math.cos(theta), r * math.sin(theta))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def cartesian_to_polar(point: Point | Sequence[float]) -> tuple[float, float]:
    """Convert (x, y) to (r, θ)."""
    x, y = point
    return math.hypot(x, y), math.atan2(y, x)


def polar_to_cartesian(r: float, theta: float) -> Point:
    """Convert (r, θ) to a Point."""
    return Point.from_polar(r, theta)


def _check_triangle(triangle: Sequence[Point | Sequence[float]]) -> list[Point]:
    if len(triangle) != 3:
        raise ValueError(f"A triangle needs 3 vertices, got {len(triangle)}")
    return [p if isinstance(p, Point) else Point(*p) for p in triangle]


def cartesian_to_trilinear(
    point: Point | Sequence[float], triangle: Sequence[Point | Sequence[float]]
) -> tuple[float, float, float]:
    """Perpendicular distances from a point to each side of a triangle.

    Side i is the side opposite vertex i. Distances are signed: positive
    inside the triangle, negative beyond the corresponding side.

    Args:
        point: Cartesian point
        triangle: Three vertices (A, B, C)

    Returns:
        Trilinear coordinates (u, v, w)

    Raises:
        ValueError: If triangle does not have exactly 3 vertices or is
            degenerate
    """
    a, b, c = _check_triangle(triangle)
    px, py = point

    area2 = (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)
    if area2 == 0:
        raise ValueError("Degenerate triangle: vertices are collinear")

    distances = []
    for start, end in ((b, c), (c, a), (a, b)):
        length = math.hypot(end.x - start.x, end.y - start.y)
        cross = (end.x - start.x) * (py - start.y) - (px - start.x) * (end.y - start.y)
        distances.append(math.copysign(1.0, area2) * cross / length)
    return distances[0], distances[1], distances[2]


def trilinear_to_cartesian(
    trilinear: Sequence[float], triangle: Sequence[Point | Sequence[float]]
) -> Point:
    """Recover the Cartesian point from trilinear coordinates.

    Trilinears are converted to barycentric weights by scaling each with the
    length of its side.

    Raises:
        ValueError: If triangle does not have exactly 3 vertices or the
            coordinates sum to a zero weight
    """
    a, b, c = _check_triangle(triangle)
    u, v, w = trilinear
    side_a = math.hypot(c.x - b.x, c.y - b.y)
    side_b = math.hypot(a.x - c.x, a.y - c.y)
    side_c = math.hypot(b.x - a.x, b.y - a.y)

    wa, wb, wc = u * side_a, v * side_b, w * side_c
    total = wa + wb + wc
    if total == 0:
        raise ValueError(f"Trilinear coordinates {tuple(trilinear)} have zero weight")
    return Point(
        (wa * a.x + wb * b.x + wc * c.x) / total,
        (wa * a.y + wb * b.y + wc * c.y) / total,
    )
