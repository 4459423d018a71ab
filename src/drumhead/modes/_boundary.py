"""
Boundary condition selectors for modal analysis.

Each axis of a domain has two edges, each either fixed (Dirichlet, zero
displacement) or free (Neumann, zero slope). The pair determines which
closed-form eigenvalues and eigenfunctions apply:

    fixed-fixed  -> dirichlet
    free-free    -> neumann
    fixed-free   -> mixed (either order)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

BoundaryKind = Literal["dirichlet", "neumann", "mixed"]

_NAMED: dict[str, tuple[bool, bool]] = {
    "fixed-fixed": (True, True),
    "free-free": (False, False),
    "fixed-free": (True, False),
    "free-fixed": (False, True),
    "dirichlet": (True, True),
    "neumann": (False, False),
    "mixed": (True, False),
}


@dataclass(frozen=True)
class BoundaryConditions:
    """Boundary conditions for the two edges of one axis.

    Args:
        first: True if the first (left) edge is fixed
        second: True if the second (right) edge is fixed

    Example:
        >>> BoundaryConditions.parse("fixed-free").kind
        'mixed'
        >>> BoundaryConditions(False, False).kind
        'neumann'
    """

    first: bool = True
    second: bool = True

    @classmethod
    def parse(cls, value: BoundarySpec) -> BoundaryConditions:
        """Build boundary conditions from a name, a (bool, bool) pair or an instance.

        Raises:
            ValueError: If a name is not recognised
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            if key not in _NAMED:
                raise ValueError(
                    f"Unknown boundary conditions '{value}'. "
                    f"Valid names: {list(_NAMED.keys())}"
                )
            return cls(*_NAMED[key])
        first, second = value
        return cls(bool(first), bool(second))

    @property
    def kind(self) -> BoundaryKind:
        """Closed-form family selected by this pair of edges."""
        if self.first and self.second:
            return "dirichlet"
        if not self.first and not self.second:
            return "neumann"
        return "mixed"

    @property
    def is_fixed(self) -> bool:
        """True if both edges are fixed."""
        return self.kind == "dirichlet"

    @property
    def is_free(self) -> bool:
        """True if both edges are free."""
        return self.kind == "neumann"


BoundarySpec = Union[str, tuple[bool, bool], BoundaryConditions]
