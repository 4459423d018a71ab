"""
Finite-difference time-domain (FDTD) simulation of the 1D and 2D wave equation.

This module time-steps an explicit scheme for the wave equation on a grid
whose cells are either free (updated) or fixed (clamped), and samples the
field at a readout point to produce an audio waveform.

Update rule (2D, interior cells only):
    u[n+1]_xy = c0 (u[n]_x+1,y + u[n]_x-1,y + u[n]_x,y+1 + u[n]_x,y-1)
                + c1 u[n]_xy - c2 u[n-1]_xy

The 1D rule is the same restricted to a line. With Courant number λ and a
per-sample loss s the usual coefficients are

    c0 = λ² / (1 + s),  c1 = 2 (1 - D λ²) / (1 + s),  c2 = (1 - s) / (1 + s)

for D dimensions (see FDTDCoefficients.from_courant). The scheme is stable
for λ <= 1/√D; the coefficients are never checked, an unstable choice grows
without bound.

Bilbao, S. (2009) Numerical Sound Synthesis, pp.131 and 306.

Memory layout:
    Both time levels live in one pre-allocated (2, *shape) arena. Each step
    writes u[n+1] over u[n-1] and flips the index of the current level, so
    no grid is allocated while stepping. Updates are restricted to the
    bounding box of the free cells, computed once.

Example:
    >>> import numpy as np
    >>> from drumhead.core.fdtd import FDTDCoefficients, FDTDSimulation
    >>> u_0 = np.zeros((32, 32))
    >>> u_1 = np.zeros((32, 32))
    >>> u_1[16, 16] = 1.0
    >>> coefficients = FDTDCoefficients.from_courant(0.5, ndim=2)
    >>> sim = FDTDSimulation(u_0, u_1, coefficients, readout=(0.25, 0.5))
    >>> waveform = sim.run(1000)
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


class DimensionMismatchError(ValueError):
    """Initial grids or boundary mask disagree in shape."""


@dataclass(frozen=True)
class FDTDCoefficients:
    """Coefficients of the explicit update rule.

    Args:
        c0: Neighbour coupling
        c1: Self term of the current level
        c2: Weight of the previous level (subtracted)
    """

    c0: float
    c1: float
    c2: float

    @classmethod
    def from_courant(
        cls, courant: float, ndim: int = 2, loss: float = 0.0
    ) -> FDTDCoefficients:
        """Coefficients for a given Courant number.

        Args:
            courant: Courant number λ = c k / h
            ndim: Number of spatial dimensions (1 or 2)
            loss: Per-sample frequency-independent loss σk (default: 0.0,
                lossless)

        Returns:
            FDTDCoefficients for the standard lossy explicit scheme
        """
        lambda_sq = courant**2
        scale = 1.0 / (1.0 + loss)
        return cls(
            c0=lambda_sq * scale,
            c1=2.0 * (1.0 - ndim * lambda_sq) * scale,
            c2=(1.0 - loss) * scale,
        )


def _active_box(mask: NDArray[np.bool_]) -> tuple[slice, ...] | None:
    """Smallest box of slices that contains every True cell, or None."""
    if not mask.any():
        return None
    box = []
    for axis in range(mask.ndim):
        others = tuple(a for a in range(mask.ndim) if a != axis)
        occupied = np.flatnonzero(mask.any(axis=others))
        box.append(slice(int(occupied[0]), int(occupied[-1]) + 1))
    return tuple(box)


def _shift(box: tuple[slice, ...], axis: int, offset: int) -> tuple[slice, ...]:
    """Box moved by `offset` cells along one axis."""
    moved = list(box)
    moved[axis] = slice(box[axis].start + offset, box[axis].stop + offset)
    return tuple(moved)


def _readout_position(
    readout: float | Sequence[float], shape: tuple[int, ...]
) -> tuple[float, ...]:
    """Normalise a readout point to one coordinate in [0, 1] per axis."""
    if hasattr(readout, "x") and hasattr(readout, "y"):
        position = (float(readout.x), float(readout.y))
    elif np.ndim(readout) == 0:
        position = (float(readout),)
    else:
        position = tuple(float(p) for p in readout)

    if len(position) != len(shape):
        raise ValueError(
            f"readout has {len(position)} coordinate(s) but the grid is {len(shape)}D"
        )
    for p in position:
        if not 0.0 <= p <= 1.0:
            raise ValueError(
                f"readout {position} is outside the grid. "
                f"Coordinates must lie in [0, 1]"
            )
    return position


def _interpolation_weights(
    position: tuple[float, ...], shape: tuple[int, ...]
) -> tuple[tuple[NDArray[np.intp], ...], NDArray[np.float64]]:
    """Corner indices and weights for (bi)linear interpolation at a readout.

    Returns a tuple of index arrays (one per axis, 2^ndim corners each)
    suitable for fancy indexing, and the matching weights.
    """
    per_axis = []
    for p, size in zip(position, shape, strict=True):
        g = p * (size - 1)
        i0 = min(int(g), max(size - 2, 0))
        i1 = min(i0 + 1, size - 1)
        f = g - i0
        per_axis.append(((i0, 1.0 - f), (i1, f)))

    indices = [[] for _ in shape]
    weights = []
    for corner in itertools.product(*per_axis):
        weight = 1.0
        for axis, (i, w) in enumerate(corner):
            indices[axis].append(i)
            weight *= w
        weights.append(weight)

    return (
        tuple(np.array(i, dtype=np.intp) for i in indices),
        np.array(weights, dtype=np.float64),
    )


class FDTDSimulation:
    """Explicit wave-equation solver on a masked 1D or 2D grid.

    Args:
        u_0: Field at t = 0
        u_1: Field at t = 1, same shape as u_0
        coefficients: Update coefficients (see FDTDCoefficients)
        readout: Sampling position, normalised to [0, 1] per axis. A float
            for 1D grids; an (x, y) pair or any object with .x and .y for 2D.
        boundary: Optional mask with the shape of the grid, nonzero marks a
            free cell. Cells on the outer edge of the grid have no complete
            stencil and are always treated as fixed. Default: every interior
            cell is free.

    Attributes:
        shape: Grid shape
        ndim: Number of spatial dimensions
        step_count: Number of updates performed

    Raises:
        DimensionMismatchError: If u_0, u_1 and boundary differ in shape
        ValueError: If the grid is not 1D or 2D or the readout is invalid

    Note:
        Fixed cells are never written. Each keeps the value it had in the
        initial grid occupying the same buffer, so fixed cells should be
        zero in both u_0 and u_1 for a true Dirichlet edge.
    """

    def __init__(
        self,
        u_0: ArrayLike,
        u_1: ArrayLike,
        coefficients: FDTDCoefficients,
        readout: float | Sequence[float],
        boundary: ArrayLike | None = None,
    ):
        u_0 = np.asarray(u_0, dtype=np.float64)
        u_1 = np.asarray(u_1, dtype=np.float64)
        if u_0.shape != u_1.shape:
            raise DimensionMismatchError(
                f"u_0 and u_1 differ in shape: {u_0.shape} != {u_1.shape}"
            )
        if u_0.ndim not in (1, 2):
            raise ValueError(f"FDTD grids must be 1D or 2D, got {u_0.ndim}D")

        self.shape: tuple[int, ...] = u_0.shape
        self.ndim = u_0.ndim
        self.coefficients = coefficients

        if boundary is None:
            free = np.ones(self.shape, dtype=bool)
        else:
            free = np.asarray(boundary) != 0
            if free.shape != self.shape:
                raise DimensionMismatchError(
                    f"u_0 and boundary differ in shape: {self.shape} != {free.shape}"
                )

        # Outer edge cells lack neighbours on one side and stay fixed
        interior = np.zeros(self.shape, dtype=bool)
        inner = tuple(slice(1, -1) for _ in self.shape)
        interior[inner] = free[inner]
        self._box = _active_box(interior)

        # Two time levels plus one box-sized work buffer, allocated once
        self._arena = np.empty((2,) + self.shape, dtype=np.float64)
        self._arena[0] = u_0
        self._arena[1] = u_1
        self._current = 1

        if self._box is not None:
            self._mask = interior[self._box]
            self._scratch = np.empty(self._mask.shape, dtype=np.float64)
            self._neighbours = [
                (_shift(self._box, axis, -1), _shift(self._box, axis, 1))
                for axis in range(self.ndim)
            ]

        position = _readout_position(readout, self.shape)
        self._readout_indices, self._readout_weights = _interpolation_weights(
            position, self.shape
        )
        self._step_count = 0

    @property
    def current(self) -> NDArray[np.float64]:
        """Field at the most recent time level (a view into the arena)."""
        return self._arena[self._current]

    @property
    def previous(self) -> NDArray[np.float64]:
        """Field one step before the current level (a view into the arena)."""
        return self._arena[self._current ^ 1]

    @property
    def step_count(self) -> int:
        """Number of updates performed."""
        return self._step_count

    @property
    def active_box(self) -> tuple[slice, ...] | None:
        """Bounding box of the free cells, or None if every cell is fixed."""
        return self._box

    def sample(self, field: NDArray[np.float64] | None = None) -> float:
        """Interpolate a field (default: the current level) at the readout point."""
        if field is None:
            field = self.current
        return float(np.dot(self._readout_weights, field[self._readout_indices]))

    def step(self) -> None:
        """Advance the simulation by one time step."""
        if self._box is not None:
            c0, c1, c2 = (
                self.coefficients.c0,
                self.coefficients.c1,
                self.coefficients.c2,
            )
            box = self._box
            mask = self._mask
            scratch = self._scratch
            current = self._arena[self._current]
            # The older level is overwritten in place with the new one
            target = self._arena[self._current ^ 1][box]

            np.multiply(target, -c2, out=target, where=mask)

            np.multiply(current[box], c1, out=scratch)
            np.add(target, scratch, out=target, where=mask)

            low, high = self._neighbours[0]
            np.add(current[low], current[high], out=scratch)
            for low, high in self._neighbours[1:]:
                scratch += current[low]
                scratch += current[high]
            scratch *= c0
            np.add(target, scratch, out=target, where=mask)

        self._current ^= 1
        self._step_count += 1

    def run(
        self,
        steps: int,
        progress: bool = False,
        callback: Callable[[int], None] | None = None,
    ) -> NDArray[np.float64]:
        """Advance `steps` times, sampling the readout after every step.

        Args:
            steps: Number of updates
            progress: If True, show a tqdm progress bar
            callback: Called after each step with the step count. Raising
                from the callback aborts the run at a step boundary.

        Returns:
            Array of shape (steps,) with one sample per update
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        waveform = np.zeros(steps, dtype=np.float64)
        if progress:
            from tqdm import tqdm

            iterator = tqdm(range(steps), desc="FDTD simulation")
        else:
            iterator = range(steps)

        for t in iterator:
            self.step()
            waveform[t] = self.sample()
            if callback:
                callback(self._step_count)
        return waveform


def fdtd_waveform(
    u_0: ArrayLike,
    u_1: ArrayLike,
    c0: float,
    c1: float,
    c2: float,
    sample_count: int,
    readout: float | Sequence[float],
    boundary: ArrayLike | None = None,
    progress: bool = False,
    callback: Callable[[int], None] | None = None,
) -> NDArray[np.float64]:
    """Simulate a grid from two initial states and return the readout waveform.

    Sample 0 reads u_0, sample 1 reads u_1 and every later sample is taken
    after one update.

    Args:
        u_0: Field at t = 0 (1D or 2D)
        u_1: Field at t = 1
        c0: Neighbour coupling coefficient
        c1: Self coefficient
        c2: Previous-level coefficient
        sample_count: Length of the waveform in samples
        readout: Sampling position normalised to [0, 1] per axis
        boundary: Optional free/fixed mask (nonzero = free)
        progress: If True, show a tqdm progress bar
        callback: Called after each update with the step count

    Returns:
        Array of shape (sample_count,)

    Raises:
        DimensionMismatchError: If the grids or the mask differ in shape
        ValueError: If sample_count is negative or the readout is invalid
    """
    if sample_count < 0:
        raise ValueError(f"sample_count must be non-negative, got {sample_count}")

    sim = FDTDSimulation(
        u_0, u_1, FDTDCoefficients(c0, c1, c2), readout, boundary=boundary
    )
    waveform = np.zeros(sample_count, dtype=np.float64)
    head = [sim.sample(sim.previous), sim.sample(sim.current)]
    waveform[: min(sample_count, 2)] = head[: min(sample_count, 2)]
    if sample_count > 2:
        waveform[2:] = sim.run(sample_count - 2, progress=progress, callback=callback)
    return waveform


def fdtd_waveform_1d(
    u_0: ArrayLike,
    u_1: ArrayLike,
    c0: float,
    c1: float,
    c2: float,
    sample_count: int,
    readout: float,
) -> NDArray[np.float64]:
    """Waveform of a 1D FDTD simulation with fixed end points."""
    if np.ndim(u_0) != 1:
        raise ValueError(f"expected a 1D grid, got {np.ndim(u_0)}D")
    return fdtd_waveform(u_0, u_1, c0, c1, c2, sample_count, readout)


def fdtd_waveform_2d(
    u_0: ArrayLike,
    u_1: ArrayLike,
    boundary: ArrayLike,
    c0: float,
    c1: float,
    c2: float,
    sample_count: int,
    readout: Sequence[float],
) -> NDArray[np.float64]:
    """Waveform of a 2D FDTD simulation over a masked grid."""
    if np.ndim(u_0) != 2:
        raise ValueError(f"expected a 2D grid, got {np.ndim(u_0)}D")
    return fdtd_waveform(u_0, u_1, c0, c1, c2, sample_count, readout, boundary=boundary)
