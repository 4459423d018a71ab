"""
Bessel functions of the first kind and their zero crossings.

The eigenvalues of a circular membrane are the zeros of J_m (fixed edge) or
of J'_m (free edge). This module evaluates J_m by Miller's downward
recurrence and locates both families of zeros with a fixed refinement
budget that the caller can trade against precision.

Functions:
    bessel_j: J_n(x) for integer order n
    bessel_j_prime: J'_n(x) for integer order n
    bessel_j_zero: k-th positive zero of J_n (Dirichlet edge)
    bessel_j_prime_zero: k-th positive zero of J'_n (Neumann edge)
    bessel_j_prime_zeros: first `count` zeros of J'_n in one ascending pass

Example:
    >>> from drumhead.core.bessel import bessel_j, bessel_j_zero
    >>> round(bessel_j_zero(0, 1), 4)
    2.4048
    >>> abs(bessel_j(0, bessel_j_zero(0, 1))) < 1e-12
    True

Note:
    Refinement is not convergence checked. Zeros are seeded by McMahon's
    expansion when k is large relative to the order and by the uniform
    Airy-zero expansion otherwise. When a refined value is still not a
    zero, it is returned as an approximation and a
    NumericalApproximationWarning is emitted; no zero finder raises for a
    valid index.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.optimize import bisect
from scipy.special import ai_zeros

# Newton steps applied to the asymptotic estimate of a Dirichlet zero
NEWTON_ITERATIONS = 5

# Relative tolerance for the Neumann zero bisection (about 50 ULPs)
BISECTION_RTOL = 50 * float(np.finfo(np.float64).eps)

# Orders above max(n, x) at which the downward recurrence starts
MILLER_MARGIN = 15

# Residual |J_n(z)| above which a refined zero is reported as approximate
ZERO_RESIDUAL_TOLERANCE = 1e-6

# Orders above this multiple of k are seeded from the Airy-zero expansion
UNIFORM_SEED_RATIO = 4

_RESCALE_THRESHOLD = 1e100
_SMALL_ARGUMENT = 1e-8


class NumericalApproximationWarning(UserWarning):
    """Fixed-budget root refinement stopped away from a true zero."""


def _starting_order(order: int, x_max: float) -> int:
    """Even order at which Miller's recurrence is started."""
    base = max(order, int(x_max))
    top = base + MILLER_MARGIN + int(math.sqrt(40.0 * base))
    return 2 * (top // 2 + 1)


def _miller(top: int, x: NDArray[np.float64], rows: int) -> NDArray[np.float64]:
    """Normalised J_0(x) ... J_{rows-1}(x) by downward recurrence.

    Only the two most recent recurrence orders and the requested rows are
    kept, so memory grows with `rows` rather than with `top`.

    Args:
        top: Order at which the recurrence starts (even, >= rows)
        x: Strictly positive arguments, 1D
        rows: Number of low orders to return

    Returns:
        Array of shape (rows, len(x)) where row i holds J_i(x)
    """
    table = np.zeros((rows, x.size), dtype=np.float64)
    upper = np.zeros(x.size, dtype=np.float64)
    current = np.ones(x.size, dtype=np.float64)
    # J_0 + 2 * (J_2 + J_4 + ...) = 1, accumulated on the way down
    norm = 2.0 * current
    two_over_x = 2.0 / x

    for i in range(top, 0, -1):
        # J_{i-1}(x) = (2i / x) J_i(x) - J_{i+1}(x)
        lower = i * two_over_x * current - upper
        upper, current = current, lower
        n = i - 1
        if n < rows:
            table[n] = current
        if n % 2 == 0:
            norm += current if n == 0 else 2.0 * current

        big = np.abs(current) > _RESCALE_THRESHOLD
        if np.any(big):
            current[big] /= _RESCALE_THRESHOLD
            upper[big] /= _RESCALE_THRESHOLD
            norm[big] /= _RESCALE_THRESHOLD
            table[:, big] /= _RESCALE_THRESHOLD

    table /= norm
    return table


def bessel_table(order: int, x: ArrayLike) -> NDArray[np.float64]:
    """Evaluate J_0 ... J_{order+1} at every element of x.

    Args:
        order: Highest order of interest (non-negative). One extra order is
            returned so that derivatives can be formed from the table.
        x: Scalar or array of arguments

    Returns:
        Array of shape (order + 2, *np.shape(x)) where row i holds J_i(x)
    """
    x = np.asarray(x, dtype=np.float64)
    flat = np.abs(x.ravel())
    table = np.zeros((order + 2, flat.size), dtype=np.float64)

    # Leading term of the power series, J_n(x) ~ (x/2)^n / n!
    tiny = flat < _SMALL_ARGUMENT
    if np.any(tiny):
        for n in range(order + 2):
            table[n, tiny] = (flat[tiny] / 2.0) ** n / math.factorial(n)

    if not np.all(tiny):
        rest = flat[~tiny]
        top = _starting_order(order + 1, float(rest.max()))
        table[:, ~tiny] = _miller(top, rest, order + 2)

    # J_n(-x) = (-1)^n J_n(x)
    negative = x.ravel() < 0
    if np.any(negative):
        table[1::2, negative] *= -1.0

    return table.reshape((order + 2,) + x.shape)


def bessel_j(order: int, x: ArrayLike) -> float | NDArray[np.float64]:
    """Bessel function of the first kind J_order(x).

    Args:
        order: Integer order. Negative orders use J_{-n} = (-1)^n J_n.
        x: Scalar or array of arguments

    Returns:
        J_order(x), a float for scalar input or an array shaped like x
    """
    sign = -1.0 if order < 0 and order % 2 else 1.0
    order = abs(order)
    values = sign * bessel_table(order, x)[order]
    return float(values) if np.ndim(x) == 0 else values


def bessel_j_prime(order: int, x: ArrayLike) -> float | NDArray[np.float64]:
    """Derivative J'_order(x) of the Bessel function of the first kind.

    Uses J'_0 = -J_1 and J'_n = (J_{n-1} - J_{n+1}) / 2.
    """
    sign = -1.0 if order < 0 and order % 2 else 1.0
    order = abs(order)
    table = bessel_table(order, x)
    if order == 0:
        values = -table[1]
    else:
        values = 0.5 * (table[order - 1] - table[order + 1])
    values = sign * values
    return float(values) if np.ndim(x) == 0 else values


def _mcmahon(order: int, k: int) -> float:
    """Asymptotic estimate of the k-th zero of J_order.

    Watson, Theory of Bessel Functions, p.506.
    """
    beta = (k + 0.5 * order - 0.25) * math.pi
    beta8 = 8.0 * beta
    mu = 4.0 * order * order
    z = beta - (mu - 1) / beta8
    z -= 4 * (mu - 1) * (7 * mu - 31) / (3 * beta8**3)
    z -= 32 * (mu - 1) * (83 * mu**2 - 982 * mu + 3779) / (15 * beta8**5)
    z -= (
        64
        * (mu - 1)
        * (6949 * mu**3 - 153855 * mu**2 + 1585743 * mu - 6277237)
        / (105 * beta8**7)
    )
    return z


def _uniform_seed(order: int, k: int) -> float:
    """Estimate of the k-th zero of J_order for orders large relative to k.

    j_{n,k} ~ n - a_k (n/2)^(1/3) + (3/20) a_k² (n/2)^(-1/3), where a_k is the
    k-th (negative) zero of the Airy function Ai.

    Abramowitz & Stegun (1964) Handbook of Mathematical Functions, 9.5.22.
    """
    a_k = float(ai_zeros(k)[0][k - 1])
    scale = (0.5 * order) ** (1.0 / 3.0)
    return order - a_k * scale + 0.15 * a_k * a_k / scale


def bessel_j_zero(order: int, k: int, iterations: int = NEWTON_ITERATIONS) -> float:
    """k-th positive zero of J_order.

    The McMahon expansion (k large relative to the order) or the uniform
    Airy-zero expansion (order above UNIFORM_SEED_RATIO * k) provides the
    starting point, which is then refined by a fixed number of Newton steps
    using the recurrence derivative J'_n(x) = (n/x) J_n(x) - J_{n+1}(x).

    Args:
        order: Bessel order (sign is ignored, zeros of J_{-n} and J_n agree)
        k: Index of the zero, starting at 1. k = 0 returns the trivial
            root at the origin, 0.0.
        iterations: Newton steps (default: NEWTON_ITERATIONS)

    Returns:
        Location of the zero. If refinement stops away from a zero, or below
        the order (where J_order has no positive zeros), the value is an
        approximation and a NumericalApproximationWarning is emitted.

    Raises:
        ValueError: If k is negative
    """
    if k < 0:
        raise ValueError(f"zero index must be non-negative, got {k}")
    if k == 0:
        return 0.0

    order = abs(order)
    if order > UNIFORM_SEED_RATIO * k:
        z = _uniform_seed(order, k)
    else:
        z = _mcmahon(order, k)

    for _ in range(iterations):
        table = bessel_table(order, z)
        derivative = order / z * table[order] - table[order + 1]
        step = float(table[order] / derivative)
        if not math.isfinite(step) or z - step <= 0:
            break
        z -= step

    residual = abs(bessel_j(order, z))
    if not residual <= ZERO_RESIDUAL_TOLERANCE or (order and z <= order):
        warnings.warn(
            f"Zero {k} of J_{order} refined to {z:.6g} with residual "
            f"{residual:.2e} after {iterations} Newton iterations.",
            NumericalApproximationWarning,
            stacklevel=2,
        )
    return z


def _bisect_prime(order: int, lower: float, upper: float, rtol: float) -> float:
    """Locate the single zero of J'_order inside (lower, upper).

    If J'_order does not change sign across the bracket, the endpoint with
    the smaller |J'_order| is returned as an approximation.
    """
    f_lower = bessel_j_prime(order, lower)
    f_upper = bessel_j_prime(order, upper)
    if f_lower == 0.0:
        return lower
    if f_upper == 0.0:
        return upper
    if not f_lower * f_upper < 0:
        estimate = lower if abs(f_lower) <= abs(f_upper) else upper
        warnings.warn(
            f"No sign change of J'_{order} on [{lower:.6g}, {upper:.6g}]; "
            f"returning {estimate:.6g} as an approximate zero.",
            NumericalApproximationWarning,
            stacklevel=3,
        )
        return estimate
    return float(
        bisect(
            lambda x: bessel_j_prime(order, x),
            lower,
            upper,
            xtol=rtol,
            rtol=rtol,
            maxiter=200,
        )
    )


def _first_prime_bracket(order: int) -> tuple[float, int]:
    """Lower bound of the first non-trivial zero of J'_order.

    Returns the lower bound and the index of the Dirichlet zero that closes
    the bracket. For order >= 1 the first zero of J'_n lies in (n, j_{n,1}).
    For order 0 the zero at x = 0 is the rigid-body mode, so the search
    starts at j_{0,1} and interlaces with the following Dirichlet zeros.
    """
    if order == 0:
        return bessel_j_zero(0, 1), 2
    return float(order), 1


def bessel_j_prime_zero(order: int, k: int, rtol: float = BISECTION_RTOL) -> float:
    """k-th positive zero of J'_order.

    The zero is bracketed by the neighbouring zeros of J_order and refined by
    bisection. The root at x = 0 (the rigid-body mode of a free membrane) is
    not counted, so k = 1 is always the first vibrating mode.

    Args:
        order: Bessel order
        k: Index of the zero, starting at 1. k = 0 returns 0.0.
        rtol: Relative tolerance of the bisection (default: BISECTION_RTOL)

    Returns:
        Location of the zero

    Raises:
        ValueError: If k is negative
    """
    if k < 0:
        raise ValueError(f"zero index must be non-negative, got {k}")
    if k == 0:
        return 0.0

    order = abs(order)
    lower, closing = _first_prime_bracket(order)
    if k > 1:
        lower = bessel_j_zero(order, closing + k - 2)
    upper = bessel_j_zero(order, closing + k - 1)
    return _bisect_prime(order, lower, upper, rtol)


def bessel_j_prime_zeros(
    order: int, count: int, rtol: float = BISECTION_RTOL
) -> NDArray[np.float64]:
    """First `count` positive zeros of J'_order in ascending order.

    Each bracket reuses the upper bound of the previous one, so the zeros
    must be produced in ascending order.

    Args:
        order: Bessel order
        count: Number of zeros
        rtol: Relative tolerance of the bisection

    Returns:
        Array of shape (count,)
    """
    order = abs(order)
    zeros = np.zeros(count, dtype=np.float64)
    lower, closing = _first_prime_bracket(order)
    for k in range(count):
        upper = bessel_j_zero(order, closing + k)
        zeros[k] = _bisect_prime(order, lower, upper, rtol)
        lower = upper
    return zeros
