"""Core numerical components: Bessel functions and the FDTD engine."""

from drumhead.core.bessel import (
    NumericalApproximationWarning,
    bessel_j,
    bessel_j_prime,
    bessel_j_prime_zero,
    bessel_j_prime_zeros,
    bessel_j_zero,
    bessel_table,
)
from drumhead.core.fdtd import (
    DimensionMismatchError,
    FDTDCoefficients,
    FDTDSimulation,
    fdtd_waveform,
    fdtd_waveform_1d,
    fdtd_waveform_2d,
)
from drumhead.core.initial_conditions import (
    raised_cosine_1d,
    raised_cosine_2d,
    raised_triangle_1d,
    raised_triangle_2d,
)

__all__ = [
    "bessel_j",
    "bessel_j_prime",
    "bessel_j_zero",
    "bessel_j_prime_zero",
    "bessel_j_prime_zeros",
    "bessel_table",
    "NumericalApproximationWarning",
    "FDTDSimulation",
    "FDTDCoefficients",
    "DimensionMismatchError",
    "fdtd_waveform",
    "fdtd_waveform_1d",
    "fdtd_waveform_2d",
    "raised_cosine_1d",
    "raised_cosine_2d",
    "raised_triangle_1d",
    "raised_triangle_2d",
]
