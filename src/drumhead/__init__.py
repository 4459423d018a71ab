"""
Drumhead - modal analysis and FDTD sound synthesis for vibrating membranes.

Main exports:
- series, amplitudes: Eigenvalues and strike-point mode shapes of canonical
  domains (linear, circular, rectangular, triangular)
- cymatics, chladni_pattern: Standing-wave fields and their nodal lines
- additive_synthesis: Damped sinusoid bank rendered to a waveform
- FDTDSimulation, fdtd_waveform: Time-domain membrane simulation
- bessel_j, bessel_j_zero, bessel_j_prime_zero: Bessel functions and roots
- raised_cosine_*, raised_triangle_*: FDTD initial conditions
- Point: Strike and readout locations
"""

from drumhead.analysis import CYMATIC_FAMILIES, chladni_pattern, cymatics
from drumhead.core import (
    DimensionMismatchError,
    FDTDCoefficients,
    FDTDSimulation,
    NumericalApproximationWarning,
    bessel_j,
    bessel_j_prime,
    bessel_j_prime_zero,
    bessel_j_prime_zeros,
    bessel_j_zero,
    fdtd_waveform,
    fdtd_waveform_1d,
    fdtd_waveform_2d,
    raised_cosine_1d,
    raised_cosine_2d,
    raised_triangle_1d,
    raised_triangle_2d,
)
from drumhead.dsp import additive_synthesis, normalise
from drumhead.geometry import (
    Point,
    cartesian_to_polar,
    cartesian_to_trilinear,
    polar_to_cartesian,
    trilinear_to_cartesian,
)
from drumhead.modes import (
    FAMILIES,
    BoundaryConditions,
    amplitudes,
    circular_amplitudes,
    circular_series,
    equilateral_triangle_amplitudes,
    equilateral_triangle_series,
    linear_amplitudes,
    linear_series,
    rectangular_amplitudes,
    rectangular_series,
    series,
    series_to_frequencies,
)

__version__ = "0.1.0"

__all__ = [
    # Modal analysis
    "series",
    "amplitudes",
    "series_to_frequencies",
    "FAMILIES",
    "BoundaryConditions",
    "linear_series",
    "linear_amplitudes",
    "circular_series",
    "circular_amplitudes",
    "rectangular_series",
    "rectangular_amplitudes",
    "equilateral_triangle_series",
    "equilateral_triangle_amplitudes",
    # Cymatics
    "cymatics",
    "chladni_pattern",
    "CYMATIC_FAMILIES",
    # Synthesis
    "additive_synthesis",
    "normalise",
    # FDTD
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
    # Bessel
    "bessel_j",
    "bessel_j_prime",
    "bessel_j_zero",
    "bessel_j_prime_zero",
    "bessel_j_prime_zeros",
    "NumericalApproximationWarning",
    # Geometry
    "Point",
    "cartesian_to_polar",
    "polar_to_cartesian",
    "cartesian_to_trilinear",
    "trilinear_to_cartesian",
    "__version__",
]
