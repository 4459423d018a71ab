"""Waveform synthesis from modal data.

Functions:
    additive_synthesis: Damped sinusoid bank driven by (series, amplitude) grids
    normalise: Peak normalisation that leaves silent waveforms untouched
"""

from drumhead.dsp.additive import additive_synthesis, normalise

__all__ = [
    "additive_synthesis",
    "normalise",
]
