"""Numeric engine.

Design principle:
  - Validation produces a :class:`~fourier_series_plotter.analysis.validation.PlotRequest`
    or raises before anything is computed.
  - Sampling, Fourier approximation and scaling are pure functions of their
    explicit arguments; the signal never reads interval bounds from anywhere
    but its ``interval`` parameter.
"""

from .fourier import approximate, approximation_error, fourier_coefficients, reconstruct
from .pipeline import HarmonicSpectrum, PlotResult, harmonic_spectrum, run_plot
from .scaling import (
    HarmonicTransform,
    ViewTransform,
    apply_harmonic_transform,
    apply_transform,
    compute_harmonic_transform,
    compute_transform,
)
from .signal import sample_signal, signal_value
from .validation import PlotRequest, ValidationError, parse_plot_inputs

__all__ = [
    "approximate",
    "approximation_error",
    "fourier_coefficients",
    "reconstruct",
    "HarmonicSpectrum",
    "PlotResult",
    "harmonic_spectrum",
    "run_plot",
    "HarmonicTransform",
    "ViewTransform",
    "apply_harmonic_transform",
    "apply_transform",
    "compute_harmonic_transform",
    "compute_transform",
    "sample_signal",
    "signal_value",
    "PlotRequest",
    "ValidationError",
    "parse_plot_inputs",
]
