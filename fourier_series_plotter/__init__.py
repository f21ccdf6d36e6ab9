"""Fourier Series Plotter -- truncated Fourier-series approximation of a periodic waveform.

This package provides tools for:
- Sampling a fixed piecewise-linear periodic signal over one period
- Computing discrete Fourier coefficients (DC term, cosine/sine/magnitude per order)
- Reconstructing the truncated-series approximation at the sample abscissas
- Mapping data ranges onto fixed-size drawing canvases (waveform + harmonic bars)

Key principles:
- Pure recompute-on-demand: every plot action rebuilds all results from its inputs
- Validation before computation: bad inputs never produce partial output
- No NaN/inf in pixel space: degenerate ranges follow an explicit fallback policy

Main subpackages:
- analysis: Sampler, Fourier approximator, scaling transforms, validation, pipeline
- gui: Interactive ipywidgets panel and matplotlib canvas rendering
- models: Data models (Interval, SampleSet, CoefficientSet, PlotProfile)
- scripts: Command-line rendering to PNG/CSV
"""

__all__ = []
