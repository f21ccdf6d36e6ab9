"""Plot pipeline: validate -> sample -> approximate -> scale.

Two consumer-facing operations share one :class:`CoefficientSet`:

- :func:`run_plot` builds everything the waveform canvas needs;
- :func:`harmonic_spectrum` builds the bar-chart geometry from the
  coefficients of a previous :func:`run_plot`, and can be invoked (or not)
  independently of it.

Both are pure and synchronous.  A new call fully supersedes earlier results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

from fourier_series_plotter.models.profile import PlotProfile
from fourier_series_plotter.models.results import ApproximationSet, CoefficientSet
from fourier_series_plotter.models.signal import SampleSet

from .fourier import approximate
from .scaling import (
    HarmonicTransform,
    ViewTransform,
    apply_harmonic_transform,
    compute_harmonic_transform,
    compute_transform,
)
from .signal import sample_signal
from .validation import PlotRequest, parse_plot_inputs


@dataclass(frozen=True)
class PlotResult:
    """Outputs of one plot action."""

    request: PlotRequest
    samples: SampleSet
    coefficients: CoefficientSet
    approximation: ApproximationSet
    transform: ViewTransform


@dataclass(frozen=True)
class HarmonicSpectrum:
    """Bar-chart geometry for the magnitudes ``c_1..c_G``.

    Attributes
    ----------
    orders:
        Harmonic orders ``1..G``.
    magnitudes:
        ``c_1..c_G``.
    bar_x, bar_top:
        Pixel position of each bar and of its top end.
    """

    orders: np.ndarray
    magnitudes: np.ndarray
    bar_x: np.ndarray
    bar_top: np.ndarray
    transform: HarmonicTransform

    @property
    def baseline(self) -> float:
        return self.transform.baseline


def run_plot(request: Union[PlotRequest, Any], profile: Optional[PlotProfile] = None) -> PlotResult:
    """Run the full numeric chain for one plot action.

    ``request`` may be a validated :class:`PlotRequest` or a mapping of raw
    UI values with keys ``start``, ``end``, ``harmonic_count`` and
    ``sample_count``.  Validation happens before any sampling.
    """
    profile = profile or PlotProfile()
    if not isinstance(request, PlotRequest):
        request = parse_plot_inputs(
            request["start"],
            request["end"],
            request["harmonic_count"],
            request["sample_count"],
        )

    samples = sample_signal(request.interval, request.sample_count)
    coeffs, approx = approximate(samples, request.harmonic_count)
    transform = compute_transform([samples, approx], profile.graph_box())

    return PlotResult(
        request=request,
        samples=samples,
        coefficients=coeffs,
        approximation=approx,
        transform=transform,
    )


def harmonic_spectrum(
    coefficients: Union[CoefficientSet, PlotResult],
    profile: Optional[PlotProfile] = None,
) -> HarmonicSpectrum:
    """Bar-chart geometry for the harmonic magnitudes of a previous plot."""
    profile = profile or PlotProfile()
    if isinstance(coefficients, PlotResult):
        coefficients = coefficients.coefficients

    mags = np.asarray(coefficients.magnitudes, dtype=float)
    orders = np.asarray(coefficients.orders[1:], dtype=int)
    t = compute_harmonic_transform(mags, profile.harmonics_box())
    bar_x, bar_top = apply_harmonic_transform(t, orders, mags)

    return HarmonicSpectrum(
        orders=orders,
        magnitudes=mags,
        bar_x=np.atleast_1d(np.asarray(bar_x, dtype=float)),
        bar_top=np.atleast_1d(np.asarray(bar_top, dtype=float)),
        transform=t,
    )
