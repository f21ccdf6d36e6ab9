"""Matplotlib rendering of plot results on fixed-size pixel canvases.

The axes of every canvas span the pixel box exactly (``x: 0..width``,
``y: height..0``), so coordinates produced by the scaling transforms can be
drawn as-is.
"""

from __future__ import annotations

from typing import Tuple

import matplotlib.pyplot as plt

from fourier_series_plotter.analysis.pipeline import HarmonicSpectrum, PlotResult
from fourier_series_plotter.analysis.scaling import (
    AxisTicks,
    apply_transform,
    axis_ticks,
    harmonic_ticks,
)
from fourier_series_plotter.models.profile import DrawingBox, PlotProfile


def make_canvas(width: int, height: int, *, dpi: int = 100) -> Tuple[plt.Figure, plt.Axes]:
    """Figure of ``width x height`` pixels whose single axes uses pixel coordinates."""
    fig = plt.figure(figsize=(width / float(dpi), height / float(dpi)), dpi=dpi)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    return fig, ax


def _draw_frame(ax: plt.Axes, box: DrawingBox, ticks: AxisTicks, profile: PlotProfile) -> None:
    m = float(box.margin)
    right = m + box.inner_width
    bottom = m + box.inner_height

    ax.vlines(ticks.x_pixels, m, bottom, colors=profile.grid_color, linewidth=1.0, zorder=1)
    ax.hlines(ticks.y_pixels, m, right, colors=profile.grid_color, linewidth=1.0, zorder=1)

    # axes: x along the bottom, y along the left edge
    ax.plot([m, right], [bottom, bottom], color=profile.axis_color, linewidth=profile.line_width, zorder=2)
    ax.plot([m, m], [m, bottom], color=profile.axis_color, linewidth=profile.line_width, zorder=2)

    for y, label in zip(ticks.y_pixels, ticks.y_labels):
        ax.text(m - 5, y, label, ha="right", va="center", fontsize=profile.font_size, color=profile.axis_color)


def draw_waveform(ax: plt.Axes, result: PlotResult, profile: PlotProfile) -> plt.Axes:
    """Grid, axes, labels, the sampled signal (red) and its approximation (blue)."""
    t = result.transform
    ticks = axis_ticks(t, profile.grid_lines_x, profile.grid_lines_y)
    _draw_frame(ax, t.box, ticks, profile)

    bottom = float(t.box.margin) + t.box.inner_height
    for x, label in zip(ticks.x_pixels, ticks.x_labels):
        ax.text(x, bottom + 5, label, ha="center", va="top", fontsize=profile.font_size, color=profile.axis_color)

    px, py = apply_transform(t, result.samples.x, result.samples.y)
    ax.plot(px, py, color=profile.signal_color, linewidth=profile.line_width, zorder=3, label="signal")

    px, py = apply_transform(t, result.approximation.x, result.approximation.y)
    ax.plot(
        px,
        py,
        color=profile.approximation_color,
        linewidth=profile.line_width,
        zorder=4,
        label=f"Fourier series (G={result.approximation.n_harmonics})",
    )
    ax.legend(loc="upper right", fontsize=profile.font_size, frameon=False)
    return ax


def draw_harmonics(ax: plt.Axes, spectrum: HarmonicSpectrum, profile: PlotProfile) -> plt.Axes:
    """Amplitude grid and one vertical bar per harmonic magnitude ``c_k``."""
    t = spectrum.transform
    ticks = harmonic_ticks(t, profile.harmonic_grid_lines_y)
    _draw_frame(ax, t.box, ticks, profile)

    baseline = spectrum.baseline
    if spectrum.orders.size:
        ax.vlines(
            spectrum.bar_x,
            baseline,
            spectrum.bar_top,
            colors=profile.harmonics_color,
            linewidth=profile.line_width,
            zorder=3,
        )
    for x, label in zip(spectrum.bar_x, ticks.x_labels):
        ax.text(x, baseline + 15, label, ha="center", va="top", fontsize=profile.font_size, color=profile.axis_color)
    return ax


def render_waveform(result: PlotResult, profile: PlotProfile) -> plt.Figure:
    fig, ax = make_canvas(profile.graph_width, profile.graph_height)
    draw_waveform(ax, result, profile)
    return fig


def render_harmonics(spectrum: HarmonicSpectrum, profile: PlotProfile) -> plt.Figure:
    fig, ax = make_canvas(profile.harmonics_width, profile.harmonics_height)
    draw_harmonics(ax, spectrum, profile)
    return fig

