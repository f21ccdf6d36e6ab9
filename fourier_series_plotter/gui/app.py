"""Notebook GUI: one input row, a waveform canvas and an independent harmonics canvas.

Entry point:
    from fourier_series_plotter.gui.app import build_gui
    gui = build_gui()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import ipywidgets as w
import matplotlib.pyplot as plt
from IPython.display import display

from fourier_series_plotter.analysis.pipeline import (
    HarmonicSpectrum,
    PlotResult,
    harmonic_spectrum,
    run_plot,
)
from fourier_series_plotter.analysis.validation import MAX_SAMPLES, MIN_SAMPLES, ValidationError, parse_plot_inputs
from fourier_series_plotter.gui.canvas import render_harmonics, render_waveform
from fourier_series_plotter.gui.log_view import HtmlLog
from fourier_series_plotter.models.profile import PlotProfile


# Keep a single active GUI instance per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None


@dataclass
class PlotState:
    result: Optional[PlotResult] = None
    spectrum: Optional[HarmonicSpectrum] = None


def build_plot_panel(profile: Optional[PlotProfile] = None) -> w.Widget:
    """
    Input fields, "Plot" and "Show harmonics" buttons, two plot areas and a log.

    Inputs are plain text fields so that non-numeric entries reach validation
    and are reported instead of being silently coerced by the widget.
    """
    profile = profile or PlotProfile()
    state = PlotState()
    log = HtmlLog(title="Log")

    txt_start = w.Text(value=str(profile.default_start), description="Start", layout=w.Layout(width="200px"))
    txt_end = w.Text(value=f"{profile.default_end:.6g}", description="End", layout=w.Layout(width="200px"))
    txt_harm = w.Text(value=str(profile.default_harmonics), description="Harmonics", layout=w.Layout(width="200px"))
    txt_samples = w.Text(
        value=str(profile.default_samples),
        description="Samples",
        placeholder=f"{MIN_SAMPLES}..{MAX_SAMPLES}",
        layout=w.Layout(width="200px"),
    )

    btn_plot = w.Button(description="Plot", button_style="primary")
    btn_harm = w.Button(description="Show harmonics")
    btn_table = w.Button(description="Show coefficients")

    out_graph = w.Output(layout=w.Layout(border="1px solid #ddd", padding="4px"))
    out_harm = w.Output(layout=w.Layout(border="1px solid #ddd", padding="4px"))
    out_table = w.Output()

    def _clear_and_close(out: w.Output) -> None:
        out.clear_output(wait=False)
        plt.close("all")

    def _plot(_):
        with out_graph:
            _clear_and_close(out_graph)
            try:
                request = parse_plot_inputs(
                    txt_start.value,
                    txt_end.value,
                    txt_harm.value,
                    txt_samples.value,
                    max_harmonics=profile.max_harmonics_ui,
                )
            except ValidationError as e:
                log.error(f"ERROR: {e}")
                return

            result = run_plot(request, profile)
            state.result = result
            state.spectrum = None

            c = result.coefficients
            log.info(
                f"Plot: [{request.start:g}, {request.end:g}) N={request.sample_count} G={request.harmonic_count} "
                f"a0={c.dc:.4g}"
            )
            if result.transform.degenerate_x or result.transform.degenerate_y:
                log.warning("WARNING: constant data range; centred on a unit span.")

            render_waveform(result, profile)
            plt.show()

        with out_harm:
            _clear_and_close(out_harm)

    def _show_harmonics(_):
        with out_harm:
            _clear_and_close(out_harm)
            if state.result is None:
                log.warning("WARNING: nothing computed yet. Click 'Plot' first.")
                return

            spectrum = harmonic_spectrum(state.result.coefficients, profile)
            state.spectrum = spectrum
            if spectrum.orders.size == 0:
                log.warning("WARNING: harmonic count is 0; no bars to draw.")
            elif spectrum.transform.degenerate:
                log.warning("WARNING: all harmonic magnitudes are zero; amplitude axis set to 0..1.")
            else:
                log.info(f"Harmonics: max |C| = {spectrum.transform.amplitude_max:.4g}")

            render_harmonics(spectrum, profile)
            plt.show()

    def _show_table(_):
        with out_table:
            out_table.clear_output(wait=False)
            if state.result is None:
                log.warning("WARNING: nothing computed yet. Click 'Plot' first.")
                return
            display(state.result.coefficients.to_frame())

    btn_plot.on_click(_plot)
    btn_harm.on_click(_show_harmonics)
    btn_table.on_click(_show_table)

    row1 = w.HBox([txt_start, txt_end, txt_harm, txt_samples])
    row2 = w.HBox([btn_plot, btn_harm, btn_table])
    return w.VBox([row1, row2, out_graph, out_harm, out_table, log.panel])


def build_gui(profile: Optional[PlotProfile] = None, *, display_now: bool = False) -> w.Widget:
    """Create (and optionally display) the plot panel, closing any previous instance."""
    global _ACTIVE_GUI

    if _ACTIVE_GUI is not None:
        _ACTIVE_GUI.close()
        _ACTIVE_GUI = None

    panel = build_plot_panel(profile)
    _ACTIVE_GUI = panel
    if display_now:
        display(panel)
    return panel
