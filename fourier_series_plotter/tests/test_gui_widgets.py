"""Headless smoke tests for the notebook panel.

These tests run without a display and verify that:
1. The panel is a widget tree with Output areas for both plots
2. Invalid input is reported in the log and nothing is plotted
3. Plot and Show harmonics work as independent actions
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import ipywidgets as w
import pytest

from fourier_series_plotter.gui.app import build_gui, build_plot_panel
from fourier_series_plotter.gui.log_view import HtmlLog
from fourier_series_plotter.models.profile import PlotProfile


def _walk(widget):
    yield widget
    for child in getattr(widget, "children", ()) or ():
        yield from _walk(child)


def _find(panel, cls, description=None):
    for wd in _walk(panel):
        if isinstance(wd, cls) and (description is None or getattr(wd, "description", None) == description):
            return wd
    raise AssertionError(f"{cls.__name__} {description!r} not found")


def _log_html(panel) -> str:
    return "".join(wd.value for wd in _walk(panel) if isinstance(wd, w.HTML))


def test_panel_contains_outputs_and_buttons():
    panel = build_plot_panel()
    assert isinstance(panel, w.Widget)
    outputs = [wd for wd in _walk(panel) if isinstance(wd, w.Output)]
    assert len(outputs) >= 2
    for name in ("Plot", "Show harmonics", "Show coefficients"):
        _find(panel, w.Button, name)


def test_invalid_samples_reported_in_log():
    panel = build_plot_panel()
    _find(panel, w.Text, "Samples").value = "1001"
    _find(panel, w.Button, "Plot").click()
    assert "Sample count must be &lt;= 1000" in _log_html(panel)


def test_non_numeric_start_reported_in_log():
    panel = build_plot_panel()
    _find(panel, w.Text, "Start").value = "abc"
    _find(panel, w.Button, "Plot").click()
    assert "start must be a number" in _log_html(panel)


def test_harmonic_count_above_profile_cap_reported_in_log():
    panel = build_plot_panel(PlotProfile(max_harmonics_ui=10))
    _find(panel, w.Text, "Harmonics").value = "11"
    _find(panel, w.Button, "Plot").click()
    html_text = _log_html(panel)
    assert "Harmonic count must be &lt;= 10" in html_text
    assert "Plot:" not in html_text


def test_harmonics_before_plot_warns():
    panel = build_plot_panel()
    _find(panel, w.Button, "Show harmonics").click()
    assert "nothing computed yet" in _log_html(panel)


def test_plot_then_harmonics():
    panel = build_plot_panel()
    _find(panel, w.Text, "Harmonics").value = "3"
    _find(panel, w.Text, "Samples").value = "50"
    _find(panel, w.Button, "Plot").click()
    html_after_plot = _log_html(panel)
    assert "Plot:" in html_after_plot
    assert "G=3" in html_after_plot

    _find(panel, w.Button, "Show harmonics").click()
    assert "Harmonics: max |C|" in _log_html(panel)


def test_build_gui_replaces_previous_instance():
    first = build_gui()
    second = build_gui()
    assert first is not second
    assert isinstance(second, w.VBox)


def test_html_log_coalesces_and_bounds():
    log = HtmlLog(max_entries=3)
    log.info("a")
    log.info("a")
    log.warning("b")
    log.error("c")
    log.info("d")
    assert log.entries == (("warning", "b", 1), ("error", "c", 1), ("info", "d", 1))

    log.clear()
    log.info("x")
    log.info("x")
    assert log.entries == (("info", "x", 2),)
    assert "(x2)" in log.widget.value


@pytest.mark.parametrize("level", ["info", "warning", "error"])
def test_html_log_escapes_messages(level):
    log = HtmlLog()
    getattr(log, level)("<b>1 < 2</b>")
    assert "&lt;b&gt;1 &lt; 2&lt;/b&gt;" in log.widget.value
