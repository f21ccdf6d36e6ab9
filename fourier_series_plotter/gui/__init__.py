"""GUI package - interactive ipywidgets interface and matplotlib canvases.

The panel offers two independent actions sharing the last computed coefficients:
1. Plot: validate inputs, sample, approximate and draw signal + approximation
2. Show harmonics: draw the magnitudes C1..CG as a bar chart

Entry point:
    from fourier_series_plotter.gui.app import build_gui
    gui = build_gui()
"""
