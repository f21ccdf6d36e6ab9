"""
Command-line rendering of the Fourier-series plots.

Runs the same pipeline as the notebook GUI and writes:
- waveform.png     : sampled signal (red) and truncated series (blue)
- harmonics.png    : magnitudes C1..CG (skipped with --no-harmonics)
- coefficients.csv : a_k, b_k, c_k per order (with --csv)
- report.pptx      : slides with both images and the coefficient table (with --pptx)

Examples
--------
>>> # python -m fourier_series_plotter.scripts.plot_fourier --start 0 --end 6.2832 --harmonics 5 --samples 200 --out-dir out
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib

matplotlib.use("Agg")

from fourier_series_plotter.analysis.pipeline import harmonic_spectrum, run_plot
from fourier_series_plotter.analysis.validation import ValidationError, parse_plot_inputs
from fourier_series_plotter.gui.canvas import render_harmonics, render_waveform
from fourier_series_plotter.models.profile import PlotProfile
from fourier_series_plotter.presentation.pptx_report import build_report, savefig


EXIT_INVALID_INPUT = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="python -m fourier_series_plotter.scripts.plot_fourier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Approximate the built-in periodic signal by a truncated Fourier series
            and render the waveform and harmonic amplitude plots to PNG files.
            """
        ),
    )
    # Strings on purpose: validation reports non-numeric input with its own reason.
    p.add_argument("--start", default=None, help="Interval start (default from profile)")
    p.add_argument("--end", default=None, help="Interval end, must exceed start (default from profile)")
    p.add_argument("--harmonics", default=None, help="Highest harmonic order G >= 0")
    p.add_argument("--samples", default=None, help="Sample count N in [1, 1000]")
    p.add_argument("--out-dir", default="fourier_out", help="Output directory (default: ./fourier_out)")
    p.add_argument("--profile", default=None, help="Optional PlotProfile JSON file")
    p.add_argument("--no-harmonics", action="store_true", help="Do not render the harmonics chart")
    p.add_argument("--csv", action="store_true", help="Also export coefficients.csv")
    p.add_argument("--pptx", action="store_true", help="Also assemble report.pptx")

    ns = p.parse_args(list(argv) if argv is not None else None)

    profile = PlotProfile.from_json(ns.profile) if ns.profile else PlotProfile()

    try:
        request = parse_plot_inputs(
            ns.start if ns.start is not None else profile.default_start,
            ns.end if ns.end is not None else profile.default_end,
            ns.harmonics if ns.harmonics is not None else profile.default_harmonics,
            ns.samples if ns.samples is not None else profile.default_samples,
            max_harmonics=profile.max_harmonics_ui,
        )
    except ValidationError as e:
        print(f"[error] {e.field}: {e} ({e.reason})")
        return EXIT_INVALID_INPUT

    out_dir = Path(ns.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    result = run_plot(request, profile)
    c = result.coefficients
    print(
        f"[info] interval=[{request.start:g}, {request.end:g}) N={request.sample_count} "
        f"G={request.harmonic_count} a0={c.dc:.6g}"
    )
    if result.transform.degenerate_x or result.transform.degenerate_y:
        print("[warn] constant data range; plot centred on a unit span")

    waveform_png = savefig(render_waveform(result, profile), out_dir, "waveform")
    print(f"[info] wrote {waveform_png}")

    harmonics_png = None
    if not ns.no_harmonics:
        spectrum = harmonic_spectrum(c, profile)
        if spectrum.transform.degenerate:
            print("[warn] no non-zero harmonic magnitudes; amplitude axis set to 0..1")
        harmonics_png = savefig(render_harmonics(spectrum, profile), out_dir, "harmonics")
        print(f"[info] wrote {harmonics_png}")

    if ns.csv:
        csv_path = out_dir / "coefficients.csv"
        c.to_frame().to_csv(csv_path, index=False)
        print(f"[info] wrote {csv_path}")

    if ns.pptx:
        pptx_path = build_report(
            result,
            out_dir / "report.pptx",
            waveform_png=waveform_png,
            harmonics_png=harmonics_png,
        )
        print(f"[info] wrote {pptx_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
