"""PPTX report of one plot action (default python-pptx 4:3 template).

Slides: title with the inputs, waveform image, harmonics image (optional),
coefficient table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from PIL import Image
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.util import Emu, Inches, Pt

from fourier_series_plotter.analysis.pipeline import PlotResult


# ── Default template layout indices ──────────────────────────────────
LY_TITLE = 0        # "Title Slide"
LY_TITLE_ONLY = 5   # "Title Only"

HEADER_BG = RGBColor(0x00, 0x33, 0x99)
DARK_GREY = RGBColor(0x33, 0x33, 0x33)
WHITE = RGBColor(0xFF, 0xFF, 0xFF)
LIGHT_BG = RGBColor(0xE8, 0xEB, 0xF0)

IMAGE_DPI = 180
MAX_TABLE_ROWS = 20


def savefig(fig, output_dir, name):
    """Save *fig* as a PNG and close it.

    Returns
    -------
    str
        Path of the saved image.
    """
    path = Path(output_dir) / f"{name}.png"
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(path), dpi=IMAGE_DPI, facecolor="white")
    plt.close(fig)
    return str(path)


def _slide_size_in(prs):
    return Emu(prs.slide_width).inches, Emu(prs.slide_height).inches


def slide_title(prs, title_text, subtitle_text=""):
    slide = prs.slides.add_slide(prs.slide_layouts[LY_TITLE])
    slide.shapes.title.text = title_text
    if subtitle_text and len(slide.placeholders) > 1:
        slide.placeholders[1].text = subtitle_text
    return slide


def slide_image(prs, title_text, img_path, top_in=1.5):
    """Title-only slide with one picture scaled to fit below the title."""
    slide = prs.slides.add_slide(prs.slide_layouts[LY_TITLE_ONLY])
    slide.shapes.title.text = title_text

    page_w, page_h = _slide_size_in(prs)
    max_w, max_h = page_w - 0.8, page_h - top_in - 0.4
    with Image.open(img_path) as im:
        iw, ih = im.size
    w_in, h_in = iw / IMAGE_DPI, ih / IMAGE_DPI
    scale = min(max_w / w_in, max_h / h_in, 1.5)
    w, h = w_in * scale, h_in * scale
    left = (page_w - w) / 2
    top = top_in + (max_h - h) / 2
    slide.shapes.add_picture(img_path, Inches(left), Inches(top), Inches(w), Inches(h))
    return slide


def slide_table(prs, title_text, headers: Sequence[str], rows: Sequence[Sequence[str]]):
    """Title-only slide with a striped table."""
    slide = prs.slides.add_slide(prs.slide_layouts[LY_TITLE_ONLY])
    slide.shapes.title.text = title_text

    page_w, page_h = _slide_size_in(prs)
    n_rows = len(rows) + 1
    n_cols = len(headers)
    table_w = page_w - 1.0
    tbl = slide.shapes.add_table(
        n_rows, n_cols, Inches(0.5), Inches(1.5),
        Inches(table_w), Inches(min(0.3 * n_rows, page_h - 2.0)),
    ).table

    for j, h in enumerate(headers):
        cell = tbl.cell(0, j)
        cell.text = h
        for p in cell.text_frame.paragraphs:
            p.font.size = Pt(12)
            p.font.bold = True
            p.font.color.rgb = WHITE
            p.alignment = PP_ALIGN.CENTER
        cell.fill.solid()
        cell.fill.fore_color.rgb = HEADER_BG

    for i, row in enumerate(rows):
        for j, val in enumerate(row):
            cell = tbl.cell(i + 1, j)
            cell.text = str(val)
            for p in cell.text_frame.paragraphs:
                p.font.size = Pt(10)
                p.font.color.rgb = DARK_GREY
                p.alignment = PP_ALIGN.CENTER
            if i % 2 == 0:
                cell.fill.solid()
                cell.fill.fore_color.rgb = LIGHT_BG
    return slide


def build_report(
    result: PlotResult,
    out_path,
    *,
    waveform_png: str,
    harmonics_png: Optional[str] = None,
) -> Path:
    """Assemble the report and write it to *out_path*.

    Only the first ``MAX_TABLE_ROWS`` coefficient orders are tabulated.
    """
    req = result.request
    prs = Presentation()

    slide_title(
        prs,
        "Fourier series approximation",
        f"interval [{req.start:g}, {req.end:g}), N = {req.sample_count}, G = {req.harmonic_count}",
    )
    slide_image(prs, "Signal and approximation", waveform_png)
    if harmonics_png:
        slide_image(prs, "Harmonic amplitudes", harmonics_png)

    df = result.coefficients.to_frame().head(MAX_TABLE_ROWS)
    rows = [
        [str(int(r.order)), f"{r.a:.4g}", f"{r.b:.4g}", f"{r.c:.4g}"]
        for r in df.itertuples(index=False)
    ]
    slide_table(prs, "Coefficients", ["k", "a_k", "b_k", "c_k"], rows)

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    prs.save(str(out))
    return out
