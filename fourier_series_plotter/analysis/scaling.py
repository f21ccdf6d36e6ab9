"""Data-to-pixel mapping for fixed-size drawing canvases.

Two independent linear maps are provided:

- :func:`compute_transform` for the waveform plot, where both axes are data
  scaled (``x`` from the shared abscissas, ``y`` from the union of all
  ordinate series);
- :func:`compute_harmonic_transform` for the harmonic bar chart, where ``x``
  is the harmonic index ``1..G`` on evenly spaced slots and ``y`` runs from
  ``0`` to ``max(c_1..c_G)``.

Pixel ``y`` grows downwards, so data "up" maps to a smaller pixel ``y``.

Degenerate ranges
-----------------
- Waveform axes: a zero span is widened to a unit span centred on the value
  (``v - 0.5 .. v + 0.5``), so a constant series lands in the middle of the
  usable area.
- Amplitude axis: when ``max(c) <= 0`` (or ``G == 0``) the range is ``0 .. 1``,
  so every bar sits on the baseline.
- Index axis: ``G == 0`` uses a single slot.

The ``degenerate_*`` flags on the returned transforms record when a fallback
was applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from fourier_series_plotter.models.profile import DrawingBox

from .validation import validate_box


ArrayLike = Union[float, np.ndarray]


@dataclass(frozen=True)
class ViewTransform:
    """Affine map ``px = offset_x + x*scale_x``, ``py = offset_y - y*scale_y``.

    ``min_*``/``max_*`` are the effective data ranges (after any degenerate
    fallback) that map onto the edges of the usable area of ``box``.
    """

    scale_x: float
    scale_y: float
    offset_x: float
    offset_y: float

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    box: DrawingBox
    degenerate_x: bool = False
    degenerate_y: bool = False


@dataclass(frozen=True)
class HarmonicTransform:
    """Index/amplitude map for the harmonic bar chart."""

    n_harmonics: int
    slot_width: float
    amplitude_max: float
    box: DrawingBox
    degenerate: bool = False

    @property
    def baseline(self) -> float:
        """Pixel ``y`` of zero amplitude."""
        return float(self.box.margin + self.box.inner_height)


@dataclass(frozen=True)
class AxisTicks:
    """Grid-line pixel positions with their data values and text labels."""

    x_pixels: np.ndarray
    x_values: np.ndarray
    x_labels: Tuple[str, ...]
    y_pixels: np.ndarray
    y_values: np.ndarray
    y_labels: Tuple[str, ...]


def _effective_range(lo: float, hi: float, extent: float) -> Tuple[float, float, float, bool]:
    """Return ``(lo, hi, scale, degenerate)`` with a finite, positive scale."""
    span = hi - lo
    if span > 0:
        scale = extent / span
        if np.isfinite(scale):
            return lo, hi, float(scale), False
    mid = 0.5 * (lo + hi)
    lo, hi = mid - 0.5, mid + 0.5
    return lo, hi, float(extent), True


def _as_series_list(series: Any) -> List[Any]:
    if hasattr(series, "x") and hasattr(series, "y"):
        return [series]
    out = list(series)
    if not out:
        raise ValueError("compute_transform needs at least one series")
    return out


def compute_transform(series: Union[Any, Sequence[Any]], box: DrawingBox) -> ViewTransform:
    """Fit one or more series sharing an ``x`` domain into ``box``.

    Parameters
    ----------
    series:
        A :class:`~fourier_series_plotter.models.signal.SampleSet`,
        :class:`~fourier_series_plotter.models.results.ApproximationSet`, or a
        sequence of them. Every series must have the same number of points.
    box:
        Target canvas.

    Raises
    ------
    ValidationError
        If ``box`` has no usable area.
    ValueError
        On mismatched series lengths, empty or non-finite data.
    """
    box = validate_box(box)
    items = _as_series_list(series)

    xs = [np.asarray(s.x, dtype=float).ravel() for s in items]
    ys = [np.asarray(s.y, dtype=float).ravel() for s in items]
    n = xs[0].size
    if n == 0:
        raise ValueError("series must contain at least one point")
    for i, (x, y) in enumerate(zip(xs, ys)):
        if x.size != n or y.size != n:
            raise ValueError(f"series {i} has {x.size}/{y.size} points (x/y), expected {n}")

    x_all = np.concatenate(xs)
    y_all = np.concatenate(ys)
    if not (np.all(np.isfinite(x_all)) and np.all(np.isfinite(y_all))):
        raise ValueError("series contain non-finite values")

    min_x, max_x, scale_x, deg_x = _effective_range(float(x_all.min()), float(x_all.max()), box.inner_width)
    min_y, max_y, scale_y, deg_y = _effective_range(float(y_all.min()), float(y_all.max()), box.inner_height)

    return ViewTransform(
        scale_x=scale_x,
        scale_y=scale_y,
        offset_x=float(box.margin) - min_x * scale_x,
        offset_y=float(box.margin) + box.inner_height + min_y * scale_y,
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        box=box,
        degenerate_x=deg_x,
        degenerate_y=deg_y,
    )


def apply_transform(t: ViewTransform, x: ArrayLike, y: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """Map data coordinates to pixel coordinates (scalars or arrays)."""
    margin = float(t.box.margin)
    px = margin + (np.asarray(x, dtype=float) - t.min_x) * t.scale_x
    py = margin + t.box.inner_height - (np.asarray(y, dtype=float) - t.min_y) * t.scale_y
    if np.ndim(px) == 0 and np.ndim(py) == 0:
        return float(px), float(py)
    return px, py


def compute_harmonic_transform(magnitudes: Iterable[float], box: DrawingBox) -> HarmonicTransform:
    """Fit the magnitudes ``c_1..c_G`` into ``box`` (index on x, amplitude on y)."""
    box = validate_box(box)
    c = np.asarray(list(magnitudes), dtype=float).ravel()
    G = int(c.size)
    if G and not np.all(np.isfinite(c)):
        raise ValueError("magnitudes contain non-finite values")

    slot = box.inner_width / float(max(G, 1))
    c_max = float(c.max()) if G else 0.0
    degenerate = not c_max > 0
    if degenerate:
        c_max = 1.0

    return HarmonicTransform(
        n_harmonics=G,
        slot_width=float(slot),
        amplitude_max=c_max,
        box=box,
        degenerate=degenerate,
    )


def apply_harmonic_transform(t: HarmonicTransform, k: ArrayLike, c: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """Map harmonic order ``k`` and magnitude ``c`` to pixel coordinates."""
    margin = float(t.box.margin)
    h = t.box.inner_height
    px = margin + np.asarray(k, dtype=float) * t.slot_width
    py = margin + h - np.asarray(c, dtype=float) * (h / t.amplitude_max)
    if np.ndim(px) == 0 and np.ndim(py) == 0:
        return float(px), float(py)
    return px, py


def _check_divisions(n: int, name: str) -> int:
    n = int(n)
    if n < 1:
        raise ValueError(f"{name} must be >= 1, got {n}")
    return n


def axis_ticks(t: ViewTransform, n_x: int = 10, n_y: int = 10) -> AxisTicks:
    """Grid lines for the waveform canvas.

    ``x`` labels increase left to right from ``min_x``; ``y`` labels decrease
    top to bottom from ``max_y``.  Labels use two decimals.
    """
    n_x = _check_divisions(n_x, "n_x")
    n_y = _check_divisions(n_y, "n_y")
    box = t.box
    m = float(box.margin)

    i = np.arange(n_x + 1, dtype=float)
    x_pixels = m + i * box.inner_width / n_x
    x_values = t.min_x + i * (t.max_x - t.min_x) / n_x

    j = np.arange(n_y + 1, dtype=float)
    y_pixels = m + j * box.inner_height / n_y
    y_values = t.max_y - j * (t.max_y - t.min_y) / n_y

    return AxisTicks(
        x_pixels=x_pixels,
        x_values=x_values,
        x_labels=tuple(f"{v:.2f}" for v in x_values),
        y_pixels=y_pixels,
        y_values=y_values,
        y_labels=tuple(f"{v:.2f}" for v in y_values),
    )


def harmonic_ticks(t: HarmonicTransform, n_y: int = 5) -> AxisTicks:
    """Grid lines for the harmonics canvas.

    Vertical lines sit on every slot boundary ``0..G``; the labels ``C1..CG``
    belong to the bar positions ``1..G``.  Amplitude labels decrease top to
    bottom from ``amplitude_max`` to zero.
    """
    n_y = _check_divisions(n_y, "n_y")
    box = t.box
    m = float(box.margin)
    G = t.n_harmonics

    i = np.arange(max(G, 1) + 1, dtype=float)
    x_pixels = m + i * t.slot_width
    x_values = i

    j = np.arange(n_y + 1, dtype=float)
    y_pixels = m + j * box.inner_height / n_y
    y_values = t.amplitude_max - j * t.amplitude_max / n_y

    return AxisTicks(
        x_pixels=x_pixels,
        x_values=x_values,
        x_labels=tuple(f"C{k}" for k in range(1, G + 1)),
        y_pixels=y_pixels,
        y_values=y_values,
        y_labels=tuple(f"{v:.2f}" for v in y_values),
    )
