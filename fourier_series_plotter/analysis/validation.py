"""Input validation for the plot pipeline.

Every user-facing input is checked here before any sampling or Fourier
computation starts.  Violations raise :class:`ValidationError`, which carries
the offending field and a stable reason code so callers (GUI, CLI, tests) can
tell the failures apart without parsing messages.

Examples
--------
>>> req = parse_plot_inputs("0", "6.5", "3", "100")
>>> req.sample_count, req.harmonic_count
(100, 3)
>>> try:
...     parse_plot_inputs(0.0, 1.0, 3, 1001)
... except ValidationError as e:
...     e.reason
'sample_count_too_large'
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from fourier_series_plotter.models.profile import DrawingBox
from fourier_series_plotter.models.signal import Interval


MIN_SAMPLES = 1
MAX_SAMPLES = 1000

# Reason codes.
NON_NUMERIC = "non_numeric"
NON_FINITE = "non_finite"
NON_INTEGER = "non_integer"
NON_POSITIVE_INTERVAL = "non_positive_interval"
PERIOD_OVERFLOW = "period_overflow"
UNRESOLVED_SAMPLING = "unresolved_sampling"
SAMPLE_COUNT_TOO_SMALL = "sample_count_too_small"
SAMPLE_COUNT_TOO_LARGE = "sample_count_too_large"
NEGATIVE_HARMONIC_COUNT = "negative_harmonic_count"
HARMONIC_COUNT_TOO_LARGE = "harmonic_count_too_large"
INVALID_BOX = "invalid_box"


class ValidationError(ValueError):
    """Rejected input.

    Attributes
    ----------
    field:
        Name of the offending input (``"start"``, ``"sample_count"``, ...).
    reason:
        One of the module-level reason codes.
    """

    def __init__(self, field: str, reason: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.reason = reason


@dataclass(frozen=True)
class PlotRequest:
    """Validated inputs of one plot action."""

    start: float
    end: float
    harmonic_count: int
    sample_count: int

    @property
    def interval(self) -> Interval:
        return Interval(start=self.start, end=self.end)


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(field, NON_NUMERIC, f"{field} must be a number, got {value!r}.")
    if isinstance(value, numbers.Real):
        out = float(value)
    else:
        txt = "" if value is None else str(value).strip()
        try:
            out = float(txt)
        except ValueError:
            raise ValidationError(field, NON_NUMERIC, f"{field} must be a number, got {value!r}.") from None
    if not math.isfinite(out):
        raise ValidationError(field, NON_FINITE, f"{field} must be finite, got {value!r}.")
    return out


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    out = _as_float(value, field)
    if not out.is_integer():
        raise ValidationError(field, NON_INTEGER, f"{field} must be an integer, got {value!r}.")
    return int(out)


def validate_interval(start: float, end: float) -> Interval:
    """Return the interval, or raise if ``end <= start``."""
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ValidationError("interval", NON_FINITE, f"Interval bounds must be finite, got [{start}, {end}).")
    if not end > start:
        raise ValidationError(
            "interval",
            NON_POSITIVE_INTERVAL,
            f"End must be greater than start (got start={start}, end={end}).",
        )
    if not math.isfinite(end - start):
        raise ValidationError(
            "interval",
            PERIOD_OVERFLOW,
            f"Interval length overflows a float (start={start}, end={end}).",
        )
    return Interval(start=float(start), end=float(end))


def validate_sample_count(n: Any) -> int:
    """Check ``MIN_SAMPLES <= n <= MAX_SAMPLES``, naming the violated bound."""
    n = _as_int(n, "sample_count")
    if n < MIN_SAMPLES:
        raise ValidationError(
            "sample_count",
            SAMPLE_COUNT_TOO_SMALL,
            f"Sample count must be >= {MIN_SAMPLES}, got {n}.",
        )
    if n > MAX_SAMPLES:
        raise ValidationError(
            "sample_count",
            SAMPLE_COUNT_TOO_LARGE,
            f"Sample count must be <= {MAX_SAMPLES}, got {n}.",
        )
    return n


def sampling_abscissas(interval: Interval, n: int) -> np.ndarray:
    """Return ``start + i*T/n`` for ``i = 0..n-1``, or raise if they are not distinct.

    A period that is tiny next to ``start`` gives a step below the float
    spacing at ``start`` and the abscissas collapse onto a few values.
    """
    h = interval.period / float(n)
    x = interval.start + np.arange(n, dtype=float) * h
    if np.any(np.diff(x) <= 0.0):
        raise ValidationError(
            "interval",
            UNRESOLVED_SAMPLING,
            f"{n} samples over [{interval.start}, {interval.end}) are not distinct in floating point.",
        )
    return x


def validate_harmonic_count(g: Any, max_count: Optional[int] = None) -> int:
    """Check ``g >= 0`` and, when given, ``g <= max_count``."""
    g = _as_int(g, "harmonic_count")
    if g < 0:
        raise ValidationError(
            "harmonic_count",
            NEGATIVE_HARMONIC_COUNT,
            f"Harmonic count must be >= 0, got {g}.",
        )
    if max_count is not None and g > max_count:
        raise ValidationError(
            "harmonic_count",
            HARMONIC_COUNT_TOO_LARGE,
            f"Harmonic count must be <= {max_count}, got {g}.",
        )
    return g


def validate_box(box: DrawingBox) -> DrawingBox:
    """Reject boxes whose usable area is empty once margins are removed."""
    for name in ("width", "height", "margin"):
        v = float(getattr(box, name))
        if not math.isfinite(v):
            raise ValidationError("box", INVALID_BOX, f"box.{name} must be finite, got {v}.")
    if box.margin < 0:
        raise ValidationError("box", INVALID_BOX, f"box.margin must be >= 0, got {box.margin}.")
    if box.inner_width <= 0 or box.inner_height <= 0:
        raise ValidationError(
            "box",
            INVALID_BOX,
            f"Drawing area is empty: {box.width}x{box.height} with margin {box.margin} "
            f"leaves {box.inner_width}x{box.inner_height}.",
        )
    return box


def parse_plot_inputs(
    start: Any,
    end: Any,
    harmonic_count: Any,
    sample_count: Any,
    *,
    max_harmonics: Optional[int] = None,
) -> PlotRequest:
    """Validate raw UI values and return a :class:`PlotRequest`.

    Checks run in a fixed order: every field numeric, then the interval,
    then the sample-count bounds (and whether that many samples are
    distinct over the interval), then the harmonic count.  The first
    violation is raised.  ``max_harmonics`` caps the harmonic count when a
    front end offers a bounded choice.
    """
    a = _as_float(start, "start")
    b = _as_float(end, "end")
    g = _as_int(harmonic_count, "harmonic_count")
    n = _as_int(sample_count, "sample_count")

    interval = validate_interval(a, b)
    validate_sample_count(n)
    sampling_abscissas(interval, n)
    validate_harmonic_count(g, max_harmonics)

    return PlotRequest(start=a, end=b, harmonic_count=g, sample_count=n)
