"""Tests for the data-to-pixel transforms.

Covers:
- waveform corners for a 400x300 box with a 40 px margin
- union of several ordinate series
- degenerate (constant) ranges map to the middle of the box, never NaN/inf
- harmonic index/amplitude map and its zero-magnitude fallback
- malformed boxes
- grid ticks and labels
"""

from __future__ import annotations

import numpy as np
import pytest

from fourier_series_plotter.analysis.scaling import (
    apply_harmonic_transform,
    apply_transform,
    axis_ticks,
    compute_harmonic_transform,
    compute_transform,
    harmonic_ticks,
)
from fourier_series_plotter.analysis.validation import INVALID_BOX, ValidationError
from fourier_series_plotter.models.profile import DrawingBox
from fourier_series_plotter.models.results import ApproximationSet


BOX = DrawingBox(width=400, height=300, margin=40)


def _series(x, y) -> ApproximationSet:
    return ApproximationSet(x=np.asarray(x, dtype=float), y=np.asarray(y, dtype=float), n_harmonics=0)


# -----------------------------------------------------------------------
# Waveform transform
# -----------------------------------------------------------------------


def test_corners_land_on_inner_box_edges() -> None:
    s = _series([0.0, 2.5, 5.0, 10.0], [-2.0, 1.0, 5.0, 0.0])
    t = compute_transform(s, BOX)

    assert apply_transform(t, 0.0, -2.0) == pytest.approx((40.0, 40.0 + 220.0))
    assert apply_transform(t, 10.0, 5.0) == pytest.approx((40.0 + 320.0, 40.0))
    assert not t.degenerate_x
    assert not t.degenerate_y


def test_scale_factors_and_offsets_agree() -> None:
    s = _series([1.0, 3.0], [0.0, 4.0])
    t = compute_transform(s, BOX)
    assert t.scale_x == pytest.approx(320.0 / 2.0)
    assert t.scale_y == pytest.approx(220.0 / 4.0)

    x = np.array([1.0, 1.5, 3.0])
    y = np.array([0.0, 2.0, 4.0])
    px, py = apply_transform(t, x, y)
    np.testing.assert_allclose(px, t.offset_x + x * t.scale_x)
    np.testing.assert_allclose(py, t.offset_y - y * t.scale_y)


def test_y_range_is_union_of_all_series() -> None:
    x = [0.0, 1.0, 2.0]
    a = _series(x, [0.0, 1.0, 2.0])
    b = _series(x, [-3.0, 1.0, 7.0])
    t = compute_transform([a, b], BOX)
    assert t.min_y == -3.0
    assert t.max_y == 7.0
    assert t.min_x == 0.0
    assert t.max_x == 2.0


def test_constant_series_is_centred_on_unit_span() -> None:
    s = _series([0.0, 1.0, 2.0, 3.0], [1.5, 1.5, 1.5, 1.5])
    t = compute_transform(s, BOX)

    assert t.degenerate_y
    assert t.min_y == pytest.approx(1.0)
    assert t.max_y == pytest.approx(2.0)
    assert t.scale_y == pytest.approx(220.0)

    px, py = apply_transform(t, s.x, s.y)
    assert np.all(np.isfinite(px)) and np.all(np.isfinite(py))
    np.testing.assert_allclose(py, 40.0 + 110.0)


def test_single_point_maps_to_box_centre() -> None:
    s = _series([0.25], [-4.0])
    t = compute_transform(s, BOX)
    assert t.degenerate_x and t.degenerate_y
    assert apply_transform(t, 0.25, -4.0) == pytest.approx((200.0, 150.0))


def test_mismatched_series_rejected() -> None:
    with pytest.raises(ValueError):
        compute_transform([_series([0, 1, 2], [0, 1, 2]), _series([0, 1], [0, 1])], BOX)


def test_non_finite_data_rejected() -> None:
    with pytest.raises(ValueError):
        compute_transform(_series([0.0, 1.0], [0.0, np.nan]), BOX)


@pytest.mark.parametrize(
    "box",
    [
        DrawingBox(width=80, height=300, margin=40),
        DrawingBox(width=400, height=60, margin=40),
        DrawingBox(width=0, height=0, margin=0),
        DrawingBox(width=400, height=300, margin=-1),
    ],
)
def test_malformed_box_rejected(box: DrawingBox) -> None:
    with pytest.raises(ValidationError) as ei:
        compute_transform(_series([0.0, 1.0], [0.0, 1.0]), box)
    assert ei.value.reason == INVALID_BOX

    with pytest.raises(ValidationError):
        compute_harmonic_transform([1.0, 2.0], box)


# -----------------------------------------------------------------------
# Harmonic transform
# -----------------------------------------------------------------------


def test_harmonic_index_and_amplitude_mapping() -> None:
    t = compute_harmonic_transform([1.0, 2.0, 4.0], BOX)
    assert t.n_harmonics == 3
    assert t.slot_width == pytest.approx(320.0 / 3.0)
    assert t.amplitude_max == 4.0
    assert t.baseline == 260.0

    assert apply_harmonic_transform(t, 3, 4.0) == pytest.approx((360.0, 40.0))
    assert apply_harmonic_transform(t, 1, 0.0) == pytest.approx((40.0 + 320.0 / 3.0, 260.0))
    assert apply_harmonic_transform(t, 2, 2.0)[1] == pytest.approx(150.0)


def test_all_zero_magnitudes_sit_on_baseline() -> None:
    t = compute_harmonic_transform([0.0, 0.0], BOX)
    assert t.degenerate
    assert t.amplitude_max == 1.0
    px, py = apply_harmonic_transform(t, np.array([1, 2]), np.array([0.0, 0.0]))
    assert np.all(np.isfinite(px))
    np.testing.assert_allclose(py, 260.0)


def test_no_harmonics_uses_single_slot() -> None:
    t = compute_harmonic_transform([], BOX)
    assert t.n_harmonics == 0
    assert t.degenerate
    assert t.slot_width == pytest.approx(320.0)


# -----------------------------------------------------------------------
# Ticks
# -----------------------------------------------------------------------


def test_axis_ticks_values_and_labels() -> None:
    t = compute_transform(_series([0.0, 10.0], [-1.0, 1.0]), BOX)
    ticks = axis_ticks(t, n_x=10, n_y=4)

    assert ticks.x_pixels.size == 11
    assert ticks.x_pixels[0] == pytest.approx(40.0)
    assert ticks.x_pixels[-1] == pytest.approx(360.0)
    assert ticks.x_labels[0] == "0.00"
    assert ticks.x_labels[-1] == "10.00"

    assert ticks.y_pixels.size == 5
    assert ticks.y_labels[0] == "1.00"
    assert ticks.y_labels[-1] == "-1.00"
    assert ticks.y_labels[2] == "0.00"


def test_harmonic_ticks_labels() -> None:
    t = compute_harmonic_transform([3.0, 1.0, 2.0], BOX)
    ticks = harmonic_ticks(t, n_y=5)
    assert ticks.x_labels == ("C1", "C2", "C3")
    assert ticks.x_pixels.size == 4
    assert ticks.y_values[0] == pytest.approx(3.0)
    assert ticks.y_values[-1] == pytest.approx(0.0)


def test_ticks_need_at_least_one_division() -> None:
    t = compute_transform(_series([0.0, 1.0], [0.0, 1.0]), BOX)
    with pytest.raises(ValueError):
        axis_ticks(t, n_x=0)
