"""Truncated real Fourier series from uniformly sampled data.

Provides discrete coefficients with the ``2/N`` normalisation for harmonic
orders ``k >= 1`` (mean value for the DC term) and reconstruction of the
truncated series at the sample abscissas.

Functions
---------
fourier_coefficients
    DC term and per-order cosine/sine/magnitude coefficients ``0..G``.
reconstruct
    Evaluate the truncated series at the sample abscissas.
approximate
    Both of the above in one call.
approximation_error
    Mean squared error between samples and approximation.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from fourier_series_plotter.models.results import ApproximationSet, CoefficientSet
from fourier_series_plotter.models.signal import SampleSet

from .validation import validate_harmonic_count


# Orders per block of the angle matrix; memory stays O(ORDER_BLOCK*N) for any G.
ORDER_BLOCK = 64


def _phase_blocks(orders: np.ndarray, x: np.ndarray, period: float) -> Iterator[Tuple[slice, np.ndarray]]:
    """Yield ``(sl, phase)`` with angles ``k*w*x_i`` for ``orders[sl]``, ``w = 2*pi/T``."""
    w = 2.0 * np.pi / float(period)
    x = np.asarray(x, dtype=float)
    for lo in range(0, orders.size, ORDER_BLOCK):
        sl = slice(lo, min(lo + ORDER_BLOCK, orders.size))
        yield sl, np.outer(orders[sl].astype(float) * w, x)


def fourier_coefficients(samples: SampleSet, n_harmonics: int) -> CoefficientSet:
    r"""Compute discrete Fourier coefficients up to order ``G``.

    Parameters
    ----------
    samples:
        Equally spaced samples over one period.
    n_harmonics:
        Highest harmonic order ``G >= 0`` to include.

    Returns
    -------
    CoefficientSet
        ``a_k = 2/N \sum y_i \cos(k w x_i)``, ``b_k = 2/N \sum y_i \sin(k w x_i)``,
        ``c_k = \sqrt{a_k^2 + b_k^2}`` for ``k = 1..G`` and ``a_0 = mean(y)``.

    Notes
    -----
    The angles use the absolute abscissas ``x_i`` (not ``x_i - start``).
    """
    G = validate_harmonic_count(n_harmonics)

    y = np.asarray(samples.y, dtype=float)
    N = y.size
    if N == 0:
        raise ValueError("samples must contain at least one point")

    orders = np.arange(G + 1, dtype=int)
    a = np.zeros(G + 1, dtype=float)
    b = np.zeros(G + 1, dtype=float)

    if G > 0:
        ak, bk = a[1:], b[1:]
        for sl, phase in _phase_blocks(orders[1:], samples.x, samples.interval.period):
            ak[sl] = 2.0 * (np.cos(phase) @ y) / float(N)
            bk[sl] = 2.0 * (np.sin(phase) @ y) / float(N)

    a[0] = float(np.sum(y)) / float(N)

    c = np.hypot(a, b)
    c[0] = 0.0

    return CoefficientSet(orders=orders, a=a, b=b, c=c, period=float(samples.interval.period))


def reconstruct(samples: SampleSet, coeffs: CoefficientSet) -> ApproximationSet:
    """Evaluate ``a_0 + sum_k b_k sin(k w x_i) + a_k cos(k w x_i)`` at every sample."""
    x = np.asarray(samples.x, dtype=float)
    G = coeffs.n_harmonics

    yg = np.full(x.size, coeffs.dc, dtype=float)
    if G > 0:
        ak, bk = coeffs.a[1:], coeffs.b[1:]
        for sl, phase in _phase_blocks(coeffs.orders[1:], x, coeffs.period):
            yg += bk[sl] @ np.sin(phase) + ak[sl] @ np.cos(phase)

    return ApproximationSet(x=x, y=yg, n_harmonics=G)


def approximate(samples: SampleSet, n_harmonics: int) -> Tuple[CoefficientSet, ApproximationSet]:
    """Coefficients and reconstructed curve for ``G = n_harmonics``."""
    coeffs = fourier_coefficients(samples, n_harmonics)
    return coeffs, reconstruct(samples, coeffs)


def approximation_error(samples: SampleSet, approx: ApproximationSet) -> float:
    """Mean squared error between the sampled signal and its approximation."""
    y = np.asarray(samples.y, dtype=float)
    yg = np.asarray(approx.y, dtype=float)
    if y.shape != yg.shape:
        raise ValueError(f"shape mismatch: samples {y.shape} vs approximation {yg.shape}")
    return float(np.mean((y - yg) ** 2))
