"""Signal definition and equally spaced sampling over one period."""

from __future__ import annotations

from typing import Union

import numpy as np

from fourier_series_plotter.models.signal import Interval, SampleSet

from .validation import sampling_abscissas, validate_interval, validate_sample_count


ArrayLike = Union[float, np.ndarray]


def signal_value(x: ArrayLike, interval: Interval) -> ArrayLike:
    """Evaluate the fixed three-segment waveform of period ``T = interval.period``.

    - ``x < T/2``        -> ``2``
    - ``T/2 <= x < 3T/4`` -> ``4*(T - 2x)/T``
    - ``x >= 3T/4``       -> ``8*(x - T)/T``

    Notes
    -----
    The branch conditions compare the absolute abscissa ``x`` with fractions of
    ``T``, not ``x - start``.  For ``start != 0`` the waveform is therefore not
    phase-aligned with the interval.
    """
    T = interval.period
    xa = np.atleast_1d(np.asarray(x, dtype=float))
    y = np.select(
        [xa < T / 2.0, xa < 3.0 * T / 4.0],
        [np.full_like(xa, 2.0), 4.0 * (T - 2.0 * xa) / T],
        default=8.0 * (xa - T) / T,
    )
    if np.ndim(x) == 0:
        return float(y[0])
    return y.reshape(np.shape(x))


def sample_signal(interval: Interval, n_samples: int) -> SampleSet:
    """Sample the signal at ``x_i = start + i*h``, ``h = T/N``, ``i = 0..N-1``.

    Parameters
    ----------
    interval:
        Period to sample; ``end`` must exceed ``start``.
    n_samples:
        Number of samples ``N`` in ``[1, 1000]``.

    Raises
    ------
    ValidationError
        If the interval is empty/reversed, ``N`` is out of bounds, or the
        ``N`` abscissas would not be strictly increasing.
    """
    interval = validate_interval(interval.start, interval.end)
    n = validate_sample_count(n_samples)

    x = sampling_abscissas(interval, n)
    y = np.asarray(signal_value(x, interval), dtype=float)
    return SampleSet(interval=interval, x=x, y=y)
