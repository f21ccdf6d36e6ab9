from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class CoefficientSet:
    """Real Fourier coefficients of a sampled signal.

    Attributes
    ----------
    orders:
        Harmonic order vector ``[0,1,...,G]``.
    a, b:
        Cosine and sine coefficients, shape ``(G+1,)``. ``a[0]`` is the DC term
        (sample mean); ``b[0]`` is always zero.
    c:
        Magnitudes ``sqrt(a_k**2 + b_k**2)``. ``c[0]`` is kept at zero; only
        orders ``k >= 1`` are meaningful.
    period:
        Fundamental period ``T`` the coefficients were computed for.
    """

    orders: np.ndarray
    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    period: float

    @property
    def n_harmonics(self) -> int:
        return int(self.orders.size) - 1

    @property
    def dc(self) -> float:
        return float(self.a[0])

    @property
    def magnitudes(self) -> np.ndarray:
        """Harmonic magnitudes ``c_1..c_G`` (empty when ``G == 0``)."""
        return self.c[1:]

    def to_frame(self) -> pd.DataFrame:
        """One row per harmonic order: ``order, a, b, c``."""
        return pd.DataFrame(
            {
                "order": self.orders.astype(int),
                "a": self.a,
                "b": self.b,
                "c": self.c,
            }
        )


@dataclass(frozen=True)
class ApproximationSet:
    """Truncated-series values at the sample abscissas.

    ``x`` is shared with the originating :class:`~fourier_series_plotter.models.signal.SampleSet`.
    """

    x: np.ndarray
    y: np.ndarray
    n_harmonics: int
