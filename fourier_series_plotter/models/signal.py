from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Interval:
    """One period ``[start, end)`` of the periodic signal.

    Notes
    - ``end > start`` is checked by the validation layer, not here, so that
      callers receive a :class:`ValidationError` with a reason code.
    """
    start: float
    end: float

    @property
    def period(self) -> float:
        return float(self.end) - float(self.start)


@dataclass(frozen=True)
class SampleSet:
    """
    Equally spaced samples of the signal over one interval.

    Notes
    - ``x[i] = start + i*h`` with ``h = period/N``; ``end`` itself is never sampled.
    - ``x`` and ``y`` are float64 arrays of shape ``(N,)``.
    """
    interval: Interval
    x: np.ndarray
    y: np.ndarray

    @property
    def n_samples(self) -> int:
        return int(self.x.size)

    @property
    def step(self) -> float:
        return self.interval.period / float(self.n_samples)
