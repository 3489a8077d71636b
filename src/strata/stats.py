from __future__ import annotations

from typing import Sequence

import numpy as np


def mean_var(values: Sequence[float]) -> tuple[float, float]:
    """평균과 모분산(population variance)."""
    x = np.asarray(values, dtype=float)
    mean = float(x.mean())
    return mean, float(((x - mean) ** 2).mean())


def quantiles(values: Sequence[float], qs: Sequence[float]) -> list[float]:
    x = np.asarray(values, dtype=float)
    return [float(v) for v in np.quantile(x, list(qs))]


def skewness(values: Sequence[float], mean: float | None = None) -> float:
    x = np.asarray(values, dtype=float)
    mean = float(x.mean()) if mean is None else mean
    d = x - mean
    m2 = float((d**2).mean())
    if m2 <= 0.0:
        return 0.0
    return float((d**3).mean()) / m2**1.5


def kurtosis(values: Sequence[float], mean: float | None = None) -> float:
    """Excess kurtosis (normal distribution -> 0)."""
    x = np.asarray(values, dtype=float)
    mean = float(x.mean()) if mean is None else mean
    d = x - mean
    m2 = float((d**2).mean())
    if m2 <= 0.0:
        return 0.0
    return float((d**4).mean()) / m2**2 - 3.0
