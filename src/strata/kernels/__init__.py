from __future__ import annotations

from strata.kernels.distance import Distance, Euclidean

__all__ = ["Distance", "Euclidean"]
