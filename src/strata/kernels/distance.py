from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Distance(ABC):
    @abstractmethod
    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        """두 벡터 사이의 (음수가 아닌) 거리."""


class Euclidean(Distance):
    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        x = np.asarray(a, dtype=float)
        y = np.asarray(b, dtype=float)
        return float(np.sqrt(((x - y) ** 2).sum()))
