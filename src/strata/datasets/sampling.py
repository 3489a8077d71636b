from __future__ import annotations

import logging
import math
import numbers
from typing import Sequence

import numpy as np

from strata.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# 전체 가중치 질량을 이 정수 단위로 환산해서 누적 뺄셈을 정수 연산으로 처리한다
PRECISION = 10**12


class WeightedSampler:
    """Two-level weighted sampling with replacement.

    Weights are split into contiguous levels of about sqrt(n) rows each and the
    level subtotals are computed once. A draw first skips whole levels by their
    subtotal and then scans a single level, so each draw costs O(sqrt(n))
    after O(n) setup.
    """

    def __init__(self, weights: Sequence[float]):
        if len(weights) < 1:
            raise InvalidArgumentError("Weights must not be empty.")

        for offset, weight in enumerate(weights):
            # "5" 같은 문자열은 float()가 받아주므로 타입을 먼저 본다
            if not isinstance(weight, numbers.Real):
                raise InvalidArgumentError(
                    f"Weight must be a number, {type(weight).__name__} given at offset {offset}."
                )
            w = float(weight)
            if not math.isfinite(w) or w < 0.0:
                raise InvalidArgumentError(
                    f"Weight must be a finite non-negative number, {weight} given"
                    f" at offset {offset}."
                )

        mass = math.fsum(float(w) for w in weights)
        if mass <= 0.0:
            raise InvalidArgumentError("Total weight must be greater than 0.")

        scaled = [int(round(float(w) / mass * PRECISION)) for w in weights]

        size = max(1, int(round(math.sqrt(len(scaled)))))

        self.levels: list[list[int]] = [scaled[i : i + size] for i in range(0, len(scaled), size)]
        self.level_size = size
        self.level_totals = [sum(level) for level in self.levels]
        self.total = sum(self.level_totals)

        logger.debug(
            "weighted sampler: %d rows in %d levels of %d", len(scaled), len(self.levels), size
        )

    def draw(self, rng: np.random.Generator) -> int:
        delta = int(rng.integers(1, self.total, endpoint=True))

        for i, level_total in enumerate(self.level_totals):
            if delta > level_total:
                delta -= level_total
                continue

            for j, weight in enumerate(self.levels[i]):
                delta -= weight
                if delta <= 0:
                    return i * self.level_size + j

        # 정수 연산이라 도달하지 않지만, 경계 draw는 마지막 양수 가중치 행으로 귀결
        return self._last_positive()

    def sample(self, n: int, rng: np.random.Generator) -> list[int]:
        return [self.draw(rng) for _ in range(n)]

    def _last_positive(self) -> int:
        for i in range(len(self.levels) - 1, -1, -1):
            if self.level_totals[i] <= 0:
                continue
            level = self.levels[i]
            for j in range(len(level) - 1, -1, -1):
                if level[j] > 0:
                    return i * self.level_size + j
        raise InvalidArgumentError("Total weight must be greater than 0.")
