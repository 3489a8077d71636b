from __future__ import annotations

from typing import TYPE_CHECKING, Any

from strata.datatype import DataType
from strata.stats import mean_var
from strata.transformers.base import Stateful

if TYPE_CHECKING:
    from strata.datasets.dataset import Dataset

EPSILON = 1e-8


class ZScaleStandardizer(Stateful):
    """Rewrite every continuous column as (x - mean) / stddev of the fitted data."""

    def __init__(self) -> None:
        self.means: dict[int, float] | None = None
        self.stddevs: dict[int, float] | None = None

    def fitted(self) -> bool:
        return self.means is not None and self.stddevs is not None

    def fit(self, dataset: "Dataset") -> None:
        means: dict[int, float] = {}
        stddevs: dict[int, float] = {}

        for offset, type_ in enumerate(dataset.feature_types()):
            if type_ is DataType.CONTINUOUS:
                mean, variance = mean_var(dataset.column(offset))
                means[offset] = mean
                stddevs[offset] = variance**0.5

        self.means, self.stddevs = means, stddevs

    def transform(self, samples: list[list[Any]]) -> None:
        if self.means is None or self.stddevs is None:
            raise RuntimeError("ZScaleStandardizer must be fitted before transforming.")

        for sample in samples:
            for offset, mean in self.means.items():
                sample[offset] = (sample[offset] - mean) / (self.stddevs[offset] + EPSILON)
