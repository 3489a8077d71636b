from __future__ import annotations

from strata.datasets.dataset import Dataset
from strata.datasets.labeled import Labeled
from strata.datasets.sampling import WeightedSampler
from strata.datasets.unlabeled import Unlabeled

__all__ = [
    "Dataset",
    "Labeled",
    "Unlabeled",
    "WeightedSampler",
]
