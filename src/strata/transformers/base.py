from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from strata.datasets.dataset import Dataset


class Transformer(ABC):
    """샘플 행렬을 제자리에서 변환하는 플러그인."""

    @abstractmethod
    def transform(self, samples: list[list[Any]]) -> None: ...


class Stateful(Transformer):
    """transform 전에 데이터셋으로 fit이 필요한 변환기."""

    @abstractmethod
    def fit(self, dataset: "Dataset") -> None: ...

    @abstractmethod
    def fitted(self) -> bool: ...
