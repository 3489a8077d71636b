from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strata.datasets.dataset import Dataset


class Writable(ABC):
    """데이터셋을 외부 포맷으로 내보내는 extractor."""

    @abstractmethod
    def export(self, dataset: "Dataset", overwrite: bool = False) -> None: ...
