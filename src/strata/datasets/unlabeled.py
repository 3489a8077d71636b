from __future__ import annotations

from typing import Any, Iterable, Sequence

from strata.datasets.dataset import Dataset
from strata.exceptions import InvalidArgumentError


class Unlabeled(Dataset):
    """Samples only, e.g. for clustering or for inference on new data."""

    @classmethod
    def build(cls, samples: Iterable[Any] | None = None) -> "Unlabeled":
        return cls(samples, verify=True)

    @classmethod
    def quick(cls, samples: Iterable[Any] | None = None) -> "Unlabeled":
        return cls(samples, verify=False)

    @classmethod
    def from_iterator(cls, records: Iterable[Sequence[Any]]) -> "Unlabeled":
        return cls.build(records)

    @classmethod
    def stack(cls, datasets: Sequence[Dataset]) -> "Unlabeled":
        if not datasets:
            return cls.quick([])

        n = datasets[0].num_columns()

        samples: list[list[Any]] = []
        for dataset in datasets:
            if not isinstance(dataset, Unlabeled):
                raise InvalidArgumentError(
                    f"Dataset must be an instance of Unlabeled, {type(dataset).__name__} given."
                )
            if dataset.num_columns() != n:
                raise InvalidArgumentError(
                    "Dataset must have the same number of columns,"
                    f" {n} expected but {dataset.num_columns()} given."
                )
            samples.extend(dataset.samples())

        return cls.quick(samples)

    def _select(self, offsets: Iterable[int]) -> "Unlabeled":
        return Unlabeled.quick([list(self._samples[i]) for i in offsets])

    def _rearrange(self, offsets: Sequence[int]) -> None:
        self._samples = [self._samples[i] for i in offsets]

    def _cut(self, start: int, stop: int) -> "Unlabeled":
        removed = self._samples[start:stop]
        del self._samples[start:stop]
        return Unlabeled.quick(removed)

    def merge(self, dataset: Dataset) -> "Unlabeled":
        """Append the rows of another dataset (labels of a Labeled one are ignored)."""
        if not dataset.empty() and not self.empty():
            if dataset.num_columns() != self.num_columns():
                raise InvalidArgumentError(
                    "Datasets must have the same number of columns,"
                    f" {self.num_columns()} expected, but {dataset.num_columns()} given."
                )

        return Unlabeled.quick(self.samples() + dataset.samples())

    def join(self, dataset: Dataset) -> "Unlabeled":
        if dataset.num_rows() != self.num_rows():
            raise InvalidArgumentError(
                "Datasets must have the same number of rows,"
                f" {self.num_rows()} expected, but {dataset.num_rows()} given."
            )

        return Unlabeled.quick(
            [sample + other for sample, other in zip(self.samples(), dataset.samples())]
        )
