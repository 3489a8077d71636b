from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterable, Iterator, Sequence

import numpy as np

from strata.datasets.dataset import Dataset
from strata.datatype import DataType
from strata.exceptions import DatasetRuntimeError, InvalidArgumentError
from strata.report import Report

logger = logging.getLogger(__name__)


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


class Labeled(Dataset):
    """Samples paired with one outcome (label) per row, for supervised learning.

    Labels are either all categorical or all continuous and never NaN. Label
    ``i`` belongs to sample ``i``; every reordering, filtering or subsetting
    operation applies the same offsets to both.
    """

    def __init__(
        self,
        samples: Iterable[Any] | None = None,
        labels: Iterable[Any] | None = None,
        verify: bool = True,
    ):
        samples = [] if samples is None else list(samples)
        labels = [] if labels is None else list(labels)

        if len(samples) != len(labels):
            raise InvalidArgumentError(
                "Number of samples and labels must be equal,"
                f" {len(samples)} samples but {len(labels)} labels given."
            )

        if verify and labels:
            type_ = DataType.detect(labels[0])

            if type_ is DataType.OTHER:
                raise InvalidArgumentError(
                    f"Label type must be categorical or continuous, {type_} given."
                )

            for offset, label in enumerate(labels):
                if DataType.detect(label) is not type_:
                    raise InvalidArgumentError(
                        f"Invalid label type found at offset {offset}, {type_} expected"
                        f" but {DataType.detect(label)} given."
                    )

                if _is_nan(label):
                    raise InvalidArgumentError(
                        f"Labels must not contain NaN values, NaN found at offset {offset}."
                    )

        super().__init__(samples, verify)

        self._labels: list[Any] = labels

    @classmethod
    def build(
        cls, samples: Iterable[Any] | None = None, labels: Iterable[Any] | None = None
    ) -> "Labeled":
        return cls(samples, labels, verify=True)

    @classmethod
    def quick(
        cls, samples: Iterable[Any] | None = None, labels: Iterable[Any] | None = None
    ) -> "Labeled":
        return cls(samples, labels, verify=False)

    @classmethod
    def from_iterator(cls, records: Iterable[Sequence[Any]]) -> "Labeled":
        """The last element of each record is taken as its label."""
        samples: list[list[Any]] = []
        labels: list[Any] = []

        for offset, record in enumerate(records):
            record = list(record)
            if not record:
                raise InvalidArgumentError(
                    f"Record at offset {offset} must contain at least a label."
                )
            labels.append(record.pop())
            samples.append(record)

        return cls.build(samples, labels)

    @classmethod
    def stack(cls, datasets: Sequence[Dataset]) -> "Labeled":
        if not datasets:
            return cls.quick([], [])

        n = datasets[0].num_columns()

        samples: list[list[Any]] = []
        labels: list[Any] = []
        for dataset in datasets:
            if not isinstance(dataset, Labeled):
                raise InvalidArgumentError(
                    f"Dataset must be an instance of Labeled, {type(dataset).__name__} given."
                )
            if dataset.num_columns() != n:
                raise InvalidArgumentError(
                    "Dataset must have the same number of columns,"
                    f" {n} expected but {dataset.num_columns()} given."
                )
            samples.extend(dataset.samples())
            labels.extend(dataset.labels())

        return cls.quick(samples, labels)

    def labels(self) -> list[Any]:
        return list(self._labels)

    def label(self, offset: int) -> Any:
        if 0 <= offset < len(self._labels):
            return self._labels[offset]
        raise InvalidArgumentError(f"Row at offset {offset} not found.")

    def label_type(self) -> DataType:
        if not self._labels:
            raise DatasetRuntimeError("Dataset is empty.")
        return DataType.detect(self._labels[0])

    def transform_labels(self, callback: Callable[[Any], Any]) -> "Labeled":
        """Map every label through ``callback``; nothing changes unless every result is valid."""
        labels = [callback(label) for label in self._labels]

        if labels:
            type_ = DataType.detect(labels[0])

            for offset, label in enumerate(labels):
                label_type = DataType.detect(label)

                if label_type is DataType.OTHER:
                    raise DatasetRuntimeError(
                        f"Label must be a string or numeric type, {type(label).__name__}"
                        f" found at offset {offset}."
                    )
                if label_type is not type_:
                    raise DatasetRuntimeError(
                        f"Labels must share one data type, {type_} expected"
                        f" but {label_type} found at offset {offset}."
                    )
                if _is_nan(label):
                    raise DatasetRuntimeError(f"Label transform produced NaN at offset {offset}.")

        self._labels = labels

        return self

    def possible_outcomes(self) -> list[Any]:
        return list(dict.fromkeys(self._labels))

    def _select(self, offsets: Iterable[int]) -> "Labeled":
        offsets = list(offsets)
        return Labeled.quick(
            [list(self._samples[i]) for i in offsets],
            [self._labels[i] for i in offsets],
        )

    def _rearrange(self, offsets: Sequence[int]) -> None:
        samples = [self._samples[i] for i in offsets]
        labels = [self._labels[i] for i in offsets]

        self._samples, self._labels = samples, labels

    def _cut(self, start: int, stop: int) -> "Labeled":
        samples = self._samples[start:stop]
        labels = self._labels[start:stop]

        del self._samples[start:stop]
        del self._labels[start:stop]

        return Labeled.quick(samples, labels)

    def merge(self, dataset: Dataset) -> "Labeled":
        if not isinstance(dataset, Labeled):
            raise InvalidArgumentError("Can only merge with another Labeled dataset.")

        if not dataset.empty() and not self.empty():
            if dataset.num_columns() != self.num_columns():
                raise InvalidArgumentError(
                    "Datasets must have the same number of columns,"
                    f" {self.num_columns()} expected, but {dataset.num_columns()} given."
                )

        return Labeled.quick(
            self.samples() + dataset.samples(),
            self.labels() + dataset.labels(),
        )

    def join(self, dataset: Dataset) -> "Labeled":
        """Append the columns of another dataset; this dataset's labels are kept."""
        if dataset.num_rows() != self.num_rows():
            raise InvalidArgumentError(
                "Datasets must have the same number of rows,"
                f" {self.num_rows()} expected, but {dataset.num_rows()} given."
            )

        return Labeled.quick(
            [sample + other for sample, other in zip(self.samples(), dataset.samples())],
            self.labels(),
        )

    def sort_by_label(self, descending: bool = False) -> "Labeled":
        order = sorted(range(len(self._labels)), key=self._labels.__getitem__, reverse=descending)

        self._rearrange(order)

        return self

    def _stratify(self) -> dict[Any, list[int]]:
        """Row offsets grouped by label, in order of first appearance.

        Labels are compared as-is: ``"1"`` and ``1`` are separate strata.
        """
        strata: dict[Any, list[int]] = {}

        for offset, label in enumerate(self._labels):
            if isinstance(label, (bool, np.bool_)) or not isinstance(label, (str, int, np.integer)):
                raise DatasetRuntimeError(
                    f"Label must be a string or integer type, {type(label).__name__}"
                    f" found at offset {offset}."
                )
            strata.setdefault(label, []).append(offset)

        return strata

    def stratify(self) -> dict[Any, "Labeled"]:
        """One dataset per distinct label holding exactly that label's rows."""
        return {label: self._select(offsets) for label, offsets in self._stratify().items()}

    def stratified_split(self, ratio: float = 0.5) -> tuple["Labeled", "Labeled"]:
        """Split each stratum by ``ratio`` so both sides keep the label proportions."""
        if not 0.0 <= ratio <= 1.0:
            raise InvalidArgumentError(f"Ratio must be between 0 and 1, {ratio} given.")

        left: list[int] = []
        right: list[int] = []

        for offsets in self._stratify().values():
            n = int(math.floor(ratio * len(offsets)))

            left.extend(offsets[:n])
            right.extend(offsets[n:])

        return self._select(left), self._select(right)

    def stratified_fold(self, k: int = 10) -> list["Labeled"]:
        """k folds built from floor(len(stratum) / k) rows of every stratum."""
        if k < 2:
            raise InvalidArgumentError(f"Cannot create less than 2 folds, {k} given.")

        strata = self._stratify()

        folds: list[Labeled] = []
        for i in range(k):
            offsets: list[int] = []

            for stratum in strata.values():
                n = len(stratum) // k
                offsets.extend(stratum[i * n : (i + 1) * n])

            folds.append(self._select(offsets))

        logger.debug(
            "stratified fold: %d folds over %d strata, %d rows each",
            k,
            len(strata),
            folds[0].num_rows(),
        )

        return folds

    def describe_by_label(self) -> Report:
        return Report(
            {label: stratum.describe().attributes for label, stratum in self.stratify().items()}
        )

    def __iter__(self) -> Iterator[list[Any]]:
        for sample, label in zip(self._samples, self._labels):
            yield [*sample, label]

    def __getitem__(self, offset: int) -> list[Any]:
        if 0 <= offset < len(self._samples):
            return [*self._samples[offset], self._labels[offset]]
        raise InvalidArgumentError(f"Row at offset {offset} not found.")
