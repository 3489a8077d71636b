from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

import numpy as np

from strata.common.rng import get_rng
from strata.datasets.sampling import WeightedSampler
from strata.datatype import DataType
from strata.exceptions import DatasetRuntimeError, InvalidArgumentError
from strata.extractors.base import Writable
from strata.kernels.distance import Distance
from strata.report import Report
from strata.stats import kurtosis, mean_var, quantiles, skewness
from strata.transformers.base import Stateful, Transformer

logger = logging.getLogger(__name__)

D = TypeVar("D", bound="Dataset")


def _as_row(sample: Any) -> list[Any]:
    if isinstance(sample, (list, tuple, np.ndarray)):
        return list(sample)
    return [sample]


def _check_n(n: int, what: str = "The number of samples") -> None:
    if n < 1:
        raise InvalidArgumentError(f"{what} cannot be less than 1, {n} given.")


class Dataset(ABC):
    """In-memory table of fixed-length sample rows with a per-column type discipline.

    Categorical values are strings, continuous values are integers or floats.
    With ``verify=True`` every row must have as many columns as the first one
    and every value must have the type of its column in the first row.

    Derived datasets (slice, split, fold, ...) own fresh copies of their rows.
    Ordering operations (randomize, sort, deduplicate) rewrite this dataset's
    rows in place and return ``self``.
    """

    def __init__(self, samples: Iterable[Any] | None = None, verify: bool = True):
        samples = [] if samples is None else samples

        if verify:
            rows = [_as_row(sample) for sample in samples]

            if rows:
                n = len(rows[0])
                types = [DataType.detect(value) for value in rows[0]]

                for row, sample in enumerate(rows):
                    if len(sample) != n:
                        raise InvalidArgumentError(
                            "Number of columns must be equal for all samples,"
                            f" {n} expected but {len(sample)} given at row offset {row}."
                        )

                    for column, value in enumerate(sample):
                        type_ = DataType.detect(value)
                        if type_ is not types[column]:
                            raise InvalidArgumentError(
                                f"Column {column} must contain values of the same data type,"
                                f" {types[column]} expected but {type_} given"
                                f" at row offset {row}."
                            )

            self._samples: list[list[Any]] = rows
        else:
            self._samples = samples if isinstance(samples, list) else list(samples)

    @classmethod
    @abstractmethod
    def from_iterator(cls: type[D], records: Iterable[Sequence[Any]]) -> D:
        """Build a validated dataset from an iterable of records."""

    @classmethod
    @abstractmethod
    def stack(cls: type[D], datasets: Sequence["Dataset"]) -> D:
        """Stack datasets of the same kind on top of each other."""

    def samples(self) -> list[list[Any]]:
        return [list(sample) for sample in self._samples]

    def sample(self, offset: int) -> list[Any]:
        if 0 <= offset < len(self._samples):
            return list(self._samples[offset])
        raise InvalidArgumentError(f"Sample at offset {offset} not found.")

    def num_rows(self) -> int:
        return len(self._samples)

    def column(self, offset: int) -> list[Any]:
        if not 0 <= offset < self.num_columns():
            raise InvalidArgumentError(f"Column at offset {offset} does not exist.")
        return [sample[offset] for sample in self._samples]

    def num_columns(self) -> int:
        return len(self._samples[0]) if self._samples else 0

    def feature_types(self) -> list[DataType]:
        """Column types detected from the first row."""
        if not self._samples:
            return []
        return [DataType.detect(value) for value in self._samples[0]]

    def unique_types(self) -> list[DataType]:
        return list(dict.fromkeys(self.feature_types()))

    def homogeneous(self) -> bool:
        return len(self.unique_types()) == 1

    def column_type(self, offset: int) -> DataType:
        if not self._samples:
            raise DatasetRuntimeError("Cannot determine data type of an empty dataset.")
        if not 0 <= offset < len(self._samples[0]):
            raise InvalidArgumentError(f"Column at offset {offset} does not exist.")
        return DataType.detect(self._samples[0][offset])

    def shape(self) -> tuple[int, int]:
        return self.num_rows(), self.num_columns()

    def size(self) -> int:
        return self.num_rows() * self.num_columns()

    def columns(self) -> list[list[Any]]:
        return [list(column) for column in zip(*self._samples)]

    def columns_by_type(self, type_: DataType) -> dict[int, list[Any]]:
        return {
            offset: self.column(offset)
            for offset, column_type in enumerate(self.feature_types())
            if column_type is type_
        }

    def map(self: D, callback: Callable[[list[Any]], Sequence[Any]]) -> D:
        return type(self).from_iterator(map(callback, self))

    def filter(self: D, callback: Callable[[list[Any]], bool]) -> D:
        return type(self).from_iterator(filter(callback, self))

    def apply(self: D, transformer: Transformer) -> D:
        """Fit (if stateful and unfitted) then transform this dataset's rows in place."""
        if isinstance(transformer, Stateful) and not transformer.fitted():
            transformer.fit(self)

        transformer.transform(self._samples)

        return self

    def describe(self) -> Report:
        stats: list[dict[str, Any]] = []

        for offset, type_ in enumerate(self.feature_types()):
            desc: dict[str, Any] = {"offset": offset, "type": str(type_)}

            if type_ is DataType.CONTINUOUS:
                values = self.column(offset)
                mean, variance = mean_var(values)
                q = quantiles(values, [0.0, 0.25, 0.5, 0.75, 1.0])

                desc.update(
                    {
                        "mean": mean,
                        "stddev": math.sqrt(variance),
                        "skewness": skewness(values, mean),
                        "kurtosis": kurtosis(values, mean),
                        "min": q[0],
                        "25%": q[1],
                        "median": q[2],
                        "75%": q[3],
                        "max": q[4],
                    }
                )
            elif type_ is DataType.CATEGORICAL:
                values = self.column(offset)
                counts = Counter(values).most_common()
                total = len(values)

                desc.update(
                    {
                        "num_categories": len(counts),
                        "counts": dict(counts),
                        "probabilities": {category: c / total for category, c in counts},
                    }
                )

            stats.append(desc)

        return Report(stats)

    def export_to(self, extractor: Writable, overwrite: bool = False) -> None:
        extractor.export(self, overwrite=overwrite)

    def empty(self) -> bool:
        return not self._samples

    # --- row-moving primitives; every concrete kind keeps its parallel data in lockstep here

    @abstractmethod
    def _select(self: D, offsets: Iterable[int]) -> D:
        """New dataset holding copies of the rows at ``offsets``, in that order."""

    @abstractmethod
    def _rearrange(self, offsets: Sequence[int]) -> None:
        """Keep only the rows at ``offsets``, in that order, in place."""

    @abstractmethod
    def _cut(self: D, start: int, stop: int) -> D:
        """Remove rows ``start:stop`` from this dataset and return them."""

    @abstractmethod
    def merge(self: D, dataset: "Dataset") -> D:
        """Row-wise concatenation with another dataset of the same kind."""

    @abstractmethod
    def join(self: D, dataset: "Dataset") -> D:
        """Column-wise concatenation with a dataset of the same number of rows."""

    def _bounds(self, offset: int, n: int) -> tuple[int, int]:
        # 음수 offset은 끝에서부터, 음수 n은 끝에서 n개 전까지
        m = len(self._samples)
        start = offset if offset >= 0 else max(0, m + offset)
        start = min(start, m)
        stop = min(m, start + n) if n >= 0 else max(start, m + n)
        return start, stop

    def head(self: D, n: int = 10) -> D:
        _check_n(n)
        return self.slice(0, n)

    def tail(self: D, n: int = 10) -> D:
        _check_n(n)
        return self.slice(-n, self.num_rows())

    def take(self: D, n: int = 1) -> D:
        """Remove the first n rows from this dataset and return them."""
        _check_n(n)
        return self.splice(0, n)

    def leave(self: D, n: int = 1) -> D:
        """Leave the first n rows on this dataset and return the rest."""
        _check_n(n)
        return self.splice(n, self.num_rows())

    def slice(self: D, offset: int, n: int) -> D:
        start, stop = self._bounds(offset, n)
        return self._select(range(start, stop))

    def splice(self: D, offset: int, n: int) -> D:
        start, stop = self._bounds(offset, n)
        return self._cut(start, stop)

    def randomize(self: D, *, rng: np.random.Generator | None = None) -> D:
        if self.empty():
            return self

        rng = rng or get_rng()
        self._rearrange([int(i) for i in rng.permutation(self.num_rows())])

        return self

    def sort_by_column(self: D, offset: int, descending: bool = False) -> D:
        column = self.column(offset)
        order = sorted(range(len(column)), key=column.__getitem__, reverse=descending)

        self._rearrange(order)

        return self

    def split(self: D, ratio: float = 0.5) -> tuple[D, D]:
        if not 0.0 <= ratio <= 1.0:
            raise InvalidArgumentError(f"Ratio must be between 0 and 1, {ratio} given.")

        n = int(math.floor(ratio * self.num_rows()))

        return self._select(range(n)), self._select(range(n, self.num_rows()))

    def fold(self: D, k: int = 10) -> list[D]:
        """Split into k datasets of floor(n / k) rows; leftover rows are dropped."""
        if k < 1:
            raise InvalidArgumentError(f"Cannot create less than 1 fold, {k} given.")

        n = self.num_rows() // k

        logger.debug("fold: %d folds of %d rows", k, n)

        return [self._select(range(i * n, (i + 1) * n)) for i in range(k)]

    def batch(self: D, n: int = 50) -> list[D]:
        _check_n(n, "Batch size")
        return [
            self._select(range(start, min(start + n, self.num_rows())))
            for start in range(0, self.num_rows(), n)
        ]

    def split_by_column(self: D, offset: int, value: Any) -> tuple[D, D]:
        """Continuous columns: ``<= value`` goes left. Categorical: ``== value`` goes left."""
        type_ = self.column_type(offset)

        left: list[int] = []
        right: list[int] = []

        if type_ is DataType.CONTINUOUS:
            for i, sample in enumerate(self._samples):
                (left if sample[offset] <= value else right).append(i)
        else:
            for i, sample in enumerate(self._samples):
                (left if sample[offset] == value else right).append(i)

        return self._select(left), self._select(right)

    def spatial_split(
        self: D,
        left_centroid: Sequence[Any],
        right_centroid: Sequence[Any],
        kernel: Distance,
    ) -> tuple[D, D]:
        """Rows strictly closer to the left centroid go left; ties go right."""
        left: list[int] = []
        right: list[int] = []

        for i, sample in enumerate(self._samples):
            l_distance = kernel.compute(sample, left_centroid)
            r_distance = kernel.compute(sample, right_centroid)

            (left if l_distance < r_distance else right).append(i)

        return self._select(left), self._select(right)

    def random_subset(self: D, n: int, *, rng: np.random.Generator | None = None) -> D:
        """n distinct rows drawn uniformly without replacement."""
        _check_n(n, "Subset size")

        if n > self.num_rows():
            raise InvalidArgumentError(
                f"Cannot generate subset of more than {self.num_rows()}, {n} given."
            )

        rng = rng or get_rng()
        offsets = rng.choice(self.num_rows(), size=n, replace=False)

        return self._select(int(i) for i in offsets)

    def random_subset_with_replacement(
        self: D, n: int, *, rng: np.random.Generator | None = None
    ) -> D:
        _check_n(n, "Subset size")

        if self.empty():
            raise DatasetRuntimeError("Cannot sample from an empty dataset.")

        rng = rng or get_rng()
        offsets = rng.integers(0, self.num_rows(), size=n)

        return self._select(int(i) for i in offsets)

    def random_weighted_subset_with_replacement(
        self: D,
        n: int,
        weights: Sequence[float],
        *,
        rng: np.random.Generator | None = None,
    ) -> D:
        """Draw n rows with replacement, each with probability proportional to its weight."""
        _check_n(n, "Subset size")

        if len(weights) != self.num_rows():
            raise InvalidArgumentError(
                "The number of weights must be equal to the number of samples in the"
                f" dataset, {self.num_rows()} needed but {len(weights)} given."
            )

        sampler = WeightedSampler(weights)

        return self._select(sampler.sample(n, rng or get_rng()))

    def deduplicate(self: D) -> D:
        """Drop records equal to an earlier record, keeping first occurrences in order."""
        seen: set[tuple[Any, ...]] = set()
        kept: list[int] = []

        for i, record in enumerate(self):
            key = tuple(record)
            if key in seen:
                continue
            seen.add(key)
            kept.append(i)

        self._rearrange(kept)

        return self

    def __len__(self) -> int:
        return self.num_rows()

    def __iter__(self) -> Iterator[list[Any]]:
        for sample in self._samples:
            yield list(sample)

    def __getitem__(self, offset: int) -> list[Any]:
        return self.sample(offset)

    def __setitem__(self, offset: int, values: Any) -> None:
        raise DatasetRuntimeError("Datasets cannot be mutated directly.")

    def __delitem__(self, offset: int) -> None:
        raise DatasetRuntimeError("Datasets cannot be mutated directly.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.num_rows()}, columns={self.num_columns()})"
