from __future__ import annotations

from strata.datasets import Dataset, Labeled, Unlabeled
from strata.datatype import DataType
from strata.exceptions import DatasetRuntimeError, InvalidArgumentError, StrataError
from strata.report import Report

__all__ = [
    "DataType",
    "Dataset",
    "DatasetRuntimeError",
    "InvalidArgumentError",
    "Labeled",
    "Report",
    "StrataError",
    "Unlabeled",
]
