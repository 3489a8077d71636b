from __future__ import annotations

import numpy as np
import pytest

from strata.datatype import DataType


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, DataType.CONTINUOUS),
        (-2.5, DataType.CONTINUOUS),
        (float("nan"), DataType.CONTINUOUS),
        (np.int64(3), DataType.CONTINUOUS),
        (np.float32(0.5), DataType.CONTINUOUS),
        ("red", DataType.CATEGORICAL),
        ("", DataType.CATEGORICAL),
        (True, DataType.OTHER),
        (None, DataType.OTHER),
        ([1, 2], DataType.OTHER),
        (object(), DataType.OTHER),
    ],
)
def test_detect(value, expected):
    assert DataType.detect(value) is expected


def test_helpers_and_str():
    assert DataType.CONTINUOUS.is_continuous()
    assert DataType.CATEGORICAL.is_categorical()
    assert DataType.OTHER.is_other()
    assert not DataType.OTHER.is_continuous()
    assert str(DataType.CATEGORICAL) == "categorical"
    assert DataType.all() == [DataType.CONTINUOUS, DataType.CATEGORICAL, DataType.OTHER]
