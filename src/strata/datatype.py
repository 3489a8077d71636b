from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np


class DataType(Enum):
    """Value kinds used for column/label homogeneity checks.

    By convention categorical data are strings, continuous data are integer or
    floating point numbers. Anything else (bool, None, containers) is OTHER and
    fails validation.
    """

    CONTINUOUS = "continuous"
    CATEGORICAL = "categorical"
    OTHER = "other"

    @classmethod
    def detect(cls, value: Any) -> "DataType":
        # bool은 int의 서브클래스라서 먼저 걸러야 한다
        if isinstance(value, (bool, np.bool_)):
            return cls.OTHER
        if isinstance(value, (int, float, np.integer, np.floating)):
            return cls.CONTINUOUS
        if isinstance(value, str):
            return cls.CATEGORICAL
        return cls.OTHER

    @classmethod
    def all(cls) -> list["DataType"]:
        return list(cls)

    def is_continuous(self) -> bool:
        return self is DataType.CONTINUOUS

    def is_categorical(self) -> bool:
        return self is DataType.CATEGORICAL

    def is_other(self) -> bool:
        return self is DataType.OTHER

    def __str__(self) -> str:
        return self.value
