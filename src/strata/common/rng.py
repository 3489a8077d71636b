from __future__ import annotations

import numpy as np

from strata.common.config import get_settings

_RNG: np.random.Generator | None = None


def get_rng() -> np.random.Generator:
    """프로세스 공용 난수 생성기. 최초 호출 시 STRATA_SEED로 시드된다."""
    global _RNG
    if _RNG is None:
        _RNG = np.random.default_rng(get_settings().seed)
    return _RNG


def seed(value: int | None) -> None:
    global _RNG
    _RNG = np.random.default_rng(value)
