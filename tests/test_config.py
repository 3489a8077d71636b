from __future__ import annotations

import numpy as np
import pytest

from strata.common import rng as rng_mod
from strata.common.config import get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("STRATA_SEED", raising=False)
    monkeypatch.delenv("STRATA_LOG_LEVEL", raising=False)

    s = get_settings()
    assert s.seed is None
    assert s.log_level == "WARNING"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("STRATA_SEED", " 7 ")
    monkeypatch.setenv("STRATA_LOG_LEVEL", "debug")

    s = get_settings()
    assert s.seed == 7
    assert s.log_level == "DEBUG"


def test_settings_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("STRATA_LOG_LEVEL", "chatty")
    assert get_settings().log_level == "WARNING"


def test_settings_rejects_bad_seed(monkeypatch):
    monkeypatch.setenv("STRATA_SEED", "abc")
    with pytest.raises(ValueError, match="STRATA_SEED"):
        get_settings()


def test_get_rng_seeded_from_env(monkeypatch):
    monkeypatch.setenv("STRATA_SEED", "123")
    monkeypatch.setattr(rng_mod, "_RNG", None)

    a = rng_mod.get_rng().integers(0, 1_000_000, size=5)
    expected = np.random.default_rng(123).integers(0, 1_000_000, size=5)

    assert a.tolist() == expected.tolist()
    # 두 번째 호출은 같은 generator를 재사용
    assert rng_mod.get_rng() is rng_mod.get_rng()


def test_seed_resets_generator(monkeypatch):
    monkeypatch.setattr(rng_mod, "_RNG", None)

    rng_mod.seed(5)
    first = rng_mod.get_rng().random()
    rng_mod.seed(5)
    assert rng_mod.get_rng().random() == first
