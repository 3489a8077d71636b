from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    seed: int | None
    log_level: str


def _parse_seed(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"STRATA_SEED must be an integer, got {raw!r}") from e


def get_settings() -> Settings:
    # 로컬 개발에서는 .env가 있으면 읽고, 그 외에는 환경변수만으로 동작
    load_dotenv(override=False)

    seed = _parse_seed(os.getenv("STRATA_SEED"))

    log_level = os.getenv("STRATA_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"

    return Settings(seed=seed, log_level=log_level)
