from __future__ import annotations


class StrataError(Exception):
    """strata에서 발생하는 모든 예외의 베이스."""


class InvalidArgumentError(StrataError, ValueError):
    """잘못된 인자/구조(컬럼 수, 타입, offset, 비율 등)."""


class DatasetRuntimeError(StrataError, RuntimeError):
    """데이터셋 상태가 연산의 전제조건을 만족하지 못할 때."""
