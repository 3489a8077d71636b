from __future__ import annotations

import json
from typing import Any, Iterator


class Report:
    """describe() 결과를 감싸는 읽기 전용 컨테이너."""

    def __init__(self, attributes: dict[Any, Any] | list[Any]):
        self.attributes = attributes

    def to_json(self) -> str:
        return json.dumps(self.attributes, ensure_ascii=False, indent=2, default=str)

    def __getitem__(self, key: Any) -> Any:
        return self.attributes[key]

    def __len__(self) -> int:
        return len(self.attributes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.attributes)

    def __str__(self) -> str:
        return self.to_json()
