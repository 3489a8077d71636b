from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator

import pandas as pd

from strata.extractors.base import Writable

if TYPE_CHECKING:
    from strata.datasets.dataset import Dataset


class CSV(Writable):
    """CSV 파일 <-> 데이터셋 레코드.

    - 순회하면 각 행을 list로 yield (labeled 데이터셋이면 마지막 컬럼이 label)
    - export는 dataset의 레코드를 그대로 기록 (labeled면 label이 마지막 컬럼)
    - header=True면 첫 줄을 헤더로 읽고/쓴다
    """

    def __init__(
        self,
        path: str | Path,
        *,
        header: bool = False,
        sep: str = ",",
        encoding: str | None = None,
        dropna: bool = True,
    ):
        self.path = Path(path)
        self.header = header
        self.sep = sep
        self.encoding = encoding
        self.dropna = dropna

    def __iter__(self) -> Iterator[list[Any]]:
        if not self.path.exists():
            raise FileNotFoundError(str(self.path))

        df = pd.read_csv(
            self.path,
            sep=self.sep,
            encoding=self.encoding,
            header=0 if self.header else None,
        )
        if self.dropna:
            df = df.dropna(axis=0, how="any")

        # Series.tolist()는 numpy 스칼라가 아닌 파이썬 기본 타입을 돌려준다
        columns = [df[c].tolist() for c in df.columns]
        for record in zip(*columns):
            yield list(record)

    def export(self, dataset: "Dataset", overwrite: bool = False) -> None:
        from strata.datasets.labeled import Labeled

        if self.path.exists() and not overwrite:
            raise FileExistsError(f"refusing to overwrite existing file: {self.path}")

        names: list[str] = [f"f{i}" for i in range(dataset.num_columns())]
        if isinstance(dataset, Labeled):
            names.append("label")

        df = pd.DataFrame(list(dataset), columns=names if len(dataset) else None)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(
            self.path,
            sep=self.sep,
            encoding=self.encoding,
            index=False,
            header=self.header,
        )
