"""Describe a CSV file as a strata dataset.

Usage:
  python -m strata.tools.describe --csv-path data.csv
  python -m strata.tools.describe --csv-path data.csv --header --labeled --by-label
"""

from __future__ import annotations

import argparse
import logging
import sys

from strata.common.config import get_settings
from strata.datasets import Labeled, Unlabeled
from strata.exceptions import StrataError
from strata.extractors import CSV


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Print descriptive statistics of a CSV dataset.")
    ap.add_argument("--csv-path", type=str, required=True)
    ap.add_argument("--sep", type=str, default=",")
    ap.add_argument("--header", action="store_true", help="first line is a header")
    ap.add_argument("--labeled", action="store_true", help="last column is the label")
    ap.add_argument(
        "--by-label", action="store_true", help="break statistics down by label (implies --labeled)"
    )
    ap.add_argument("--deduplicate", action="store_true")
    args = ap.parse_args(argv)

    s = get_settings()
    logging.basicConfig(level=s.log_level, format="%(levelname)s %(name)s: %(message)s")

    extractor = CSV(args.csv_path, header=args.header, sep=args.sep)
    labeled = args.labeled or args.by_label

    try:
        kind = Labeled if labeled else Unlabeled
        dataset = kind.from_iterator(extractor)
    except FileNotFoundError as e:
        print(f"[ERR] file not found: {e}", file=sys.stderr)
        return 2
    except StrataError as e:
        print(f"[ERR] invalid dataset: {e}", file=sys.stderr)
        return 3

    if args.deduplicate:
        dataset.deduplicate()

    try:
        if args.by_label:
            report = dataset.describe_by_label()
        else:
            report = dataset.describe()
    except StrataError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 3

    rows, columns = dataset.shape()
    print(f"[OK] shape: {rows} rows x {columns} columns")
    print(report.to_json())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
