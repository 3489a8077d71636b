from __future__ import annotations

from strata.extractors.base import Writable
from strata.extractors.csv import CSV

__all__ = ["CSV", "Writable"]
