from __future__ import annotations

from strata.transformers.base import Stateful, Transformer
from strata.transformers.zscale import ZScaleStandardizer

__all__ = ["Stateful", "Transformer", "ZScaleStandardizer"]
