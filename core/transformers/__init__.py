from core.transformers.clusterer import Clusterer2d
from core.transformers.threshold import OverwriteWithThreshold
from core.transformers.transformer2d import (
    ClustererTransformer,
    ConstTransformer,
    OverwriteIfAbove,
    OverwriteIfBelow,
    Transformer2d,
)

__all__ = [
    "Clusterer2d",
    "ClustererTransformer",
    "ConstTransformer",
    "OverwriteIfAbove",
    "OverwriteIfBelow",
    "OverwriteWithThreshold",
    "Transformer2d",
]
