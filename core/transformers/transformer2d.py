"""Transformers combining 2 byte inputs into 1 byte output."""

from dataclasses import dataclass
from typing import ClassVar

from core.transformers.clusterer import Clusterer2d
from core.transformers.threshold import OverwriteWithThreshold
from core.types import Transformer2dType, validate_byte


@dataclass(frozen=True)
class ClustererTransformer:
    """Selects a cluster id, e.g. a biome."""

    TYPE: ClassVar[Transformer2dType] = Transformer2dType.CLUSTERER

    clusterer: Clusterer2d

    def transform(self, input0: int, input1: int) -> int:
        return self.clusterer.cluster(input0, input1)


@dataclass(frozen=True)
class ConstTransformer:
    TYPE: ClassVar[Transformer2dType] = Transformer2dType.CONST

    value: int

    def __post_init__(self) -> None:
        validate_byte("value", self.value)

    def transform(self, input0: int, input1: int) -> int:
        return self.value


@dataclass(frozen=True)
class OverwriteIfAbove:
    """Overwrites the 2nd input if the 1st is at or above the threshold."""

    TYPE: ClassVar[Transformer2dType] = Transformer2dType.OVERWRITE_IF_ABOVE

    data: OverwriteWithThreshold

    @classmethod
    def new(cls, value: int, threshold: int) -> "OverwriteIfAbove":
        return cls(OverwriteWithThreshold(value, threshold))

    def transform(self, input0: int, input1: int) -> int:
        return self.data.overwrite_output_if_above(input0, input1)


@dataclass(frozen=True)
class OverwriteIfBelow:
    """Overwrites the 2nd input if the 1st is at or below the threshold."""

    TYPE: ClassVar[Transformer2dType] = Transformer2dType.OVERWRITE_IF_BELOW

    data: OverwriteWithThreshold

    @classmethod
    def new(cls, value: int, threshold: int) -> "OverwriteIfBelow":
        return cls(OverwriteWithThreshold(value, threshold))

    def transform(self, input0: int, input1: int) -> int:
        return self.data.overwrite_output_if_below(input0, input1)


Transformer2d = ClustererTransformer | ConstTransformer | OverwriteIfAbove | OverwriteIfBelow
