"""DTOs for the portable form of 2d transformers."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from core.transformers.clusterer import Clusterer2d
from core.transformers.transformer2d import (
    ClustererTransformer,
    ConstTransformer,
    OverwriteIfAbove,
    OverwriteIfBelow,
    Transformer2d,
)

from .generator_dto import Byte, SizeData


class ClustererData(BaseModel):
    """DTO for a clusterer, e.g. a biome table over 2 attributes."""

    type: Literal["clusterer"] = "clusterer"
    size: SizeData = Field(description="Number of clusters along each input")
    cluster_ids: list[Byte] = Field(description="Cluster id of each cell, row by row")

    def to_transformer(self) -> ClustererTransformer:
        return ClustererTransformer(Clusterer2d(self.size.to_size(), tuple(self.cluster_ids)))


class ConstData(BaseModel):
    type: Literal["const"] = "const"
    value: Byte

    def to_transformer(self) -> ConstTransformer:
        return ConstTransformer(self.value)


class OverwriteIfAboveData(BaseModel):
    type: Literal["overwrite_if_above"] = "overwrite_if_above"
    value: Byte
    threshold: Byte

    def to_transformer(self) -> OverwriteIfAbove:
        return OverwriteIfAbove.new(self.value, self.threshold)


class OverwriteIfBelowData(BaseModel):
    type: Literal["overwrite_if_below"] = "overwrite_if_below"
    value: Byte
    threshold: Byte

    def to_transformer(self) -> OverwriteIfBelow:
        return OverwriteIfBelow.new(self.value, self.threshold)


Transformer2dData = Annotated[
    ClustererData | ConstData | OverwriteIfAboveData | OverwriteIfBelowData,
    Field(discriminator="type"),
]


def transformer2d_to_data(
    transformer: Transformer2d,
) -> ClustererData | ConstData | OverwriteIfAboveData | OverwriteIfBelowData:
    """Convert a runtime transformer back into its portable form."""
    if isinstance(transformer, ClustererTransformer):
        clusterer = transformer.clusterer
        return ClustererData(
            size=SizeData.from_size(clusterer.lookup_table_size),
            cluster_ids=list(clusterer.cluster_id_lookup),
        )
    elif isinstance(transformer, ConstTransformer):
        return ConstData(value=transformer.value)
    elif isinstance(transformer, OverwriteIfAbove):
        return OverwriteIfAboveData(
            value=transformer.data.value, threshold=transformer.data.threshold
        )
    elif isinstance(transformer, OverwriteIfBelow):
        return OverwriteIfBelowData(
            value=transformer.data.value, threshold=transformer.data.threshold
        )
    raise TypeError(f"Unknown 2d transformer: {transformer!r}")
