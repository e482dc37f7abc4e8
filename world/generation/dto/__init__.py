"""DTOs for the portable, name-based form of a map generation."""

from .generation_dto import MapGenerationData, MapSizeData
from .generator_dto import (
    AbsoluteGradientData,
    ApplyToDistanceData,
    ApplyToXData,
    ApplyToYData,
    Generator1dData,
    Generator2dData,
    GradientData,
    IndexGeneratorData,
    InputAsOutputData,
    InterpolateVectorData,
    InterpolationEntryData,
    Noise1dData,
    Noise2dData,
    NoiseData,
    SizeData,
)
from .step_dto import (
    CreateAttributeData,
    DistortAlongXData,
    DistortAlongYData,
    Distortion2dData,
    GenerationStepData,
    GeneratorAddData,
    GeneratorSubData,
    ModifyWithAttributeData,
    TransformAttribute2dData,
)
from .transformer_dto import (
    ClustererData,
    ConstData,
    OverwriteIfAboveData,
    OverwriteIfBelowData,
    Transformer2dData,
)

__all__ = [
    "AbsoluteGradientData",
    "ApplyToDistanceData",
    "ApplyToXData",
    "ApplyToYData",
    "ClustererData",
    "ConstData",
    "CreateAttributeData",
    "DistortAlongXData",
    "DistortAlongYData",
    "Distortion2dData",
    "GenerationStepData",
    "Generator1dData",
    "Generator2dData",
    "GeneratorAddData",
    "GeneratorSubData",
    "GradientData",
    "IndexGeneratorData",
    "InputAsOutputData",
    "InterpolateVectorData",
    "InterpolationEntryData",
    "MapGenerationData",
    "MapSizeData",
    "ModifyWithAttributeData",
    "Noise1dData",
    "Noise2dData",
    "NoiseData",
    "OverwriteIfAboveData",
    "OverwriteIfBelowData",
    "SizeData",
    "Transformer2dData",
    "TransformAttribute2dData",
]
