"""DTOs for the portable form of 1d & 2d generators.

Each DTO is tagged by a ``type`` field and converts into its runtime
generator with ``to_generator()``. Semantic checks (positive scale & length,
ordered thresholds, ...) happen when the runtime generator is constructed.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from core.generators.generator1d import (
    AbsoluteGradient,
    Generator1d,
    Gradient,
    InputAsOutput,
    InterpolateVector,
    Noise1d,
)
from core.generators.generator2d import (
    ApplyToDistance,
    ApplyToX,
    ApplyToY,
    Generator2d,
    IndexGenerator,
    Noise2d,
)
from core.generators.noise import Noise
from core.interpolation import VectorInterpolation
from core.size import Size2d

Byte = Annotated[int, Field(ge=0, le=255)]


class SizeData(BaseModel):
    """DTO for a 2d size."""

    width: int = Field(ge=0, description="Size along the x-axis")
    height: int = Field(ge=0, description="Size along the y-axis")

    def to_size(self) -> Size2d:
        return Size2d(self.width, self.height)

    @classmethod
    def from_size(cls, size: Size2d) -> "SizeData":
        return cls(width=size.width, height=size.height)


class NoiseData(BaseModel):
    """DTO for noise parameters."""

    seed: int = Field(ge=0, description="Seed of the noise primitive")
    scale: float = Field(
        allow_inf_nan=False, description="Divides the coordinates before sampling"
    )
    min_value: Byte
    max_value: Byte

    def to_noise(self) -> Noise:
        return Noise(self.seed, self.scale, self.min_value, self.max_value)

    @classmethod
    def from_noise(cls, noise: Noise) -> "NoiseData":
        return cls(
            seed=noise.seed,
            scale=noise.scale,
            min_value=noise.min_value,
            max_value=noise.max_value,
        )


class InterpolationEntryData(BaseModel):
    threshold: int = Field(ge=0)
    value: Byte


# 1d generators


class AbsoluteGradientData(BaseModel):
    type: Literal["absolute_gradient"] = "absolute_gradient"
    value_center: Byte
    value_end: Byte
    center: int = Field(ge=0)
    length: int

    def to_generator(self) -> AbsoluteGradient:
        return AbsoluteGradient(self.value_center, self.value_end, self.center, self.length)


class GradientData(BaseModel):
    type: Literal["gradient"] = "gradient"
    value_start: Byte
    value_end: Byte
    start: int = Field(ge=0)
    length: int

    def to_generator(self) -> Gradient:
        return Gradient(self.value_start, self.value_end, self.start, self.length)


class InputAsOutputData(BaseModel):
    type: Literal["input_as_output"] = "input_as_output"

    def to_generator(self) -> InputAsOutput:
        return InputAsOutput()


class InterpolateVectorData(BaseModel):
    type: Literal["interpolate_vector"] = "interpolate_vector"
    entries: list[InterpolationEntryData]

    def to_generator(self) -> InterpolateVector:
        pairs = [(entry.threshold, entry.value) for entry in self.entries]
        return InterpolateVector(VectorInterpolation.from_pairs(pairs))


class Noise1dData(NoiseData):
    type: Literal["noise"] = "noise"

    def to_generator(self) -> Noise1d:
        return Noise1d(self.to_noise())


Generator1dData = Annotated[
    AbsoluteGradientData | GradientData | InputAsOutputData | InterpolateVectorData | Noise1dData,
    Field(discriminator="type"),
]


def generator1d_to_data(
    generator: Generator1d,
) -> AbsoluteGradientData | GradientData | InputAsOutputData | InterpolateVectorData | Noise1dData:
    """Convert a runtime 1d generator back into its portable form."""
    if isinstance(generator, AbsoluteGradient):
        return AbsoluteGradientData(
            value_center=generator.value_center,
            value_end=generator.value_end,
            center=generator.center,
            length=generator.length,
        )
    elif isinstance(generator, Gradient):
        return GradientData(
            value_start=generator.value_start,
            value_end=generator.value_end,
            start=generator.start,
            length=generator.length,
        )
    elif isinstance(generator, InputAsOutput):
        return InputAsOutputData()
    elif isinstance(generator, InterpolateVector):
        entries = [
            InterpolationEntryData(threshold=threshold, value=value)
            for threshold, value in generator.interpolation.to_pairs()
        ]
        return InterpolateVectorData(entries=entries)
    elif isinstance(generator, Noise1d):
        return Noise1dData(**NoiseData.from_noise(generator.noise).model_dump())
    raise TypeError(f"Unknown 1d generator: {generator!r}")


# 2d generators


class ApplyToXData(BaseModel):
    type: Literal["apply_to_x"] = "apply_to_x"
    generator: Generator1dData

    def to_generator(self) -> ApplyToX:
        return ApplyToX(self.generator.to_generator())


class ApplyToYData(BaseModel):
    type: Literal["apply_to_y"] = "apply_to_y"
    generator: Generator1dData

    def to_generator(self) -> ApplyToY:
        return ApplyToY(self.generator.to_generator())


class ApplyToDistanceData(BaseModel):
    type: Literal["apply_to_distance"] = "apply_to_distance"
    generator: Generator1dData
    center_x: int = Field(ge=0)
    center_y: int = Field(ge=0)

    def to_generator(self) -> ApplyToDistance:
        return ApplyToDistance(self.generator.to_generator(), self.center_x, self.center_y)


class IndexGeneratorData(BaseModel):
    type: Literal["index"] = "index"
    size: SizeData

    def to_generator(self) -> IndexGenerator:
        return IndexGenerator(self.size.to_size())


class Noise2dData(NoiseData):
    type: Literal["noise_2d"] = "noise_2d"

    def to_generator(self) -> Noise2d:
        return Noise2d(self.to_noise())


Generator2dData = Annotated[
    ApplyToXData | ApplyToYData | ApplyToDistanceData | IndexGeneratorData | Noise2dData,
    Field(discriminator="type"),
]


def generator2d_to_data(
    generator: Generator2d,
) -> ApplyToXData | ApplyToYData | ApplyToDistanceData | IndexGeneratorData | Noise2dData:
    """Convert a runtime 2d generator back into its portable form."""
    if isinstance(generator, ApplyToX):
        return ApplyToXData(generator=generator1d_to_data(generator.generator))
    elif isinstance(generator, ApplyToY):
        return ApplyToYData(generator=generator1d_to_data(generator.generator))
    elif isinstance(generator, ApplyToDistance):
        return ApplyToDistanceData(
            generator=generator1d_to_data(generator.generator),
            center_x=generator.center_x,
            center_y=generator.center_y,
        )
    elif isinstance(generator, IndexGenerator):
        return IndexGeneratorData(size=SizeData.from_size(generator.size))
    elif isinstance(generator, Noise2d):
        return Noise2dData(**NoiseData.from_noise(generator.noise).model_dump())
    raise TypeError(f"Unknown 2d generator: {generator!r}")
