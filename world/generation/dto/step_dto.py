"""DTOs for the portable form of generation steps.

Portable steps reference attributes by name. ``to_step()`` resolves these
names into ids with an :class:`AttributeResolver` that is built in step order.
"""

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, Field

from world.generation.steps import (
    CreateAttribute,
    DistortAlongX,
    DistortAlongY,
    Distortion2d,
    GenerationStep,
    GeneratorAdd,
    GeneratorSub,
    ModifyWithAttribute,
    TransformAttribute2d,
)

from .generator_dto import (
    Byte,
    Generator1dData,
    Generator2dData,
    generator1d_to_data,
    generator2d_to_data,
)
from .transformer_dto import Transformer2dData, transformer2d_to_data

if TYPE_CHECKING:
    from world.generation.resolver import AttributeResolver


class CreateAttributeData(BaseModel):
    """DTO declaring a new attribute."""

    type: Literal["create_attribute"] = "create_attribute"
    name: str = Field(min_length=1, description="Unique name of the attribute")
    default: Byte = Field(default=0, description="Initial value of every cell")

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> CreateAttribute:
        resolver.declare(self.name, step_index)
        return CreateAttribute(self.name, self.default)


class GeneratorAddData(BaseModel):
    type: Literal["generator_add"] = "generator_add"
    attribute: str
    generator: Generator2dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> GeneratorAdd:
        attribute_id = resolver.resolve(self.attribute, step_index)
        return GeneratorAdd(attribute_id, self.generator.to_generator())


class GeneratorSubData(BaseModel):
    type: Literal["generator_sub"] = "generator_sub"
    attribute: str
    generator: Generator2dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> GeneratorSub:
        attribute_id = resolver.resolve(self.attribute, step_index)
        return GeneratorSub(attribute_id, self.generator.to_generator())


class DistortAlongXData(BaseModel):
    type: Literal["distort_along_x"] = "distort_along_x"
    attribute: str
    generator: Generator1dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> DistortAlongX:
        attribute_id = resolver.resolve(self.attribute, step_index)
        return DistortAlongX(attribute_id, self.generator.to_generator())


class DistortAlongYData(BaseModel):
    type: Literal["distort_along_y"] = "distort_along_y"
    attribute: str
    generator: Generator1dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> DistortAlongY:
        attribute_id = resolver.resolve(self.attribute, step_index)
        return DistortAlongY(attribute_id, self.generator.to_generator())


class Distortion2dData(BaseModel):
    type: Literal["distortion_2d"] = "distortion_2d"
    attribute: str
    generator_x: Generator2dData
    generator_y: Generator2dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> Distortion2d:
        attribute_id = resolver.resolve(self.attribute, step_index)
        return Distortion2d(
            attribute_id,
            self.generator_x.to_generator(),
            self.generator_y.to_generator(),
        )


class ModifyWithAttributeData(BaseModel):
    type: Literal["modify_with_attribute"] = "modify_with_attribute"
    source: str
    target: str
    factor: float = Field(
        allow_inf_nan=False, description="Contribution of a source of 255, relative to 255"
    )
    minimum: Byte = Field(default=0, description="Source values up to this are ignored")

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> ModifyWithAttribute:
        source_id = resolver.resolve(self.source, step_index)
        target_id = resolver.resolve(self.target, step_index)
        return ModifyWithAttribute(source_id, target_id, self.factor, self.minimum)


class TransformAttribute2dData(BaseModel):
    type: Literal["transform_attribute_2d"] = "transform_attribute_2d"
    name: str = Field(default="", description="Describes the transformation in logs")
    source0: str
    source1: str
    target: str
    transformer: Transformer2dData

    def to_step(self, resolver: "AttributeResolver", step_index: int) -> TransformAttribute2d:
        source_id0 = resolver.resolve(self.source0, step_index)
        source_id1 = resolver.resolve(self.source1, step_index)
        target_id = resolver.resolve(self.target, step_index)
        return TransformAttribute2d(
            source_id0,
            source_id1,
            target_id,
            self.transformer.to_transformer(),
            self.name,
        )


GenerationStepDataType = (
    CreateAttributeData
    | GeneratorAddData
    | GeneratorSubData
    | DistortAlongXData
    | DistortAlongYData
    | Distortion2dData
    | ModifyWithAttributeData
    | TransformAttribute2dData
)

GenerationStepData = Annotated[GenerationStepDataType, Field(discriminator="type")]


def step_to_data(step: GenerationStep, names: list[str]) -> GenerationStepDataType:
    """Convert a resolved step back into its portable form.

    Args:
        step: The resolved step
        names: Attribute names indexed by id, as declared by the earlier steps

    Raises:
        IndexError: If the step references an id that no earlier step declared
    """
    if isinstance(step, CreateAttribute):
        return CreateAttributeData(name=step.name, default=step.default)
    elif isinstance(step, GeneratorAdd):
        return GeneratorAddData(
            attribute=_name_of(names, step.attribute_id),
            generator=generator2d_to_data(step.generator),
        )
    elif isinstance(step, GeneratorSub):
        return GeneratorSubData(
            attribute=_name_of(names, step.attribute_id),
            generator=generator2d_to_data(step.generator),
        )
    elif isinstance(step, DistortAlongX):
        return DistortAlongXData(
            attribute=_name_of(names, step.attribute_id),
            generator=generator1d_to_data(step.generator),
        )
    elif isinstance(step, DistortAlongY):
        return DistortAlongYData(
            attribute=_name_of(names, step.attribute_id),
            generator=generator1d_to_data(step.generator),
        )
    elif isinstance(step, Distortion2d):
        return Distortion2dData(
            attribute=_name_of(names, step.attribute_id),
            generator_x=generator2d_to_data(step.generator_x),
            generator_y=generator2d_to_data(step.generator_y),
        )
    elif isinstance(step, ModifyWithAttribute):
        return ModifyWithAttributeData(
            source=_name_of(names, step.source_id),
            target=_name_of(names, step.target_id),
            factor=step.factor,
            minimum=step.minimum,
        )
    elif isinstance(step, TransformAttribute2d):
        return TransformAttribute2dData(
            name=step.name,
            source0=_name_of(names, step.source_id0),
            source1=_name_of(names, step.source_id1),
            target=_name_of(names, step.target_id),
            transformer=transformer2d_to_data(step.transformer),
        )
    raise TypeError(f"Unknown generation step: {step!r}")


def _name_of(names: list[str], attribute_id: int) -> str:
    if not 0 <= attribute_id < len(names):
        raise IndexError(f"Unknown attribute id {attribute_id}!")
    return names[attribute_id]
