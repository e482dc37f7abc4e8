"""The closed set of steps run during map generation.

Every step reads a snapshot of its sources, computes all new values and then
replaces the target's values in one go.
"""

from world.generation.steps.attribute import CreateAttribute
from world.generation.steps.distortion import DistortAlongX, DistortAlongY, Distortion2d
from world.generation.steps.generator import GeneratorAdd, GeneratorSub
from world.generation.steps.modify import ModifyWithAttribute
from world.generation.steps.transform import TransformAttribute2d

GenerationStep = (
    CreateAttribute
    | DistortAlongX
    | DistortAlongY
    | Distortion2d
    | GeneratorAdd
    | GeneratorSub
    | ModifyWithAttribute
    | TransformAttribute2d
)

__all__ = [
    "CreateAttribute",
    "DistortAlongX",
    "DistortAlongY",
    "Distortion2d",
    "GenerationStep",
    "GeneratorAdd",
    "GeneratorSub",
    "ModifyWithAttribute",
    "TransformAttribute2d",
]
