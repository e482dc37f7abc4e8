import logging
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import numpy.typing as npt

from core.generators.generator2d import Generator2d
from core.size import Size2d
from core.types import BYTE_MAX, AttributeID, StepType
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)


def generate_values(generator: Generator2d, size: Size2d) -> npt.NDArray[np.int16]:
    """Evaluate a 2d generator for every cell, in index order."""
    values = np.empty(size.area, dtype=np.int16)
    index = 0

    for y in range(size.height):
        for x in range(size.width):
            values[index] = generator.generate(x, y)
            index += 1

    return values


def _combine(map2d: Map2d, attribute_id: AttributeID, generator: Generator2d, sign: int) -> None:
    attribute = map2d.get_attribute(attribute_id)
    old_values = attribute.get_all().astype(np.int16)
    generated = generate_values(generator, map2d.size)
    attribute.replace_all(np.clip(old_values + sign * generated, 0, BYTE_MAX))


@dataclass(frozen=True)
class GeneratorAdd:
    """Adds the values of a generator to an attribute, saturating at 255."""

    TYPE: ClassVar[StepType] = StepType.GENERATOR_ADD

    attribute_id: AttributeID
    generator: Generator2d

    def run(self, map2d: Map2d) -> None:
        logger.info(
            f"Add generator to attribute '{map2d.get_attribute(self.attribute_id).name}' "
            f"of map '{map2d.name}'"
        )
        _combine(map2d, self.attribute_id, self.generator, 1)


@dataclass(frozen=True)
class GeneratorSub:
    """Subtracts the values of a generator from an attribute, saturating at 0."""

    TYPE: ClassVar[StepType] = StepType.GENERATOR_SUB

    attribute_id: AttributeID
    generator: Generator2d

    def run(self, map2d: Map2d) -> None:
        logger.info(
            f"Subtract generator from attribute '{map2d.get_attribute(self.attribute_id).name}' "
            f"of map '{map2d.name}'"
        )
        _combine(map2d, self.attribute_id, self.generator, -1)
