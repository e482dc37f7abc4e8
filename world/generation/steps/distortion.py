"""Steps shifting the values of an attribute.

Edge values are repeated into the gap a shift opens, and values pushed
beyond the border are dropped. Nothing wraps around.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import numpy.typing as npt

from core.generators.generator1d import Generator1d
from core.generators.generator2d import Generator2d
from core.size import Size2d
from core.types import AttributeID, StepType
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)

Values = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class DistortAlongX:
    """Shifts each row to the right based on a 1d generator fed with y."""

    TYPE: ClassVar[StepType] = StepType.DISTORT_ALONG_X

    attribute_id: AttributeID
    generator: Generator1d

    def distort(self, values: Values, size: Size2d) -> Values:
        rows = values.reshape(size.height, size.width)
        result = np.empty_like(rows)

        for y in range(size.height):
            shift = min(self.generator.generate(y), size.width)
            logger.debug(f"y={y} shift={shift}")
            result[y, :shift] = rows[y, 0]
            result[y, shift:] = rows[y, : size.width - shift]

        return result.reshape(-1)

    def run(self, map2d: Map2d) -> None:
        attribute = map2d.get_attribute(self.attribute_id)
        logger.info(f"Distort attribute '{attribute.name}' of map '{map2d.name}' along the x-axis.")

        if map2d.size.area > 0:
            attribute.replace_all(self.distort(attribute.get_all(), map2d.size))


@dataclass(frozen=True)
class DistortAlongY:
    """Shifts each column down based on a 1d generator fed with x."""

    TYPE: ClassVar[StepType] = StepType.DISTORT_ALONG_Y

    attribute_id: AttributeID
    generator: Generator1d

    def distort(self, values: Values, size: Size2d) -> Values:
        rows = values.reshape(size.height, size.width)
        result = np.empty_like(rows)

        for x in range(size.width):
            shift = min(self.generator.generate(x), size.height)
            logger.debug(f"x={x} shift={shift}")
            result[:shift, x] = rows[0, x]
            result[shift:, x] = rows[: size.height - shift, x]

        return result.reshape(-1)

    def run(self, map2d: Map2d) -> None:
        attribute = map2d.get_attribute(self.attribute_id)
        logger.info(f"Distort attribute '{attribute.name}' of map '{map2d.name}' along the y-axis.")

        if map2d.size.area > 0:
            attribute.replace_all(self.distort(attribute.get_all(), map2d.size))


@dataclass(frozen=True)
class Distortion2d:
    """Reads each cell from a point shifted by 2 generators, clamped to the map."""

    TYPE: ClassVar[StepType] = StepType.DISTORTION_2D

    attribute_id: AttributeID
    generator_x: Generator2d
    generator_y: Generator2d

    def distort(self, values: Values, size: Size2d) -> Values:
        indices = np.empty(size.area, dtype=np.intp)
        index = 0

        for y in range(size.height):
            for x in range(size.width):
                shift_x = self.generator_x.generate(x, y)
                shift_y = self.generator_y.generate(x, y)
                indices[index] = size.saturating_to_index(x + shift_x, y + shift_y)
                index += 1

        return values[indices]

    def run(self, map2d: Map2d) -> None:
        attribute = map2d.get_attribute(self.attribute_id)
        logger.info(f"Distort attribute '{attribute.name}' of map '{map2d.name}' in 2 dimensions.")
        attribute.replace_all(self.distort(attribute.get_all(), map2d.size))
