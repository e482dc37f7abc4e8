import logging
import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from core.errors import ConfigurationError
from core.types import BYTE_MAX, AttributeID, StepType, validate_byte
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModifyWithAttribute:
    """Modifies one attribute with the part of another one above a minimum.

    ``target += max(0, source - minimum) * factor * 255 / (255 - minimum)``, so
    a source of 255 contributes ``factor * 255`` to the target. A negative
    factor lowers the target, e.g. high elevation cools the temperature.
    """

    TYPE: ClassVar[StepType] = StepType.MODIFY_WITH_ATTRIBUTE

    source_id: AttributeID
    target_id: AttributeID
    factor: float
    minimum: int

    def __post_init__(self) -> None:
        if not math.isfinite(self.factor):
            raise ConfigurationError(f"The factor must be finite, got {self.factor}!")
        validate_byte("minimum", self.minimum)
        if self.minimum >= BYTE_MAX:
            raise ConfigurationError(f"The minimum must be below {BYTE_MAX}, got {self.minimum}!")

    @property
    def adjusted_factor(self) -> float:
        return self.factor * BYTE_MAX / (BYTE_MAX - self.minimum)

    def run(self, map2d: Map2d) -> None:
        source = map2d.get_attribute(self.source_id)
        target = map2d.get_attribute(self.target_id)
        logger.info(
            f"Modify attribute '{target.name}' with attribute '{source.name}' of map '{map2d.name}'"
        )

        source_values = source.get_all().astype(np.float64)
        target_values = target.get_all().astype(np.float64)
        contribution = np.maximum(source_values - self.minimum, 0.0) * self.adjusted_factor
        values = np.clip(np.trunc(target_values + contribution), 0, BYTE_MAX)
        target.replace_all(values)
