import logging
from dataclasses import dataclass
from typing import ClassVar

from core.types import StepType, validate_byte
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateAttribute:
    """Creates a new attribute of the map, filled with a default value."""

    TYPE: ClassVar[StepType] = StepType.CREATE_ATTRIBUTE

    name: str
    default: int

    def __post_init__(self) -> None:
        validate_byte("default", self.default)

    def run(self, map2d: Map2d) -> None:
        logger.info(f"Create attribute '{self.name}' of map '{map2d.name}'")
        map2d.create_attribute(self.name, self.default)
