import logging
from dataclasses import dataclass
from typing import ClassVar

from core.transformers.transformer2d import Transformer2d
from core.types import AttributeID, StepType
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformAttribute2d:
    """Transforms 2 attributes and writes the result into another.

    Used to select biomes from 2 attributes, or to force a value wherever
    an attribute is below a threshold (e.g. ocean wherever elevation is low).
    """

    TYPE: ClassVar[StepType] = StepType.TRANSFORM_ATTRIBUTE_2D

    source_id0: AttributeID
    source_id1: AttributeID
    target_id: AttributeID
    transformer: Transformer2d
    name: str = ""

    def run(self, map2d: Map2d) -> None:
        source0 = map2d.get_attribute(self.source_id0)
        source1 = map2d.get_attribute(self.source_id1)
        target = map2d.get_attribute(self.target_id)
        logger.info(
            f"Apply transformation '{self.name}' using '{source0.name}' & '{source1.name}' "
            f"to '{target.name}' of map '{map2d.name}'"
        )

        values = [
            self.transformer.transform(value0, value1)
            for value0, value1 in zip(source0.get_all().tolist(), source1.get_all().tolist())
        ]
        target.replace_all(values)
