"""Runs an ordered list of generation steps against a fresh map."""

import logging
import time
from collections.abc import Sequence
from typing import Any

from core.size import Size2d
from world.generation.dto.generation_dto import MapGenerationData, MapSizeData
from world.generation.resolver import resolve_steps, serialize_steps
from world.generation.steps import GenerationStep
from world.map.map2d import Map2d

logger = logging.getLogger(__name__)


class MapGeneration:
    """An immutable pipeline of generation steps bound to a target size.

    The steps run sequentially in list order. Later steps may depend on
    anything an earlier step wrote, so the order is never changed.
    """

    def __init__(self, name: str, size: Size2d, steps: Sequence[GenerationStep]) -> None:
        self._name = name
        self._size = size
        self._steps = tuple(steps)

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> Size2d:
        return self._size

    @property
    def steps(self) -> tuple[GenerationStep, ...]:
        return self._steps

    @classmethod
    def from_data(cls, data: MapGenerationData) -> "MapGeneration":
        """Validate & resolve a portable pipeline.

        Raises:
            AttributeUnknownError: If a step references an attribute before its creation
            AttributeDuplicateError: If 2 steps create the same attribute
            ConfigurationError: If a generator or transformer is invalid
        """
        steps = resolve_steps(data.steps)
        return cls(data.name, data.size.to_size(), steps)

    def to_data(self) -> MapGenerationData:
        return MapGenerationData(
            name=self._name,
            size=MapSizeData(width=self._size.width, height=self._size.height),
            steps=serialize_steps(self._steps),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MapGeneration":
        """Parse, validate & resolve a pipeline document.

        Raises:
            ValidationError: If the document doesn't match the schema
        """
        return cls.from_data(MapGenerationData.from_dict(data))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary with every default spelled out."""
        return self.to_data().to_dict()

    def generate(self) -> Map2d:
        """Create a new map and run all steps on it."""
        logger.info(
            f"Start generation of map '{self._name}' with size "
            f"{self._size.width}x{self._size.height} & {len(self._steps)} steps"
        )
        start = time.perf_counter()
        map2d = Map2d(self._size, self._name)

        for index, step in enumerate(self._steps):
            step_start = time.perf_counter()
            step.run(map2d)
            step_time_ms = (time.perf_counter() - step_start) * 1000.0
            logger.debug(f"Step {index} ({step.TYPE.value}) took {step_time_ms:.2f} ms")

        total_time_ms = (time.perf_counter() - start) * 1000.0
        logger.info(f"Finished generation of map '{self._name}' in {total_time_ms:.2f} ms")

        return map2d
