"""Converts between name-based portable steps and id-based runtime steps.

Names are resolved strictly in step order: a step may only reference
attributes created by an earlier step, and each created attribute gets the
next free id, which is exactly the id the map assigns while generating.
"""

import logging
from collections.abc import Sequence

from core.errors import AttributeDuplicateError, AttributeUnknownError
from core.types import AttributeID
from world.generation.dto.step_dto import GenerationStepDataType, step_to_data
from world.generation.steps import CreateAttribute, GenerationStep

logger = logging.getLogger(__name__)


class AttributeResolver:
    """Append-only table of the attribute names declared so far."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._ids: dict[str, AttributeID] = {}

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def declare(self, name: str, step_index: int) -> AttributeID:
        """Assign the next free id to a new attribute.

        Raises:
            AttributeDuplicateError: If an earlier step already declared the name
        """
        if name in self._ids:
            logger.warning(f"Step {step_index} declares attribute '{name}' a second time")
            raise AttributeDuplicateError(name, step_index)

        attribute_id = AttributeID(len(self._names))
        self._names.append(name)
        self._ids[name] = attribute_id
        return attribute_id

    def resolve(self, name: str, step_index: int) -> AttributeID:
        """Return the id of an attribute declared by an earlier step.

        Raises:
            AttributeUnknownError: If no earlier step declared the name
        """
        attribute_id = self._ids.get(name)
        if attribute_id is None:
            logger.warning(f"Step {step_index} references unknown attribute '{name}'")
            raise AttributeUnknownError(name, step_index)
        return attribute_id


def resolve_steps(steps: Sequence[GenerationStepDataType]) -> list[GenerationStep]:
    """Resolve portable steps into executable steps.

    Raises:
        AttributeUnknownError: If a step references an attribute before its creation
        AttributeDuplicateError: If 2 steps create the same attribute
        ConfigurationError: If a generator or transformer is invalid
    """
    resolver = AttributeResolver()
    return [data.to_step(resolver, index) for index, data in enumerate(steps)]


def serialize_steps(steps: Sequence[GenerationStep]) -> list[GenerationStepDataType]:
    """Convert executable steps back into their portable form.

    Replays the creation order of the attributes to rebuild their names. The
    result equals the validated ``MapGenerationData`` steps it was resolved
    from, so optional fields omitted by a document come back with their
    defaults filled in.
    """
    names: list[str] = []
    result: list[GenerationStepDataType] = []

    for step in steps:
        result.append(step_to_data(step, names))

        if isinstance(step, CreateAttribute):
            names.append(step.name)

    return result
