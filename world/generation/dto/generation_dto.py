"""DTO for a complete, portable map generation pipeline."""

from typing import Any

from pydantic import BaseModel, Field

from .generator_dto import SizeData
from .step_dto import GenerationStepData


class MapSizeData(SizeData):
    """DTO for the size of a generated map; both sides must be positive."""

    width: int = Field(gt=0, description="Number of cells along the x-axis")
    height: int = Field(gt=0, description="Number of cells along the y-axis")


class MapGenerationData(BaseModel):
    """DTO for ``{name, size, steps}``: the persisted pipeline schema.

    Steps reference attributes by name and run in list order.
    """

    name: str = Field(min_length=1, description="Name of the generated map")
    size: MapSizeData
    steps: list[GenerationStepData] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MapGenerationData":
        """Create DTO from dictionary.

        Raises:
            ValidationError: If the document doesn't match the schema
        """
        return cls.model_validate(data)
