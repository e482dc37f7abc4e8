"""Pydantic models for the parameters of the built-in pipelines."""

from pydantic import BaseModel, Field, field_validator, model_validator


class GenerationParams(BaseModel):
    """Parameters for the built-in biome pipeline.

    Single fields are checked with declarative constraints. The biome table is
    checked by validators, as its ids must fit its size.
    """

    # Map
    map_name: str = Field(min_length=1, description="Name of the generated map")
    map_width: int = Field(gt=0, description="Map width in cells")
    map_height: int = Field(gt=0, description="Map height in cells")

    # Generation seed
    seed: int = Field(ge=0, description="Seed of the noise used for generation")

    # Elevation
    continent_height: int = Field(
        default=125, ge=0, le=255, description="Elevation added at the center of the continent"
    )
    island_height: int = Field(
        default=125, gt=0, le=255, description="Maximum elevation added by island noise"
    )
    island_scale: float = Field(
        default=20.0, gt=0, allow_inf_nan=False, description="Scale of the island noise"
    )
    coast_distortion: int = Field(
        default=8, ge=0, le=255, description="Maximum shift of each row of the elevation"
    )

    # Climate
    temperature_cooling: float = Field(
        default=-0.8,
        le=0,
        allow_inf_nan=False,
        description="How much high elevation cools the temperature",
    )
    rainfall_scale: float = Field(
        default=100.0, gt=0, allow_inf_nan=False, description="Scale of the rainfall noise"
    )

    # Biomes
    ocean_threshold: int = Field(
        default=76, ge=0, lt=255, description="Elevation at or below which cells become ocean"
    )
    ocean_biome: int = Field(default=12, ge=0, le=255, description="Biome id of the ocean")
    biome_table_size: tuple[int, int] = Field(
        default=(3, 4), description="[rainfall, temperature] clusters of the biome table"
    )
    biome_ids: list[int] = Field(
        default_factory=lambda: list(range(12)),
        description="Biome id of each cluster, row by row",
    )

    @field_validator("biome_table_size")
    @classmethod
    def validate_biome_table_size(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Validate that the biome table has at least 1 cluster per axis."""
        if any(x < 1 for x in v):
            raise ValueError("Biome table size values must be at least 1")
        return v

    @field_validator("biome_ids")
    @classmethod
    def validate_biome_ids(cls, v: list[int]) -> list[int]:
        """Validate that all biome ids are bytes."""
        if any(x < 0 or x > 255 for x in v):
            raise ValueError("Biome ids must be between 0 and 255")
        return v

    @model_validator(mode="after")
    def validate_biome_table(self) -> "GenerationParams":
        """Validate that there is a biome id for each cluster."""
        width, height = self.biome_table_size
        if len(self.biome_ids) != width * height:
            raise ValueError(
                f"Biome table of size {width}x{height} needs {width * height} ids, "
                f"got {len(self.biome_ids)}"
            )
        return self
