"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to assemble the steps manually.

Currently implemented:
- "biome": Continent with islands, a latitude-based climate & biomes
"""

import logging

from world.generation.dto import (
    AbsoluteGradientData,
    ApplyToDistanceData,
    ApplyToYData,
    ClustererData,
    CreateAttributeData,
    DistortAlongXData,
    GenerationStepData,
    GeneratorAddData,
    GradientData,
    MapGenerationData,
    MapSizeData,
    ModifyWithAttributeData,
    Noise1dData,
    Noise2dData,
    OverwriteIfBelowData,
    SizeData,
    TransformAttribute2dData,
)
from world.generation.params import GenerationParams
from world.generation.pipeline import MapGeneration

logger = logging.getLogger(__name__)

ELEVATION = "elevation"
TEMPERATURE = "temperature"
RAINFALL = "rainfall"
BIOME = "biome"


def create_pipeline(name: str, params: GenerationParams) -> MapGeneration:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "biome": Elevation, temperature, rainfall & biomes

    Args:
        name: Name of the pipeline configuration to use.
        params: Validated generation parameters.

    Returns:
        A resolved MapGeneration ready to generate maps.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "biome":
        return create_biome_pipeline(params)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_biome_pipeline(params: GenerationParams) -> MapGeneration:
    """Create the biome pipeline.

    The biome pipeline generates:
    1. A continent as a circular gradient around the center of the map
    2. Islands with noise
    3. A ragged coast by shifting the rows of the elevation
    4. A temperature falling from the equator to the poles
    5. Colder temperatures on high ground
    6. Rainfall with noise
    7. Biomes selected by rainfall & temperature
    8. Ocean wherever the elevation is low
    """
    data = create_biome_data(params)
    logger.debug(f"Created biome pipeline '{data.name}' with {len(data.steps)} steps")
    return MapGeneration.from_data(data)


def create_biome_data(params: GenerationParams) -> MapGenerationData:
    """Create the portable form of the biome pipeline."""
    half_x = params.map_width // 2
    half_y = params.map_height // 2
    table_width, table_height = params.biome_table_size

    steps: list[GenerationStepData] = [
        CreateAttributeData(name=ELEVATION),
        CreateAttributeData(name=TEMPERATURE),
        CreateAttributeData(name=RAINFALL),
        CreateAttributeData(name=BIOME),
        GeneratorAddData(
            attribute=ELEVATION,
            generator=ApplyToDistanceData(
                generator=GradientData(
                    value_start=params.continent_height,
                    value_end=0,
                    start=0,
                    length=max(half_x // 2, 1),
                ),
                center_x=half_x,
                center_y=half_y,
            ),
        ),
        GeneratorAddData(
            attribute=ELEVATION,
            generator=Noise2dData(
                seed=params.seed,
                scale=params.island_scale,
                min_value=0,
                max_value=params.island_height,
            ),
        ),
    ]

    if params.coast_distortion > 0:
        steps.append(
            DistortAlongXData(
                attribute=ELEVATION,
                generator=Noise1dData(
                    seed=params.seed + 1,
                    scale=params.island_scale,
                    min_value=0,
                    max_value=params.coast_distortion,
                ),
            )
        )

    steps += [
        GeneratorAddData(
            attribute=TEMPERATURE,
            generator=ApplyToYData(
                generator=AbsoluteGradientData(
                    value_center=255,
                    value_end=0,
                    center=half_y,
                    length=max(half_y, 1),
                )
            ),
        ),
        ModifyWithAttributeData(
            source=ELEVATION,
            target=TEMPERATURE,
            factor=params.temperature_cooling,
            minimum=params.ocean_threshold,
        ),
        GeneratorAddData(
            attribute=RAINFALL,
            generator=Noise2dData(
                seed=params.seed + 2,
                scale=params.rainfall_scale,
                min_value=0,
                max_value=255,
            ),
        ),
        TransformAttribute2dData(
            name="biome selection",
            source0=RAINFALL,
            source1=TEMPERATURE,
            target=BIOME,
            transformer=ClustererData(
                size=SizeData(width=table_width, height=table_height),
                cluster_ids=params.biome_ids,
            ),
        ),
        TransformAttribute2dData(
            name="ocean",
            source0=ELEVATION,
            source1=BIOME,
            target=BIOME,
            transformer=OverwriteIfBelowData(
                value=params.ocean_biome,
                threshold=params.ocean_threshold,
            ),
        ),
    ]

    return MapGenerationData(
        name=params.map_name,
        size=MapSizeData(width=params.map_width, height=params.map_height),
        steps=steps,
    )
