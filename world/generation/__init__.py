"""Procedural map generation module."""

from .dto import MapGenerationData
from .factory import create_biome_pipeline, create_pipeline
from .params import GenerationParams
from .pipeline import MapGeneration
from .resolver import AttributeResolver, resolve_steps, serialize_steps
from .steps import GenerationStep

__all__ = [
    "AttributeResolver",
    "GenerationParams",
    "GenerationStep",
    "MapGeneration",
    "MapGenerationData",
    "create_biome_pipeline",
    "create_pipeline",
    "resolve_steps",
    "serialize_steps",
]
