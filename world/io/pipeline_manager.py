"""Pipeline file management for export and import operations."""

import logging
import os
import re
from pathlib import Path

import orjson

from world.generation.dto import MapGenerationData
from world.generation.pipeline import MapGeneration

logger = logging.getLogger(__name__)


def read_map_generation(path: str | Path) -> MapGeneration:
    """Read, validate & resolve a pipeline from a JSON file.

    Args:
        path: Path of the pipeline file

    Returns:
        Resolved MapGeneration instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file isn't valid JSON, doesn't match the schema
            or references unknown attributes
    """
    with open(path, "rb") as file:
        content = file.read()

    try:
        document = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        raise ValueError(f"Failed to parse pipeline file {path}: {e}") from e

    logger.info(f"Read pipeline from {path}")
    return MapGeneration.from_data(MapGenerationData.from_dict(document))


def write_map_generation(generation: MapGeneration, path: str | Path) -> None:
    """Write a pipeline to a JSON file.

    Args:
        generation: MapGeneration to write
        path: Path of the pipeline file

    Raises:
        OSError: If there's an error writing the file
    """
    content = orjson.dumps(generation.to_dict(), option=orjson.OPT_INDENT_2)

    with open(path, "wb") as file:
        file.write(content)

    logger.info(f"Wrote pipeline '{generation.name}' to {path}")


def sanitize_pipeline_name(name: str) -> str:
    """Sanitize pipeline name to prevent path traversal and allow only safe characters.

    Args:
        name: Original pipeline name

    Returns:
        Sanitized name containing only alphanumeric characters, underscores, and hyphens
    """
    # Remove path separators and other dangerous characters
    sanitized = re.sub(r"[^a-zA-Z0-9_-]", "_", name)
    sanitized = sanitized.strip(". ")
    if not sanitized:
        sanitized = "unnamed_pipeline"
    return sanitized


def get_pipelines_directory() -> str:
    """Get the absolute path to the pipelines directory in the workspace root."""
    workspace_root = Path(__file__).parent.parent.parent
    return str(workspace_root / "pipelines")


def get_pipeline_filepath(pipeline_name: str) -> str:
    """Get the full filepath for a sanitized pipeline name, creating the directory."""
    pipelines_dir = get_pipelines_directory()
    os.makedirs(pipelines_dir, exist_ok=True)
    return os.path.join(pipelines_dir, f"{pipeline_name}.json")


def export_pipeline(generation: MapGeneration, pipeline_name: str) -> None:
    """Export a pipeline into the pipelines directory.

    Args:
        generation: MapGeneration to export
        pipeline_name: Name for the pipeline file (will be sanitized)

    Raises:
        ValueError: If the pipeline file already exists
        OSError: If there's an error writing the file
    """
    sanitized_name = sanitize_pipeline_name(pipeline_name)
    filepath = get_pipeline_filepath(sanitized_name)

    if os.path.exists(filepath):
        raise ValueError(f"Pipeline file already exists: {sanitized_name}")

    write_map_generation(generation, filepath)


def import_pipeline(pipeline_name: str) -> MapGeneration:
    """Import a pipeline from the pipelines directory.

    Args:
        pipeline_name: Name of the pipeline file to import (will be sanitized)

    Raises:
        FileNotFoundError: If the pipeline file doesn't exist
        ValueError: If the pipeline file is invalid
    """
    sanitized_name = sanitize_pipeline_name(pipeline_name)
    filepath = get_pipeline_filepath(sanitized_name)

    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Pipeline file not found: {sanitized_name}")

    return read_map_generation(filepath)


def pipeline_exists(pipeline_name: str) -> bool:
    """Check if a pipeline file exists in the pipelines directory."""
    sanitized_name = sanitize_pipeline_name(pipeline_name)
    filepath = get_pipeline_filepath(sanitized_name)
    return os.path.exists(filepath)
