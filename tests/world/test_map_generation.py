"""Tests for the map generation orchestrator."""

import logging
from typing import Any

import pytest
from pydantic import ValidationError

from core.errors import AttributeUnknownError
from core.generators import ApplyToX, IndexGenerator, InputAsOutput
from core.size import Size2d
from core.transformers import OverwriteIfBelow
from core.types import AttributeID
from world.generation import MapGeneration
from world.generation.steps import (
    CreateAttribute,
    DistortAlongX,
    GeneratorAdd,
    TransformAttribute2d,
)


def create_generation() -> MapGeneration:
    elevation = AttributeID(0)
    biome = AttributeID(1)
    return MapGeneration(
        "island",
        Size2d(3, 2),
        [
            CreateAttribute("elevation", 0),
            CreateAttribute("biome", 7),
            GeneratorAdd(elevation, IndexGenerator(Size2d(3, 2))),
            GeneratorAdd(elevation, ApplyToX(InputAsOutput())),
            DistortAlongX(elevation, InputAsOutput()),
            TransformAttribute2d(elevation, biome, biome, OverwriteIfBelow.new(0, 2), "ocean"),
        ],
    )


class TestMapGeneration:
    """Test running steps in order."""

    def test_generate(self) -> None:
        """Test that every step runs in list order on a new map."""
        map2d = create_generation().generate()

        assert map2d.name == "island"
        assert map2d.size == Size2d(3, 2)
        assert [attribute.name for attribute in map2d.get_attributes()] == ["elevation", "biome"]
        assert map2d.get_attribute(0).get_all().tolist() == [0, 2, 4, 3, 3, 5]
        assert map2d.get_attribute(1).get_all().tolist() == [0, 0, 7, 7, 7, 7]

    def test_generate_twice(self) -> None:
        """Test that each run starts with a fresh map."""
        generation = create_generation()

        first = generation.generate()
        second = generation.generate()

        assert first is not second
        first_values = first.get_attribute(0).get_all().tolist()
        assert first_values == second.get_attribute(0).get_all().tolist()

    def test_logs_step_timings(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the duration of each step is logged."""
        with caplog.at_level(logging.DEBUG, logger="world.generation.pipeline"):
            create_generation().generate()

        messages = [record.getMessage() for record in caplog.records]

        assert any("Step 0 (create_attribute) took" in message for message in messages)
        assert any("Step 5 (transform_attribute_2d) took" in message for message in messages)
        assert any("Finished generation of map 'island'" in message for message in messages)

    def test_steps_are_immutable(self) -> None:
        """Test that the steps can't be changed after construction."""
        steps = [CreateAttribute("elevation", 0)]
        generation = MapGeneration("test", Size2d(1, 1), steps)

        steps.append(CreateAttribute("rainfall", 0))

        assert generation.steps == (CreateAttribute("elevation", 0),)


class TestMapGenerationSerialization:
    """Test conversion from & to the portable form."""

    def test_dict_round_trip(self) -> None:
        """Test that a generation survives conversion to a dict & back."""
        generation = create_generation()

        document = generation.to_dict()
        restored = MapGeneration.from_dict(document)

        assert document["name"] == "island"
        assert document["size"] == {"width": 3, "height": 2}
        assert document["steps"][2]["attribute"] == "elevation"
        assert restored.steps == generation.steps
        assert restored.size == generation.size
        assert restored.to_dict() == document

    def test_unknown_attribute(self) -> None:
        """Test that documents referencing unknown attributes are rejected."""
        document: dict[str, Any] = {
            "name": "broken",
            "size": {"width": 2, "height": 2},
            "steps": [
                {"type": "create_attribute", "name": "elevation", "default": 0},
                {
                    "type": "distort_along_x",
                    "attribute": "height",
                    "generator": {"type": "input_as_output"},
                },
            ],
        }

        with pytest.raises(AttributeUnknownError, match="Step 1 references unknown attribute"):
            MapGeneration.from_dict(document)

    def test_invalid_size(self) -> None:
        """Test that the map size must be positive."""
        document = {"name": "broken", "size": {"width": 0, "height": 2}, "steps": []}

        with pytest.raises(ValidationError):
            MapGeneration.from_dict(document)
