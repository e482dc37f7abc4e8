"""Tests for the execution of generation steps."""

import pytest

from core.errors import ConfigurationError
from core.generators import (
    ApplyToX,
    Gradient,
    IndexGenerator,
    InputAsOutput,
)
from core.size import Size2d
from core.transformers import Clusterer2d, ClustererTransformer, OverwriteIfBelow
from core.types import AttributeID
from world.generation.steps import (
    CreateAttribute,
    DistortAlongX,
    DistortAlongY,
    Distortion2d,
    GeneratorAdd,
    GeneratorSub,
    ModifyWithAttribute,
    TransformAttribute2d,
)
from world.map.map2d import Map2d


def create_map(width: int, height: int, values: list[int]) -> tuple[Map2d, AttributeID]:
    map2d = Map2d(Size2d(width, height), "test")
    return map2d, map2d.create_attribute_from("values", values)


def const_1d(value: int) -> Gradient:
    return Gradient(value, value, 0, 1)


class TestCreateAttribute:
    """Test the creation step."""

    def test_run(self) -> None:
        """Test that a new attribute is appended with its default."""
        map2d = Map2d(Size2d(2, 1))

        CreateAttribute("elevation", 3).run(map2d)

        assert map2d.get_attribute_id("elevation") == 0
        assert map2d.get_attribute(0).get_all().tolist() == [3, 3]


class TestGeneratorSteps:
    """Test adding & subtracting generators."""

    def test_add_saturates(self) -> None:
        """Test that sums are capped at 255."""
        map2d, attribute_id = create_map(8, 1, [250] * 8)

        GeneratorAdd(attribute_id, IndexGenerator(Size2d(8, 1))).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [
            250, 251, 252, 253, 254, 255, 255, 255,
        ]

    def test_sub_saturates(self) -> None:
        """Test that differences are capped at 0."""
        map2d, attribute_id = create_map(8, 1, [3] * 8)

        GeneratorSub(attribute_id, IndexGenerator(Size2d(8, 1))).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [3, 2, 1, 0, 0, 0, 0, 0]

    def test_add_uses_coordinates(self) -> None:
        """Test that each cell gets the value generated for its point."""
        map2d, attribute_id = create_map(3, 2, [10] * 6)

        GeneratorAdd(attribute_id, ApplyToX(InputAsOutput())).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [10, 11, 12, 10, 11, 12]


class TestDistortion:
    """Test the steps shifting values."""

    def test_distort_along_x(self) -> None:
        """Test that each row is shifted right by its y value."""
        map2d, attribute_id = create_map(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])

        DistortAlongX(attribute_id, InputAsOutput()).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [1, 2, 3, 4, 4, 5, 7, 7, 7]

    def test_distort_along_y(self) -> None:
        """Test that each column is shifted down by its x value."""
        map2d, attribute_id = create_map(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])

        DistortAlongY(attribute_id, InputAsOutput()).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [1, 2, 3, 4, 2, 3, 7, 5, 3]

    def test_shift_beyond_border(self) -> None:
        """Test that shifts larger than a row repeat the edge value."""
        map2d, attribute_id = create_map(3, 2, [1, 2, 3, 4, 5, 6])

        DistortAlongX(attribute_id, const_1d(200)).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [1, 1, 1, 4, 4, 4]

    def test_distortion_2d_clamps(self) -> None:
        """Test that shifted points are clamped to the last column & row."""
        map2d, attribute_id = create_map(2, 2, [1, 2, 3, 4])

        Distortion2d(attribute_id, ApplyToX(const_1d(5)), ApplyToX(InputAsOutput())).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [2, 4, 4, 4]


class TestModifyWithAttribute:
    """Test modifying an attribute with another one."""

    def test_positive_factor(self) -> None:
        """Test that the source adds to the target."""
        map2d, target_id = create_map(2, 1, [100, 100])
        source_id = map2d.create_attribute_from("source", [200, 255])

        ModifyWithAttribute(source_id, target_id, 0.5, 0).run(map2d)

        assert map2d.get_attribute(target_id).get_all().tolist() == [200, 227]

    def test_minimum(self) -> None:
        """Test that only the part above the minimum contributes."""
        map2d, target_id = create_map(3, 1, [100, 100, 100])
        source_id = map2d.create_attribute_from("source", [10, 55, 255])

        ModifyWithAttribute(source_id, target_id, 0.5, 55).run(map2d)

        assert map2d.get_attribute(target_id).get_all().tolist() == [100, 100, 227]

    def test_negative_factor(self) -> None:
        """Test that a negative factor lowers the target & saturates at 0."""
        map2d, target_id = create_map(2, 1, [200, 100])
        source_id = map2d.create_attribute_from("source", [101, 255])

        ModifyWithAttribute(source_id, target_id, -0.5, 0).run(map2d)

        assert map2d.get_attribute(target_id).get_all().tolist() == [149, 0]

    def test_same_source_and_target(self) -> None:
        """Test that the source is read before the target is written."""
        map2d, attribute_id = create_map(3, 1, [10, 20, 200])

        ModifyWithAttribute(attribute_id, attribute_id, 1.0, 0).run(map2d)

        assert map2d.get_attribute(attribute_id).get_all().tolist() == [20, 40, 255]

    def test_invalid_minimum(self) -> None:
        """Test that the minimum must be below 255."""
        with pytest.raises(ConfigurationError):
            ModifyWithAttribute(AttributeID(0), AttributeID(1), 1.0, 255)


class TestTransformAttribute2d:
    """Test transforming 2 attributes into a 3rd."""

    def test_overwrite_if_below(self) -> None:
        """Test forcing a value wherever the 1st source is low."""
        map2d = Map2d(Size2d(3, 2))
        source0 = map2d.create_attribute_from("source0", [0, 1, 99, 100, 101, 255])
        source1 = map2d.create_attribute_from("source1", [200, 199, 198, 197, 196, 195])
        target = map2d.create_attribute("target", 10)

        step = TransformAttribute2d(source0, source1, target, OverwriteIfBelow.new(42, 100))
        step.run(map2d)

        assert map2d.get_attribute(target).get_all().tolist() == [42, 42, 42, 42, 196, 195]
        assert map2d.get_attribute(source1).get_all().tolist() == [200, 199, 198, 197, 196, 195]

    def test_clusterer(self) -> None:
        """Test selecting a cluster from both sources."""
        map2d = Map2d(Size2d(4, 1))
        source0 = map2d.create_attribute_from("rainfall", [0, 200, 0, 200])
        source1 = map2d.create_attribute_from("temperature", [0, 0, 200, 200])
        target = map2d.create_attribute("biome", 0)
        clusterer = Clusterer2d(Size2d(2, 2), (5, 6, 7, 8))

        TransformAttribute2d(
            source0, source1, target, ClustererTransformer(clusterer), "biome"
        ).run(map2d)

        assert map2d.get_attribute(target).get_all().tolist() == [5, 6, 7, 8]

    def test_target_is_source(self) -> None:
        """Test that the target may be one of the sources."""
        map2d = Map2d(Size2d(2, 1))
        source0 = map2d.create_attribute_from("elevation", [0, 200])
        source1 = map2d.create_attribute_from("biome", [5, 6])

        TransformAttribute2d(source1, source0, source0, OverwriteIfBelow.new(42, 5)).run(map2d)

        assert map2d.get_attribute(source0).get_all().tolist() == [42, 200]


class TestStepValidation:
    """Test that invalid steps are rejected at construction."""

    def test_default_outside_byte(self) -> None:
        """Test that the default of a new attribute must be a byte."""
        with pytest.raises(ConfigurationError, match="default"):
            CreateAttribute("elevation", 300)

        with pytest.raises(ConfigurationError):
            CreateAttribute("elevation", -1)

    def test_non_finite_factor(self) -> None:
        """Test that NaN & infinite factors are rejected."""
        with pytest.raises(ConfigurationError, match="finite"):
            ModifyWithAttribute(AttributeID(0), AttributeID(1), float("nan"), 0)

        with pytest.raises(ConfigurationError):
            ModifyWithAttribute(AttributeID(0), AttributeID(1), float("-inf"), 0)

    def test_negative_minimum(self) -> None:
        """Test that the minimum must be a byte."""
        with pytest.raises(ConfigurationError, match="minimum"):
            ModifyWithAttribute(AttributeID(0), AttributeID(1), 1.0, -1)
