"""Tests for byte interpolation & vector interpolation."""

from fractions import Fraction

import pytest

from core.color import BLUE, RED, Color
from core.errors import ConfigurationError
from core.interpolation import VectorInterpolation, lerp, lerp_value


class TestLerp:
    """Test linear interpolation between 2 bytes."""

    def test_increasing(self) -> None:
        """Test interpolation from a lower to a higher value."""
        assert lerp(100, 200, 0.5) == 150
        assert lerp(0, 100, Fraction(29, 100)) == 29

    def test_decreasing(self) -> None:
        """Test interpolation from a higher to a lower value."""
        assert lerp(200, 100, 0.25) == 175
        assert lerp(100, 0, Fraction(79, 100)) == 21

    def test_factor_is_clamped(self) -> None:
        """Test that factors outside [0, 1] return the start or end."""
        assert lerp(100, 200, -1.0) == 100
        assert lerp(100, 200, 0) == 100
        assert lerp(100, 200, 1) == 200
        assert lerp(100, 200, 7.5) == 200
        assert lerp(200, 0, 2) == 0

    def test_floor(self) -> None:
        """Test that partial steps are rounded down."""
        assert lerp(0, 10, Fraction(99, 100)) == 9
        assert lerp(10, 0, Fraction(99, 100)) == 1

    def test_lerp_value_with_color(self) -> None:
        """Test that colors are interpolated per channel."""
        assert lerp_value(RED, BLUE, 0.5) == Color(128, 0, 127)
        assert lerp_value(10, 20, 0.5) == 15


class TestVectorInterpolation:
    """Test piecewise-linear interpolation."""

    @pytest.fixture
    def interpolation(self) -> VectorInterpolation[int]:
        return VectorInterpolation.from_pairs([(100, 10), (150, 20), (200, 0)])

    def test_at_or_below_first(self, interpolation: VectorInterpolation[int]) -> None:
        """Test that inputs up to the first threshold return the first value."""
        assert interpolation.interpolate(0) == 10
        assert interpolation.interpolate(100) == 10

    def test_above_last(self, interpolation: VectorInterpolation[int]) -> None:
        """Test that inputs above the last threshold return the last value."""
        assert interpolation.interpolate(201) == 0
        assert interpolation.interpolate(10_000) == 0

    def test_between(self, interpolation: VectorInterpolation[int]) -> None:
        """Test interpolation between the bracketing entries."""
        assert interpolation.interpolate(125) == 15
        assert interpolation.interpolate(150) == 20
        assert interpolation.interpolate(175) == 10
        assert interpolation.interpolate(200) == 0

    def test_pairs(self, interpolation: VectorInterpolation[int]) -> None:
        """Test that the entries can be converted back to pairs."""
        assert interpolation.to_pairs() == [(100, 10), (150, 20), (200, 0)]

    def test_too_few_entries(self) -> None:
        """Test that a vector needs at least 2 entries."""
        with pytest.raises(ConfigurationError, match="at least 2"):
            VectorInterpolation.from_pairs([(100, 10)])

        with pytest.raises(ConfigurationError):
            VectorInterpolation.from_pairs([])

    def test_unordered_entries(self) -> None:
        """Test that thresholds must be ascending."""
        with pytest.raises(ConfigurationError, match="not ordered"):
            VectorInterpolation.from_pairs([(100, 10), (50, 20)])
