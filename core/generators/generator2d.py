"""Generators producing a byte for a 2d point.

Used as signal sources for the procedural generation of 2d maps.
"""

import math
from dataclasses import dataclass
from typing import ClassVar

from core.generators.generator1d import Generator1d
from core.generators.noise import Noise
from core.size import Size2d
from core.types import BYTE_MAX, Generator2dType


def calculate_distance(x0: int, y0: int, x1: int, y1: int) -> int:
    """Return the integer euclidean distance between 2 points."""
    diff_x = x0 - x1
    diff_y = y0 - y1
    return math.isqrt(diff_x * diff_x + diff_y * diff_y)


@dataclass(frozen=True)
class ApplyToX:
    """Feeds the x values to a 1d generator."""

    TYPE: ClassVar[Generator2dType] = Generator2dType.APPLY_TO_X

    generator: Generator1d

    def generate(self, x: int, y: int) -> int:
        return self.generator.generate(x)


@dataclass(frozen=True)
class ApplyToY:
    """Feeds the y values to a 1d generator."""

    TYPE: ClassVar[Generator2dType] = Generator2dType.APPLY_TO_Y

    generator: Generator1d

    def generate(self, x: int, y: int) -> int:
        return self.generator.generate(y)


@dataclass(frozen=True)
class ApplyToDistance:
    """Feeds the distance from a center point to a 1d generator."""

    TYPE: ClassVar[Generator2dType] = Generator2dType.APPLY_TO_DISTANCE

    generator: Generator1d
    center_x: int
    center_y: int

    def generate(self, x: int, y: int) -> int:
        distance = calculate_distance(self.center_x, self.center_y, x, y)
        return self.generator.generate(distance)


@dataclass(frozen=True)
class IndexGenerator:
    """Generates the index of each 2d point, wrapped to a byte."""

    TYPE: ClassVar[Generator2dType] = Generator2dType.INDEX

    size: Size2d

    def generate(self, x: int, y: int) -> int:
        return self.size.to_index(x, y) & BYTE_MAX


@dataclass(frozen=True)
class Noise2d:
    TYPE: ClassVar[Generator2dType] = Generator2dType.NOISE_2D

    noise: Noise

    def generate(self, x: int, y: int) -> int:
        return self.noise.generate2d(x, y)


Generator2d = ApplyToX | ApplyToY | ApplyToDistance | IndexGenerator | Noise2d
