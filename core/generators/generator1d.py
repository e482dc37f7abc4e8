"""Generators producing a byte for a 1d input."""

from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar

from core.errors import ConfigurationError
from core.generators.noise import Noise
from core.interpolation import VectorInterpolation, lerp
from core.types import BYTE_MAX, Generator1dType, validate_byte


def _validate_length(length: int) -> None:
    if length <= 0:
        raise ConfigurationError("The gradient's length must be positive!")


@dataclass(frozen=True)
class AbsoluteGradient:
    """A linear gradient between a center and both sides.

    ::

             value
               ^
               |        center
        center |        *
               |       / \\
               |      /   \\
           end |----*       *----
               |
               +----*-------*---> input
                 center +- length
    """

    TYPE: ClassVar[Generator1dType] = Generator1dType.ABSOLUTE_GRADIENT

    value_center: int
    value_end: int
    center: int
    length: int

    def __post_init__(self) -> None:
        validate_byte("center value", self.value_center)
        validate_byte("end value", self.value_end)
        _validate_length(self.length)

    def generate(self, input: int) -> int:
        factor = Fraction(abs(self.center - input), self.length)
        return lerp(self.value_center, self.value_end, factor)


@dataclass(frozen=True)
class Gradient:
    """A linear gradient between a start and an end value.

    ::

            value
              ^
          end |        *------
              |       /
        start |----*
              |
              +----*---*------> input
                start  start + length
    """

    TYPE: ClassVar[Generator1dType] = Generator1dType.GRADIENT

    value_start: int
    value_end: int
    start: int
    length: int

    def __post_init__(self) -> None:
        validate_byte("start value", self.value_start)
        validate_byte("end value", self.value_end)
        _validate_length(self.length)

    def generate(self, input: int) -> int:
        if input <= self.start:
            return self.value_start

        factor = Fraction(input - self.start, self.length)
        return lerp(self.value_start, self.value_end, factor)


@dataclass(frozen=True)
class InputAsOutput:
    """Returns the input truncated to a byte."""

    TYPE: ClassVar[Generator1dType] = Generator1dType.INPUT_AS_OUTPUT

    def generate(self, input: int) -> int:
        return input & BYTE_MAX


@dataclass(frozen=True)
class InterpolateVector:
    """Interpolates between multiple (threshold, value) entries."""

    TYPE: ClassVar[Generator1dType] = Generator1dType.INTERPOLATE_VECTOR

    interpolation: VectorInterpolation[int]

    def __post_init__(self) -> None:
        for _, value in self.interpolation.to_pairs():
            validate_byte("interpolated value", value)

    def generate(self, input: int) -> int:
        return self.interpolation.interpolate(input)


@dataclass(frozen=True)
class Noise1d:
    TYPE: ClassVar[Generator1dType] = Generator1dType.NOISE

    noise: Noise

    def generate(self, input: int) -> int:
        return self.noise.generate1d(input)


Generator1d = AbsoluteGradient | Gradient | InputAsOutput | InterpolateVector | Noise1d
