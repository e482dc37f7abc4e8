"""Selects a value (byte or color) for a byte, e.g. to render an attribute.

The renderer reads an attribute value per cell and asks a selector for the
glyph or color to draw. Selectors never touch the map themselves.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Generic, TypeVar

from core.interpolation import (
    InterpolationEntry,
    interpolate_entries,
    lerp_value,
    validate_thresholds,
)
from core.types import BYTE_MAX

T = TypeVar("T")


@dataclass(frozen=True)
class ConstSelector(Generic[T]):
    """Always returns the same value."""

    value: T

    def get(self, input: int) -> T:
        return self.value


@dataclass(frozen=True)
class InterpolatePairSelector(Generic[T]):
    """Interpolates between 2 values across the whole byte range."""

    first: T
    second: T

    def get(self, input: int) -> T:
        return lerp_value(self.first, self.second, Fraction(input, BYTE_MAX))


@dataclass(frozen=True)
class InterpolateVectorSelector(Generic[T]):
    """Interpolates between ordered (threshold, value) entries."""

    entries: tuple[InterpolationEntry[T], ...]

    def __post_init__(self) -> None:
        validate_thresholds([entry.threshold for entry in self.entries])

    @classmethod
    def from_pairs(cls, pairs: list[tuple[int, T]]) -> "InterpolateVectorSelector[T]":
        return cls(tuple(InterpolationEntry(threshold, value) for threshold, value in pairs))

    def get(self, input: int) -> T:
        return interpolate_entries(self.entries, input)


@dataclass(frozen=True)
class LookupSelector(Generic[T]):
    """Looks the input up in a table and falls back to a default."""

    default: T
    lookup: dict[int, T] = field(default_factory=dict, hash=False)

    def get(self, input: int) -> T:
        return self.lookup.get(input, self.default)


Selector = (
    ConstSelector[T] | InterpolatePairSelector[T] | InterpolateVectorSelector[T] | LookupSelector[T]
)
