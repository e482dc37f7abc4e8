"""Piecewise-linear interpolation of bytes & colors.

Factors are clamped to ``[0, 1]`` before use. Callers that derive the factor
from integer inputs pass a ``Fraction`` so the floor of the result is exact.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Generic, TypeVar

from core.errors import ConfigurationError

Factor = float | Fraction

T = TypeVar("T")


def lerp(start: int, end: int, factor: Factor) -> int:
    """Interpolate between 2 bytes.

    The factor is clamped to [0, 1], so values above 1 return ``end``.
    """
    if factor <= 0:
        return start
    if factor >= 1:
        return end

    if end >= start:
        return start + math.floor((end - start) * factor)

    return start - math.floor((start - end) * factor)


def lerp_value(start: T, end: T, factor: Factor) -> T:
    """Interpolate bytes with :func:`lerp` and anything else with its own ``lerp``."""
    if isinstance(start, int) and isinstance(end, int):
        return lerp(start, end, factor)  # type: ignore[return-value]
    return start.lerp(end, factor)  # type: ignore[attr-defined,no-any-return]


@dataclass(frozen=True)
class InterpolationEntry(Generic[T]):
    threshold: int
    value: T


def validate_thresholds(thresholds: list[int]) -> None:
    """Fail unless there are at least 2 thresholds in ascending order."""
    if len(thresholds) < 2:
        raise ConfigurationError("The vector needs at least 2 elements!")

    for previous, current in zip(thresholds, thresholds[1:]):
        if current < previous:
            raise ConfigurationError("The elements of vector are not ordered!")


@dataclass(frozen=True)
class VectorInterpolation(Generic[T]):
    """Interpolates between ordered (threshold, value) entries."""

    entries: tuple[InterpolationEntry[T], ...]

    def __post_init__(self) -> None:
        validate_thresholds([entry.threshold for entry in self.entries])

    @classmethod
    def from_pairs(cls, pairs: list[tuple[int, T]]) -> "VectorInterpolation[T]":
        return cls(tuple(InterpolationEntry(threshold, value) for threshold, value in pairs))

    def to_pairs(self) -> list[tuple[int, T]]:
        return [(entry.threshold, entry.value) for entry in self.entries]

    def interpolate(self, input: int) -> T:
        return interpolate_entries(self.entries, input)


def interpolate_entries(entries: tuple[InterpolationEntry[T], ...], input: int) -> T:
    last_entry = entries[0]

    if input <= last_entry.threshold:
        return last_entry.value

    for entry in entries[1:]:
        if input <= entry.threshold:
            factor = Fraction(input - last_entry.threshold, entry.threshold - last_entry.threshold)
            return lerp_value(last_entry.value, entry.value, factor)

        last_entry = entry

    return last_entry.value
