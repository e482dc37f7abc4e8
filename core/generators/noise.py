"""Wraps the coherent noise primitive behind a byte-valued interface."""

import math
from dataclasses import dataclass, field

from opensimplex import OpenSimplex

from core.errors import ConfigurationError
from core.types import validate_byte


@dataclass(frozen=True)
class Noise:
    """Samples simplex noise at ``(x / scale, y / scale)`` and maps it to bytes.

    The primitive returns values in ``[-1, 1]``, which are mapped linearly into
    ``[min_value, max_value]``.
    """

    seed: int
    scale: float
    min_value: int
    max_value: int
    _algo: OpenSimplex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise ConfigurationError("Noise's scale must be positive & finite!")
        validate_byte("min_value", self.min_value)
        validate_byte("max_value", self.max_value)
        if self.min_value >= self.max_value:
            raise ConfigurationError("Noise's min_value must be smaller than max_value!")

        object.__setattr__(self, "_algo", OpenSimplex(seed=self.seed))

    def _to_byte(self, value: float) -> int:
        factor = (value + 1.0) / 2.0
        result = self.min_value + int(factor * (self.max_value - self.min_value))
        return min(max(result, self.min_value), self.max_value)

    def generate1d(self, input: int) -> int:
        """Generate noise for an input."""
        return self._to_byte(self._algo.noise2(input / self.scale, 0.0))

    def generate2d(self, x: int, y: int) -> int:
        """Generate noise for a 2d point (x,y)."""
        return self._to_byte(self._algo.noise2(x / self.scale, y / self.scale))
