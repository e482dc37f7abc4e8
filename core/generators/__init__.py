from core.generators.generator1d import (
    AbsoluteGradient,
    Generator1d,
    Gradient,
    InputAsOutput,
    InterpolateVector,
    Noise1d,
)
from core.generators.generator2d import (
    ApplyToDistance,
    ApplyToX,
    ApplyToY,
    Generator2d,
    IndexGenerator,
    Noise2d,
)
from core.generators.noise import Noise

__all__ = [
    "AbsoluteGradient",
    "ApplyToDistance",
    "ApplyToX",
    "ApplyToY",
    "Generator1d",
    "Generator2d",
    "Gradient",
    "IndexGenerator",
    "InputAsOutput",
    "InterpolateVector",
    "Noise",
    "Noise1d",
    "Noise2d",
]
