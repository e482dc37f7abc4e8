from dataclasses import dataclass

from core.interpolation import Factor, lerp


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def gray(cls, value: int) -> "Color":
        return cls(value, value, value)

    def lerp(self, other: "Color", factor: Factor) -> "Color":
        """Interpolate each channel independently."""
        return Color(
            lerp(self.r, other.r, factor),
            lerp(self.g, other.g, factor),
            lerp(self.b, other.b, factor),
        )

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
BLUE = Color(0, 0, 255)
CYAN = Color(0, 255, 255)
GREEN = Color(0, 255, 0)
MAGENTA = Color(255, 0, 255)
ORANGE = Color(255, 128, 0)
PINK = Color(255, 0, 128)
RED = Color(255, 0, 0)
WHITE = Color(255, 255, 255)
YELLOW = Color(255, 255, 0)
