from dataclasses import dataclass


@dataclass(frozen=True)
class Size2d:
    """The size of something in 2 dimensions."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size must not be negative, got {self.width}x{self.height}")

    @property
    def area(self) -> int:
        return self.width * self.height

    def to_x(self, index: int) -> int:
        """Convert an index to the x-coordinate of the equivalent point."""
        return index % self.width

    def to_y(self, index: int) -> int:
        """Convert an index to the y-coordinate of the equivalent point."""
        return index // self.width

    def to_x_and_y(self, index: int) -> tuple[int, int]:
        return self.to_x(index), self.to_y(index)

    def to_index(self, x: int, y: int) -> int:
        """Convert a point to the equivalent index."""
        return y * self.width + x

    def saturating_to_index(self, x: int, y: int) -> int:
        """Convert a point to an index, clamping it to the last column & row."""
        x = min(x, self.width - 1)
        y = min(y, self.height - 1)
        return self.to_index(x, y)

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}
