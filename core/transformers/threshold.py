from dataclasses import dataclass

from core.types import validate_byte


@dataclass(frozen=True)
class OverwriteWithThreshold:
    """Overwrites an output with a value, depending on an input & a threshold."""

    value: int
    threshold: int

    def __post_init__(self) -> None:
        validate_byte("value", self.value)
        validate_byte("threshold", self.threshold)

    def overwrite_if_above(self, input: int) -> int:
        return self.overwrite_output_if_above(input, input)

    def overwrite_output_if_above(self, input: int, output: int) -> int:
        """Return the value if ``input >= threshold``, otherwise the output unchanged."""
        if input >= self.threshold:
            return self.value
        return output

    def overwrite_if_below(self, input: int) -> int:
        return self.overwrite_output_if_below(input, input)

    def overwrite_output_if_below(self, input: int, output: int) -> int:
        """Return the value if ``input <= threshold``, otherwise the output unchanged."""
        if input <= self.threshold:
            return self.value
        return output
