from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from core.size import Size2d

Values = npt.NDArray[np.uint8]


def _freeze(values: Iterable[int] | npt.ArrayLike) -> Values:
    array = np.array(values, dtype=np.uint8)
    array.flags.writeable = False
    return array


class Attribute:
    """A value with a specific meaning for each cell of a map.

    Examples: elevation, rainfall, temperature.

    The values are stored as a read-only array that is only ever replaced as a
    whole, so a step can read a snapshot while it computes the new values.
    """

    def __init__(self, name: str, size: Size2d, values: Iterable[int] | npt.ArrayLike) -> None:
        self.name = name
        self.size = size
        self._values = _freeze(values)
        self._check_length(self._values)

    @classmethod
    def with_default(cls, name: str, size: Size2d, default: int) -> "Attribute":
        """Create an attribute with every cell set to the default value."""
        return cls(name, size, np.full(size.area, default, dtype=np.uint8))

    def _check_length(self, values: Values) -> None:
        if values.ndim != 1 or values.shape[0] != self.size.area:
            raise ValueError(
                f"Attribute '{self.name}' needs {self.size.area} values, got {values.size}"
            )

    def get(self, index: int) -> int:
        """Return the value at the index.

        Raises:
            IndexError: If the index is outside the map
        """
        if not 0 <= index < self.size.area:
            raise IndexError(f"Index {index} is outside attribute '{self.name}'!")
        return int(self._values[index])

    def get_all(self) -> Values:
        """Return a read-only view of all values."""
        return self._values

    def replace_all(self, values: Iterable[int] | npt.ArrayLike) -> None:
        """Replace all values at once.

        Raises:
            ValueError: If the number of values doesn't match the area
        """
        new_values = _freeze(values)
        self._check_length(new_values)
        self._values = new_values

    def __repr__(self) -> str:
        return f"Attribute(name={self.name!r}, size={self.size!r})"
