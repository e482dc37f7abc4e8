import logging
from collections.abc import Iterable

import numpy.typing as npt

from core.errors import AttributeDuplicateError
from core.size import Size2d
from core.types import AttributeID
from world.map.attribute import Attribute

logger = logging.getLogger(__name__)


class Map2d:
    """A 2d region or world map made of named attributes of equal size.

    Attributes are only ever appended and never resized.
    """

    def __init__(self, size: Size2d, name: str = "map") -> None:
        self.name = name
        self.size = size
        self._attributes: list[Attribute] = []
        self._attribute_lookup: dict[str, AttributeID] = {}

    def create_attribute(self, name: str, default: int) -> AttributeID:
        """Add a new attribute filled with the default value and return its id.

        Raises:
            AttributeDuplicateError: If the map already contains an attribute with the same name
        """
        return self._add_attribute(Attribute.with_default(name, self.size, default))

    def create_attribute_from(
        self, name: str, values: Iterable[int] | npt.ArrayLike
    ) -> AttributeID:
        """Add a new attribute with explicit values and return its id."""
        return self._add_attribute(Attribute(name, self.size, values))

    def _add_attribute(self, attribute: Attribute) -> AttributeID:
        if attribute.name in self._attribute_lookup:
            raise AttributeDuplicateError(attribute.name)

        attribute_id = AttributeID(len(self._attributes))
        self._attribute_lookup[attribute.name] = attribute_id
        self._attributes.append(attribute)
        logger.debug(
            f"Added attribute '{attribute.name}' with id {attribute_id} to map '{self.name}'"
        )
        return attribute_id

    def get_attribute_id(self, name: str) -> AttributeID | None:
        """Return the id of the attribute with the matching name."""
        return self._attribute_lookup.get(name)

    def get_attribute(self, attribute_id: int) -> Attribute:
        """Return the attribute with the matching id.

        Raises:
            IndexError: If there is no matching id
        """
        if not 0 <= attribute_id < len(self._attributes):
            raise IndexError(f"Unknown attribute id {attribute_id}!")
        return self._attributes[attribute_id]

    def get_attributes(self) -> list[Attribute]:
        return list(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)
