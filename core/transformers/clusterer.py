import math
from dataclasses import dataclass, field

from core.errors import ConfigurationError
from core.size import Size2d
from core.types import validate_byte


def calculate_cluster_size(number_of_clusters: int) -> int:
    return math.ceil(256 / number_of_clusters)


@dataclass(frozen=True)
class Clusterer2d:
    """Partitions the byte x byte input space into a grid of cluster ids.

    Each input is divided by the cell size of its axis and the resulting
    point is looked up in ``cluster_id_lookup``, e.g. to select a biome from
    rainfall & temperature.
    """

    lookup_table_size: Size2d
    cluster_id_lookup: tuple[int, ...]
    cluster_size: Size2d = field(init=False)

    def __post_init__(self) -> None:
        if self.lookup_table_size.area != len(self.cluster_id_lookup):
            raise ConfigurationError("Size & look up table don't match!")
        if len(self.cluster_id_lookup) < 2:
            raise ConfigurationError("Needs more than 1 cluster!")
        for cluster_id in self.cluster_id_lookup:
            validate_byte("cluster id", cluster_id)

        cluster_size = Size2d(
            calculate_cluster_size(self.lookup_table_size.width),
            calculate_cluster_size(self.lookup_table_size.height),
        )
        object.__setattr__(self, "cluster_size", cluster_size)

    def cluster(self, input0: int, input1: int) -> int:
        x = input0 // self.cluster_size.width
        y = input1 // self.cluster_size.height
        return self.cluster_id_lookup[self.lookup_table_size.to_index(x, y)]
