"""Tests for the 2d clusterer."""

import pytest

from core.errors import ConfigurationError
from core.size import Size2d
from core.transformers import Clusterer2d
from core.transformers.clusterer import calculate_cluster_size


class TestClusterer2d:
    """Test validation & lookup of clusters."""

    def test_cluster_size(self) -> None:
        """Test that the cell size is rounded up."""
        assert calculate_cluster_size(1) == 256
        assert calculate_cluster_size(2) == 128
        assert calculate_cluster_size(3) == 86

    def test_size_mismatch(self) -> None:
        """Test that the table must match the size."""
        with pytest.raises(ConfigurationError, match="don't match"):
            Clusterer2d(Size2d(3, 2), (0, 1, 2, 3, 4))

        with pytest.raises(ConfigurationError):
            Clusterer2d(Size2d(3, 2), (0, 1, 2, 3, 4, 5, 6))

    def test_too_few_clusters(self) -> None:
        """Test that a single cluster is rejected."""
        with pytest.raises(ConfigurationError, match="more than 1"):
            Clusterer2d(Size2d(1, 1), (0,))

    def test_cluster(self) -> None:
        """Test lookups in the corners & the middle of the input space."""
        table = (10, 11, 12, 13, 14, 15)
        clusterer = Clusterer2d(Size2d(3, 2), table)

        assert clusterer.cluster_size == Size2d(86, 128)
        assert clusterer.cluster(0, 0) == table[0]
        assert clusterer.cluster(255, 0) == table[2]
        assert clusterer.cluster(0, 255) == table[3]
        assert clusterer.cluster(255, 255) == table[5]
        assert clusterer.cluster(86, 127) == table[1]
        assert clusterer.cluster(85, 128) == table[3]

    def test_cluster_ids_outside_byte(self) -> None:
        """Test that every cluster id must be a byte."""
        with pytest.raises(ConfigurationError, match="cluster id"):
            Clusterer2d(Size2d(2, 1), (0, 300))
