"""Tests for SitePartition, the concrete Partition implementation."""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from partition_bins import Partition, SitePartition


@pytest.fixture
def partition():
    return SitePartition(id="north", op_optimized=12.5, site_ids=["s1", "s2", "s3"])


class TestSitePartition:
    def test_implements_protocol(self, partition):
        assert isinstance(partition, Partition)

    def test_cost_and_sites(self, partition):
        assert partition.cost() == 12.5
        assert partition.sites() == ["s1", "s2", "s3"]

    def test_sites_default_empty(self):
        p = SitePartition("empty", 1)
        assert p.sites() == []
        assert p.describe() == "empty: 1, sites: 0"

    def test_describe(self, partition):
        assert partition.describe() == "north: 12.5, sites: 3"
        assert str(partition) == partition.describe()

    def test_cost_follows_in_place_change(self, partition):
        partition.op_optimized = 4
        assert partition.cost() == 4


class TestToRow:
    def test_row_follows_context_order(self, partition):
        row = partition.to_row({"Sites": "sites", "Name": "id", "Cost": "cost"})
        assert list(row) == ["Sites", "Name", "Cost"]
        assert row == {"Sites": 3, "Name": "north", "Cost": 12.5}

    def test_site_ids_joined(self, partition):
        assert partition.to_row({"ids": "site_ids"}) == {"ids": "s1;s2;s3"}

    def test_empty_context_gives_empty_row(self, partition):
        assert partition.to_row({}) == {}

    def test_unknown_field_raises(self, partition):
        with pytest.raises(ValueError, match="Unknown partition field: weight"):
            partition.to_row({"Weight": "weight"})
