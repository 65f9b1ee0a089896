"""Core data models: the Partition protocol and the Bin container."""

from .bin import Bin
from .partition import Partition, SitePartition

__all__ = ["Bin", "Partition", "SitePartition"]
