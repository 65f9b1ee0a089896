"""Partition bins: ordered, size-ranked containers of partitions.

A Bin accumulates partitions and keeps its size equal to the sum of their
costs, so an allocator can rank bins when placing the next partition.
"""

from .core.bin import Bin
from .core.partition import Partition, SitePartition

__version__ = "0.1.0"

__all__ = [
    "Bin",
    "Partition",
    "SitePartition",
]
