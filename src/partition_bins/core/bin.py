"""Bin: an ordered, size-ranked container of partitions."""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Any, Iterable, Iterator, Mapping, Optional

from .partition import Partition

logger = logging.getLogger(__name__)

FILL_LEVEL = "fill_level"
DETAIL = "detail"


@total_ordering
class Bin:
    """
    Accumulates partitions and tracks their total cost as ``size``.

    ``size`` is cached: ``add`` increments it per partition, and
    ``resync_size`` recomputes it after partition costs changed in place.
    Bins are ordered by size only, so two bins of equal size compare equal
    whatever they contain.
    """

    def __init__(self):
        self._items: list[Partition] = []
        self._size: float = 0

    @property
    def items(self) -> tuple[Partition, ...]:
        """Partitions in insertion order."""
        return tuple(self._items)

    @property
    def size(self) -> float:
        """Sum of the partition costs, as of the last add or resync."""
        return self._size

    def add(self, partitions: Iterable[Partition]) -> Bin:
        """
        Append partitions to this bin, in order.

        Args:
            partitions: Partitions to add (may be empty)

        Returns:
            This bin, for chaining
        """
        added = 0
        for partition in partitions:
            cost = partition.cost()
            self._items.append(partition)
            self._size += cost
            added += 1
        if added:
            logger.debug("Added %d partition(s), size now %s", added, self._size)
        return self

    def resync_size(self) -> Bin:
        """Recompute ``size`` from the current partition costs."""
        previous = self._size
        self._size = sum(partition.cost() for partition in self._items)
        if self._size != previous:
            logger.debug("Resynced size %s -> %s", previous, self._size)
        return self

    def last(self) -> Optional[Partition]:
        """Most recently added partition, or None if the bin is empty."""
        if not self._items:
            return None
        return self._items[-1]

    def total_sites(self) -> int:
        """Total number of sites over all partitions (0 for an empty bin)."""
        if not self._items:
            return 0
        return sum(len(partition.sites()) for partition in self._items)

    def describe(self, mode: str = DETAIL) -> str:
        """
        Render the bin as text.

        Args:
            mode: "fill_level" for a one-line summary; anything else lists
                every partition

        Returns:
            Human-readable description
        """
        if mode == FILL_LEVEL:
            return (
                f"[size: {self._size}, "
                f"partition: {len(self._items)}, "
                f"sites: {self.total_sites()}]"
            )

        if not self._items:
            return "[]"
        listing = "".join(f"({partition.describe()}), " for partition in self._items)
        # Drop the trailing ", "
        return f"[size: {self._size}, partitions: {listing[:-2]}]"

    def to_rows(self, context: Mapping[str, str]) -> list[Any]:
        """One row per partition, in insertion order."""
        return [partition.to_row(context) for partition in self._items]

    def __iter__(self) -> Iterator[Partition]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        # An empty bin is still a bin
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bin):
            return NotImplemented
        return self._size == other._size

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Bin):
            return NotImplemented
        return self._size < other._size

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Bin(size={self._size}, partitions={len(self._items)})"
