"""Partition protocol and a concrete site-based partition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Partition(Protocol):
    """A unit of work that can be placed into a Bin."""

    def cost(self) -> float:
        """Optimized operation cost, summed into the bin size."""
        ...

    def sites(self) -> Sequence[Any]:
        """Sites covered by this partition."""
        ...

    def describe(self) -> str:
        ...

    def to_row(self, context: Mapping[str, str]) -> Any:
        ...


@dataclass
class SitePartition:
    """A partition covering a set of sites.

    Attributes:
        id: Partition identifier.
        op_optimized: Optimized operation cost. May be re-estimated after the
            partition was added to a bin; call ``Bin.resync_size`` afterwards.
        site_ids: Identifiers of the sites in this partition.
    """

    id: str
    op_optimized: float
    site_ids: list[str] = field(default_factory=list)

    # Field names accepted by to_row
    ROW_FIELDS = ("id", "cost", "sites", "site_ids")

    def cost(self) -> float:
        return self.op_optimized

    def sites(self) -> list[str]:
        return self.site_ids

    def describe(self) -> str:
        return f"{self.id}: {self.op_optimized}, sites: {len(self.site_ids)}"

    def to_row(self, context: Mapping[str, str]) -> dict[str, Any]:
        """
        Project this partition onto the given columns.

        Args:
            context: Mapping of output column header to field name
                (id, cost, sites, site_ids)

        Returns:
            Dict of header to value, in the order of ``context``

        Raises:
            ValueError: If a field name is not recognized
        """
        values = {
            "id": self.id,
            "cost": self.op_optimized,
            "sites": len(self.site_ids),
            "site_ids": ";".join(self.site_ids),
        }
        row = {}
        for header, field_name in context.items():
            if field_name not in values:
                raise ValueError(
                    f"Unknown partition field: {field_name}. "
                    f"Available: {list(self.ROW_FIELDS)}"
                )
            row[header] = values[field_name]
        return row

    def __str__(self) -> str:
        return self.describe()
