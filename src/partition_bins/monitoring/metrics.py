"""Fill-level metrics over a set of bins.

Provides dataclasses describing how full each bin is and how evenly the
total cost is spread across bins.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable

import numpy as np

from ..core.bin import Bin


@dataclass
class BinMetrics:
    """Metrics for a single bin.

    Attributes:
        bin_index: Position of the bin in the allocation.
        size: Total partition cost held by the bin.
        partitions: Number of partitions in the bin.
        sites: Number of sites over all partitions.
    """

    bin_index: int
    size: float
    partitions: int
    sites: int

    @classmethod
    def from_bin(cls, bin_index: int, bin: Bin) -> BinMetrics:
        """Snapshot a bin.

        Example:
            >>> from partition_bins import SitePartition
            >>> b = Bin().add([SitePartition("p1", 3, ["a", "b"])])
            >>> BinMetrics.from_bin(0, b).sites
            2
        """
        return cls(
            bin_index=bin_index,
            size=bin.size,
            partitions=len(bin),
            sites=bin.total_sites(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class FillLevelReport:
    """Aggregate fill levels for a set of bins.

    Attributes:
        total_bins: Number of bins.
        total_partitions: Number of partitions across all bins.
        total_sites: Number of sites across all bins.
        total_size: Sum of bin sizes.
        avg_size: Mean bin size.
        median_size: Median bin size.
        min_size: Smallest bin size.
        max_size: Largest bin size.
        imbalance: max_size / avg_size (1.0 means perfectly balanced).
        bin_metrics: Per-bin metrics, in bin order.
    """

    total_bins: int = 0
    total_partitions: int = 0
    total_sites: int = 0
    total_size: float = 0.0
    avg_size: float = 0.0
    median_size: float = 0.0
    min_size: float = 0.0
    max_size: float = 0.0
    imbalance: float = 0.0
    bin_metrics: list[BinMetrics] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["bin_metrics"] = [m.to_dict() for m in self.bin_metrics]
        return d

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to dictionary without per-bin details.

        Example:
            >>> d = FillLevelReport().to_summary_dict()
            >>> "bin_metrics" in d
            False
        """
        d = self.to_dict()
        del d["bin_metrics"]
        return d


def summarize_bins(bins: Iterable[Bin]) -> FillLevelReport:
    """Build a fill-level report for the given bins.

    Args:
        bins: Bins to summarize, in allocation order.

    Returns:
        FillLevelReport; all zeros when no bins are given.

    Example:
        >>> from partition_bins import SitePartition
        >>> a = Bin().add([SitePartition("p1", 10)])
        >>> b = Bin().add([SitePartition("p2", 30)])
        >>> summarize_bins([a, b]).avg_size
        20.0
    """
    metrics = [BinMetrics.from_bin(i, b) for i, b in enumerate(bins)]
    if not metrics:
        return FillLevelReport()

    sizes = np.array([m.size for m in metrics], dtype=float)
    avg_size = float(sizes.mean())
    max_size = float(sizes.max())

    return FillLevelReport(
        total_bins=len(metrics),
        total_partitions=sum(m.partitions for m in metrics),
        total_sites=sum(m.sites for m in metrics),
        total_size=float(sizes.sum()),
        avg_size=avg_size,
        median_size=float(np.median(sizes)),
        min_size=float(sizes.min()),
        max_size=max_size,
        imbalance=max_size / avg_size if avg_size else 0.0,
        bin_metrics=metrics,
    )


def print_summary(report: FillLevelReport) -> str:
    """Generate human-readable summary of a fill-level report.

    Returns:
        Formatted multi-line summary string.
    """
    lines = [
        "=" * 60,
        f"Bins: {report.total_bins}",
        f"Partitions: {report.total_partitions}",
        f"Sites: {report.total_sites}",
        "=" * 60,
        f"Total Size: {report.total_size:.2f}",
        "",
        "Size Statistics:",
        f"  Average: {report.avg_size:.2f}",
        f"  Median:  {report.median_size:.2f}",
        f"  Min:     {report.min_size:.2f}",
        f"  Max:     {report.max_size:.2f}",
        f"  Imbalance: {report.imbalance:.3f}",
        "=" * 60,
    ]
    return "\n".join(lines)
