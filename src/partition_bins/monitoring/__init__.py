"""Monitoring module for partition bins.

Provides fill-level metrics and Telegram notifications for bin allocations.
"""

from .metrics import (
    BinMetrics,
    FillLevelReport,
    print_summary,
    summarize_bins,
)
from .telegram_notifier import (
    format_error,
    format_fill_levels,
    notify_error,
    notify_fill_levels,
    send_telegram,
)

__all__ = [
    # Metrics
    "BinMetrics",
    "FillLevelReport",
    "print_summary",
    "summarize_bins",
    # Telegram
    "send_telegram",
    "format_fill_levels",
    "notify_fill_levels",
    "notify_error",
    "format_error",
]
