"""Lightweight Telegram notification for bin fill levels.

Sends plain-text messages to a Telegram channel via the Bot API, e.g. the
fill level of every bin once an allocation pass is done, or an error raised
by the allocator.

No retry logic: notifications are non-critical.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Optional

import httpx

from ..config import BinSettings
from ..core.bin import FILL_LEVEL, Bin

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org/bot{token}/sendMessage"


async def send_telegram(
    message: str,
    chat_id: str | None = None,
    token: str | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """Send a plain-text message to a Telegram channel.

    Args:
        message: Text to send.
        chat_id: Telegram chat ID. Defaults to TELEGRAM_CHAT_ID env var.
        token: Bot token. Defaults to TELEGRAM_BOT_TOKEN env var.
        transport: Optional httpx transport, e.g. a MockTransport in tests.

    Returns:
        True if message was sent successfully, False otherwise.
    """
    token = token or os.environ.get("TELEGRAM_BOT_TOKEN", "")
    if not token:
        return False

    chat_id = chat_id or os.environ.get("TELEGRAM_CHAT_ID", "")
    if not chat_id:
        return False

    url = TELEGRAM_API.format(token=token)
    payload = {"chat_id": chat_id, "text": message}

    try:
        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(url, json=payload)
            data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Telegram notification failed: %s", exc)
        return False
    return isinstance(data, dict) and bool(data.get("ok", False))


def format_fill_levels(bins: Iterable[Bin], title: str = "Bin Fill Levels") -> str:
    """Format one fill-level line per bin.

    Example:
        >>> from partition_bins import SitePartition
        >>> b = Bin().add([SitePartition("p1", 3, ["a", "b"])])
        >>> print(format_fill_levels([b]))
        Bin Fill Levels
        #0 [size: 3, partition: 1, sites: 2]
    """
    lines = [title]
    for index, b in enumerate(bins):
        lines.append(f"#{index} {b.describe(FILL_LEVEL)}")
    return "\n".join(lines)


def format_error(error_type: str, error_message: str, context: dict[str, Any] | None = None) -> str:
    """Format error notification message.

    Args:
        error_type: Type of error (e.g., "ValueError").
        error_message: Detailed error message.
        context: Optional context dictionary with additional info.

    Returns:
        Formatted message string.

    Example:
        >>> print(format_error("ValueError", "Unknown partition field: foo", {"bin": 3}))
        Error: ValueError
        Unknown partition field: foo
        Context: bin=3
    """
    lines = [
        f"Error: {error_type}",
        error_message,
    ]
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        lines.append(f"Context: {ctx_str}")
    return "\n".join(lines)


async def notify_fill_levels(
    bins: Iterable[Bin],
    settings: Optional[BinSettings] = None,
    token: str | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """Send the fill level of every bin to the configured chat."""
    settings = settings or BinSettings()
    message = format_fill_levels(bins)
    return await send_telegram(
        message,
        chat_id=settings.telegram_chat_id,
        token=token,
        transport=transport,
    )


async def notify_error(
    error: BaseException,
    context: dict[str, Any] | None = None,
    settings: Optional[BinSettings] = None,
    token: str | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bool:
    """Send an exception raised while filling bins, e.g. a failing cost lookup."""
    settings = settings or BinSettings()
    message = format_error(type(error).__name__, str(error), context)
    return await send_telegram(
        message,
        chat_id=settings.telegram_chat_id,
        token=token,
        transport=transport,
    )
