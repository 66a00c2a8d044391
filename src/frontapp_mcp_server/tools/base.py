"""
Base functionality for MCP tools.

This module provides common formatting helpers for tool implementations.
"""

from datetime import datetime, timedelta, timezone

from frontapp_mcp_server.models import Message, MessageSummary


def epoch_to_iso(epoch_seconds: float) -> str:
    """
    Convert Front epoch seconds to an ISO-8601 UTC timestamp.

    Truncates to millisecond precision with a ``Z`` suffix, e.g.
    ``2024-01-15T10:30:00.000Z``.
    """
    millis = int(epoch_seconds * 1000)
    seconds, remainder = divmod(millis, 1000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=remainder)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def summarize_message(message: Message) -> MessageSummary:
    """Map a Front message to the compact shape returned to the agent."""
    return MessageSummary(
        id=message.id,
        type=message.type,
        isInbound=message.is_inbound,
        createdAt=epoch_to_iso(message.created_at),
        text=message.text,
        blurb=message.blurb,
    )
