"""
Conversation tools for the Front MCP Server.

Fetches recent conversations from a Front inbox together with their
messages and returns a compact summary for the agent.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import ValidationError

from frontapp_mcp_server.config import ConfigurationError, FrontConfig
from frontapp_mcp_server.front_client import FrontAPIError, FrontClient
from frontapp_mcp_server.models import (
    ConversationStatus,
    GetConversationsInput,
    GetConversationsOutput,
)
from frontapp_mcp_server.tools.base import summarize_message

logger = logging.getLogger(__name__)


async def get_conversations_tool(
    config: FrontConfig,
    inbox_id: Optional[str] = None,
    limit: int = 10,
    query: Optional[str] = None,
    only_unresolved: bool = False,
    status: Optional[ConversationStatus] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    Get recent messages from a Front inbox.

    Lists one page of conversations matching the filters, then fetches the
    messages of every conversation in that page.

    Args:
        config: Loaded server configuration
        inbox_id: Front inbox ID, defaults to the configured inbox
        limit: Number of conversations to fetch (1-100)
        query: Optional Front search query
        only_unresolved: Only open conversations; ignores ``status``
        status: Filter conversations by status
        transport: Optional httpx transport, used by tests

    Returns:
        Dict with the conversation count and the summarized messages

    Raises:
        ToolError: On missing configuration or any Front API failure
    """
    params = GetConversationsInput(
        inbox_id=inbox_id,
        limit=limit,
        query=query,
        only_unresolved=only_unresolved,
        status=status,
    )

    try:
        client = FrontClient.from_config(config, transport=transport)
        resolved_inbox_id = config.resolve_inbox_id(params.inbox_id)
    except ConfigurationError as e:
        raise ToolError(str(e)) from e

    try:
        result = await client.list_inbox_messages(resolved_inbox_id, params.to_query())
    except (FrontAPIError, httpx.HTTPError, ValidationError) as e:
        logger.error(f"Front API error for inbox {resolved_inbox_id}: {e}")
        raise ToolError(f"Front API error: {e}") from e

    output = GetConversationsOutput(
        conversations=len(result.conversations),
        messages=[summarize_message(message) for message in result.messages],
    )
    return output.model_dump(by_alias=True)
