#!/usr/bin/env python3
"""
Front MCP Server.

Exposes recent messages from Front inboxes to MCP clients over stdio.
"""

import json
import logging
import sys
from typing import Annotated, Optional

# MCP SDK imports
from mcp.server.fastmcp import FastMCP
from pydantic import Field

# Local imports
from frontapp_mcp_server.config import FrontConfig, get_config
from frontapp_mcp_server.models import ConversationStatus, ToolName
from frontapp_mcp_server.tools.conversations import get_conversations_tool
from frontapp_mcp_server.tools.health import health_check_tool

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("FrontMcp")

# Global instances
config: Optional[FrontConfig] = None


def _current_config() -> FrontConfig:
    return config if config is not None else get_config()


# ===== CONVERSATION TOOLS =====


@mcp.tool(name=ToolName.GET_CONVERSATIONS.value, description="Get conversations from a Front inbox")
async def get_conversations(
    inboxId: Annotated[  # noqa: N803
        Optional[str],
        Field(description="Front Inbox ID (uses DEFAULT_INBOX_ID env var if not provided)"),
    ] = None,
    limit: Annotated[
        int, Field(ge=1, le=100, description="Number of messages to get (max 100)")
    ] = 10,
    query: Annotated[Optional[str], Field(description="Optional search query")] = None,
    onlyUnresolved: Annotated[  # noqa: N803
        bool, Field(description="Only retrieve unresolved/open conversations")
    ] = False,
    status: Annotated[
        Optional[ConversationStatus], Field(description="Filter conversations by status")
    ] = None,
) -> str:
    """Get recent messages from the conversations of a Front inbox."""
    result = await get_conversations_tool(
        _current_config(),
        inbox_id=inboxId,
        limit=limit,
        query=query,
        only_unresolved=onlyUnresolved,
        status=status,
    )
    return json.dumps(result)


# ===== HEALTH =====


@mcp.tool(name=ToolName.HEALTH_CHECK.value)
async def front_health_check():
    """Validate the Front API configuration without contacting Front."""
    return await health_check_tool(_current_config())


# ===== SERVER LIFECYCLE =====


def startup() -> FrontConfig:
    """Load configuration once before serving."""
    global config

    logger.info("Starting Front MCP Server...")

    config = get_config()
    logger.info(f"Loaded configuration: {config}")

    if not config.api_token:
        logger.warning("FRONT_API_TOKEN is not set; tool calls will fail until it is")

    return config


def main():
    """Main entry point for the server."""
    try:
        startup()

        logger.info("Starting MCP server on stdio transport...")
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
