"""
Health check tool for the Front MCP Server.

Validates configuration without contacting Front.
"""

from typing import Any, Dict

from frontapp_mcp_server import __version__
from frontapp_mcp_server.config import FrontConfig


async def health_check_tool(config: FrontConfig) -> Dict[str, Any]:
    """
    Report whether the server is configured to reach Front.

    Args:
        config: Loaded server configuration

    Returns:
        Dict containing:
        - Whether an API token and default inbox are configured
        - The API base URL in use
        - Overall status and recommendations

    Privacy:
        The API token itself is never included.
    """
    health: Dict[str, Any] = {
        "token_configured": bool(config.api_token),
        "default_inbox_configured": bool(config.default_inbox_id),
        "base_url": config.base_url,
        "request_timeout_s": config.request_timeout_s,
        "server": f"Front MCP Server v{__version__}",
    }

    recommendations = []
    if not health["token_configured"]:
        recommendations.append("Set FRONT_API_TOKEN to a Front API token")
    if not health["default_inbox_configured"]:
        recommendations.append(
            "Set DEFAULT_INBOX_ID or pass inboxId to getConversations on every call"
        )
    if recommendations:
        health["recommendations"] = recommendations

    health["status"] = "healthy" if health["token_configured"] else "unhealthy"
    health["healthy"] = health["status"] == "healthy"

    return health
