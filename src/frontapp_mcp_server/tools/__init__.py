"""
MCP Tools for the Front MCP Server.

This package contains the tool implementations registered by the server.
"""

from frontapp_mcp_server.tools.conversations import get_conversations_tool
from frontapp_mcp_server.tools.health import health_check_tool

__all__ = ["get_conversations_tool", "health_check_tool"]
