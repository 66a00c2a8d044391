"""
Front MCP Server.

Exposes recent messages from a Front inbox to MCP clients.
"""

__version__ = "0.9.6"
