"""MCP tools for appservice-mcp."""

from appservice_mcp.tools.appservice import register_appservice_tools

__all__ = [
    "register_appservice_tools",
]
