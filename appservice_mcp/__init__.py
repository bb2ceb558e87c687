"""appservice-mcp: Azure App Service operations exposed as commands and MCP tools."""

__version__ = "0.1.0"
