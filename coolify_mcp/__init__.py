"""MCP server exposing the Coolify REST API as agent tools."""

__version__ = "1.0.0"

SERVER_NAME = "coolify-mcp-server"
