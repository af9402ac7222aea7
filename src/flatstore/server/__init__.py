"""MCP server exposing a content folder."""

from flatstore.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
