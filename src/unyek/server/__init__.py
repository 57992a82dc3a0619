"""MCP server exposing a reconstructed archive."""

from unyek.server.mcp_server import create_mcp_server, format_size

__all__ = ["create_mcp_server", "format_size"]
