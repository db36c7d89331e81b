"""Run the SVG MCP server over stdio: ``python -m svg_mcp``."""

from svg_mcp.mcp_server.server import run

run()
