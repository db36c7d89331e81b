"""
MCP Server Implementation
========================

Model Context Protocol server providing tools for SVG to image conversion.
Implements the two conversion tools: svg_to_png and svg_to_jpeg.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.models import InitializationOptions
from mcp.types import ServerCapabilities, TextContent, Tool, ToolsCapability

from svg_mcp import __version__
from svg_mcp.config.logging import get_logger
from svg_mcp.config.settings import Settings, get_settings
from svg_mcp.mcp_server.handlers import ToolDispatcher

logger = get_logger(__name__)


class SvgMCPServer:
    """MCP Server for SVG to image conversion."""

    def __init__(
        self, settings: Optional[Settings] = None, dispatcher: Optional[ToolDispatcher] = None
    ) -> None:
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="mcp_server")  # structlog.BoundLoggerBase
        self.dispatcher = dispatcher or ToolDispatcher(settings=self.settings)
        self.server = Server(self.settings.server_name)
        self._setup_tools()

    def _setup_tools(self) -> None:
        """Setup MCP tools."""

        @self.server.list_tools()
        async def handle_list_tools() -> List[Tool]:
            """List available MCP tools."""
            return await self.get_tools()

        # Arguments are validated by the dispatcher, which reports field-level errors
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            """Handle tool execution."""
            return await self.call_tool(name, arguments)

    # Public API methods for MCP protocol testing
    async def get_tools(self) -> List[Tool]:
        """Get list of available MCP tools (public API)."""
        listing = self.dispatcher.list_tools()
        return [
            Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.to_dict()["schema"],
            )
            for descriptor in listing.tools
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Call a specific MCP tool (public API)."""
        # Rendering is CPU-bound; keep it off the event loop
        response = await asyncio.to_thread(self.dispatcher.call_tool, name, arguments)

        if not response.success:
            self.logger.warning("Tool call failed", tool=name, error=response.to_dict()["error"])

        return [TextContent(type="text", text=json.dumps(response.to_dict(), indent=2))]

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=self.settings.server_name,
            server_version=__version__,
            capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False)),
            instructions=self.settings.instructions,
        )

    async def run(self) -> None:
        """Run the MCP server over stdio."""
        from mcp.server.stdio import stdio_server

        try:
            async with stdio_server() as (read_stream, write_stream):
                self.logger.info(
                    "Starting SVG converter MCP server",
                    app=self.settings.app_name,
                    transport="stdio",
                )
                await self.server.run(read_stream, write_stream, self.initialization_options())
        except Exception as e:
            self.logger.error("MCP server error", error=str(e))
            raise


async def main() -> None:
    """Main entry point for MCP server."""
    await SvgMCPServer().run()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
