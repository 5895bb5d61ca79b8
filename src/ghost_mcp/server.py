"""
Ghost MCP Server

A Model Context Protocol server that exposes Ghost posts management tools
over stdio.
"""

import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from .client import GhostAdminClient
from .config import GhostConfig, get_config
from .errors import GhostAPIError
from .registry import ToolRegistry
from .tools import register_post_tools

# Configure logging (stderr; stdout carries the MCP stream)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def create_registry(client) -> ToolRegistry:
    """Create a registry holding every Ghost tool."""
    registry = ToolRegistry()
    register_post_tools(registry, client)
    return registry


def create_server(client) -> Server:
    """Create and configure the MCP server."""
    server = Server("ghost-mcp")
    registry = create_registry(client)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """Return list of available Ghost tools."""
        tools = registry.list_tools()
        logger.info(f"Listing {len(tools)} tools")
        return tools

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Handle tool invocation."""
        try:
            results = await registry.call(name, arguments or {})
            return CallToolResult(content=results)
        except GhostAPIError as e:
            logger.error(f"Tool {name} failed: {e}")
            return error_result(e.message)
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}", exc_info=True)
            return error_result(str(e))

    return server


async def run_server(config: GhostConfig):
    """Run the MCP server."""
    errors = config.validate_config()
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        raise ValueError("Invalid configuration")

    async with GhostAdminClient(config) as client:
        server = create_server(client)
        logger.info(f"Starting Ghost MCP server for {config.api_url}")

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main():
    """Entry point for the MCP server."""
    from dotenv import load_dotenv

    load_dotenv()
    config = get_config()

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
