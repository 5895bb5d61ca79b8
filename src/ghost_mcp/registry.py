"""
Tool registry.

Holds tool definitions (name, description, parameter model, handler) and
dispatches validated calls to them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp.types import TextContent, Tool
from pydantic import ValidationError

from .errors import ToolInputError, ToolNotFoundError
from .models import ToolParams

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Any], Awaitable[str]]


@dataclass
class RegisteredTool:
    """A tool bound to its parameter model and handler."""
    name: str
    description: str
    params: Type[ToolParams]
    handler: ToolHandler

    def to_mcp(self) -> Tool:
        """Convert to an MCP tool definition."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.params.model_json_schema(),
        )


class ToolRegistry:
    """Registry of tools exposed over MCP."""

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def register(
        self,
        name: str,
        description: str,
        params: Type[ToolParams],
        handler: ToolHandler,
    ) -> RegisteredTool:
        """
        Register a tool.

        Args:
            name: Tool name as seen by MCP clients
            description: Human-readable description
            params: Pydantic model describing accepted arguments
            handler: Coroutine receiving a validated params instance and
                returning the text to send back

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")

        tool = RegisteredTool(name=name, description=description, params=params, handler=handler)
        self._tools[name] = tool
        logger.debug(f"Registered tool {name}")
        return tool

    def tool(self, name: str, description: str, params: Type[ToolParams]):
        """Decorator form of register()."""
        def decorator(handler: ToolHandler) -> ToolHandler:
            self.register(name, description, params, handler)
            return handler
        return decorator

    def get(self, name: str) -> RegisteredTool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(f"Unknown tool: {name}") from None

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[Tool]:
        """Return MCP definitions for every registered tool."""
        return [tool.to_mcp() for tool in self._tools.values()]

    async def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> List[TextContent]:
        """
        Validate arguments and run a tool.

        Upstream errors raised by the handler propagate unchanged.

        Raises:
            ToolNotFoundError: If the tool is not registered
            ToolInputError: If arguments do not match the parameter model
        """
        tool = self.get(name)

        try:
            params = tool.params.model_validate(arguments or {})
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "<root>"
                for err in e.errors()
            )
            logger.warning(f"Invalid arguments for {name}: {fields}")
            raise ToolInputError(f"Invalid arguments for {name} ({fields}): {e}") from e

        logger.info(f"Tool call: {name}")
        text = await tool.handler(params)
        return [TextContent(type="text", text=text)]
