"""
Ghost MCP Server

A Model Context Protocol server for the Ghost Admin API that lets agents
browse, read, create, edit and delete posts.
"""

from .server import main, create_server
from .client import GhostAdminClient
from .config import GhostConfig
from .errors import GhostAPIError, ToolInputError, ToolNotFoundError
from .registry import ToolRegistry
from .tools import register_post_tools

__version__ = "0.1.0"

__all__ = [
    "main",
    "create_server",
    "GhostAdminClient",
    "GhostConfig",
    "GhostAPIError",
    "ToolInputError",
    "ToolNotFoundError",
    "ToolRegistry",
    "register_post_tools",
]
