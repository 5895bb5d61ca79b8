"""
Test configuration and fixtures for Ghost MCP tests.
"""

from unittest.mock import AsyncMock

import pytest

from ghost_mcp.config import GhostConfig
from ghost_mcp.registry import ToolRegistry
from ghost_mcp.tools import register_post_tools

KEY_ID = "6489a1b2c3d4e5f6a7b8c9d0"
KEY_SECRET = "a1b2c3d4" * 8
ADMIN_API_KEY = f"{KEY_ID}:{KEY_SECRET}"


@pytest.fixture
def config() -> GhostConfig:
    return GhostConfig(
        api_url="https://blog.example.com",
        admin_api_key=ADMIN_API_KEY,
        _env_file=None,
    )


@pytest.fixture
def ghost_client() -> AsyncMock:
    """Fake Admin API client; every posts method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def registry(ghost_client: AsyncMock) -> ToolRegistry:
    registry = ToolRegistry()
    register_post_tools(registry, ghost_client)
    return registry
