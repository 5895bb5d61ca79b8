"""Tests for server wiring."""

import pytest
from mcp import types

from ghost_mcp.config import GhostConfig
from ghost_mcp.errors import GhostAPIError
from ghost_mcp.server import create_registry, create_server, run_server


async def call_tool(server, name, arguments):
    """Dispatch a tools/call request through the server's registered handler."""
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    response = await handler(request)
    return response.root


def test_create_server(ghost_client):
    server = create_server(ghost_client)

    assert server.name == "ghost-mcp"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def test_create_registry(ghost_client):
    registry = create_registry(ghost_client)

    assert len(registry.list_tools()) == 5


@pytest.mark.asyncio
async def test_list_tools(ghost_client):
    server = create_server(ghost_client)
    handler = server.request_handlers[types.ListToolsRequest]

    response = await handler(types.ListToolsRequest(method="tools/list"))

    assert [tool.name for tool in response.root.tools] == [
        "posts_browse",
        "posts_read",
        "posts_add",
        "posts_edit",
        "posts_delete",
    ]


@pytest.mark.asyncio
async def test_call_tool_success(ghost_client):
    ghost_client.posts.delete.return_value = None
    server = create_server(ghost_client)

    result = await call_tool(server, "posts_delete", {"id": "abc123"})

    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].text == "Post with id abc123 deleted."


@pytest.mark.asyncio
async def test_call_tool_upstream_error(ghost_client):
    ghost_client.posts.edit.side_effect = GhostAPIError(
        "Saving failed! Someone else is editing this post.",
        status_code=409,
        error_type="UpdateCollisionError",
        context="Post was updated at 2024-05-01T10:05:00.000Z",
    )
    server = create_server(ghost_client)

    result = await call_tool(
        server,
        "posts_edit",
        {"id": "64f0aa", "updated_at": "2024-05-01T10:00:00.000Z", "title": "Stale"},
    )

    assert result.isError is True
    assert result.content[0].text == "Error: Saving failed! Someone else is editing this post."


@pytest.mark.asyncio
async def test_call_tool_invalid_arguments(ghost_client):
    server = create_server(ghost_client)

    result = await call_tool(server, "posts_add", {"html": "<p>No title</p>"})

    assert result.isError is True
    ghost_client.posts.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_server_invalid_config():
    config = GhostConfig(api_url="", admin_api_key="", _env_file=None)

    with pytest.raises(ValueError, match="Invalid configuration"):
        await run_server(config)
