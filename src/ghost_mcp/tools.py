"""
MCP tool definitions for Ghost posts.

Each tool validates its arguments, forwards them to the Admin API client
and returns the response as pretty-printed JSON text.
"""

import json
import logging
from typing import Any, Dict, Optional

from .models import (
    AddPostParams,
    BrowsePostsParams,
    DeletePostParams,
    EditPostParams,
    ReadPostParams,
)
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def content_options(payload: Dict[str, Any]) -> Optional[Dict[str, str]]:
    """Ask Ghost to build the post from html rather than lexical when html is given."""
    return {"source": "html"} if payload.get("html") else None


def format_result(result: Any) -> str:
    return json.dumps(result, indent=2)


def register_post_tools(registry: ToolRegistry, client) -> None:
    """
    Register the posts tools.

    Args:
        registry: Tool registry bound to the MCP server
        client: Admin API client exposing a ``posts`` resource
    """

    @registry.tool(
        "posts_browse",
        "Browse posts. Supports NQL filter, limit, page and order.",
        BrowsePostsParams,
    )
    async def browse_posts(params: BrowsePostsParams) -> str:
        posts = await client.posts.browse(params.to_payload())
        return format_result(posts)

    @registry.tool(
        "posts_read",
        "Read a single post by id or slug.",
        ReadPostParams,
    )
    async def read_post(params: ReadPostParams) -> str:
        post = await client.posts.read(params.to_payload())
        return format_result(post)

    @registry.tool(
        "posts_add",
        "Create a new post. Only title is required; html content is used as the source when given.",
        AddPostParams,
    )
    async def add_post(params: AddPostParams) -> str:
        payload = params.to_payload()
        post = await client.posts.add(payload, content_options(payload))
        return format_result(post)

    @registry.tool(
        "posts_edit",
        "Update a post. Requires id and the post's current updated_at; "
        "fails if the post was changed since.",
        EditPostParams,
    )
    async def edit_post(params: EditPostParams) -> str:
        payload = params.to_payload()
        post = await client.posts.edit(payload, content_options(payload))
        return format_result(post)

    @registry.tool(
        "posts_delete",
        "Delete a post by id.",
        DeletePostParams,
    )
    async def delete_post(params: DeletePostParams) -> str:
        await client.posts.delete(params.to_payload())
        return f"Post with id {params.id} deleted."
