"""
Ghost Admin API Client

Handles all API interactions with a Ghost site's Admin API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .auth import GhostAdminAuth
from .config import GhostConfig
from .errors import GhostAPIError

logger = logging.getLogger(__name__)


class PostsResource:
    """Posts endpoints of the Admin API"""

    def __init__(self, api: "GhostAdminClient"):
        self.api = api

    async def browse(self, query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        List posts.

        Args:
            query: Browse parameters (filter, limit, page, order)

        Returns:
            Response with "posts" and pagination "meta"
        """
        return await self.api.request("GET", "posts/", params=query or None)

    async def read(self, query: Dict[str, Any]) -> Dict[str, Any]:
        """Get a single post by id or slug"""
        if query.get("id"):
            path = f"posts/{query['id']}/"
        elif query.get("slug"):
            path = f"posts/slug/{query['slug']}/"
        else:
            raise GhostAPIError(
                "Must include either id or slug",
                error_type="ValidationError",
            )

        data = await self.api.request("GET", path)
        return data["posts"][0]

    async def add(
        self,
        data: Dict[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a new post.

        Args:
            data: Post fields (title required)
            options: Extra query parameters, e.g. {"source": "html"}

        Returns:
            Created post including server-assigned fields
        """
        response = await self.api.request(
            "POST",
            "posts/",
            params=options,
            json={"posts": [data]},
        )
        return response["posts"][0]

    async def edit(
        self,
        data: Dict[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Update an existing post.

        Ghost compares data["updated_at"] against the stored post and
        answers 409 if they differ.
        """
        if not data.get("id"):
            raise GhostAPIError("Must include data.id", error_type="ValidationError")

        body = {key: value for key, value in data.items() if key != "id"}
        response = await self.api.request(
            "PUT",
            f"posts/{data['id']}/",
            params=options,
            json={"posts": [body]},
        )
        return response["posts"][0]

    async def delete(self, query: Dict[str, Any]) -> None:
        """Delete a post by id"""
        if not query.get("id"):
            raise GhostAPIError("Must include data.id", error_type="ValidationError")

        await self.api.request("DELETE", f"posts/{query['id']}/")


class GhostAdminClient:
    """Async client for Ghost Admin API"""

    def __init__(
        self,
        config: GhostConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.auth = GhostAdminAuth(config.admin_api_key)
        self.posts = PostsResource(self)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Initialize HTTP client"""
        self._client = httpx.AsyncClient(
            base_url=self.config.admin_api_base,
            headers={
                "Accept-Version": self.config.api_version,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(self.config.timeout),
            transport=self._transport,
        )

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")
        return self._client

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Make an authenticated request and return the decoded body."""
        logger.debug(f"{method} {path}")

        response = await self.client.request(
            method,
            path,
            headers=self.auth.get_headers(),
            **kwargs,
        )

        if response.is_error:
            raise self._parse_error(response)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _parse_error(response: httpx.Response) -> GhostAPIError:
        """Convert a Ghost error response into a GhostAPIError"""
        try:
            body = response.json()
        except ValueError:
            body = None
        errors = (body.get("errors") if isinstance(body, dict) else None) or []

        if not errors:
            return GhostAPIError(
                response.text or response.reason_phrase,
                status_code=response.status_code,
            )

        error = errors[0]
        return GhostAPIError(
            error.get("message") or response.reason_phrase,
            status_code=response.status_code,
            error_type=error.get("type"),
            context=error.get("context"),
        )
