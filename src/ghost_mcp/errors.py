"""Exception types raised by the Ghost client and the tool registry."""

from typing import Any, Optional


class GhostAPIError(Exception):
    """Raised when the Ghost Admin API rejects a request."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        context: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.context = context

    @property
    def is_conflict(self) -> bool:
        """True when the post was edited since the supplied updated_at."""
        return self.status_code == 409 or self.error_type == "UpdateCollisionError"

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __str__(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(str(self.context))
        if self.status_code is not None:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)


class ToolNotFoundError(LookupError):
    """Raised when a tool name is not registered."""
    pass


class ToolInputError(ValueError):
    """Raised when tool arguments do not match the tool's parameter schema."""
    pass
