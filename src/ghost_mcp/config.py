"""
Configuration for Ghost MCP Server.

Uses pydantic-settings for environment variable loading with .env support.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GhostConfig(BaseSettings):
    """Configuration for the Ghost Admin API connection."""

    model_config = SettingsConfigDict(
        env_prefix="GHOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Site URL (e.g., https://blog.example.com)
    api_url: str = Field(default="", description="Ghost site URL")

    # Admin API key in "<id>:<secret>" form, from Ghost Admin > Integrations
    admin_api_key: str = Field(default="", description="Ghost Admin API key")

    api_version: str = Field(default="v5.0", description="Accept-Version header value")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def admin_api_base(self) -> str:
        """Get the Admin API base URL"""
        return f"{self.api_url.rstrip('/')}/ghost/api/admin/"

    @property
    def is_configured(self) -> bool:
        """Check if Ghost is properly configured."""
        return bool(self.api_url and self.admin_api_key)

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_url:
            errors.append("GHOST_API_URL is required")

        if not self.admin_api_key:
            errors.append("GHOST_ADMIN_API_KEY is required")
        elif ":" not in self.admin_api_key:
            errors.append("GHOST_ADMIN_API_KEY must be in '<id>:<secret>' format")

        return errors


# Global config instance (lazy loaded)
_config: Optional[GhostConfig] = None


def get_config() -> GhostConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = GhostConfig()
    return _config


def reload_config() -> GhostConfig:
    """Reload configuration from environment."""
    global _config
    _config = GhostConfig()
    return _config
