"""
Authentication for the Ghost Admin API.

Admin API keys have the form "<id>:<secret>". Each request carries a
short-lived JWT signed with the hex-decoded secret:
- header: alg=HS256, typ=JWT, kid=<id>
- claims: iat, exp (5 minutes later), aud="/admin/"
"""

import logging
import time
from typing import Dict, Optional

import jwt

logger = logging.getLogger(__name__)

TOKEN_AUDIENCE = "/admin/"
TOKEN_TTL_SECONDS = 5 * 60


class GhostAdminAuth:
    """Signs Admin API tokens from an Admin API key."""

    def __init__(self, admin_api_key: str):
        self.key_id, self._secret = self._split_key(admin_api_key)

    @staticmethod
    def _split_key(admin_api_key: str) -> tuple[str, bytes]:
        """Split "<id>:<secret>" and decode the secret."""
        key_id, sep, secret = admin_api_key.partition(":")
        if not sep or not key_id or not secret:
            raise ValueError("Admin API key must be in '<id>:<secret>' format")

        try:
            return key_id, bytes.fromhex(secret)
        except ValueError:
            raise ValueError("Admin API key secret must be hex encoded") from None

    def create_token(self, now: Optional[int] = None) -> str:
        """
        Create a signed Admin API token.

        Args:
            now: Issue time as a Unix timestamp (defaults to current time)

        Returns:
            Encoded JWT string
        """
        iat = int(now if now is not None else time.time())
        payload = {
            "iat": iat,
            "exp": iat + TOKEN_TTL_SECONDS,
            "aud": TOKEN_AUDIENCE,
        }
        return jwt.encode(
            payload,
            self._secret,
            algorithm="HS256",
            headers={"kid": self.key_id, "typ": "JWT"},
        )

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers for an HTTP request."""
        logger.debug(f"Signing Admin API token for key {self.key_id}")
        return {"Authorization": f"Ghost {self.create_token()}"}
