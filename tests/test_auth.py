"""Tests for Admin API token signing."""

import jwt
import pytest

from ghost_mcp.auth import GhostAdminAuth, TOKEN_AUDIENCE, TOKEN_TTL_SECONDS

from conftest import ADMIN_API_KEY, KEY_ID, KEY_SECRET


def test_token_header_and_claims():
    """Test token carries kid, audience and a five minute expiry."""
    auth = GhostAdminAuth(ADMIN_API_KEY)
    token = auth.create_token(now=1_700_000_000)

    header = jwt.get_unverified_header(token)
    assert header["alg"] == "HS256"
    assert header["kid"] == KEY_ID
    assert header["typ"] == "JWT"

    claims = jwt.decode(
        token,
        bytes.fromhex(KEY_SECRET),
        algorithms=["HS256"],
        audience=TOKEN_AUDIENCE,
        options={"verify_exp": False, "verify_iat": False},
    )
    assert claims == {
        "iat": 1_700_000_000,
        "exp": 1_700_000_000 + TOKEN_TTL_SECONDS,
        "aud": "/admin/",
    }


def test_token_verifies_now():
    """Test a freshly minted token is valid against the secret."""
    token = GhostAdminAuth(ADMIN_API_KEY).create_token()

    claims = jwt.decode(
        token,
        bytes.fromhex(KEY_SECRET),
        algorithms=["HS256"],
        audience="/admin/",
    )
    assert claims["exp"] - claims["iat"] == TOKEN_TTL_SECONDS


def test_auth_headers():
    headers = GhostAdminAuth(ADMIN_API_KEY).get_headers()

    assert headers["Authorization"].startswith("Ghost ")


@pytest.mark.parametrize("key", ["no-separator", ":secret", "id:", "id:not-hex"])
def test_malformed_key(key):
    with pytest.raises(ValueError):
        GhostAdminAuth(key)
