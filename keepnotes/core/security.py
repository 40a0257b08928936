"""
Security Utilities.

Session check for the API. Tokens are issued elsewhere; this module
only answers whether a presented bearer token identifies a session.
Without a configured JWT_SECRET no token is ever accepted.
"""

from typing import Any

from jose import JWTError, jwt

from keepnotes.core.config import get_app_config, get_settings
from keepnotes.core.exceptions import AuthenticationError
from keepnotes.core.logging import get_logger

logger = get_logger(__name__)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Raises:
        AuthenticationError: If no secret is configured, or the token is
            invalid or expired
    """
    settings = get_settings()
    if not settings.jwt_secret:
        logger.error("Token rejected: JWT_SECRET is not configured")
        raise AuthenticationError("Authentication is not configured")

    jwt_config = get_app_config().security.jwt
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Token decode failed", extra={"error": str(e)})
        raise AuthenticationError("Invalid or expired token")


def is_authenticated(token: str | None) -> bool:
    """Return True when the token decodes as an access token with a subject."""
    if not token:
        return False
    try:
        payload = decode_token(token)
    except AuthenticationError:
        return False
    return payload.get("type") == "access" and bool(payload.get("sub"))
