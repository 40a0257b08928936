"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from keepnotes.core.config import get_app_config
from keepnotes.core.database import get_db_session
from keepnotes.core.exceptions import AuthenticationError
from keepnotes.core.logging import get_logger
from keepnotes.core.security import is_authenticated

logger = get_logger(__name__)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def require_session(authorization: str | None = Header(None)) -> None:
    """
    Reject the request unless it carries an authenticated session.

    Only enforced when the auth_require_api_authentication feature
    flag is on.

    Raises:
        AuthenticationError: If the bearer token is missing or invalid
    """
    if not get_app_config().features.auth_require_api_authentication:
        return

    if not is_authenticated(_bearer_token(authorization)):
        raise AuthenticationError("Not authenticated")
