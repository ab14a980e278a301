"""
Common FastAPI dependencies for FindEasily.
Provides caller authentication, database sessions and access to the
application-wide collaborators kept on app.state.
"""

import logging
from typing import Optional, Dict, Any, AsyncGenerator, List

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from .security import get_security_manager, get_password_encoder as _get_password_encoder, PasswordEncoder
from .exceptions import AuthenticationError, AuthorizationError
from ..config.settings import Settings, get_settings
from ..events.publisher import EventPublisher
from ..infrastructure.storage.file_manager import FileService
from ..utils.logging import user_id_var

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation
security = HTTPBearer(auto_error=False)

ADMIN_ROLE = "ADMIN"


class CurrentUser:
    """Caller identity extracted from the bearer token."""

    def __init__(
        self,
        user_id: str,
        email: str,
        roles: Optional[List[str]] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.roles = roles or ["USER"]
        self.token_payload = token_payload or {}

    def has_role(self, role: str) -> bool:
        """Check if user has specific role."""
        return role in self.roles

    def is_admin(self) -> bool:
        """Check if user has admin privileges."""
        return self.has_role(ADMIN_ROLE)

    def __repr__(self) -> str:
        return f"CurrentUser(user_id='{self.user_id}', roles={self.roles})"


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> CurrentUser:
    """
    Resolve the authenticated caller from the Authorization header.

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    payload = get_security_manager().verify_token(credentials.credentials)
    current_user = CurrentUser(
        user_id=payload["sub"],
        email=payload.get("email", ""),
        roles=payload.get("roles") or ["USER"],
        token_payload=payload
    )
    user_id_var.set(current_user.user_id)

    logger.debug(f"Current user retrieved: {current_user.user_id}")
    return current_user


async def get_current_admin_user(
    current_user: CurrentUser = Depends(get_current_user)
) -> CurrentUser:
    """
    Get current user with admin privileges.

    Raises:
        AuthorizationError: If user is not an admin
    """
    if not current_user.is_admin():
        logger.warning(f"Non-admin user attempted admin access: {current_user.user_id}")
        raise AuthorizationError(
            "Admin privileges required for this action",
            required_permission=ADMIN_ROLE,
            user_id=current_user.user_id
        )

    return current_user


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for database session.

    Yields:
        AsyncSession: Database session bound to the application's engine
    """
    async with request.app.state.database.session() as session:
        yield session


def get_settings_dep() -> Settings:
    return get_settings()


def get_event_publisher(request: Request) -> EventPublisher:
    return request.app.state.event_publisher


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service


def get_password_encoder() -> PasswordEncoder:
    return _get_password_encoder()
