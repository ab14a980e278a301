"""
Security utilities for JWT validation and password hashing.
Provides the password encoder collaborator and bearer-token handling.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Dict, Any, List

from jose import JWTError, jwt
from passlib.context import CryptContext

from ..config.settings import get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class PasswordEncoder:
    """
    One-way password hashing with bcrypt.

    `encode` produces a salted hash for storage and `matches` checks a
    submitted plaintext against a stored hash.
    """

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def encode(self, raw_password: str) -> str:
        return self._context.hash(raw_password)

    def matches(self, raw_password: Optional[str], encoded_password: Optional[str]) -> bool:
        """
        Verify password against hash.

        Args:
            raw_password: Plain text password
            encoded_password: Stored hashed password

        Returns:
            bool: True if password matches, False for missing values or
            unparseable hashes
        """
        if not raw_password or not encoded_password:
            return False
        try:
            return self._context.verify(raw_password, encoded_password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification error: {e}")
            return False


class SecurityManager:
    """
    Centralized security manager for bearer-token authentication.
    Handles JWT access token creation and verification.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", access_token_expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes

    def create_access_token(
        self,
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT access token with user data and expiration.

        Args:
            data: Token payload data
            expires_delta: Custom expiration time

        Returns:
            str: Encoded JWT token
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        to_encode.update({
            "exp": expire,
            "iat": now,
            "type": "access"
        })

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Access token created for user: {data.get('sub')}")
        return encoded_jwt

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT access token.

        Args:
            token: JWT token to verify

        Returns:
            dict: Decoded token payload

        Raises:
            AuthenticationError: If token is invalid, expired or malformed
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials")

        if payload.get("type") != "access":
            logger.warning(f"Token type mismatch. Got: {payload.get('type')}")
            raise AuthenticationError("Could not validate credentials")

        if not payload.get("sub"):
            logger.warning("Token missing subject (user_id)")
            raise AuthenticationError("Could not validate credentials")

        return payload

    @staticmethod
    def create_user_token_data(user_id: str, email: str, roles: Optional[List[str]] = None) -> Dict[str, Any]:
        return {
            "sub": user_id,
            "email": email,
            "roles": roles or ["USER"],
        }


@lru_cache()
def get_security_manager() -> SecurityManager:
    """
    Get cached security manager instance.

    Returns:
        SecurityManager: Singleton security manager
    """
    settings = get_settings()
    return SecurityManager(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
    )


@lru_cache()
def get_password_encoder() -> PasswordEncoder:
    return PasswordEncoder(rounds=get_settings().BCRYPT_ROUNDS)


# Convenience functions for direct usage
def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token."""
    return get_security_manager().create_access_token(data, expires_delta)


def verify_token(token: str) -> Dict[str, Any]:
    """Verify JWT access token."""
    return get_security_manager().verify_token(token)
