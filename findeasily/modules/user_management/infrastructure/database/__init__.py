"""
Database layer for user management: ORM models and repository implementations.
"""

from .models import TokenModel, UserExtModel, UserModel
from .user_repository_impl import SQLAlchemyUserRepository
from .token_repository_impl import SQLAlchemyTokenRepository

__all__ = [
    "UserModel",
    "UserExtModel",
    "TokenModel",
    "SQLAlchemyUserRepository",
    "SQLAlchemyTokenRepository",
]
