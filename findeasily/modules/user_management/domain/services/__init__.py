"""
User management domain services.
"""

from .user_service import UserService
from .token_service import TokenService
from .current_user_service import CurrentUserService

__all__ = [
    "UserService",
    "TokenService",
    "CurrentUserService",
]
