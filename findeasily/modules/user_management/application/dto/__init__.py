"""
User management data transfer objects.
"""

from .user_dto import AccessTokenDto, UserDetailDto, UserDto, UserExtDto

__all__ = ["AccessTokenDto", "UserDetailDto", "UserDto", "UserExtDto"]
