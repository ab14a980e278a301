# 📄 File: findeasily/modules/user_management/application/dto/user_dto.py
# 🧭 Purpose (Layman Explanation):
# This file defines the safe "public card" of a user that can be sent back to the browser,
# leaving out private things like the password.
#
# 🧪 Purpose (Technical Summary):
# User data transfer objects with security filtering (password hash never exposed).
#
# 🔗 Dependencies:
# - pydantic for DTO serialization
# - user_management.domain.models.user (User, UserExt)
#
# 🔄 Connected Modules / Calls From:
# - user_management.application.handlers (handlers return user DTOs)
# - user_management.presentation.api (response models)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.models.user import User, UserExt


class UserDto(BaseModel):
    """Public representation of a user account."""

    id: str = Field(..., description="Unique identifier of the user")
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserDto":
        return cls(id=user.id, email=user.email, role=user.role.value)


class UserDetailDto(UserDto):
    created_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserDetailDto":
        return cls(id=user.id, email=user.email, role=user.role.value, created_at=user.created_at)


class UserExtDto(BaseModel):
    user_id: Optional[str] = None
    self_introduction: Optional[str] = None
    picture: Optional[str] = None

    @classmethod
    def from_user_ext(cls, user_ext: UserExt) -> "UserExtDto":
        return cls(
            user_id=user_ext.user_id,
            self_introduction=user_ext.self_introduction,
            picture=user_ext.picture,
        )


class AccessTokenDto(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")
    user: UserDto
