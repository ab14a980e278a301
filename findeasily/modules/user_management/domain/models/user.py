# 📄 File: findeasily/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is on FindEasily - their email, scrambled password and role - plus the
# optional extra profile details like a short bio and a profile picture.
# 🧪 Purpose (Technical Summary):
# Domain models for the User entity and its UserExt profile extension, with the Role enumeration
# used for authorization.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository.py, request handlers, event subscribers

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """User role enumeration"""
    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def values(cls) -> List[str]:
        return [role.value for role in cls]


class User(BaseModel):
    """
    User domain model.

    The password is only ever held as a bcrypt hash; plaintext passwords
    exist solely in the submitted forms.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    email: str
    password_hash: str
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        email = (v or '').strip().lower()
        if not email:
            raise ValueError('Email is required')
        if len(email) > 254:
            raise ValueError('Email too long')
        return email

    @field_validator('password_hash')
    @classmethod
    def validate_password_hash(cls, v: str) -> str:
        if not v:
            raise ValueError('Password hash is required')
        return v

    @property
    def roles(self) -> List[str]:
        return [self.role.value]

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __str__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role.value})"


class UserExt(BaseModel):
    """
    Extended profile of a user.

    A user without a stored extension is shown an empty default.
    """
    user_id: Optional[str] = None
    self_introduction: Optional[str] = None
    picture: Optional[str] = None
    updated_at: Optional[datetime] = None
