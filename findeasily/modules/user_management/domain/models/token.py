# 📄 File: findeasily/modules/user_management/domain/models/token.py
# 🧭 Purpose (Layman Explanation):
# Describes the one-time codes we email to people who forgot their password. Each code belongs to
# one user and stops working after a while.
# 🧪 Purpose (Technical Summary):
# Token domain model with type enumeration, random value generation and expiry checks.
# 🔗 Dependencies:
# pydantic, secrets, datetime
# 🔄 Connected Modules / Calls From:
# token_service.py, token_repository.py, password reset handlers and subscribers

import secrets
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TokenType(str, Enum):
    PASSWORD_RESET = "PASSWORD_RESET"


def generate_token_value() -> str:
    return secrets.token_urlsafe(32)


class Token(BaseModel):
    """Single-use token tied to a user."""

    id: Optional[int] = None
    user_id: str
    value: str = Field(default_factory=generate_token_value)
    type: TokenType = TokenType.PASSWORD_RESET
    expires_at: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def password_reset(cls, user_id: str, expires_in_hours: int = 24) -> "Token":
        return cls(
            user_id=user_id,
            type=TokenType.PASSWORD_RESET,
            expires_at=datetime.now(timezone.utc) + timedelta(hours=expires_in_hours),
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        # SQLite hands back naive datetimes, stored values are UTC
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now
