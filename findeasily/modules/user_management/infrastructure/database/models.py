# 📄 File: findeasily/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts, their profiles and password reset codes are stored in the
# database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the users, user_ext and tokens tables. The unique index on
# users.email is what resolves concurrent registrations of the same address.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - findeasily.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py and token_repository_impl.py (CRUD operations)
# - DatabaseManager.create_all (schema creation on startup)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Account identity, credentials and role
- UserExtModel: Profile extension (self introduction, picture)
- TokenModel: Single-use tokens such as password reset links
"""

from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from findeasily.shared.infrastructure.database.connection import Base


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """SQLAlchemy model for user accounts."""
    __tablename__ = "users"

    id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
    )
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Login email, unique across all accounts"
    )
    password_hash = Column(String(255), nullable=False, comment="bcrypt hash")
    role = Column(String(20), nullable=False, default="USER")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    ext = relationship("UserExtModel", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"


class UserExtModel(Base):
    """SQLAlchemy model for the optional profile extension of a user."""
    __tablename__ = "user_ext"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    self_introduction = Column(Text, nullable=True)
    picture = Column(String(512), nullable=True, comment="Path relative to the upload directory")
    updated_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("UserModel", back_populates="ext")


# =============================================================================
# TOKEN MODEL
# =============================================================================

class TokenModel(Base):
    """SQLAlchemy model for single-use tokens."""
    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    value = Column(String(128), nullable=False, unique=True, index=True)
    type = Column(String(32), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<TokenModel(id={self.id}, user_id={self.user_id}, type={self.type})>"
