# 📄 File: findeasily/modules/listing_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how listings and their photos are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the listings and listing_photos tables.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - findeasily.shared.infrastructure.database.connection (Base)
# - users table of the user management module (owner foreign key)
#
# 🔄 Connected Modules / Calls From:
# - listing_repository_impl.py
# - DatabaseManager.create_all (schema creation on startup)

from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from findeasily.shared.infrastructure.database.connection import Base


class ListingModel(Base):
    """SQLAlchemy model for property listings."""
    __tablename__ = "listings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()), nullable=False)
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Basic info, nullable because listings are saved even when the form has problems
    title = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    price = Column(Numeric(12, 2), nullable=True)
    bedrooms = Column(Integer, nullable=True)
    bathrooms = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    photos = relationship(
        "ListingPhotoModel",
        back_populates="listing",
        cascade="all, delete-orphan",
        order_by="ListingPhotoModel.id",
    )

    def __repr__(self) -> str:
        return f"<ListingModel(id={self.id}, owner_id={self.owner_id})>"


class ListingPhotoModel(Base):
    """SQLAlchemy model for listing photo paths."""
    __tablename__ = "listing_photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    listing_id = Column(String(36), ForeignKey("listings.id", ondelete="CASCADE"), nullable=False, index=True)
    path = Column(String(512), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    listing = relationship("ListingModel", back_populates="photos")
