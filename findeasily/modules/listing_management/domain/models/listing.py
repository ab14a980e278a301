# 📄 File: findeasily/modules/listing_management/domain/models/listing.py
# 🧭 Purpose (Layman Explanation):
# Defines what a property listing is - its title, address, price, rooms and photos - and who
# owns it.
# 🧪 Purpose (Technical Summary):
# Domain models for the Listing aggregate and its ListingPhoto children.
# 🔗 Dependencies:
# pydantic, datetime, decimal, uuid
# 🔄 Connected Modules / Calls From:
# listing_service.py, listing_repository.py, listing request handler, CurrentUserService

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class ListingPhoto(BaseModel):
    id: Optional[int] = None
    listing_id: str
    path: str = Field(..., description="Path relative to the upload directory")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Listing(BaseModel):
    """
    Property listing owned by exactly one user.

    Basic info fields are optional at the domain level so a listing can be
    saved while its form still has problems.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    owner_id: str

    # Basic info
    title: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price: Optional[Decimal] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None

    photos: List[ListingPhoto] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id

    def __str__(self) -> str:
        return f"Listing(id={self.id}, owner_id={self.owner_id}, title={self.title!r})"
