# 📄 File: findeasily/modules/listing_management/application/dto/listing_dto.py
# 🧭 Purpose (Layman Explanation):
# The shape of a listing as it is sent back to the browser.
# 🧪 Purpose (Technical Summary):
# Listing and photo DTOs built from the domain models.
# 🔗 Dependencies:
# pydantic, listing domain models
# 🔄 Connected Modules / Calls From:
# Listing request handler

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.listing import Listing, ListingPhoto


class ListingPhotoDto(BaseModel):
    id: Optional[int] = None
    path: str

    @classmethod
    def from_photo(cls, photo: ListingPhoto) -> "ListingPhotoDto":
        return cls(id=photo.id, path=photo.path)


class ListingDto(BaseModel):
    """Listing with its basic info and photo paths."""

    id: str
    owner_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price: Optional[Decimal] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    photos: List[ListingPhotoDto] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingDto":
        return cls(
            **listing.model_dump(exclude={"photos"}),
            photos=[ListingPhotoDto.from_photo(photo) for photo in listing.photos],
        )
