"""
Listing data transfer objects.
"""

from .listing_dto import ListingDto, ListingPhotoDto

__all__ = ["ListingDto", "ListingPhotoDto"]
