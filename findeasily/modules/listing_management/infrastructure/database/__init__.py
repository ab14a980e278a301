"""
Database layer for listing management: ORM models and repository implementation.
"""

from .models import ListingModel, ListingPhotoModel
from .listing_repository_impl import SQLAlchemyListingRepository

__all__ = ["ListingModel", "ListingPhotoModel", "SQLAlchemyListingRepository"]
