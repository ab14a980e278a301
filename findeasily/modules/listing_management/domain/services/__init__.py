"""
Listing domain services.
"""

from .listing_service import ListingService

__all__ = ["ListingService"]
