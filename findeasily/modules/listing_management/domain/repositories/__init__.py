"""
Listing repository interfaces.
"""

from .listing_repository import ListingRepository

__all__ = ["ListingRepository"]
