"""
Listing domain models.
"""

from .listing import Listing, ListingPhoto

__all__ = ["Listing", "ListingPhoto"]
