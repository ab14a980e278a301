"""
Listing management request handlers.
"""

from .listing_handler import ListingRequestHandler

__all__ = ["ListingRequestHandler"]
