"""
Listing management API v1 routers.
"""

from .listings import listings_router

__all__ = ["listings_router"]
