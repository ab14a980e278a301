# 📄 File: findeasily/modules/listing_management/domain/services/listing_service.py
# 🧭 Purpose (Layman Explanation):
# The business rules for listings: saving a new listing for its owner, finding listings, and
# recording newly uploaded photos.
# 🧪 Purpose (Technical Summary):
# Domain service over ListingRepository.
# 🔗 Dependencies:
# Listing domain models, ListingRepository
# 🔄 Connected Modules / Calls From:
# Listing request handler, CurrentUserService (listing lookup for can_edit_listing)

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..models.listing import Listing, ListingPhoto
from ..repositories.listing_repository import ListingRepository

logger = logging.getLogger(__name__)


class ListingService:
    """Domain service for listing business logic."""

    def __init__(self, listing_repository: ListingRepository):
        self.listing_repository = listing_repository

    async def save(self, listing: Listing) -> Listing:
        listing.updated_at = datetime.now(timezone.utc)
        saved = await self.listing_repository.save(listing)
        logger.info(f"Saved listing {saved.id} of owner {saved.owner_id}")
        return saved

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        if not listing_id:
            return None
        return await self.listing_repository.get_by_id(listing_id)

    async def get_by_owner_id(self, owner_id: str) -> List[Listing]:
        return await self.listing_repository.get_by_owner_id(owner_id)

    async def add_photo(self, listing_id: str, path: str) -> ListingPhoto:
        photo = await self.listing_repository.add_photo(ListingPhoto(listing_id=listing_id, path=path))
        logger.info(f"Added photo {photo.path} to listing {listing_id}")
        return photo
