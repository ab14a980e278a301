# 📄 File: findeasily/modules/listing_management/domain/repositories/listing_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving and finding listings and their photos without tying it to a
# particular database
# 🧪 Purpose (Technical Summary):
# Repository interface for the Listing aggregate
# 🔗 Dependencies:
# Domain models (Listing, ListingPhoto), typing, abc
# 🔄 Connected Modules / Calls From:
# listing_service.py, infrastructure implementation, test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.listing import Listing, ListingPhoto


class ListingRepository(ABC):
    """
    Repository interface for Listing data access operations.

    Returned listings carry their photos.
    """

    @abstractmethod
    async def save(self, listing: Listing) -> Listing:
        """
        Insert or update a listing's basic info.

        Raises:
            RepositoryError: If database operation fails
        """

    @abstractmethod
    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        pass

    @abstractmethod
    async def get_by_owner_id(self, owner_id: str) -> List[Listing]:
        pass

    @abstractmethod
    async def add_photo(self, photo: ListingPhoto) -> ListingPhoto:
        """Attach a stored photo path to a listing."""
