# 📄 File: findeasily/modules/listing_management/infrastructure/database/listing_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file does the database work for listings: saving them, finding them by id or by owner,
# and remembering where their photos are stored.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the ListingRepository interface. Photos are always eager loaded
# with selectinload since lazy loading is unavailable on async sessions.
#
# 🔗 Dependencies:
# - listing_management.domain.repositories.listing_repository (interface)
# - listing_management.infrastructure.database.models (SQLAlchemy models)
#
# 🔄 Connected Modules / Calls From:
# - listing_management.presentation.dependencies (per-request construction)

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from findeasily.modules.listing_management.domain.models.listing import Listing, ListingPhoto
from findeasily.modules.listing_management.domain.repositories.listing_repository import ListingRepository
from findeasily.modules.listing_management.infrastructure.database.models import ListingModel, ListingPhotoModel
from findeasily.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)

BASIC_INFO_FIELDS = ("title", "description", "address", "city", "price", "bedrooms", "bathrooms")


class SQLAlchemyListingRepository(ListingRepository):
    """
    SQLAlchemy implementation of the ListingRepository interface.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, listing: Listing) -> Listing:
        try:
            model = await self._session.get(ListingModel, listing.id)
            if model is None:
                model = ListingModel(
                    id=listing.id,
                    owner_id=listing.owner_id,
                    created_at=listing.created_at,
                    photos=[],
                )
                self._session.add(model)

            for field in BASIC_INFO_FIELDS:
                setattr(model, field, getattr(listing, field))
            model.updated_at = listing.updated_at

            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error saving listing {listing.id}: {str(e)}")
            raise RepositoryError(f"Failed to save listing: {str(e)}", operation="save", entity_type="listing") from e

        return await self.get_by_id(listing.id)

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        try:
            stmt = (
                select(ListingModel)
                .where(ListingModel.id == str(listing_id))
                .options(selectinload(ListingModel.photos))
                .execution_options(populate_existing=True)
            )
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving listing {listing_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve listing: {str(e)}", operation="get", entity_type="listing") from e

        return self._model_to_domain(model) if model else None

    async def get_by_owner_id(self, owner_id: str) -> List[Listing]:
        try:
            stmt = (
                select(ListingModel)
                .where(ListingModel.owner_id == owner_id)
                .options(selectinload(ListingModel.photos))
                .order_by(ListingModel.created_at.desc(), ListingModel.id)
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Database error listing listings of owner {owner_id}: {str(e)}")
            raise RepositoryError(f"Failed to list listings: {str(e)}", operation="list", entity_type="listing") from e

    async def add_photo(self, photo: ListingPhoto) -> ListingPhoto:
        try:
            model = ListingPhotoModel(listing_id=photo.listing_id, path=photo.path, created_at=photo.created_at)
            self._session.add(model)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error adding photo to listing {photo.listing_id}: {str(e)}")
            raise RepositoryError(f"Failed to add photo: {str(e)}", operation="create", entity_type="listing_photo") from e

        return ListingPhoto(id=model.id, listing_id=model.listing_id, path=model.path, created_at=model.created_at)

    @staticmethod
    def _model_to_domain(model: ListingModel) -> Listing:
        return Listing(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            description=model.description,
            address=model.address,
            city=model.city,
            price=model.price,
            bedrooms=model.bedrooms,
            bathrooms=model.bathrooms,
            photos=[
                ListingPhoto(id=p.id, listing_id=p.listing_id, path=p.path, created_at=p.created_at)
                for p in model.photos
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
