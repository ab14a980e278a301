# 📄 File: findeasily/modules/listing_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts together, for every request, what the listing pages need: the listing database helper,
# the listing service, the permission checker and the request handler.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the listing module. The CurrentUserService built here is
# given the ListingService as its listing lookup so can_edit_listing can check ownership.
# 🔗 Dependencies:
# FastAPI Depends, shared.core.dependencies, listing_management layers, user_management
# CurrentUserService
# 🔄 Connected Modules / Calls From:
# listing_management.presentation.api.v1.listings

"""
Listing Management Module Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from findeasily.modules.user_management.domain.services.current_user_service import CurrentUserService
from findeasily.shared.config.settings import Settings
from findeasily.shared.core.dependencies import get_db_session, get_file_service, get_settings_dep
from findeasily.shared.infrastructure.storage.file_manager import FileService

from ..application.handlers.listing_handler import ListingRequestHandler
from ..domain.repositories.listing_repository import ListingRepository
from ..domain.services.listing_service import ListingService
from ..infrastructure.database.listing_repository_impl import SQLAlchemyListingRepository


def get_listing_repository(session: AsyncSession = Depends(get_db_session)) -> ListingRepository:
    return SQLAlchemyListingRepository(session)


def get_listing_service(listing_repository: ListingRepository = Depends(get_listing_repository)) -> ListingService:
    return ListingService(listing_repository)


def get_listing_current_user_service(
    listing_service: ListingService = Depends(get_listing_service)
) -> CurrentUserService:
    return CurrentUserService(listing_lookup=listing_service)


def get_listing_handler(
    listing_service: ListingService = Depends(get_listing_service),
    current_user_service: CurrentUserService = Depends(get_listing_current_user_service),
    file_service: FileService = Depends(get_file_service),
    settings: Settings = Depends(get_settings_dep)
) -> ListingRequestHandler:
    return ListingRequestHandler(
        listing_service=listing_service,
        current_user_service=current_user_service,
        file_service=file_service,
        strict_validation=settings.LISTING_STRICT_VALIDATION,
    )
