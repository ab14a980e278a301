# 📄 File: findeasily/modules/listing_management/application/handlers/listing_handler.py
# 🧭 Purpose (Layman Explanation):
# What an owner does with their property listings: start a new one, save it, add photos, see
# all of their listings and open one of them.
#
# 🧪 Purpose (Technical Summary):
# Listing request handler under /mgmt. Edit access is checked with
# CurrentUserService.can_edit_listing before any service call. Form problems are logged and, in
# the default lenient mode, do not block creation.
#
# 🔗 Dependencies:
# - ListingService, CurrentUserService, FileService
# - ListingCreateFormValidator
#
# 🔄 Connected Modules / Calls From:
# - listing_management.presentation.api.v1.listings

import logging
from typing import Optional

from findeasily.modules.user_management.domain.services.current_user_service import CurrentUserService
from findeasily.shared.core.dependencies import CurrentUser
from findeasily.shared.core.exceptions import AuthorizationError, FileStorageError, FormValidationError
from findeasily.shared.core.responses import GenericResponse, HandlerResult, Redirect, ViewModel
from findeasily.shared.infrastructure.storage.file_manager import FileService, UploadedFile
from findeasily.shared.utils.validators import errors_to_dicts

from ...domain.services.listing_service import ListingService
from ..dto.listing_dto import ListingDto
from ..forms import ListingBasicInfoForm
from ..validators import ListingCreateFormValidator

logger = logging.getLogger(__name__)

NO_FILE_UPLOADED = "No file was uploaded"
LISTING_NOT_FOUND = "Listing not found"
PHOTO_UPLOADED = "Photo uploaded"


class ListingRequestHandler:
    """
    Handles the listing management pages.
    """

    def __init__(
        self,
        listing_service: ListingService,
        current_user_service: CurrentUserService,
        file_service: FileService,
        listing_create_form_validator: Optional[ListingCreateFormValidator] = None,
        strict_validation: bool = False
    ):
        self.listing_service = listing_service
        self.current_user_service = current_user_service
        self.file_service = file_service
        self.listing_create_form_validator = listing_create_form_validator or ListingCreateFormValidator()
        self.strict_validation = strict_validation

    # =========================================================================
    # CREATE
    # =========================================================================

    def get_new_listing_page(self) -> ViewModel:
        return ViewModel(view="listing/new", model={"form": ListingBasicInfoForm().to_view()})

    async def create_listing(self, caller: CurrentUser, form: ListingBasicInfoForm) -> Redirect:
        """
        Save a new listing owned by the caller and open it.

        Raises:
            FormValidationError: Only in strict mode, when the form has errors
        """
        errors = self.listing_create_form_validator.validate(form)
        if errors:
            logger.info(f"Listing form of user {caller.user_id} has {len(errors)} problem(s): {[e.code for e in errors]}")
            if self.strict_validation:
                raise FormValidationError(errors_to_dicts(errors), form="listing")

        listing = await self.listing_service.save(form.to_listing(caller.user_id))
        return Redirect(f"/mgmt/listing/{listing.id}")

    # =========================================================================
    # PHOTOS
    # =========================================================================

    async def get_photo_page(self, caller: CurrentUser, listing_id: str) -> HandlerResult:
        await self._require_edit(caller, listing_id)

        listing = await self.listing_service.get_by_id(listing_id)
        if listing is None:
            return Redirect("/")

        return ViewModel(view="listing/photo", model={"listing": ListingDto.from_listing(listing).model_dump()})

    async def upload_photo(
        self,
        caller: CurrentUser,
        listing_id: str,
        file: Optional[UploadedFile]
    ) -> GenericResponse:
        """
        Store one photo for the listing.

        ``success`` is true only when a stored path was produced and recorded.
        """
        await self._require_edit(caller, listing_id)

        if file is None or file.is_empty:
            return GenericResponse(success=False, message=NO_FILE_UPLOADED)

        listing = await self.listing_service.get_by_id(listing_id)
        if listing is None:
            return GenericResponse(success=False, message=LISTING_NOT_FOUND)

        try:
            path = await self.file_service.store_listing_photo(listing.id, file.filename, file.content)
        except FileStorageError as e:
            logger.warning(f"Photo upload for listing {listing_id} failed: {e.message}")
            return GenericResponse(success=False, message=e.message)

        await self.listing_service.add_photo(listing.id, path)
        return GenericResponse(success=True, message=PHOTO_UPLOADED, data={"path": path})

    # =========================================================================
    # VIEW
    # =========================================================================

    async def get_my_listings(self, caller: CurrentUser) -> ViewModel:
        listings = await self.listing_service.get_by_owner_id(caller.user_id)
        return ViewModel(
            view="listing/listings",
            model={"listings": [ListingDto.from_listing(listing).model_dump() for listing in listings]}
        )

    async def get_listing_page(self, caller: CurrentUser, listing_id: str) -> HandlerResult:
        """Unknown ids send the caller back to the home page."""
        await self._require_edit(caller, listing_id)

        listing = await self.listing_service.get_by_id(listing_id)
        if listing is None:
            logger.debug(f"Listing {listing_id} not found, redirecting home")
            return Redirect("/")

        return ViewModel(view="listing/listing", model={"listing": ListingDto.from_listing(listing).model_dump()})

    async def _require_edit(self, caller: CurrentUser, listing_id: str) -> None:
        if not await self.current_user_service.can_edit_listing(caller, listing_id):
            raise AuthorizationError(
                resource_type="listing",
                resource_id=listing_id,
                user_id=caller.user_id if caller else None
            )
