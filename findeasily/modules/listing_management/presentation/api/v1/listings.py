# 📄 File: findeasily/modules/listing_management/presentation/api/v1/listings.py
# 🧭 Purpose (Layman Explanation):
# The web addresses owners use to manage their property listings and photos.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes under /mgmt. Every route requires an authenticated caller; the handler checks
# edit access per listing.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File binding
# - shared.core.dependencies (caller resolution)
# - listing_management.presentation.dependencies (handler wiring)
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router (router inclusion)

"""
Listing Management API Endpoints

Endpoints:
- GET  /mgmt/listing/new: Empty listing form
- POST /mgmt/listing: Create a listing
- GET  /mgmt/listing/{listing_id}/photo, POST /mgmt/listing/{listing_id}/photo: Photo upload
- GET  /mgmt/listings: Caller's listings
- GET  /mgmt/listing/{listing_id}: One listing
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response

from findeasily.shared.core.dependencies import CurrentUser, get_current_user
from findeasily.shared.core.responses import GenericResponse, to_response
from findeasily.shared.infrastructure.storage.file_manager import UploadedFile

from ....application.forms import ListingBasicInfoForm
from ....application.handlers.listing_handler import ListingRequestHandler
from ...dependencies import get_listing_handler

logger = logging.getLogger(__name__)

listings_router = APIRouter(prefix="/mgmt", tags=["Listings"])


@listings_router.get("/listing/new", summary="New listing form")
async def get_new_listing_page(
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> Response:
    return to_response(handler.get_new_listing_page())


@listings_router.post("/listing", summary="Create a listing")
async def post_listing(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    city: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    bedrooms: Optional[str] = Form(None),
    bathrooms: Optional[str] = Form(None),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> Response:
    form = ListingBasicInfoForm(
        title=title,
        description=description,
        address=address,
        city=city,
        price=price,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
    )
    return to_response(await handler.create_listing(current_user, form))


@listings_router.get("/listing/{listing_id}/photo", summary="Photo upload page")
async def get_photo_page(
    listing_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> Response:
    return to_response(await handler.get_photo_page(current_user, listing_id))


@listings_router.post("/listing/{listing_id}/photo", response_model=GenericResponse, summary="Upload a photo")
async def post_photo(
    listing_id: str,
    file: Optional[UploadFile] = File(None),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> GenericResponse:
    uploaded = None
    if file is not None:
        uploaded = UploadedFile(
            filename=file.filename or "",
            content=await file.read(),
            content_type=file.content_type,
        )
    return await handler.upload_photo(current_user, listing_id, uploaded)


@listings_router.get("/listings", summary="Own listings")
async def get_my_listings(
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> Response:
    return to_response(await handler.get_my_listings(current_user))


@listings_router.get("/listing/{listing_id}", summary="Listing page")
async def get_listing_page(
    listing_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListingRequestHandler = Depends(get_listing_handler)
) -> Response:
    return to_response(await handler.get_listing_page(current_user, listing_id))
