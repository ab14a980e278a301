# 📄 File: findeasily/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The web addresses of the signed-in account area: profile pages, profile editing, password
# change, and the admin pages for adding and listing users.
#
# 🧪 Purpose (Technical Summary):
# FastAPI routes under /user and /users. Routes only bind HTTP input into forms and files, pass
# the authenticated caller to AccountRequestHandler and map its result to a response.
#
# 🔗 Dependencies:
# - FastAPI router, Form/File binding
# - shared.core.dependencies (caller resolution)
# - user_management.presentation.dependencies (handler wiring)
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router (router inclusion)

"""
Account API Endpoints

Endpoints:
- GET  /user: Own profile page
- POST /user: Update bio and optional picture
- GET  /user/password, POST /user/password: Password change
- GET  /user/create, POST /user/create: Admin account creation
- GET  /users: Admin user list
- GET  /user/{user_id}: Another user's page
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import Response

from findeasily.shared.core.dependencies import CurrentUser, get_current_admin_user, get_current_user
from findeasily.shared.core.responses import to_response
from findeasily.shared.infrastructure.storage.file_manager import UploadedFile

from ....application.forms import PasswordChangeForm, UserCreateForm
from ....application.handlers.account_handler import AccountRequestHandler
from ...dependencies import get_account_handler

logger = logging.getLogger(__name__)

users_router = APIRouter(tags=["Account"])


@users_router.get("/user", summary="Own profile page")
async def get_self_page(
    current_user: CurrentUser = Depends(get_current_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    return to_response(await handler.get_self_page(current_user))


@users_router.post("/user", summary="Update own profile")
async def post_user_info(
    self_introduction: str = Form(..., alias="self-introduction"),
    file: Optional[UploadFile] = File(None),
    current_user: CurrentUser = Depends(get_current_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    uploaded = None
    if file is not None:
        uploaded = UploadedFile(
            filename=file.filename or "",
            content=await file.read(),
            content_type=file.content_type,
        )
    return to_response(await handler.update_profile(current_user, self_introduction, uploaded))


@users_router.get("/user/password", summary="Password change page")
async def get_password_page(
    current_user: CurrentUser = Depends(get_current_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    return to_response(handler.get_password_page())


@users_router.post("/user/password", summary="Change own password")
async def post_password_update(
    current_password: Optional[str] = Form(None, alias="current-password"),
    new_password: Optional[str] = Form(None, alias="new-password"),
    repeated_password: Optional[str] = Form(None, alias="repeated-password"),
    current_user: CurrentUser = Depends(get_current_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    form = PasswordChangeForm(
        current_password=current_password,
        new_password=new_password,
        repeated_password=repeated_password,
    )
    return to_response(await handler.change_password(current_user, form))


@users_router.get("/user/create", summary="Admin: new user form")
async def get_user_create_page(
    current_user: CurrentUser = Depends(get_current_admin_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    return to_response(handler.get_user_create_page(current_user))


@users_router.post("/user/create", summary="Admin: create user")
async def handle_user_create_form(
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    password_repeated: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    current_user: CurrentUser = Depends(get_current_admin_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    form = UserCreateForm(email=email, password=password, password_repeated=password_repeated, role=role)
    return to_response(await handler.create_user(current_user, form))


@users_router.get("/users", summary="Admin: list users")
async def list_users(
    current_user: CurrentUser = Depends(get_current_admin_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    return to_response(await handler.list_users(current_user))


@users_router.get("/user/{user_id}", summary="User page")
async def get_user_page(
    user_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: AccountRequestHandler = Depends(get_account_handler)
) -> Response:
    return to_response(await handler.get_user_page(current_user, user_id))
