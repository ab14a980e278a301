# 📄 File: findeasily/modules/user_management/presentation/api/v1/public.py
# 🧭 Purpose (Layman Explanation):
# The web addresses anyone can use without signing in: creating an account, signing in, asking
# for a password reset email and choosing a new password.
#
# 🧪 Purpose (Technical Summary):
# Public FastAPI routes returning JSON. Sign up, sign in and reset requests are rate limited
# with slowapi. The password reset target is read from the signed session cookie set when the
# mailed link is opened.
#
# 🔗 Dependencies:
# - FastAPI router, Form binding, Starlette session
# - slowapi limiter (shared.core.rate_limiter)
# - user_management.presentation.dependencies (handler wiring)
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router (router inclusion)

"""
Public Account API Endpoints

Endpoints:
- POST /signup: Registration, returns the created user
- POST /login: Email/password sign in, returns a bearer token
- POST /password/forget/handler: Request a reset link
- GET  /password/reset: Open a reset link (stores it in the session)
- POST /password/reset/handler: Set the new password
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import Response

from findeasily.shared.core.rate_limiter import limiter, login_limit, password_reset_limit, signup_limit
from findeasily.shared.core.responses import to_response

from ....application.dto.user_dto import AccessTokenDto, UserDto
from ....application.forms import ForgetPasswordForm, ResetPasswordForm, UserCreateForm
from ....application.handlers.registration_handler import RegistrationRequestHandler
from ...dependencies import get_registration_handler

logger = logging.getLogger(__name__)

public_router = APIRouter(tags=["Public"])


@public_router.post(
    "/signup",
    response_model=UserDto,
    summary="Register new user account",
    responses={
        422: {"description": "Validation error or email already exists"},
        429: {"description": "Too many registration attempts"},
        500: {"description": "Account could not be created"},
    }
)
@limiter.limit(signup_limit)
async def post_registration(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    password_repeated: Optional[str] = Form(None),
    handler: RegistrationRequestHandler = Depends(get_registration_handler)
) -> UserDto:
    form = UserCreateForm(email=email, password=password, password_repeated=password_repeated)
    return await handler.register(form)


@public_router.post("/login", response_model=AccessTokenDto, summary="Sign in")
@limiter.limit(login_limit)
async def post_login(
    request: Request,
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    handler: RegistrationRequestHandler = Depends(get_registration_handler)
) -> AccessTokenDto:
    return await handler.login(email, password)


@public_router.post(
    "/password/forget/handler",
    summary="Request a password reset email",
    responses={404: {"description": "No account uses this email"}}
)
@limiter.limit(password_reset_limit)
async def post_forget_password_submit(
    request: Request,
    email: Optional[str] = Form(None),
    handler: RegistrationRequestHandler = Depends(get_registration_handler)
) -> Response:
    await handler.forget_password(ForgetPasswordForm(email=email))
    return Response(status_code=status.HTTP_200_OK)


@public_router.get("/password/reset", summary="Open a password reset link")
async def get_password_reset_page(
    request: Request,
    token: Optional[str] = None,
    handler: RegistrationRequestHandler = Depends(get_registration_handler)
) -> Response:
    return to_response(await handler.open_password_reset(token, request.session))


@public_router.post("/password/reset/handler", response_model=UserDto, summary="Set a new password")
async def post_reset_password_submit(
    request: Request,
    user_id: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    password_repeated: Optional[str] = Form(None),
    handler: RegistrationRequestHandler = Depends(get_registration_handler)
) -> UserDto:
    form = ResetPasswordForm(user_id=user_id, password=password, password_repeated=password_repeated)
    return await handler.reset_password(form, request.session)
