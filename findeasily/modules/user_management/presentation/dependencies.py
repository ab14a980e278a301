# 📄 File: findeasily/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# This file puts together, for every request, the pieces the account pages need - the database
# helpers, the user and token services and the request handlers.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependency providers wiring repositories, domain services, the event
# publisher facade and the request handlers per request. Tests override these via
# app.dependency_overrides.
# 🔗 Dependencies:
# FastAPI Depends, shared.core.dependencies, user_management layers
# 🔄 Connected Modules / Calls From:
# user_management.presentation.api.v1.*, listing_management.presentation.dependencies

"""
User Management Module Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from findeasily.shared.config.settings import Settings
from findeasily.shared.core.dependencies import (
    get_db_session,
    get_event_publisher,
    get_file_service,
    get_password_encoder,
    get_settings_dep,
)
from findeasily.shared.core.security import PasswordEncoder, get_security_manager
from findeasily.shared.events.publisher import EventPublisher
from findeasily.shared.infrastructure.storage.file_manager import FileService

from ..application.handlers.account_handler import AccountRequestHandler
from ..application.handlers.registration_handler import RegistrationRequestHandler
from ..domain.events.user_events import UserEventPublisher
from ..domain.repositories.token_repository import TokenRepository
from ..domain.repositories.user_repository import UserRepository
from ..domain.services.current_user_service import CurrentUserService
from ..domain.services.token_service import TokenService
from ..domain.services.user_service import UserService
from ..infrastructure.database.token_repository_impl import SQLAlchemyTokenRepository
from ..infrastructure.database.user_repository_impl import SQLAlchemyUserRepository


# =========================================================================
# REPOSITORIES AND SERVICES
# =========================================================================

def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_token_repository(session: AsyncSession = Depends(get_db_session)) -> TokenRepository:
    return SQLAlchemyTokenRepository(session)


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_encoder: PasswordEncoder = Depends(get_password_encoder)
) -> UserService:
    return UserService(user_repository, password_encoder)


def get_token_service(
    token_repository: TokenRepository = Depends(get_token_repository),
    settings: Settings = Depends(get_settings_dep)
) -> TokenService:
    return TokenService(token_repository, expire_hours=settings.PASSWORD_RESET_TOKEN_EXPIRE_HOURS)


def get_user_event_publisher(publisher: EventPublisher = Depends(get_event_publisher)) -> UserEventPublisher:
    return UserEventPublisher(publisher)


def get_current_user_service() -> CurrentUserService:
    """Predicates for user pages; listing checks are wired by the listing module."""
    return CurrentUserService()


# =========================================================================
# REQUEST HANDLERS
# =========================================================================

def get_account_handler(
    user_service: UserService = Depends(get_user_service),
    current_user_service: CurrentUserService = Depends(get_current_user_service),
    password_encoder: PasswordEncoder = Depends(get_password_encoder),
    file_service: FileService = Depends(get_file_service)
) -> AccountRequestHandler:
    return AccountRequestHandler(
        user_service=user_service,
        current_user_service=current_user_service,
        password_encoder=password_encoder,
        file_service=file_service,
    )


def get_registration_handler(
    user_service: UserService = Depends(get_user_service),
    token_service: TokenService = Depends(get_token_service),
    password_encoder: PasswordEncoder = Depends(get_password_encoder),
    user_event_publisher: UserEventPublisher = Depends(get_user_event_publisher),
    settings: Settings = Depends(get_settings_dep)
) -> RegistrationRequestHandler:
    return RegistrationRequestHandler(
        user_service=user_service,
        token_service=token_service,
        password_encoder=password_encoder,
        user_event_publisher=user_event_publisher,
        security_manager=get_security_manager(),
        revoke_all_reset_tokens=settings.PASSWORD_RESET_REVOKE_ALL_TOKENS,
    )
