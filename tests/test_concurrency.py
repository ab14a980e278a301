"""Concurrent account creation against the real database."""

import asyncio

from findeasily.modules.user_management.application.forms import UserCreateForm
from findeasily.modules.user_management.application.handlers import (
    AccountRequestHandler,
    RegistrationRequestHandler,
)
from findeasily.modules.user_management.domain.events.user_events import UserEventPublisher
from findeasily.modules.user_management.domain.services.current_user_service import CurrentUserService
from findeasily.modules.user_management.domain.services.token_service import TokenService
from findeasily.modules.user_management.domain.services.user_service import UserService
from findeasily.modules.user_management.infrastructure.database import (
    SQLAlchemyTokenRepository,
    SQLAlchemyUserRepository,
)
from findeasily.shared.core.exceptions import FormValidationError
from findeasily.shared.core.responses import Redirect, ViewModel
from findeasily.shared.core.security import get_password_encoder, get_security_manager


def _form(email: str) -> UserCreateForm:
    return UserCreateForm(email=email, password="secret", password_repeated="secret")


class TestDuplicateEmailRace:

    def test_concurrent_signups_one_wins(self, client):
        state = client.app.state

        async def signup():
            async with state.database.session() as session:
                handler = RegistrationRequestHandler(
                    user_service=UserService(SQLAlchemyUserRepository(session), get_password_encoder()),
                    token_service=TokenService(SQLAlchemyTokenRepository(session)),
                    password_encoder=get_password_encoder(),
                    user_event_publisher=UserEventPublisher(state.event_publisher),
                    security_manager=get_security_manager(),
                )
                try:
                    return await handler.register(_form("race@example.com"))
                except FormValidationError as e:
                    return e

        async def race():
            return await asyncio.gather(signup(), signup())

        results = client.portal.call(race)

        failures = [r for r in results if isinstance(r, FormValidationError)]
        assert len(failures) == 1
        assert failures[0].details["errors"] == [
            {"field": "email", "code": "email.exists", "message": "Email already exists"}
        ]
        assert [r.email for r in results if not isinstance(r, FormValidationError)] == ["race@example.com"]

    def test_concurrent_admin_creates_one_wins(self, client, make_caller):
        state = client.app.state
        admin = make_caller("root", admin=True)

        async def create():
            async with state.database.session() as session:
                handler = AccountRequestHandler(
                    user_service=UserService(SQLAlchemyUserRepository(session), get_password_encoder()),
                    current_user_service=CurrentUserService(),
                    password_encoder=get_password_encoder(),
                    file_service=state.file_service,
                )
                return await handler.create_user(admin, _form("admin-race@example.com"))

        async def race():
            return await asyncio.gather(create(), create())

        results = client.portal.call(race)

        assert [r for r in results if isinstance(r, Redirect)] == [Redirect("/users")]
        rejected = [r for r in results if isinstance(r, ViewModel)]
        assert len(rejected) == 1
        assert rejected[0].status_code == 422
        assert rejected[0].model["errors"][0]["field"] == "email"
