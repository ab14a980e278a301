"""Tests for the signed-in account request handler."""

from unittest.mock import AsyncMock

import pytest

from findeasily.modules.user_management.application.forms import PasswordChangeForm, UserCreateForm
from findeasily.modules.user_management.application.handlers.account_handler import (
    CURRENT_PASSWORD_NOT_MATCHED,
    PASSWORD_FIELDS_REQUIRED,
    PASSWORD_UPDATED,
    PASSWORDS_NOT_MATCHED,
    AccountRequestHandler,
)
from findeasily.modules.user_management.domain.models.user import Role
from findeasily.modules.user_management.domain.services.current_user_service import CurrentUserService
from findeasily.shared.core.exceptions import AuthorizationError, FileStorageError, NotFoundError
from findeasily.shared.core.responses import Redirect, ViewModel
from findeasily.shared.infrastructure.storage.file_manager import UploadedFile


@pytest.fixture
def file_service():
    service = AsyncMock()
    service.store_user_picture.return_value = "users/u/picture.png"
    return service


@pytest.fixture
def handler(user_service, password_encoder, file_service):
    return AccountRequestHandler(
        user_service=user_service,
        current_user_service=CurrentUserService(),
        password_encoder=password_encoder,
        file_service=file_service,
    )


@pytest.fixture
async def alice(user_service):
    return await user_service.create("alice@example.com", "old-password")


# ============================================================================
# Profile pages
# ============================================================================

class TestUserPages:

    async def test_other_user_page_denied_before_lookup(self, handler, alice, make_caller, user_repository):
        user_repository.get_by_id = AsyncMock()
        with pytest.raises(AuthorizationError):
            await handler.get_user_page(make_caller("someone-else"), alice.id)
        user_repository.get_by_id.assert_not_called()

    async def test_own_page(self, handler, alice, make_caller):
        result = await handler.get_user_page(make_caller(alice.id), alice.id)
        assert isinstance(result, ViewModel)
        assert result.model["user"]["email"] == "alice@example.com"
        assert "password_hash" not in result.model["user"]

    async def test_admin_unknown_user_is_not_found(self, handler, make_caller):
        with pytest.raises(NotFoundError) as exc_info:
            await handler.get_user_page(make_caller("root", admin=True), "nope")
        assert exc_info.value.message == "User=nope not found"

    async def test_self_page_defaults_to_empty_profile(self, handler, alice, make_caller):
        result = await handler.get_self_page(make_caller(alice.id))
        assert result.model["user_ext"] == {"user_id": None, "self_introduction": None, "picture": None}


class TestUpdateProfile:

    async def test_picture_stored_before_text(self, handler, alice, make_caller, file_service, user_repository):
        file = UploadedFile(filename="me.png", content=b"png-bytes")
        result = await handler.update_profile(make_caller(alice.id), "Hello there", file)

        assert result == Redirect("/user")
        file_service.store_user_picture.assert_awaited_once_with(alice.id, "me.png", b"png-bytes")
        ext = user_repository.exts[alice.id]
        assert ext.self_introduction == "Hello there"
        assert ext.picture == "users/u/picture.png"

    async def test_empty_file_is_ignored(self, handler, alice, make_caller, file_service, user_repository):
        await handler.update_profile(make_caller(alice.id), "Bio", UploadedFile(filename="", content=b""))
        file_service.store_user_picture.assert_not_called()
        assert user_repository.exts[alice.id].picture is None

    async def test_failed_storage_persists_nothing(self, handler, alice, make_caller, file_service, user_repository):
        file_service.store_user_picture.side_effect = FileStorageError("disk full")
        with pytest.raises(FileStorageError):
            await handler.update_profile(make_caller(alice.id), "Bio", UploadedFile("me.png", b"x"))
        assert alice.id not in user_repository.exts


# ============================================================================
# Password change
# ============================================================================

class TestChangePassword:

    @pytest.mark.parametrize("form", [
        PasswordChangeForm(),
        PasswordChangeForm(current_password="old-password", new_password="new"),
        PasswordChangeForm(current_password=" ", new_password="new", repeated_password="new"),
    ])
    async def test_blank_fields_leave_hash_unchanged(self, handler, alice, make_caller, user_repository, form):
        before = user_repository.users[alice.id].password_hash

        result = await handler.change_password(make_caller(alice.id), form)

        assert result.toastr.type == "error"
        assert result.toastr.message == PASSWORD_FIELDS_REQUIRED
        assert result.status_code == 422
        assert user_repository.users[alice.id].password_hash == before
        assert "update_password_hash" not in user_repository.writes

    async def test_mismatch_makes_no_persistence_call(self, handler, alice, make_caller, user_repository):
        user_repository.update_password_hash = AsyncMock()
        form = PasswordChangeForm(current_password="old-password", new_password="a", repeated_password="b")

        result = await handler.change_password(make_caller(alice.id), form)

        assert result.toastr.message == PASSWORDS_NOT_MATCHED
        user_repository.update_password_hash.assert_not_called()

    async def test_wrong_current_password(self, handler, alice, make_caller, user_repository):
        form = PasswordChangeForm(current_password="guess", new_password="n", repeated_password="n")
        result = await handler.change_password(make_caller(alice.id), form)
        assert result.toastr.message == CURRENT_PASSWORD_NOT_MATCHED
        assert "update_password_hash" not in user_repository.writes

    async def test_success(self, handler, alice, make_caller, user_repository, password_encoder):
        form = PasswordChangeForm(current_password="old-password", new_password="fresh", repeated_password="fresh")

        result = await handler.change_password(make_caller(alice.id), form)

        assert result.toastr.type == "success"
        assert result.toastr.message == PASSWORD_UPDATED
        assert result.status_code == 200
        assert password_encoder.matches("fresh", user_repository.users[alice.id].password_hash)


# ============================================================================
# Admin user creation
# ============================================================================

class TestCreateUser:

    def test_create_page_requires_admin(self, handler, make_caller):
        with pytest.raises(AuthorizationError):
            handler.get_user_create_page(make_caller("u1"))

    async def test_non_admin_rejected_before_validation(self, handler, make_caller, user_repository):
        with pytest.raises(AuthorizationError):
            await handler.create_user(make_caller("u1"), UserCreateForm())
        assert user_repository.writes == []

    async def test_validation_errors_redisplay_form(self, handler, make_caller):
        form = UserCreateForm(email="bad", password="x", password_repeated="y")
        result = await handler.create_user(make_caller("root", admin=True), form)

        assert result.view == "user/user_create"
        assert result.status_code == 422
        assert [e["code"] for e in result.model["errors"]] == ["email.invalid", "password.no_match"]
        assert "password" not in result.model["form"]

    async def test_duplicate_email_becomes_email_field_error(self, handler, alice, make_caller, caplog):
        form = UserCreateForm(email="ALICE@example.com", password="x", password_repeated="x")

        with caplog.at_level("WARNING"):
            result = await handler.create_user(make_caller("root", admin=True), form)

        assert result.model["errors"] == [
            {"field": "email", "code": "email.exists", "message": "Email already exists"}
        ]
        assert any(record.levelname == "WARNING" for record in caplog.records)

    async def test_success_redirects_to_user_list(self, handler, make_caller, user_repository):
        form = UserCreateForm(email="bob@example.com", password="x", password_repeated="x", role="admin")
        result = await handler.create_user(make_caller("root", admin=True), form)

        assert result == Redirect("/users")
        created = [u for u in user_repository.users.values() if u.email == "bob@example.com"]
        assert created[0].role == Role.ADMIN

    async def test_list_users(self, handler, alice, make_caller):
        result = await handler.list_users(make_caller("root", admin=True))
        assert [u["email"] for u in result.model["users"]] == ["alice@example.com"]
