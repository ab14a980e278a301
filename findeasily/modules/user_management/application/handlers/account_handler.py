# 📄 File: findeasily/modules/user_management/application/handlers/account_handler.py
# 🧭 Purpose (Layman Explanation):
# Everything a signed-in person does with their own account: looking at profile pages, changing
# the bio and picture, changing the password, and (for admins) adding new accounts.
#
# 🧪 Purpose (Technical Summary):
# Account request handler. Each operation runs bind -> validate -> authorize -> service call ->
# result mapping, taking the caller identity explicitly and returning a ViewModel or Redirect.
#
# 🔗 Dependencies:
# - UserService, CurrentUserService, PasswordEncoder, FileService
# - UserCreateFormValidator
#
# 🔄 Connected Modules / Calls From:
# - user_management.presentation.api.v1.users (routes under /user)

import logging
from typing import Optional

from findeasily.shared.core.dependencies import CurrentUser
from findeasily.shared.core.exceptions import AuthorizationError, DuplicateResourceError, NotFoundError, WebApplicationError
from findeasily.shared.core.responses import HandlerResult, Redirect, ToastrMessage, ViewModel
from findeasily.shared.core.security import PasswordEncoder
from findeasily.shared.infrastructure.storage.file_manager import FileService, UploadedFile
from findeasily.shared.utils.validators import FieldError, errors_to_dicts, is_any_blank

from ...domain.models.user import Role, UserExt
from ...domain.services.current_user_service import CurrentUserService
from ...domain.services.user_service import UserService
from ..dto.user_dto import UserDetailDto, UserExtDto
from ..forms import PasswordChangeForm, UserCreateForm
from ..validators import UserCreateFormValidator

logger = logging.getLogger(__name__)

PASSWORD_FIELDS_REQUIRED = "invalid request: current password, new password and password confirmation must be provided"
PASSWORDS_NOT_MATCHED = "new passwords are not matched"
CURRENT_PASSWORD_NOT_MATCHED = "Current password is not matched"
PASSWORD_UPDATED = "Password is updated successfully"
EMAIL_EXISTS = FieldError("email", "email.exists", "Email already exists")


class AccountRequestHandler:
    """
    Handles the signed-in account pages.
    """

    def __init__(
        self,
        user_service: UserService,
        current_user_service: CurrentUserService,
        password_encoder: PasswordEncoder,
        file_service: FileService,
        user_create_form_validator: Optional[UserCreateFormValidator] = None
    ):
        self.user_service = user_service
        self.current_user_service = current_user_service
        self.password_encoder = password_encoder
        self.file_service = file_service
        self.user_create_form_validator = user_create_form_validator or UserCreateFormValidator()

    # =========================================================================
    # PROFILE PAGES
    # =========================================================================

    async def get_user_page(self, caller: CurrentUser, user_id: str) -> ViewModel:
        """
        Another user's page.

        Raises:
            AuthorizationError: If the caller may not access this user
            NotFoundError: If the user does not exist
        """
        if not self.current_user_service.can_access_user(caller, user_id):
            raise AuthorizationError(
                resource_type="user",
                resource_id=user_id,
                user_id=caller.user_id if caller else None
            )

        logger.debug(f"Getting user page for user={user_id}")
        user = await self.user_service.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User={user_id} not found", resource_type="user", resource_id=user_id)

        return ViewModel(view="user/user", model={"user": UserDetailDto.from_user(user).model_dump()})

    async def get_self_page(self, caller: CurrentUser) -> ViewModel:
        user_ext = await self.user_service.get_user_ext(caller.user_id) or UserExt()
        return ViewModel(view="user/user", model={"user_ext": UserExtDto.from_user_ext(user_ext).model_dump()})

    async def update_profile(
        self,
        caller: CurrentUser,
        self_introduction: Optional[str],
        file: Optional[UploadedFile] = None
    ) -> Redirect:
        """
        Store an optional new picture, then the bio.

        Nothing is persisted when storing the picture fails.
        """
        picture = None
        if file is not None and not file.is_empty:
            picture = await self.file_service.store_user_picture(caller.user_id, file.filename, file.content)

        await self.user_service.update_self_intro(caller.user_id, self_introduction, picture=picture)
        return Redirect("/user")

    # =========================================================================
    # PASSWORD CHANGE
    # =========================================================================

    def get_password_page(self) -> ViewModel:
        return ViewModel(view="user/password")

    async def change_password(self, caller: CurrentUser, form: PasswordChangeForm) -> ViewModel:
        """
        Change the caller's password.

        The first failing check is reported and nothing is written.
        """
        if is_any_blank(form.current_password, form.new_password, form.repeated_password):
            return self._password_error(PASSWORD_FIELDS_REQUIRED)

        if form.new_password != form.repeated_password:
            return self._password_error(PASSWORDS_NOT_MATCHED)

        user = await self.user_service.get_user_by_id(caller.user_id)
        if user is None or not self.password_encoder.matches(form.current_password, user.password_hash):
            return self._password_error(CURRENT_PASSWORD_NOT_MATCHED)

        if not await self.user_service.update_password(caller.user_id, form.new_password):
            raise WebApplicationError("Failed to update password")

        return ViewModel(view="user/password", toastr=ToastrMessage.success(PASSWORD_UPDATED))

    @staticmethod
    def _password_error(message: str) -> ViewModel:
        return ViewModel(
            view="user/password",
            toastr=ToastrMessage.error(message),
            status_code=422
        )

    # =========================================================================
    # ADMIN
    # =========================================================================

    def get_user_create_page(self, caller: CurrentUser) -> ViewModel:
        self._require_admin(caller)
        logger.debug("Getting user create form")
        return ViewModel(view="user/user_create", model={"form": UserCreateForm().to_view(), "errors": []})

    async def create_user(self, caller: CurrentUser, form: UserCreateForm) -> HandlerResult:
        """
        Admin-only account creation.

        Validation errors and a duplicate email redisplay the form.
        """
        self._require_admin(caller)
        logger.debug(f"Processing user create form={form!r}")

        errors = self.user_create_form_validator.validate(form)
        if errors:
            return self._user_create_form(form, errors)

        role = Role(form.role.strip().upper()) if form.role and form.role.strip() else Role.USER
        try:
            user = await self.user_service.create(form.email, form.password, role)
        except DuplicateResourceError:
            # two admins adding the same email at once, both passed validation
            logger.warning(f"Duplicate email when creating user {form.email}, rejecting form")
            return self._user_create_form(form, [EMAIL_EXISTS])

        if user is None:
            raise WebApplicationError("Failed to create new user")

        logger.info(f"Admin {caller.user_id} created user {user.id}")
        return Redirect("/users")

    async def list_users(self, caller: CurrentUser) -> ViewModel:
        self._require_admin(caller)
        users = await self.user_service.list_users()
        return ViewModel(
            view="user/users",
            model={"users": [UserDetailDto.from_user(user).model_dump() for user in users]}
        )

    @staticmethod
    def _user_create_form(form: UserCreateForm, errors) -> ViewModel:
        return ViewModel(
            view="user/user_create",
            model={"form": form.to_view(), "errors": errors_to_dicts(errors)},
            status_code=422
        )

    @staticmethod
    def _require_admin(caller: Optional[CurrentUser]) -> None:
        if caller is None or not caller.is_admin():
            raise AuthorizationError(
                "Admin privileges required for this action",
                required_permission=Role.ADMIN.value,
                user_id=caller.user_id if caller else None
            )
