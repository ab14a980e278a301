# 📄 File: findeasily/modules/user_management/application/handlers/registration_handler.py
# 🧭 Purpose (Layman Explanation):
# The front desk for visitors who are not signed in: signing up, signing in, asking for a
# password reset link, and choosing a new password from that link.
#
# 🧪 Purpose (Technical Summary):
# Public registration / password reset request handler. Validates forms, calls the user and token
# services, publishes user events to the outbound queue, and reads the reset target exclusively
# from the server-side session passed in by the caller.
#
# 🔗 Dependencies:
# - UserService, TokenService, PasswordEncoder, SecurityManager
# - UserEventPublisher
# - Form validators
#
# 🔄 Connected Modules / Calls From:
# - user_management.presentation.api.v1.public (/signup, /login, /password/...)

import logging
from typing import Any, MutableMapping, Optional

from findeasily.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    FormValidationError,
    NotFoundError,
    WebApplicationError
)
from findeasily.shared.core.responses import ViewModel
from findeasily.shared.core.security import PasswordEncoder, SecurityManager
from findeasily.shared.utils.validators import FieldError, errors_to_dicts

from ...domain.events.user_events import UserEventPublisher, UserEventType
from ...domain.models.user import Role
from ...domain.services.token_service import TokenService
from ...domain.services.user_service import UserService
from ..dto.user_dto import AccessTokenDto, UserDto
from ..forms import ForgetPasswordForm, ResetPasswordForm, UserCreateForm
from ..validators import ForgetPasswordFormValidator, ResetPasswordFormValidator, UserCreateFormValidator

logger = logging.getLogger(__name__)

SESSION_USER_ID_KEY = "user_id"
SESSION_TOKEN_ID_KEY = "token_id"

NO_ACCOUNT_FOR_EMAIL = "There is no existing user account associated with this email address"


class RegistrationRequestHandler:
    """
    Handles the public account endpoints.

    Args:
        revoke_all_reset_tokens: After a successful reset, also delete every
            other outstanding reset token of the user
    """

    def __init__(
        self,
        user_service: UserService,
        token_service: TokenService,
        password_encoder: PasswordEncoder,
        user_event_publisher: UserEventPublisher,
        security_manager: SecurityManager,
        revoke_all_reset_tokens: bool = True
    ):
        self.user_service = user_service
        self.token_service = token_service
        self.password_encoder = password_encoder
        self.user_event_publisher = user_event_publisher
        self.security_manager = security_manager
        self.revoke_all_reset_tokens = revoke_all_reset_tokens

        self.user_create_form_validator = UserCreateFormValidator()
        self.forget_password_form_validator = ForgetPasswordFormValidator()
        self.reset_password_form_validator = ResetPasswordFormValidator()

    # =========================================================================
    # SIGN UP / SIGN IN
    # =========================================================================

    async def register(self, form: UserCreateForm) -> UserDto:
        """
        Create an account and queue the confirmation mail.

        Raises:
            FormValidationError: With every validation message, or the
                "Email already exists" field error
            WebApplicationError: If the account could not be created
        """
        logger.debug(f"Processing user create form={form!r}")
        self._raise_if_invalid(self.user_create_form_validator.validate(form), "user_create")

        try:
            # public sign-up never grants more than USER
            user = await self.user_service.create(form.email, form.password, Role.USER)
        except DuplicateResourceError:
            logger.warning(f"Registration rejected, email already exists: {form.email}")
            raise FormValidationError(
                errors_to_dicts([FieldError("email", "email.exists", "Email already exists")]),
                form="user_create"
            )

        if user is None:
            raise WebApplicationError("Failed to create new user")

        self.user_event_publisher.publish(UserEventType.ACCOUNT_CONFIRMATION, user)
        return UserDto.from_user(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AccessTokenDto:
        user = await self.user_service.authenticate(email or "", password or "")
        if user is None:
            logger.info(f"Failed sign in for {email}")
            raise AuthenticationError("Invalid email or password")

        token = self.security_manager.create_access_token(
            self.security_manager.create_user_token_data(user.id, user.email, user.roles)
        )
        return AccessTokenDto(
            access_token=token,
            expires_in=self.security_manager.access_token_expire_minutes * 60,
            user=UserDto.from_user(user),
        )

    # =========================================================================
    # PASSWORD RESET
    # =========================================================================

    async def forget_password(self, form: ForgetPasswordForm) -> None:
        """
        Queue a password reset mail for a known address.

        Raises:
            NotFoundError: If no account uses the address
        """
        logger.debug(f"Processing forget password. Email={form.email}")
        self._raise_if_invalid(self.forget_password_form_validator.validate(form), "forget_password")

        user = await self.user_service.get_user_by_email(form.email)
        if user is None:
            raise NotFoundError(NO_ACCOUNT_FOR_EMAIL, resource_type="user")

        self.user_event_publisher.publish(UserEventType.PASSWORD_RESET_REQUEST, user)

    async def open_password_reset(self, token_value: Optional[str], session: MutableMapping[str, Any]) -> ViewModel:
        """
        Check a mailed reset link and remember its user and token in the session.

        Raises:
            NotFoundError: If the token is unknown or expired
        """
        token = await self.token_service.get_valid_token(token_value)
        if token is None:
            session.pop(SESSION_USER_ID_KEY, None)
            session.pop(SESSION_TOKEN_ID_KEY, None)
            raise NotFoundError("Password reset link is invalid or has expired", resource_type="token")

        session[SESSION_USER_ID_KEY] = token.user_id
        session[SESSION_TOKEN_ID_KEY] = token.id
        return ViewModel(view="user/password_reset", model={"form": ResetPasswordForm().to_view()})

    async def reset_password(self, form: ResetPasswordForm, session: MutableMapping[str, Any]) -> UserDto:
        """
        Set a new password for the account remembered in the session.

        The user id posted with the form is ignored.

        Raises:
            FormValidationError: If the passwords are missing or differ
            WebApplicationError: If the session does not hold a usable reset
        """
        logger.debug(f"Processing reset password. form={form!r}")
        self._raise_if_invalid(self.reset_password_form_validator.validate(form), "reset_password")

        user_id = session.get(SESSION_USER_ID_KEY)
        token_id = self._session_token_id(session)
        user = await self.user_service.get_user_by_id(str(user_id)) if user_id else None
        if user is None or token_id is None:
            logger.warning("Password reset submitted without a reset session")
            raise WebApplicationError()

        token = await self.token_service.get_by_id(token_id)
        if token is None or token.user_id != user.id or token.is_expired():
            logger.warning(f"Password reset token {token_id} of user {user.id} is no longer valid")
            raise WebApplicationError()

        user.password_hash = self.password_encoder.encode(form.password)
        if not await self.user_service.update_by_id(user):
            raise WebApplicationError()

        self.user_event_publisher.publish(UserEventType.PASSWORD_RESET_COMPLETE, user)

        deleted = await self.token_service.delete_by_id(token_id)
        logger.debug(f"token {token_id} has been deleted: {deleted}")
        if self.revoke_all_reset_tokens:
            await self.token_service.delete_all_for_user(user.id)

        session.pop(SESSION_USER_ID_KEY, None)
        session.pop(SESSION_TOKEN_ID_KEY, None)
        return UserDto.from_user(user)

    @staticmethod
    def _session_token_id(session: MutableMapping[str, Any]) -> Optional[int]:
        raw = session.get(SESSION_TOKEN_ID_KEY)
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _raise_if_invalid(errors, form_name: str) -> None:
        if errors:
            logger.debug(f"{form_name} form rejected with {len(errors)} errors")
            raise FormValidationError(errors_to_dicts(errors), form=form_name)
