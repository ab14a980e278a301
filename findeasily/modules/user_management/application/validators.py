# 📄 File: findeasily/modules/user_management/application/validators.py
# 🧭 Purpose (Layman Explanation):
# Checks the account forms before anything is saved - a valid email, no empty password boxes,
# and the two password boxes typed the same.
# 🧪 Purpose (Technical Summary):
# Stateless form validators returning ordered FieldError lists (every error, not only the first).
# 🔗 Dependencies:
# shared.utils.validators, application.forms, domain Role
# 🔄 Connected Modules / Calls From:
# Account and registration request handlers, tests

from typing import List

from findeasily.shared.utils.validators import (
    FieldError,
    FormValidator,
    is_blank,
    validate_email_address,
)

from ..domain.models.user import Role
from .forms import ForgetPasswordForm, ResetPasswordForm, UserCreateForm


def _check_email(email, errors: List[FieldError]) -> None:
    if is_blank(email):
        errors.append(FieldError("email", "email.required", "Email is required"))
        return
    if not validate_email_address(email):
        errors.append(FieldError("email", "email.invalid", "Email address is not valid"))


def _check_passwords(password, repeated, errors: List[FieldError], field: str = "password") -> None:
    if is_blank(password):
        errors.append(FieldError(field, "password.required", "Password is required"))
    if is_blank(repeated):
        errors.append(FieldError(f"{field}_repeated", "password_repeated.required", "Password confirmation is required"))
    if not is_blank(password) and not is_blank(repeated) and password != repeated:
        errors.append(FieldError(None, "password.no_match", "Passwords do not match"))


class UserCreateFormValidator(FormValidator):

    def validate(self, form: UserCreateForm) -> List[FieldError]:
        errors: List[FieldError] = []
        _check_email(form.email, errors)
        _check_passwords(form.password, form.password_repeated, errors)
        if not is_blank(form.role) and form.role.strip().upper() not in Role.values():
            errors.append(FieldError("role", "role.invalid", f"Role must be one of: {', '.join(Role.values())}"))
        return errors


class ForgetPasswordFormValidator(FormValidator):

    def validate(self, form: ForgetPasswordForm) -> List[FieldError]:
        errors: List[FieldError] = []
        _check_email(form.email, errors)
        return errors


class ResetPasswordFormValidator(FormValidator):

    def validate(self, form: ResetPasswordForm) -> List[FieldError]:
        errors: List[FieldError] = []
        _check_passwords(form.password, form.password_repeated, errors)
        return errors
