# 📄 File: findeasily/modules/user_management/application/forms.py
# 🧭 Purpose (Layman Explanation):
# The paper forms people fill in on the site - sign-up, forgot password, reset password and
# change password - as simple containers that hold exactly what was typed.
# 🧪 Purpose (Technical Summary):
# Request-scoped form value objects bound from form-encoded request parameters. Every field is
# optional at binding time so that all problems are reported by the form validators.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# application.validators, application.handlers, presentation.api routers

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=False, extra="ignore")

    def to_view(self) -> Dict[str, Any]:
        """Form values safe to send back when the form is redisplayed."""
        return self.model_dump(exclude={name for name in type(self).model_fields if "password" in name})


class UserCreateForm(_Form):
    email: Optional[str] = None
    password: Optional[str] = None
    password_repeated: Optional[str] = None
    role: Optional[str] = None

    def __repr__(self) -> str:
        # passwords stay out of logs
        return f"UserCreateForm(email={self.email!r}, role={self.role!r})"


class ForgetPasswordForm(_Form):
    email: Optional[str] = None


class ResetPasswordForm(_Form):
    """
    New password for the account held in the server-side session.

    ``user_id`` may be posted by the client but is never used to pick the account.
    """
    user_id: Optional[str] = None
    password: Optional[str] = None
    password_repeated: Optional[str] = None

    def __repr__(self) -> str:
        return f"ResetPasswordForm(user_id={self.user_id!r})"


class PasswordChangeForm(_Form):
    current_password: Optional[str] = None
    new_password: Optional[str] = None
    repeated_password: Optional[str] = None

    def __repr__(self) -> str:
        return "PasswordChangeForm(***)"
