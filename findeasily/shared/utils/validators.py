# 📄 File: findeasily/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Small checkers that make sure data typed into forms is usable, like verifying
# an email address looks right or a text box is not left empty.
# 🧪 Purpose (Technical Summary):
# Reusable, side-effect-free validation primitives (blank checks, email syntax,
# numeric ranges, filename sanitizing) used by the form validators of every module.
# 🔗 Dependencies:
# re, typing, decimal, email-validator
# 🔄 Connected Modules / Calls From:
# user_management.application.validators, listing_management.application.validators,
# shared.infrastructure.storage.file_manager

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from email_validator import validate_email, EmailNotValidError

SAFE_FILENAME_PATTERN = re.compile(r'[^A-Za-z0-9._-]')


class ValidationResult:
    """Outcome of a single validation check."""

    def __init__(self, is_valid: bool = True, error_message: Optional[str] = None, normalized: Any = None):
        self.is_valid = is_valid
        self.error_message = error_message
        self.normalized = normalized

    def __bool__(self) -> bool:
        return self.is_valid


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    return value is None or not str(value).strip()


def is_any_blank(*values: Optional[str]) -> bool:
    return any(is_blank(value) for value in values)


def validate_email_address(email: Optional[str]) -> ValidationResult:
    """
    Validate email syntax without a deliverability (DNS) lookup.

    Args:
        email: Email address to validate

    Returns:
        ValidationResult: normalized address on success
    """
    if is_blank(email):
        return ValidationResult(False, "Email is required")

    try:
        info = validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError as e:
        return ValidationResult(False, str(e))

    return ValidationResult(True, normalized=info.normalized)


def validate_decimal(
    value: Optional[str],
    min_value: Optional[Decimal] = None,
    max_value: Optional[Decimal] = None,
) -> ValidationResult:
    """Validate an optional decimal string, blank is accepted."""
    if is_blank(value):
        return ValidationResult(True, normalized=None)

    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return ValidationResult(False, f"'{value}' is not a number")

    if not number.is_finite():
        return ValidationResult(False, f"'{value}' is not a number")
    if min_value is not None and number < min_value:
        return ValidationResult(False, f"Value must be at least {min_value}")
    if max_value is not None and number > max_value:
        return ValidationResult(False, f"Value must be at most {max_value}")

    return ValidationResult(True, normalized=number)


def validate_integer(
    value: Optional[str],
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> ValidationResult:
    """Validate an optional integer string, blank is accepted."""
    if is_blank(value):
        return ValidationResult(True, normalized=None)

    try:
        number = int(str(value).strip())
    except ValueError:
        return ValidationResult(False, f"'{value}' is not a whole number")

    if min_value is not None and number < min_value:
        return ValidationResult(False, f"Value must be at least {min_value}")
    if max_value is not None and number > max_value:
        return ValidationResult(False, f"Value must be at most {max_value}")

    return ValidationResult(True, normalized=number)


def sanitize_filename(filename: str) -> str:
    """Strip directory parts and unsafe characters from an uploaded filename."""
    name = filename.replace('\\', '/').split('/')[-1]
    name = SAFE_FILENAME_PATTERN.sub('_', name).strip('._')
    return name or 'file'


@dataclass(frozen=True)
class FieldError:
    """
    One validation error.

    ``field`` is None for errors about the form as a whole.
    """
    field: Optional[str]
    code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "code": self.code, "message": self.message}


class FormValidator(ABC):
    """Stateless validator for one form type."""

    @abstractmethod
    def validate(self, form: Any) -> List[FieldError]:
        """Return every error of the form in field order, empty when valid."""


def errors_to_dicts(errors: List[FieldError]) -> List[Dict[str, Any]]:
    return [error.to_dict() for error in errors]
