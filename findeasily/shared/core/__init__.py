"""
Core utilities package for FindEasily.
Provides security helpers, the exception hierarchy and request dependencies.

Dependencies live in ``findeasily.shared.core.dependencies`` and are imported
from there directly, since they reach into the infrastructure packages.
"""

from .security import (
    create_access_token,
    verify_token,
    PasswordEncoder,
    SecurityManager,
    get_security_manager,
    get_password_encoder
)

from .exceptions import (
    FindEasilyException,
    AuthenticationError,
    AuthorizationError,
    FormValidationError,
    NotFoundError,
    DuplicateResourceError,
    WebApplicationError,
    RepositoryError,
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError
)

__all__ = [
    "create_access_token",
    "verify_token",
    "PasswordEncoder",
    "SecurityManager",
    "get_security_manager",
    "get_password_encoder",
    "FindEasilyException",
    "AuthenticationError",
    "AuthorizationError",
    "FormValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "WebApplicationError",
    "RepositoryError",
    "FileStorageError",
    "FileTooLargeError",
    "InvalidFileTypeError",
]
