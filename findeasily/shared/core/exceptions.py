# 📄 File: findeasily/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the site uses to say what went
# wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Request handlers, domain services, repositories, file storage, error handling middleware

from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status


class FindEasilyException(Exception):
    """
    Base exception class for the FindEasily application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(FindEasilyException):
    """
    Exception raised for authentication failures.
    Used when user credentials are invalid or missing.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(FindEasilyException):
    """
    Exception raised for authorization failures.
    Used when user lacks permission to access resources.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        required_permission: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        if required_permission:
            details["required_permission"] = required_permission
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class FormValidationError(FindEasilyException):
    """
    Exception raised when a submitted form fails validation.

    Carries every validation message (not only the first) so the caller
    can correct all fields in one round trip.
    """

    def __init__(
        self,
        errors: List[Dict[str, Any]],
        message: str = "Form validation failed",
        form: Optional[str] = None
    ):
        details: Dict[str, Any] = {"errors": errors}
        if form:
            details["form"] = form

        super().__init__(
            message=message,
            status_code=422,
            details=details,
            error_code="FORM_VALIDATION_ERROR"
        )

    @property
    def messages(self) -> List[str]:
        return [error["message"] for error in self.details["errors"]]


class NotFoundError(FindEasilyException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateResourceError(FindEasilyException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations, duplicate entries, etc.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class WebApplicationError(FindEasilyException):
    """
    Opaque server-side failure surfaced to the caller with a fixed message.
    """

    def __init__(
        self,
        message: str = "Something went wrong.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="WEB_APPLICATION_ERROR"
        )


class RepositoryError(FindEasilyException):
    """
    Exception raised for repository/persistence failures other than
    uniqueness violations.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity_type:
            details["entity_type"] = entity_type

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class FileStorageError(FindEasilyException):
    """
    Exception raised for file storage operation failures.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "FILE_STORAGE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if file_path:
            details["file_path"] = file_path
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class FileTooLargeError(FileStorageError):
    """Raised when an uploaded file exceeds the configured size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            message=f"File '{filename}' is too large ({size} bytes, limit {max_size} bytes)",
            operation="upload",
            status_code=413,
            error_code="FILE_TOO_LARGE",
            details={"filename": filename, "size": size, "max_size": max_size}
        )


class InvalidFileTypeError(FileStorageError):
    """Raised when an uploaded file is not an accepted image."""

    def __init__(self, filename: str, allowed_types: Optional[List[str]] = None):
        details: Dict[str, Any] = {"filename": filename}
        if allowed_types:
            details["allowed_types"] = allowed_types

        super().__init__(
            message=f"File '{filename}' is not an accepted image",
            operation="upload",
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            error_code="INVALID_FILE_TYPE",
            details=details
        )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def is_server_error(exception: Exception) -> bool:
    """Check whether an exception maps to a 5xx response."""
    if isinstance(exception, FindEasilyException):
        return exception.status_code >= 500
    if isinstance(exception, HTTPException):
        return exception.status_code >= 500
    return True
