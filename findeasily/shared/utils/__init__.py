# 📄 File: findeasily/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the site
# use for common tasks like logging and checking form input.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package with structured logging and validation helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Data validation functions

# 🔄 Connected Modules / Calls From:
# Used by: All application modules

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Form field validation primitives
"""

from .logging import get_logger, setup_logging, log_context
from .validators import ValidationResult, is_blank, is_any_blank, validate_email_address

__all__ = [
    "get_logger",
    "setup_logging",
    "log_context",
    "ValidationResult",
    "is_blank",
    "is_any_blank",
    "validate_email_address",
]
