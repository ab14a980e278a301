# 📄 File: findeasily/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the helpers that wrap every request: the request diary and the error replies.
# 🧪 Purpose (Technical Summary):
# Middleware package exports.

from .error_handling import create_error_response, register_exception_handlers
from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "create_error_response",
    "register_exception_handlers",
]
