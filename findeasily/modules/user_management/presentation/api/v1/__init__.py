# 📄 File: findeasily/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file collects the account web addresses in one place.
#
# 🧪 Purpose (Technical Summary):
# Router exports for the user management endpoints.
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router

from .public import public_router
from .users import users_router

__all__ = [
    "public_router",
    "users_router",
]
