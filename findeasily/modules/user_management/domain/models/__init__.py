# 📄 File: findeasily/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data models - what we store about users, their profiles and their
# password reset codes
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models containing User, UserExt and Token entities with their enums
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, infrastructure layer

from .user import Role, User, UserExt
from .token import Token, TokenType, generate_token_value

__all__ = [
    "Role",
    "User",
    "UserExt",
    "Token",
    "TokenType",
    "generate_token_value",
]
