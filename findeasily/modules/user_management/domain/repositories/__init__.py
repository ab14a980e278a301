# 📄 File: findeasily/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the contracts for storing users and password reset codes
# 🧪 Purpose (Technical Summary):
# Repository interfaces of the user management domain
# 🔗 Dependencies:
# user_repository.py, token_repository.py
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .user_repository import UserRepository
from .token_repository import TokenRepository

__all__ = ["UserRepository", "TokenRepository"]
