# 📄 File: findeasily/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core business rules for user accounts - what a user is, who may see what, and
# what happens when an account changes
# 🧪 Purpose (Technical Summary):
# Domain layer containing entities, domain services, repository interfaces and domain events
# 🔗 Dependencies:
# Domain models, services, repositories, events from subpackages
# 🔄 Connected Modules / Calls From:
# Application layer, Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Domain Models: User, UserExt, Token
Domain Services: UserService, TokenService, CurrentUserService
Repository Interfaces: UserRepository, TokenRepository
Domain Events: UserEvent (ACCOUNT_CONFIRMATION, PASSWORD_RESET_REQUEST, PASSWORD_RESET_COMPLETE)
"""
