# 📄 File: findeasily/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the user account system: signing up and in, profile pages, password change and
# forgotten-password resets
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (domain, application, infrastructure,
# presentation layers)
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, passlib, python-jose
# 🔄 Connected Modules / Calls From:
# findeasily.main, findeasily.api.v1.router, listing_management (authorization predicates)

"""
User Management Module

- Registration, sign in and admin account creation
- Profile (self introduction, picture) management
- Password change and email-based password reset
- Account events and their mail notifications

Architecture follows Domain-Driven Design:
- Domain: Entities, services, repository interfaces and events
- Application: Forms, validators, DTOs and request handlers
- Infrastructure: SQLAlchemy persistence and outbound mail
- Presentation: FastAPI routers and dependency wiring
"""

__version__ = "1.0.0"
