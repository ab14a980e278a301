# 📄 File: findeasily/modules/user_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the application layer for user accounts: the forms people submit, the
# checks run on them, and the handlers that carry out each request.
#
# 🧪 Purpose (Technical Summary):
# Application layer with request-scoped forms, stateless form validators, DTOs and request
# handlers orchestrating the domain services.
#
# 🔄 Connected Modules / Calls From:
# - findeasily.modules.user_management.presentation (routers call the handlers)
