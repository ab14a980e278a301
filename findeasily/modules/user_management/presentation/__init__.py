# 📄 File: findeasily/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the web addresses people use to manage their accounts.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer with FastAPI routers and dependency wiring for user management endpoints.
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router
