# 📄 File: findeasily/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes all the web endpoints for user accounts.
#
# 🧪 Purpose (Technical Summary):
# API package for user management routers.
#
# 🔄 Connected Modules / Calls From:
# - findeasily.api.v1.router (router registration)
