# 📄 File: findeasily/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file sets up the infrastructure layer for user accounts: how users and reset codes are
# stored in the database and how emails go out.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer with SQLAlchemy repository implementations and the outbound mail adapter.
#
# 🔄 Connected Modules / Calls From:
# - user_management.presentation.dependencies, findeasily.main
