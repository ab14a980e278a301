# 📄 File: findeasily/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the site how to connect to its database,
# where to keep uploaded photos, and how strict some rules should be.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the pydantic-settings Settings class and
# its cached accessor.

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
