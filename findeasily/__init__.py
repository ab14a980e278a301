# 📄 File: findeasily/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that this folder holds the FindEasily website backend and records
# basic version information about it.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the FindEasily
# FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
FindEasily - property listing marketplace web layer.

Account registration and authentication flows, password reset, profile
management and listing creation/editing with photo upload.
"""

__version__ = "1.0.0"
__title__ = "FindEasily"
__description__ = "Property listing marketplace"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
