# 📄 File: findeasily/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the
# site uses, like settings, errors, logging, events and file storage.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure and cross-cutting
# concerns used by the user and listing modules.

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database and file storage infrastructure
- Security and authentication utilities
- Domain events and the outbound event queue
- Logging and validation helpers
"""

__all__ = []
