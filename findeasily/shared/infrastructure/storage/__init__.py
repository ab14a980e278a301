# 📄 File: findeasily/shared/infrastructure/storage/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the file storage system that keeps profile pictures and listing photos.
#
# 🧪 Purpose (Technical Summary):
# Storage infrastructure package exposing the local-filesystem FileService.
#
# 🔗 Dependencies:
# - findeasily/shared/infrastructure/storage/file_manager.py
#
# 🔄 Connected Modules / Calls From:
# - main.py, shared.core.dependencies, profile and listing photo handlers

"""
Storage Infrastructure Package

Storage Organization:
- users/{user_id}/ - Profile pictures
- listings/{listing_id}/ - Listing photos
"""

from .file_manager import FileService, UploadedFile

__all__ = ["FileService", "UploadedFile"]
