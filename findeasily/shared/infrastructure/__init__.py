"""
Infrastructure layer package for FindEasily.
Provides the database connection manager and file storage.
"""

from .database import Base, DatabaseManager
from .storage import FileService

__all__ = [
    "Base",
    "DatabaseManager",
    "FileService",
]
