"""Async SQLAlchemy engine/session management and the declarative Base."""

from .connection import Base, DatabaseManager

__all__ = ["Base", "DatabaseManager"]
