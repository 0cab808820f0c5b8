"""Common data models for the application."""

from .user import CREATE_TABLE_SQL, User

__all__ = ["CREATE_TABLE_SQL", "User"]
