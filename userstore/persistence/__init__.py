"""Persistence layer for SQLite storage."""

from userstore.persistence.base import BaseUserRepository
from userstore.persistence.database import Database
from userstore.persistence.errors import (
    NotFoundError,
    QueryFailedError,
    StoreError,
    StoreUnavailableError,
)
from userstore.persistence.repository import UserRepository

__all__ = [
    "BaseUserRepository",
    "Database",
    "UserRepository",
    "StoreError",
    "StoreUnavailableError",
    "QueryFailedError",
    "NotFoundError",
]
