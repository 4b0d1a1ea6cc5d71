"""Userstore - a small SQLite-backed user repository."""

from userstore.models import User
from userstore.persistence import (
    Database,
    NotFoundError,
    QueryFailedError,
    StoreError,
    StoreUnavailableError,
    UserRepository,
)

__version__ = "0.1.0"

__all__ = [
    "User",
    "Database",
    "UserRepository",
    "StoreError",
    "StoreUnavailableError",
    "QueryFailedError",
    "NotFoundError",
]
