"""Abstract user repository interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userstore.models import User


class BaseUserRepository(ABC):
    """Storage-agnostic contract for persisting users."""

    @abstractmethod
    async def create_table(self) -> str:
        """Ensure the users table exists. Idempotent."""
        pass

    @abstractmethod
    async def find(self, user_id: int) -> "User":
        """Return the user with the given id, or raise NotFoundError."""
        pass

    @abstractmethod
    async def all(self) -> list["User"]:
        """Return every stored user in insertion order."""
        pass

    @abstractmethod
    async def insert(self, user: "User") -> "User":
        """Store the user as a new row, set its id and return it."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored users."""
        pass
