"""User entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from userstore.persistence.base import BaseUserRepository


@dataclass
class User:
    """One row of the users table.

    The id is assigned by the store on insert and stays None until then.
    """

    name: str
    age: int
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        """Rebuild a user from a stored row."""
        return cls(name=row["name"], age=row["age"], id=row["id"])

    async def insert(self, repository: "BaseUserRepository") -> "User":
        """Persist this user as a new row and record the assigned id."""
        return await repository.insert(self)

    def __str__(self) -> str:
        return f"{self.name} is {self.age} with id {self.id}"
