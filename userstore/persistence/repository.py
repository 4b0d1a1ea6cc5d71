"""Data access layer for users."""

import logging

from userstore.models import User
from userstore.persistence.base import BaseUserRepository
from userstore.persistence.database import Database
from userstore.persistence.errors import NotFoundError
from userstore.persistence.models import USERS_TABLE

logger = logging.getLogger(__name__)


class UserRepository(BaseUserRepository):
    """SQLite-backed user repository."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def create_table(self) -> str:
        """Create the users table if it does not exist yet."""
        logger.info("Preparing to create the users table...")
        await self._db.execute(USERS_TABLE)
        await self._db.commit()
        logger.info("...users table created!")
        return "Success"

    async def find(self, user_id: int) -> User:
        """Get a user by id."""
        logger.info("Querying for user id %s...", user_id, extra={"user_id": user_id})
        row = await self._db.fetchone(
            "SELECT id, name, age FROM users WHERE id = ? LIMIT 1",
            (user_id,),
        )
        if row is None:
            logger.warning("...no user with id %s", user_id, extra={"user_id": user_id})
            raise NotFoundError(user_id)
        user = User.from_row(row)
        logger.info("...found %s!", user)
        return user

    async def all(self) -> list[User]:
        """Get all users ordered by id."""
        logger.info("Loading all users...")
        rows = await self._db.fetchall("SELECT id, name, age FROM users ORDER BY id")
        logger.info("...found %d users!", len(rows))
        return [User.from_row(row) for row in rows]

    async def insert(self, user: User) -> User:
        """Save a user as a new row."""
        logger.info("Inserting user %s into database...", user.name)
        cursor = await self._db.execute(
            "INSERT INTO users (name, age) VALUES (?, ?)",
            (user.name, user.age),
        )
        await self._db.commit()
        user.id = cursor.lastrowid
        await cursor.close()
        logger.info(
            "...user %s inserted into database", user.id, extra={"user_id": user.id}
        )
        return user

    async def count(self) -> int:
        """Count stored users."""
        row = await self._db.fetchone("SELECT COUNT(*) FROM users")
        return row[0] if row else 0
