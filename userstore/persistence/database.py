"""Async SQLite database wrapper."""

import logging
from pathlib import Path
from types import TracebackType

import aiosqlite

from userstore.persistence.errors import QueryFailedError, StoreUnavailableError

logger = logging.getLogger(__name__)


class Database:
    """Async SQLite database connection manager."""

    def __init__(self, path: Path, create_if_missing: bool = True) -> None:
        self._path = Path(path)
        self._create_if_missing = create_if_missing
        self._connection: aiosqlite.Connection | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the active database connection."""
        if self._connection is None:
            raise StoreUnavailableError("Database not connected")
        return self._connection

    def _uri(self) -> str:
        mode = "rwc" if self._create_if_missing else "rw"
        return f"{self._path.resolve().as_uri()}?mode={mode}"

    async def connect(self) -> None:
        """Open the database connection."""
        if self._connection is not None:
            return
        try:
            if self._create_if_missing:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = await aiosqlite.connect(self._uri(), uri=True)
        except (aiosqlite.Error, OSError) as e:
            logger.error("Failed to open database %s: %s", self._path, e)
            raise StoreUnavailableError(
                f"cannot open database {self._path}: {e}", cause=e
            ) from e
        self._connection.row_factory = aiosqlite.Row
        logger.info("Database connected: %s", self._path)

    async def disconnect(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            logger.info("Database disconnected")

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    async def execute(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Cursor:
        """Execute a SQL statement."""
        connection = self.connection
        try:
            if parameters is None:
                return await connection.execute(sql)
            return await connection.execute(sql, parameters)
        except aiosqlite.Error as e:
            logger.error("Query failed: %s", e)
            raise QueryFailedError(str(e), cause=e, sql=sql) from e

    async def fetchone(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Row | None:
        """Execute a query and fetch one row."""
        cursor = await self.execute(sql, parameters)
        try:
            return await cursor.fetchone()
        except aiosqlite.Error as e:
            raise QueryFailedError(str(e), cause=e, sql=sql) from e
        finally:
            await cursor.close()

    async def fetchall(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> list[aiosqlite.Row]:
        """Execute a query and fetch all rows."""
        cursor = await self.execute(sql, parameters)
        try:
            return list(await cursor.fetchall())
        except aiosqlite.Error as e:
            raise QueryFailedError(str(e), cause=e, sql=sql) from e
        finally:
            await cursor.close()

    async def commit(self) -> None:
        """Commit the current transaction."""
        try:
            await self.connection.commit()
        except aiosqlite.Error as e:
            raise QueryFailedError(str(e), cause=e) from e
