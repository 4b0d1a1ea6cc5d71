"""Application wiring for the user store scripts."""

import logging
from types import TracebackType

from userstore.config import Settings
from userstore.logger import setup_logging
from userstore.persistence.database import Database
from userstore.persistence.repository import UserRepository

logger = logging.getLogger(__name__)


class Application:
    """Owns the database connection and repository for one script run."""

    def __init__(self, settings: Settings, configure_logging: bool = True) -> None:
        self._settings = settings
        self._configure_logging = configure_logging
        self._db: Database | None = None
        self._repo: UserRepository | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def repository(self) -> UserRepository:
        """Get the user repository of a started application."""
        if self._repo is None:
            raise RuntimeError("Application not started")
        return self._repo

    async def start(self) -> None:
        """Configure logging and open the database."""
        if self._configure_logging:
            setup_logging(
                self._settings.logging.log_dir,
                self._settings.logging.level,
                self._settings.logging.json_format,
                self._settings.logging.to_file,
            )

        self._db = Database(
            self._settings.database.path,
            create_if_missing=self._settings.database.create_if_missing,
        )
        await self._db.connect()
        self._repo = UserRepository(self._db)

    async def stop(self) -> None:
        """Close the database connection."""
        if self._db:
            await self._db.disconnect()
        self._db = None
        self._repo = None

    async def __aenter__(self) -> "Application":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()
