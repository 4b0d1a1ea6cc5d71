"""Shared fixtures."""

import logging

import pytest
import pytest_asyncio

from userstore.config import DatabaseConfig, LoggingConfig, Settings
from userstore.persistence.database import Database
from userstore.persistence.repository import UserRepository


@pytest_asyncio.fixture
async def db(tmp_path):
    database = Database(tmp_path / "db" / "test.sqlite")
    await database.connect()
    yield database
    await database.disconnect()


@pytest_asyncio.fixture
async def repo(db):
    repository = UserRepository(db)
    await repository.create_table()
    return repository


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database=DatabaseConfig(path=tmp_path / "db" / "development.sqlite"),
        logging=LoggingConfig(log_dir=tmp_path / "logs", to_file=False),
    )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
