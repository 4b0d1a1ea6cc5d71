"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from userstore.config import Settings, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.database.path == Path("db/development.sqlite")
    assert settings.database.create_if_missing is True
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("USERSTORE_DATABASE__PATH", "/var/data/users.sqlite")
    monkeypatch.setenv("USERSTORE_DATABASE__CREATE_IF_MISSING", "false")
    monkeypatch.setenv("USERSTORE_LOGGING__LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.database.path == Path("/var/data/users.sqlite")
    assert settings.database.create_if_missing is False
    assert settings.logging.level == "DEBUG"


def test_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("USERSTORE_LOGGING__JSON_FORMAT=true\n")

    assert Settings().logging.json_format is True


def test_invalid_log_level(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("USERSTORE_LOGGING__LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        load_settings()
