"""Tests for logging setup."""

import json
import logging

from userstore.logger import JsonFormatter, setup_logging


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="userstore.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="found %d users",
        args=(2,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    data = json.loads(JsonFormatter().format(make_record()))

    assert data["level"] == "INFO"
    assert data["logger"] == "userstore.test"
    assert data["message"] == "found 2 users"
    assert data["timestamp"].endswith("Z")
    assert "user_id" not in data


def test_json_formatter_includes_user_id():
    data = json.loads(JsonFormatter().format(make_record(user_id=7)))

    assert data["user_id"] == 7


def test_setup_logging_writes_files(tmp_path, restore_root_logger):
    setup_logging(tmp_path / "logs", level="DEBUG", json_format=True)

    logging.getLogger("userstore.test").error("boom")
    for handler in restore_root_logger.handlers:
        handler.flush()

    app_lines = (tmp_path / "logs" / "app.log").read_text().splitlines()
    error_lines = (tmp_path / "logs" / "errors.log").read_text().splitlines()
    assert json.loads(app_lines[-1])["message"] == "boom"
    assert json.loads(error_lines[-1])["level"] == "ERROR"
    assert logging.getLogger("aiosqlite").level == logging.WARNING


def test_setup_logging_without_files(tmp_path, restore_root_logger):
    setup_logging(tmp_path / "logs", level="WARNING", to_file=False)

    assert not (tmp_path / "logs").exists()
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1
