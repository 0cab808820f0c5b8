"""Tests for configuration loading."""

import logging
from typing import TYPE_CHECKING

import pytest

from userstore.config import AppConfig, configure_logging, load_config_from_env

if TYPE_CHECKING:
    from pathlib import Path

ENV_VARS = ("DATABASE_PATH", "LOGGING_LEVEL", "ROOT_PATH", "PAGE_SIZE_LIMIT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables and restore them after each test.

    Setting before deleting makes monkeypatch also undo values that
    load_dotenv writes straight into os.environ.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults() -> None:
    config = AppConfig()

    assert config.database_path == AppConfig.DEFAULT_DATABASE_PATH
    assert config.logging_level is None
    assert config.root_path == ""
    assert config.page_size_limit == AppConfig.DEFAULT_PAGE_SIZE_LIMIT


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_PATH", "/tmp/users.db")
    monkeypatch.setenv("PAGE_SIZE_LIMIT", "25")

    config = AppConfig()

    assert config.database_path == "/tmp/users.db"
    assert config.page_size_limit == 25


def test_non_integer_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGE_SIZE_LIMIT", "many")

    with pytest.raises(ValueError, match="PAGE_SIZE_LIMIT"):
        AppConfig()


def test_non_positive_page_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGE_SIZE_LIMIT", "0")

    with pytest.raises(ValueError, match="PAGE_SIZE_LIMIT"):
        AppConfig()


def test_load_config_from_env_file(tmp_path: "Path") -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_PATH=from_file.db\nLOGGING_LEVEL=debug\n")

    config = load_config_from_env(env_file)

    assert config.database_path == "from_file.db"
    assert config.logging_level == "debug"


def test_load_config_missing_env_file(tmp_path: "Path") -> None:
    config = load_config_from_env(tmp_path / "missing.env")

    assert config.database_path == AppConfig.DEFAULT_DATABASE_PATH


def test_configure_logging_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGGING_LEVEL", "warning")

    configure_logging(AppConfig())

    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOGGING_LEVEL", "chatty")

    configure_logging(AppConfig())

    assert logging.getLogger().level == logging.INFO
