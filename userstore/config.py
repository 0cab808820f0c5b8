"""Configuration management for the userstore application.

This module provides utilities for loading and validating configuration
from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)


def configure_logging(app_config: AppConfig) -> None:
    """Set the root log level from LOGGING_LEVEL, falling back to INFO."""
    level_name = (app_config.logging_level or "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        LOGGER.warning("Unknown LOGGING_LEVEL %s, using INFO", level_name)
        level = logging.INFO
    logging.basicConfig(level=level, force=True)


@dataclass
class AppConfig:
    """Settings read from the process environment when instantiated.

    Use :func:`load_config_from_env` to apply a .env file first.
    """

    DEFAULT_DATABASE_PATH: ClassVar[str] = "userstore.db"
    DEFAULT_PAGE_SIZE_LIMIT: ClassVar[int] = 100

    database_path: str = field(
        default_factory=lambda: os.getenv(
            "DATABASE_PATH",
            AppConfig.DEFAULT_DATABASE_PATH,
        ),
    )

    logging_level: str | None = field(
        default_factory=lambda: os.getenv("LOGGING_LEVEL"),
    )

    root_path: str = field(
        default_factory=lambda: os.getenv("ROOT_PATH", ""),
    )

    page_size_limit: int = field(
        default_factory=lambda: AppConfig._getenv_int_required(
            "PAGE_SIZE_LIMIT",
            AppConfig.DEFAULT_PAGE_SIZE_LIMIT,
        ),
    )

    def __post_init__(self) -> None:
        """Post-initialization validation."""
        if self.page_size_limit <= 0:
            msg = "PAGE_SIZE_LIMIT must be a positive integer"
            raise ValueError(msg)

    @staticmethod
    def _getenv_int_required(key: str, default: int) -> int:
        """Get an integer environment variable with a default.

        :param key: Environment variable name
        :param default: Default value if not set
        :return: The environment variable value as integer or default
        :raises ValueError: If value cannot be converted to int
        """
        value_str = os.getenv(key)

        if value_str is None or value_str == "":
            return default

        try:
            return int(value_str)
        except ValueError as e:
            msg = f"Environment variable {key} must be an integer, got: {value_str}"
            raise ValueError(msg) from e


def load_config_from_env(env_file: str | Path | None) -> AppConfig:
    """Load application configuration from environment variables.

    :param env_file: Optional path to a .env file loaded before reading
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file and Path(env_file).exists():
        LOGGER.info("Loading environment variables from %s", env_file)
        load_dotenv(dotenv_path=env_file)
    elif env_file:
        LOGGER.debug("No .env file found at %s", env_file)

    return AppConfig()
