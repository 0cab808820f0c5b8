"""FastAPI application factory for user storage."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aiosqlite import connect as aiosqlite_connect
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userstore.users import UserQueries, configure_user_router

from .config import configure_logging, load_config_from_env

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from .config import AppConfig

LOGGER = logging.getLogger(__name__)

SERVICE_NAME = "User Store API"


def ensure_database_directory(database_path: str) -> None:
    """Make sure SQLite can create the database file at ``database_path``."""
    directory = Path(database_path).parent
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        LOGGER.info("Created database directory %s", directory)

    if not Path(database_path).exists():
        LOGGER.info("Starting with a new database at %s", database_path)


def configure_fastapi_app(config: "AppConfig") -> FastAPI:
    """Configure and return the FastAPI application.

    :param config: Application configuration
    :return: Configured FastAPI application
    """
    ensure_database_directory(config.database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> "AsyncGenerator[Any, Any]":
        """Open a fresh connection per run and publish it on ``app.state``."""
        LOGGER.info("%s is starting", SERVICE_NAME)

        async with aiosqlite_connect(config.database_path) as db_connection:
            app.state.user_queries = UserQueries(db_connection)
            await app.state.user_queries.initialize_table()

            yield

            LOGGER.info("%s is shutting down", SERVICE_NAME)
            del app.state.user_queries

    app = FastAPI(
        title=SERVICE_NAME,
        version="0.0.1",
        lifespan=lifespan,
        root_path=config.root_path,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        configure_user_router(APIRouter(), page_size_limit=config.page_size_limit),
        tags=["users"],
    )

    @app.get("/")
    def read_root() -> str:
        return SERVICE_NAME

    return app


def create_app(env_file: str | None = None) -> FastAPI:
    """Build the application from a .env file and the process environment.

    Used as the uvicorn factory, which reads the file name from ENV_FILE.

    :param env_file: Optional path to the environment configuration file
    :return: Configured FastAPI application
    """
    if env_file is None:
        env_file = os.environ.get("ENV_FILE", ".env")
    config = load_config_from_env(env_file)
    configure_logging(config)
    return configure_fastapi_app(config)
