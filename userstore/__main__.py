"""Main entry point for the User Store API."""

import argparse
import asyncio
import logging
import os

import uvicorn

from userstore import create_app
from userstore.app import ensure_database_directory
from userstore.config import configure_logging, load_config_from_env
from userstore.users import UserQueries

LOGGER = logging.getLogger(__name__)

APP_FACTORY = "userstore.app:create_app"


async def initialize_database(database_path: str) -> int:
    """Create the user table and return the number of stored users.

    :param database_path: Path to the SQLite database file
    :return: Number of users already in the table
    """
    ensure_database_directory(database_path)
    user_queries = await UserQueries.create(database_path)
    try:
        await user_queries.initialize_table()
        return await user_queries.count_users()
    finally:
        await user_queries.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="userstore",
        description="Serve the user store over HTTP, or prepare its database.",
    )
    parser.add_argument("--env-file", default=".env", help="dotenv file to load.")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of server processes.",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the user table in the configured database and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the FastAPI application using Uvicorn."""
    args = build_parser().parse_args(argv)

    if args.init_db:
        config = load_config_from_env(args.env_file)
        configure_logging(config)
        user_count = asyncio.run(initialize_database(config.database_path))
        LOGGER.info(
            "User table ready at %s with %s users",
            config.database_path,
            user_count,
        )
        return

    if args.reload or args.workers > 1:
        # uvicorn re-imports the app in child processes, so it needs a factory path
        os.environ["ENV_FILE"] = args.env_file
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=args.host,
            port=args.port,
            reload=args.reload,
            workers=args.workers,
        )
        return

    uvicorn.run(create_app(args.env_file), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
