"""User Store API package."""

from .app import configure_fastapi_app, create_app
from .common import CREATE_TABLE_SQL, User
from .config import AppConfig, load_config_from_env

__all__ = [
    "CREATE_TABLE_SQL",
    "AppConfig",
    "User",
    "configure_fastapi_app",
    "create_app",
    "load_config_from_env",
]
