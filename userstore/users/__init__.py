"""User persistence and routes."""

from .queries import UserQueries
from .routes import configure_user_router

__all__ = ["UserQueries", "configure_user_router"]
