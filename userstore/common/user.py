"""Fundamental user data model for userstore."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS user (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT,
        password TEXT
    );
    """


@dataclass
class User:
    """Data structure representing one application account.

    Every field starts out unset (``None``). The ``id`` is assigned by the
    database once the row is persisted. The password is kept exactly as
    given.
    """

    CREATE_TABLE_SQL: ClassVar[str] = CREATE_TABLE_SQL

    id: int | None = None
    username: str | None = None
    password: str | None = None

    @classmethod
    def from_row(cls, row: tuple[int, str | None, str | None]) -> User:
        """Build a User from an ``(id, username, password)`` row.

        :param row: Row as returned by the user table queries
        :return: User instance
        """
        user_id, username, password = row
        return cls(id=user_id, username=username, password=password)

    def get_id(self) -> int | None:
        return self.id

    def set_id(self, user_id: int) -> None:
        self.id = user_id

    def get_username(self) -> str | None:
        return self.username

    def set_username(self, username: str) -> None:
        self.username = username

    def get_password(self) -> str | None:
        return self.password

    def set_password(self, password: str) -> None:
        self.password = password
