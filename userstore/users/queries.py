"""All queries related to the user table.

Using the UserQueries class as a repository for user-related queries.
"""

from __future__ import annotations

import logging

import aiosqlite
from aiosqlite import Connection

from userstore.common import User

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)


class UserQueries:
    """Repository for user-related queries."""

    CREATE_USER_TABLE = User.CREATE_TABLE_SQL

    COUNT_USERS = """SELECT COUNT(*) FROM user;"""

    GET_USER_BY_ID = """
        SELECT id, username, password FROM user WHERE id = ?;
        """

    GET_USER_BY_USERNAME = """
        SELECT id, username, password FROM user WHERE username = ? ORDER BY id LIMIT 1;
        """

    LIST_USERS = """
        SELECT id, username, password FROM user ORDER BY id LIMIT ? OFFSET ?;
        """

    ADD_USER = """
        INSERT INTO user (username, password) VALUES (?, ?);
        """

    UPDATE_USER = """
        UPDATE user SET username = ?, password = ? WHERE id = ?;
        """

    DELETE_USER = """
        DELETE FROM user WHERE id = ?;
        """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    @classmethod
    async def create(cls, db_path: str) -> UserQueries:
        """Create a UserQueries instance with an aiosqlite connection.

        :param db_path: Path to the SQLite database file
        :return: Configured UserQueries instance
        """
        connection = await aiosqlite.connect(db_path)
        return cls(connection)

    async def close(self) -> None:
        """Close the database connection."""
        await self.connection.close()

    async def initialize_table(self) -> None:
        """Create the user table if it does not exist.

        This method should be called during application startup.
        """
        await self.connection.execute(UserQueries.CREATE_USER_TABLE)
        await self.connection.commit()
        LOGGER.info("User table initialized")

    async def count_users(self) -> int:
        """Return the number of users in the user table.

        :return: Number of users
        """
        async with self.connection.execute(UserQueries.COUNT_USERS) as cursor:
            result = await cursor.fetchone()
        return result[0] if result else 0

    async def add_user(self, user: User) -> User | None:
        """Insert a new user and record the assigned id on it.

        :param user: The User to persist; its id is ignored and overwritten
        :return: The same User with its id set, or None if the insert failed
        """
        try:
            cursor = await self.connection.execute(
                UserQueries.ADD_USER,
                (user.get_username(), user.get_password()),
            )
            await self.connection.commit()
        except aiosqlite.Error as e:
            await self.connection.rollback()
            LOGGER.error("Error adding user %s: %s", user.get_username(), e)
            return None

        user.set_id(cursor.lastrowid)
        await cursor.close()
        LOGGER.debug("Added user %s with id %s", user.get_username(), user.get_id())
        return user

    async def get_user(self, user_id: int) -> User | None:
        """Get a user by id.

        :param user_id: The id of the user
        :return: The User if found, None otherwise
        """
        async with self.connection.execute(
            UserQueries.GET_USER_BY_ID, (user_id,)
        ) as cursor:
            row = await cursor.fetchone()
        if row is None:
            return None
        return User.from_row(tuple(row))

    async def get_user_by_username(self, username: str) -> User | None:
        """Get the first user with the given username.

        Usernames are not unique, so the lowest id wins.

        :param username: The username to look up
        :return: The User if found, None otherwise
        """
        async with self.connection.execute(
            UserQueries.GET_USER_BY_USERNAME, (username,)
        ) as cursor:
            row = await cursor.fetchone()
        if row is None:
            return None
        return User.from_row(tuple(row))

    async def list_users(
        self,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[User], int]:
        """List users ordered by id with pagination.

        :param page: Page number for pagination (1-based)
        :param limit: Number of results per page
        :return: (users, total_count)
        """
        total_count = await self.count_users()

        offset = (page - 1) * limit
        async with self.connection.execute(
            UserQueries.LIST_USERS, (limit, offset)
        ) as cursor:
            rows = await cursor.fetchall()

        return [User.from_row(tuple(row)) for row in rows], total_count

    async def update_user(self, user: User) -> int:
        """Write the username and password of an existing user.

        :param user: The User to update, identified by its id
        :return: Number of rows updated
        """
        if user.get_id() is None:
            return 0

        try:
            cursor = await self.connection.execute(
                UserQueries.UPDATE_USER,
                (user.get_username(), user.get_password(), user.get_id()),
            )
            await self.connection.commit()
        except aiosqlite.Error as e:
            await self.connection.rollback()
            LOGGER.error("Error updating user %s: %s", user.get_id(), e)
            return 0

        rowcount = cursor.rowcount
        await cursor.close()
        return rowcount

    async def delete_user(self, user_id: int) -> int:
        """Delete the user with the given id.

        :param user_id: The id of the user to delete
        :return: Number of rows deleted
        """
        try:
            cursor = await self.connection.execute(UserQueries.DELETE_USER, (user_id,))
            await self.connection.commit()
        except aiosqlite.Error as e:
            await self.connection.rollback()
            LOGGER.error("Error deleting user %s: %s", user_id, e)
            return 0

        rowcount = cursor.rowcount
        await cursor.close()
        return rowcount
