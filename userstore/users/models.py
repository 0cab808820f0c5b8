"""Request and response models for the user routes."""

from __future__ import annotations

from pydantic import BaseModel

from userstore.common import User


class UserCreate(BaseModel):
    username: str
    password: str

    def to_user(self) -> User:
        return User(username=self.username, password=self.password)


class UserUpdate(BaseModel):
    username: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public view of a user. The password is never returned.

    :param id: The database id of the user
    :param username: The username of the user
    """

    id: int
    username: str | None

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        """Create UserResponse from a persisted User.

        :param user: User instance with its id set
        :return: UserResponse instance
        """
        return cls(id=user.get_id(), username=user.get_username())


class UserPage(BaseModel):
    """One page of users.

    :param page: Current page number
    :param limit: Number of items per page
    :param total_count: Total number of users
    :param total_pages: Total number of pages
    :param items: Users on the current page
    """

    page: int
    limit: int
    total_count: int
    total_pages: int
    items: list[UserResponse]

    @classmethod
    def from_query_params(
        cls,
        page: int,
        limit: int,
        users: list[User],
        total_count: int,
    ) -> UserPage:
        """Create a page from query parameters and the fetched users.

        :param page: Current page number
        :param limit: Number of items per page
        :param users: Users on the current page
        :param total_count: Total number of users
        :return: UserPage instance
        """
        total_pages = (total_count + limit - 1) // limit
        return cls(
            page=page,
            limit=limit,
            total_count=total_count,
            total_pages=total_pages,
            items=[UserResponse.from_user(user) for user in users],
        )
