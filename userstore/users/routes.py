"""User management routes for the FastAPI application.

Provides endpoints for listing, creating, reading, updating and deleting users.
"""

import logging
from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)

from userstore.common import User

from .models import UserCreate, UserPage, UserResponse, UserUpdate
from .queries import UserQueries

LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(logging.DEBUG)

DEFAULT_PAGE_SIZE = 10


def get_user_queries(request: Request) -> UserQueries:
    """Return the repository opened by the running application's lifespan."""
    return request.app.state.user_queries


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found",
    )


async def _get_existing_user(user_queries: UserQueries, user_id: int) -> User:
    user = await user_queries.get_user(user_id)
    if user is None:
        raise _not_found(user_id)
    return user


async def _create_user(user_queries: UserQueries, body: UserCreate) -> UserResponse:
    user = await user_queries.add_user(body.to_user())
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to create user",
        )
    LOGGER.info("Created user %s", user.get_id())
    return UserResponse.from_user(user)


async def _update_user(
    user_queries: UserQueries,
    user_id: int,
    body: UserUpdate,
) -> UserResponse:
    """Apply the given fields to an existing user; unset fields are left alone."""
    user = await _get_existing_user(user_queries, user_id)

    if body.username is not None:
        user.set_username(body.username)
    if body.password is not None:
        user.set_password(body.password)

    # zero rows means the user went away after the read
    if not await user_queries.update_user(user):
        raise _not_found(user_id)
    return UserResponse.from_user(user)


def configure_user_router(
    router: APIRouter,
    page_size_limit: int = 100,
) -> APIRouter:
    """Configure the user router.

    Handlers look up the repository on ``app.state`` per request.

    :param router: The APIRouter to configure
    :param page_size_limit: Largest page size accepted by the list endpoint
    :return: The configured APIRouter
    """
    default_page_size = min(DEFAULT_PAGE_SIZE, page_size_limit)
    Queries = Annotated[UserQueries, Depends(get_user_queries)]

    @router.get("/users", response_model=UserPage)
    async def list_users(
        user_queries: Queries,
        page: Annotated[int, Query(ge=1)] = 1,
        limit: Annotated[int, Query(ge=1, le=page_size_limit)] = default_page_size,
    ) -> UserPage:
        users, total_count = await user_queries.list_users(page=page, limit=limit)
        return UserPage.from_query_params(page, limit, users, total_count)

    @router.post(
        "/users",
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_user(body: UserCreate, user_queries: Queries) -> UserResponse:
        return await _create_user(user_queries, body)

    @router.get("/users/{user_id}", response_model=UserResponse)
    async def get_user(user_id: int, user_queries: Queries) -> UserResponse:
        user = await _get_existing_user(user_queries, user_id)
        return UserResponse.from_user(user)

    @router.patch("/users/{user_id}", response_model=UserResponse)
    async def update_user(
        user_id: int,
        body: UserUpdate,
        user_queries: Queries,
    ) -> UserResponse:
        return await _update_user(user_queries, user_id, body)

    @router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_user(user_id: int, user_queries: Queries) -> Response:
        if not await user_queries.delete_user(user_id):
            raise _not_found(user_id)
        LOGGER.info("Deleted user %s", user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
