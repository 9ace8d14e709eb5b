"""
User endpoints for API v1.

Provide listing with filters and pagination, registration and lookup
by identifier.  Query and body validation is handled by the pydantic
schemas; failures are reported as 400 by the handler registered in
``core.errors``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.core.errors import UserNotFoundError
from user_directory_api.app.schemas.user import (
    UserCreate,
    UserQuery,
    UserRead,
    UsersList,
    serialize_user,
    serialize_users_page,
)
from user_directory_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=UsersList, response_model_exclude_none=True)
async def list_users(
    query: Annotated[UserQuery, Query()],
    service: UserService = Depends(get_user_service),
) -> UsersList:
    """Получить список пользователей с фильтрами и пагинацией.

    - **page**, **limit**: параметры пагинации (по умолчанию 1 и 10).
    - **role**: фильтр по роли (`user`, `admin`, `moderator`).
    - **search**: поиск по имени или e‑mail без учёта регистра.
    """
    result = service.find_all(
        page=query.page,
        limit=query.limit,
        role=query.role,
        search=query.search,
    )
    return serialize_users_page(result)


@router.post(
    "",
    response_model=UserRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Зарегистрировать нового пользователя и вернуть созданную запись."""
    return serialize_user(service.create(user))


@router.get("/{user_id}", response_model=UserRead, response_model_exclude_none=True)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Retrieve a single user by its ID.

    Raises 404 if the user is not found.
    """
    try:
        record = service.find_one(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from e
    return serialize_user(record)
