"""
Business logic for users.

``UserService`` answers list queries (filtering and pagination),
creates users and looks them up by identifier.  All state lives in the
:class:`~user_directory_api.app.core.store.UserStore` passed to the
constructor; the service itself holds nothing else.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import UserNotFoundError
from ..core.store import UserRecord, UserStore
from ..schemas.user import UserCreate


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class UserPage:
    """One pagination window over the filtered user list."""

    users: Tuple[UserRecord, ...]
    page: int
    limit: int
    total: int
    total_pages: int


def _matches_search(record: UserRecord, term: str) -> bool:
    return term in record.name.lower() or term in record.email.lower()


class UserService:
    """Сервис для работы с пользователями.

    Хранит ссылку на хранилище пользователей и реализует выборку с
    фильтрами и пагинацией, создание и поиск по идентификатору.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def find_all(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        role: Optional[str] = None,
        search: Optional[str] = None,
    ) -> UserPage:
        """Вернуть страницу пользователей с фильтрами.

        - ``role``: точное совпадение роли (с учётом регистра).
        - ``search``: подстрока имени или e‑mail без учёта регистра;
          пустая строка не фильтрует.
        - ``page`` (по умолчанию 1) и ``limit`` (по умолчанию 10)
          выбирают окно ``[(page-1)*limit, page*limit)``.

        Фильтры объединяются через AND и применяются до пагинации.
        Страница за пределами списка возвращает пустой список без
        ошибки; ``page`` и ``limit`` возвращаются как есть.
        """
        page = DEFAULT_PAGE if page is None else page
        limit = DEFAULT_LIMIT if limit is None else limit

        users = self.store.all()
        if role:
            users = tuple(user for user in users if user.role == role)
        if search:
            term = search.lower()
            users = tuple(user for user in users if _matches_search(user, term))

        total = len(users)
        total_pages = math.ceil(total / limit)
        start = (page - 1) * limit
        window = users[start:start + limit]

        logger.debug(
            "User query role=%s search=%r page=%s limit=%s matched %s, returning %s",
            role,
            search,
            page,
            limit,
            total,
            len(window),
        )
        return UserPage(
            users=window,
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
        )

    def create(self, data: UserCreate) -> UserRecord:
        """Create a user from validated input and append it to the store.

        The role default is applied by ``UserCreate``; here the fields
        are copied verbatim.  ``created_at`` and ``updated_at`` share
        one timestamp.
        """
        record = UserRecord.new(
            name=data.name,
            email=str(data.email),
            role=data.role,
            age=data.age,
        )
        self.store.append(record)
        logger.info("Created user %s (%s, role=%s)", record.id, record.email, record.role)
        return record

    def find_one(self, user_id: str) -> UserRecord:
        """Return the user with ``user_id``.

        Raises ``UserNotFoundError`` when no such user exists.
        """
        record = self.store.find_by_id(user_id)
        if record is None:
            logger.info("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return record
