"""
Pydantic models for user data.

Defines the contracts for creating users, querying the user list and
reading users back.  Input models coerce raw request data and reject
malformed values with field‑level messages; output models guard the
shape of every record that leaves the service.  Wire names are
camelCase (``createdAt``, ``totalPages``) while Python attributes stay
snake_case.
"""

import re
import uuid
from typing import Any, List, Literal, Optional, get_args

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..core.errors import SerializationError


Role = Literal["user", "admin", "moderator"]
ROLES = get_args(Role)
DEFAULT_ROLE: Role = "user"

NAME_MAX_LENGTH = 100
MIN_AGE = 18
MAX_AGE = 120
MAX_LIMIT = 100

_INTEGER = re.compile(r"^[+-]?\d+$")

_TIMESTAMP = TypeAdapter(AwareDatetime)


def _check_email_syntax(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    # EmailStr rewrites the domain and accepts "Name <addr>"; the address
    # is returned unchanged.
    if isinstance(value, str) and ("<" in value or ">" in value):
        raise PydanticCustomError("email_format", "Invalid email format")
    try:
        handler(value)
    except ValidationError:
        raise PydanticCustomError("email_format", "Invalid email format") from None
    return value


class UserCreate(BaseModel):
    """Schema for registering a user.

    ``role`` falls back to ``"user"`` when omitted; ``age`` is optional
    but, when given, must be an adult age.
    """

    name: str = Field(..., examples=["Jane Smith"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    age: Optional[int] = Field(None, examples=[30])
    role: Role = Field(DEFAULT_ROLE, examples=["admin"])

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("name_required", "Name is required")
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError("name_too_long", "Name too long")
        return value

    @field_validator("email", mode="wrap")
    @classmethod
    def _check_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _check_email_syntax(value, handler)

    @field_validator("age")
    @classmethod
    def _check_age(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if value < MIN_AGE:
            raise PydanticCustomError("age_too_low", "Must be at least 18 years old")
        if value > MAX_AGE:
            raise PydanticCustomError("age_too_high", "Invalid age")
        return value


def _parse_int(value: Any, field: str) -> Any:
    # Query parameters arrive as strings; ints are accepted for direct
    # service calls.
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    if isinstance(value, str) and _INTEGER.match(value.strip()):
        return int(value.strip())
    raise PydanticCustomError("int_parsing", "{field} must be a number", {"field": field.capitalize()})


class UserQuery(BaseModel):
    """Filters and pagination for the user list.

    Defaults for ``page`` and ``limit`` are applied by the query
    engine, not here, so an omitted value stays ``None``.
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    role: Optional[Role] = None
    search: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator("page", "limit", mode="before")
    @classmethod
    def _parse_number(cls, value: Any, info: ValidationInfo) -> Any:
        return _parse_int(value, info.field_name)

    @field_validator("page")
    @classmethod
    def _check_page(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise PydanticCustomError("page_not_positive", "Page must be positive")
        return value

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 0 < value <= MAX_LIMIT:
            raise PydanticCustomError("limit_out_of_range", "Limit must be between 1-100")
        return value


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    name: str
    email: EmailStr
    age: Optional[int] = None
    role: Role
    created_at: str
    updated_at: str

    @field_validator("email", mode="wrap")
    @classmethod
    def _check_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _check_email_syntax(value, handler)

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        try:
            canonical = str(uuid.UUID(value))
        except ValueError:
            raise PydanticCustomError("uuid_format", "Invalid uuid") from None
        if canonical != value:
            raise PydanticCustomError("uuid_format", "Invalid uuid")
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        # Dates without a time and naive times are rejected.
        if "T" not in value:
            raise PydanticCustomError("datetime_format", "Invalid datetime")
        try:
            _TIMESTAMP.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("datetime_format", "Invalid datetime") from None
        return value


class Pagination(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int


class UsersList(BaseModel):
    """A page of users together with its pagination metadata."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    users: List[UserRead]
    pagination: Pagination


def serialize_user(record: Any) -> UserRead:
    """Run ``record`` through the output contract.

    Raises :class:`SerializationError` when the record does not
    conform; this indicates a bug, not bad client input.
    """
    try:
        return UserRead.model_validate(record)
    except ValidationError as exc:
        raise SerializationError(f"User record {getattr(record, 'id', '?')} is malformed", exc.errors()) from exc


def serialize_users_page(result: Any) -> UsersList:
    """Run a query result (``users`` plus pagination numbers) through the output contract."""
    users = [serialize_user(record) for record in result.users]
    try:
        pagination = Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        )
    except ValidationError as exc:
        raise SerializationError("Pagination metadata is malformed", exc.errors()) from exc
    return UsersList(users=users, pagination=pagination)
