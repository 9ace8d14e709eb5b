from __future__ import annotations

from user_directory_api.app.core.errors import (
    SerializationError,
    ServiceError,
    UserNotFoundError,
    validation_error_payload,
)


def test_payload_lists_fields_in_order() -> None:
    payload = validation_error_payload(
        [
            {"loc": ("body", "name"), "msg": "Name is required"},
            {"loc": ("query", "page"), "msg": "Page must be positive"},
            {"loc": ("body", "b", "c", 0), "msg": "Input should be a valid number"},
        ]
    )

    assert payload["errors"] == [
        {"field": "name", "message": "Name is required"},
        {"field": "page", "message": "Page must be positive"},
        {"field": "b.c.0", "message": "Input should be a valid number"},
    ]
    assert payload["detail"] == (
        "name Name is required, page Page must be positive, b.c.0 Input should be a valid number"
    )


def test_payload_for_whole_body_error() -> None:
    payload = validation_error_payload([{"loc": ("body",), "msg": "Field required"}])

    assert payload["errors"] == [{"field": "body", "message": "Field required"}]


def test_payload_without_errors() -> None:
    assert validation_error_payload([]) == {"detail": "Validation failed", "errors": []}


def test_error_hierarchy() -> None:
    not_found = UserNotFoundError("abc")

    assert isinstance(not_found, ServiceError)
    assert isinstance(not_found, LookupError)
    assert str(not_found) == "User abc not found"
    assert isinstance(SerializationError("bad"), ServiceError)
    assert SerializationError("bad").errors == []
