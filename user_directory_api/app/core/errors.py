"""
Error taxonomy and HTTP error mapping.

Services raise the exceptions defined here; endpoints and the
handlers registered by :func:`register_exception_handlers` translate
them into HTTP responses.  Input validation failures are always client
errors (400) with a structured body::

    {"detail": "email Invalid email format",
     "errors": [{"field": "email", "message": "Invalid email format"}]}

Serialization failures are programming faults and surface as 500.
"""

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

# Leading location segments added by FastAPI that do not name a field.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class UserNotFoundError(ServiceError, LookupError):
    """No user with the requested identifier exists."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class SerializationError(ServiceError):
    """An internal record does not satisfy the output contract."""

    def __init__(self, message: str, errors: Sequence[Dict[str, Any]] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)


def _field_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    if not parts:
        return str(loc[0]) if loc else "body"
    return ".".join(str(part) for part in parts)


def validation_error_payload(errors: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Build the structured 400 body from pydantic/FastAPI error dicts.

    Field violations are kept in the order the validator reported
    them.  ``detail`` is a one‑line summary of all of them.
    """
    violations: List[Dict[str, str]] = [
        {"field": _field_path(error.get("loc", ())), "message": str(error.get("msg", "Invalid value"))}
        for error in errors
    ]
    summary = ", ".join(f"{item['field']} {item['message']}" for item in violations)
    return {"detail": summary or "Validation failed", "errors": violations}


def register_exception_handlers(app: FastAPI) -> None:
    """Install the service's exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        payload = validation_error_payload(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, payload["detail"])
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)

    @app.exception_handler(SerializationError)
    async def handle_serialization_error(request: Request, exc: SerializationError) -> JSONResponse:
        logger.error(
            "Response for %s %s violates the output contract: %s %s",
            request.method,
            request.url.path,
            exc,
            exc.errors,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
