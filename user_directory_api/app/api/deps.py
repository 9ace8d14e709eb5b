"""
FastAPI dependency providers.

Services are built once by ``create_app`` and stored on
``app.state``; these providers hand them to endpoint functions.
"""

from fastapi import Request

from user_directory_api.app.services.hello_service import HelloService
from user_directory_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_hello_service(request: Request) -> HelloService:
    return request.app.state.hello_service
