"""
Hello echo and health endpoints for API v1.

``GET /`` echoes a fixed stub input, ``POST /`` echoes the posted
payload, and ``GET /health`` reports liveness with the current time.
"""

from fastapi import APIRouter, Depends

from user_directory_api.app.api.deps import get_hello_service
from user_directory_api.app.schemas.hello import HealthStatus, HelloInput, HelloOutput
from user_directory_api.app.services.hello_service import STUB_INPUT, HelloService


router = APIRouter()


@router.get("/", response_model=HelloOutput)
async def get_hello(service: HelloService = Depends(get_hello_service)) -> HelloOutput:
    return service.greet(STUB_INPUT)


@router.post("/", response_model=HelloOutput)
async def post_hello(
    payload: HelloInput,
    service: HelloService = Depends(get_hello_service),
) -> HelloOutput:
    """Echo ``x`` in a greeting and return ``y`` unchanged under ``b.c``."""
    return service.greet(payload)


@router.get("/health", response_model=HealthStatus)
async def get_health(service: HelloService = Depends(get_hello_service)) -> HealthStatus:
    return service.health()
