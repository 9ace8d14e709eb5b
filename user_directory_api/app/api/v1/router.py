"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers.  When new
endpoints are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import hello, users

# Create a router for version 1 and include sub‑routers for each domain.
router = APIRouter()

# The hello router defines ``/`` and ``/health`` itself, so it is
# mounted without a prefix.
router.include_router(hello.router, tags=["hello"])
router.include_router(users.router, prefix="/users", tags=["users"])
