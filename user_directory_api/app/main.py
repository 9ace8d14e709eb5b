"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging,
creates the user store and services, and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn user_directory_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import UserStore
from .services.hello_service import HelloService
from .services.user_service import UserService


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        The user store backing the ``/users`` endpoints.  When
        omitted, a new store is created, seeded with the demo users
        if ``SEED_DEMO_USERS`` is enabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = UserStore.seeded() if settings.seed_demo_users else UserStore()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_service = UserService(store)
    app.state.hello_service = HelloService()

    # The public paths (``/``, ``/health``, ``/users``) are served at the
    # root rather than under a version prefix.
    app.include_router(v1_router)
    register_exception_handlers(app)

    logging.getLogger(__name__).debug("Application created with %d users", len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
