"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Shared infrastructure (configuration, logging, the user
store and the error taxonomy) lives in ``core``; request and response
contracts live in ``schemas``; business logic lives in ``services``;
HTTP routes are grouped under ``api/<version>/``.
"""

from .main import app  # noqa: F401
