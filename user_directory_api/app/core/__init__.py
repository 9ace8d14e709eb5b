"""Shared infrastructure: settings, logging, errors and the user store."""
