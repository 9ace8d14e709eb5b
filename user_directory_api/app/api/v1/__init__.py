"""
Version 1 of the API.

This subpackage bundles the hello, health and user endpoints.
"""
