"""
Business logic for the API.

Services are plain objects constructed once in ``create_app`` and
handed to endpoints through FastAPI dependencies.
"""
