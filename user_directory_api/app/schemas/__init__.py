"""
Pydantic schema definitions for API payloads.

Input contracts coerce and reject raw request data; output contracts
guard what leaves the service.  Schemas are kept separate from the
in‑memory records held by the store.
"""
