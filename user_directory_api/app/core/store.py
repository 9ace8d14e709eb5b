"""
In‑memory user store.

``UserStore`` holds the authoritative, ordered list of user records
for the lifetime of the process.  Records are appended and read, never
updated or removed.  A single store is created by ``create_app`` and
handed to the services that need it.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO‑8601 string, e.g. ``2025-01-31T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_user_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class UserRecord:
    """A single user held by the store."""

    id: str
    name: str
    email: str
    role: str
    created_at: str
    updated_at: str
    age: Optional[int] = None

    @classmethod
    def new(
        cls,
        name: str,
        email: str,
        role: str,
        age: Optional[int] = None,
    ) -> "UserRecord":
        """Build a record with a fresh identifier and matching timestamps."""
        timestamp = utc_now_iso()
        return cls(
            id=new_user_id(),
            name=name,
            email=email,
            role=role,
            age=age,
            created_at=timestamp,
            updated_at=timestamp,
        )


DEMO_USERS = (
    {"name": "John Doe", "email": "john@example.com", "age": 25, "role": "user"},
    {"name": "Jane Smith", "email": "jane@example.com", "age": 30, "role": "admin"},
    {"name": "Bob Wilson", "email": "bob@example.com", "age": None, "role": "moderator"},
)


class UserStore:
    """Ordered, append‑only collection of :class:`UserRecord` objects."""

    def __init__(self, records: Iterable[UserRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._records: List[UserRecord] = list(records)

    @classmethod
    def seeded(cls) -> "UserStore":
        """Return a store holding the three demo users, one per role."""
        return cls(UserRecord.new(**user) for user in DEMO_USERS)

    def append(self, record: UserRecord) -> None:
        with self._lock:
            self._records.append(record)

    def all(self) -> Tuple[UserRecord, ...]:
        """Return a snapshot of every record in insertion order."""
        with self._lock:
            return tuple(self._records)

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        for record in self.all():
            if record.id == user_id:
                return record
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
