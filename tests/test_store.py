from __future__ import annotations

import threading
import uuid
from datetime import datetime

from user_directory_api.app.core.store import UserRecord, UserStore, utc_now_iso


def test_seeded_store_has_one_user_per_role(store: UserStore) -> None:
    records = store.all()

    assert [record.name for record in records] == ["John Doe", "Jane Smith", "Bob Wilson"]
    assert [record.role for record in records] == ["user", "admin", "moderator"]
    assert records[0].age == 25
    assert records[2].age is None


def test_new_record_has_uuid_and_matching_timestamps() -> None:
    record = UserRecord.new(name="Ann", email="ann@example.com", role="user")

    assert str(uuid.UUID(record.id)) == record.id
    assert record.created_at == record.updated_at
    assert record.created_at.endswith("Z")
    assert datetime.fromisoformat(record.created_at).tzinfo is not None


def test_append_preserves_insertion_order() -> None:
    store = UserStore()
    first = UserRecord.new(name="First", email="first@example.com", role="user")
    second = UserRecord.new(name="Second", email="second@example.com", role="admin")

    store.append(first)
    store.append(second)

    assert store.all() == (first, second)
    assert len(store) == 2


def test_all_returns_a_snapshot(store: UserStore) -> None:
    snapshot = store.all()
    store.append(UserRecord.new(name="Later", email="later@example.com", role="user"))

    assert len(snapshot) == 3
    assert len(store.all()) == 4


def test_find_by_id(store: UserStore) -> None:
    jane = store.all()[1]

    assert store.find_by_id(jane.id) is jane
    assert store.find_by_id(str(uuid.uuid4())) is None
    assert store.find_by_id("") is None


def test_concurrent_appends_are_not_lost() -> None:
    store = UserStore()

    def worker(prefix: str) -> None:
        for index in range(200):
            store.append(UserRecord.new(name=f"{prefix}{index}", email=f"{prefix}{index}@example.com", role="user"))

    threads = [threading.Thread(target=worker, args=(f"t{n}-",)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 800
    assert len({record.id for record in store.all()}) == 800


def test_utc_now_iso_uses_millisecond_precision() -> None:
    value = utc_now_iso()
    # e.g. 2025-01-31T12:00:00.123Z
    assert len(value) == 24
    assert value[19] == "."
