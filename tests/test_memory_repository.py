"""
Behaviour of the in-memory user repository (ids, snapshots, locking).
"""
from __future__ import annotations

import sys
import threading
import uuid
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

# Make the api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.repositories.memory_repository import (  # noqa: E402
    IdentifierCollisionError,
    InMemoryUserRepository,
)

BIO = "A short biography text of sufficient length to pass."


@pytest.fixture()
def repo():
    return InMemoryUserRepository()


def test_crud_scenario(repo):
    user = repo.insert("Ana", "Silva", BIO)
    assert isinstance(user.id, uuid.UUID)
    assert user.first_name == "Ana"
    assert len(repo.find_all()) == 1

    updated = repo.update(user.id, "Ana", "Souza", BIO)
    assert updated is not None
    assert updated.id == user.id
    assert updated.last_name == "Souza"

    assert repo.delete(user.id) is True
    assert repo.find_all() == []


def test_find_by_id_returns_inserted_user(repo):
    user = repo.insert("Ana", "Silva", BIO)
    assert repo.find_by_id(user.id) == user
    assert repo.find_by_id(uuid.uuid4()) is None


def test_identical_values_get_distinct_ids(repo):
    first = repo.insert("Ana", "Silva", BIO)
    second = repo.insert("Ana", "Silva", BIO)
    assert first.id != second.id
    assert len(repo) == 2


def test_update_missing_id_changes_nothing(repo):
    repo.insert("Ana", "Silva", BIO)
    before = set(repo.find_all())
    assert repo.update(uuid.uuid4(), "Bob", "Stone", BIO) is None
    assert set(repo.find_all()) == before


def test_update_replaces_all_fields(repo):
    user = repo.insert("Ana", "Silva", BIO)
    new_bio = "Another biography that is long enough."
    repo.update(user.id, "Maria", "Souza", new_bio)
    found = repo.find_by_id(user.id)
    assert (found.id, found.first_name, found.last_name, found.biography) == (user.id, "Maria", "Souza", new_bio)


def test_delete_removes_exactly_one(repo):
    keep = repo.insert("Ana", "Silva", BIO)
    gone = repo.insert("Bob", "Stone", BIO)
    assert repo.delete(gone.id) is True
    assert repo.find_by_id(gone.id) is None
    assert repo.find_all() == [keep]
    assert repo.delete(gone.id) is False
    assert repo.delete(uuid.uuid4()) is False
    assert len(repo) == 1


def test_returned_values_do_not_alias_state(repo):
    user = repo.insert("Ana", "Silva", BIO)
    with pytest.raises(FrozenInstanceError):
        user.first_name = "Eve"  # type: ignore[misc]
    snapshot = repo.find_all()
    snapshot.clear()
    assert len(repo.find_all()) == 1


def test_reused_id_is_reported_and_state_is_kept():
    fixed = uuid.UUID("00000000-0000-4000-8000-000000000001")
    repo = InMemoryUserRepository(id_factory=lambda: fixed)
    user = repo.insert("Ana", "Silva", BIO)
    repo.delete(user.id)

    with pytest.raises(IdentifierCollisionError):
        repo.insert("Bob", "Stone", BIO)
    assert repo.find_all() == []


def test_concurrent_inserts_and_deletes(repo):
    created = []
    created_lock = threading.Lock()

    def worker():
        for _ in range(50):
            user = repo.insert("Ana", "Silva", BIO)
            with created_lock:
                created.append(user.id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(set(created)) == 400
    assert len(repo) == 400

    def delete_all(ids):
        for user_id in ids:
            repo.delete(user_id)

    deleters = [threading.Thread(target=delete_all, args=(created[n::4],)) for n in range(4)]
    for t in deleters:
        t.start()
    for t in deleters:
        t.join()
    assert repo.find_all() == []
