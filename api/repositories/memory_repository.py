"""In-memory user storage guarded by a lock."""
from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from typing import Callable, Dict, Optional, Set

from api.domain.users import User


class IdentifierCollisionError(RuntimeError):
    """Raised when a freshly generated id was already issued by this repository."""


class InMemoryUserRepository:
    """CRUD helpers over a dict keyed by user id.

    Every method holds ``_lock`` while touching the mapping. Users are frozen
    dataclasses, so the values handed out can never alter stored state.
    """

    def __init__(self, id_factory: Callable[[], uuid.UUID] = uuid.uuid4) -> None:
        self._lock = threading.Lock()
        self._users: Dict[uuid.UUID, User] = {}
        # every id ever handed out, deleted ones included
        self._issued: Set[uuid.UUID] = set()
        self._id_factory = id_factory

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def insert(self, first_name: str, last_name: str, biography: str) -> User:
        user_id = self._id_factory()
        with self._lock:
            if user_id in self._issued:
                raise IdentifierCollisionError(f"Generated id {user_id} was already issued")
            user = User(id=user_id, first_name=first_name, last_name=last_name, biography=biography)
            self._issued.add(user_id)
            self._users[user_id] = user
            return user

    def find_all(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def update(self, user_id: uuid.UUID, first_name: str, last_name: str, biography: str) -> Optional[User]:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            user = replace(current, first_name=first_name, last_name=last_name, biography=biography)
            self._users[user_id] = user
            return user

    def delete(self, user_id: uuid.UUID) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None
