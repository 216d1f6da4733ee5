"""User use cases (validation, lookups, mutations)."""

from __future__ import annotations

import logging
import re
from typing import Optional
from uuid import UUID

from api.domain.users import User, UserDraft, ValidationError, validate_user
from api.repositories.memory_repository import InMemoryUserRepository

logger = logging.getLogger(__name__)

_CANONICAL_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
# canonical, urn:uuid:-prefixed, braced or bare 32-hex; ASCII hex digits only
UUID_PATTERN = re.compile(
    rf"(?:urn:uuid:)?{_CANONICAL_UUID}|\{{{_CANONICAL_UUID}\}}|[0-9a-f]{{32}}",
    re.IGNORECASE | re.ASCII,
)


class UserServiceError(Exception):
    """Base exception for the user workflow."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedIdentifierError(UserServiceError):
    """Raised when a client-supplied id is not a UUID."""

    def __init__(self, raw_id: str):
        super().__init__("Invalid ID")
        self.raw_id = raw_id


class InvalidUserError(UserServiceError):
    """Raised when a draft breaks one of the field rules."""

    def __init__(self, error: ValidationError):
        super().__init__(error.message)
        self.error = error


class UserNotFoundError(UserServiceError):
    def __init__(self, user_id: UUID):
        super().__init__("The user with the specified ID does not exist")
        self.user_id = user_id


class UserService:
    """Validates drafts and drives the repository."""

    def __init__(self, repository: Optional[InMemoryUserRepository] = None) -> None:
        self.repository = repository if repository is not None else InMemoryUserRepository()

    def parse_user_id(self, raw_id: str) -> UUID:
        if not raw_id or not UUID_PATTERN.fullmatch(raw_id):
            raise MalformedIdentifierError(raw_id)
        if raw_id[:9].lower() == "urn:uuid:":
            raw_id = raw_id[9:]
        return UUID(raw_id)

    def _check(self, draft: UserDraft) -> None:
        error = validate_user(draft)
        if error is not None:
            raise InvalidUserError(error)

    def create_user(self, draft: UserDraft) -> User:
        self._check(draft)
        user = self.repository.insert(draft.first_name, draft.last_name, draft.biography)
        logger.info("user %s created", user.id)
        return user

    def list_users(self) -> list[User]:
        return self.repository.find_all()

    def get_user(self, raw_id: str) -> User:
        user_id = self.parse_user_id(raw_id)
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_user(self, raw_id: str, draft: UserDraft) -> User:
        user_id = self.parse_user_id(raw_id)
        self._check(draft)
        user = self.repository.update(user_id, draft.first_name, draft.last_name, draft.biography)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info("user %s updated", user_id)
        return user

    def delete_user(self, raw_id: str) -> None:
        user_id = self.parse_user_id(raw_id)
        if not self.repository.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("user %s deleted", user_id)
