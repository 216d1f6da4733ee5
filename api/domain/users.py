"""Domain model and field rules for users."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class UserDraft:
    """Field values supplied by a client to create or replace a user."""

    first_name: str
    last_name: str
    biography: str


@dataclass(frozen=True)
class User:
    id: UUID
    first_name: str
    last_name: str
    biography: str

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "biography": self.biography,
        }


class ValidationError(Enum):
    """Field rule a draft failed; value is (field, min length, max length)."""

    INVALID_FIRST_NAME = ("first_name", 2, 20)
    INVALID_LAST_NAME = ("last_name", 2, 20)
    INVALID_BIOGRAPHY = ("biography", 20, 450)

    @property
    def field(self) -> str:
        return self.value[0]

    @property
    def min_length(self) -> int:
        return self.value[1]

    @property
    def max_length(self) -> int:
        return self.value[2]

    @property
    def message(self) -> str:
        return f"{self.field} must be between {self.min_length} and {self.max_length} characters"


def text_length(value: str) -> int:
    """Length in Unicode code points, so "José" counts 4 (not its 5 UTF-8 bytes)."""
    return len(value)


def validate_user(draft: UserDraft) -> Optional[ValidationError]:
    """Return the first failing rule in field order, or None when the draft is valid."""
    for rule in ValidationError:
        size = text_length(getattr(draft, rule.field))
        if size < rule.min_length or size > rule.max_length:
            return rule
    return None
