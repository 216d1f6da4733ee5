"""
Pydantic models for the users endpoints.

``UserRequest`` is the body accepted by POST/PUT. Text fields are strict
strings: a number or object where text is expected makes the payload
invalid, while a missing field falls back to ``""`` and is then rejected by
the field rules with its own message.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from api.domain.users import User, UserDraft


class UserRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    first_name: StrictStr = Field("", examples=["Ana"])
    last_name: StrictStr = Field("", examples=["Silva"])
    biography: StrictStr = Field("", examples=["A short biography text of sufficient length to pass."])

    def to_draft(self) -> UserDraft:
        return UserDraft(first_name=self.first_name, last_name=self.last_name, biography=self.biography)


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    first_name: str
    last_name: str
    biography: str

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(**user.to_dict())


class Envelope(BaseModel):
    """Every response body: either ``data`` or ``error``, empty members omitted."""

    error: Optional[str] = None
    data: Any = None

    def body(self) -> dict:
        return self.model_dump(exclude_none=True)
