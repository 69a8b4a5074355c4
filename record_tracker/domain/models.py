"""
Domain models for the Record Tracker.

Defines the stored record schema, the keys a query can target, and the typed
query values accepted by the record store. Records are immutable once built;
the add-record flow collects fields on a `RecordDraft` first.
"""
from __future__ import annotations

import enum
from typing import ClassVar, Optional, Tuple, Union

from pydantic import BaseModel, Field


class Key(str, enum.Enum):
    """Record field a query targets."""

    NAME = "name"
    EMAIL = "email"
    AGE = "age"
    ID = "id"

    @property
    def field(self) -> str:
        """Attribute name on `Record` this key reads."""
        return self.value

    @property
    def expected_type(self) -> type:
        if self in (Key.NAME, Key.EMAIL):
            return str
        return int

    def accepts(self, value: object) -> bool:
        """Whether `value` has the kind this key compares against."""
        # bool is an int subclass but never a valid age or id.
        if isinstance(value, bool):
            return False
        return isinstance(value, self.expected_type)

    @classmethod
    def from_string(cls, text: str) -> Optional["Key"]:
        """Case-insensitive lookup by key name; None when nothing matches."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return None


class Record(BaseModel):
    """
    A single tracked person.

    `id` is metadata assigned by the owning store; deduplication uses
    `identity` (name, email, age) only.
    """

    id: int = Field(..., ge=0, description="Store-assigned identifier.")
    name: str = Field(..., description="Free-form name.")
    email: str = Field(..., description="Email address, not validated.")
    age: int = Field(..., ge=0, description="Age in whole years.")

    model_config = {
        "frozen": True,
        "strict": True,
    }

    @property
    def identity(self) -> Tuple[str, str, int]:
        return (self.name, self.email, self.age)

    def format(self) -> str:
        return f"{self.name}, age {self.age}, email {self.email}, #{self.id}"


class RecordDraft(BaseModel):
    """Fields collected so far by the add-record flow."""

    name: str = ""
    email: str = ""
    age: int = Field(0, ge=0)

    model_config = {"validate_assignment": True}


class _QueryBase(BaseModel):
    key: ClassVar[Key]

    model_config = {"frozen": True, "strict": True}


class NameQuery(_QueryBase):
    key: ClassVar[Key] = Key.NAME
    value: str


class EmailQuery(_QueryBase):
    key: ClassVar[Key] = Key.EMAIL
    value: str


class AgeQuery(_QueryBase):
    key: ClassVar[Key] = Key.AGE
    value: int


class IdQuery(_QueryBase):
    key: ClassVar[Key] = Key.ID
    value: int


Query = Union[NameQuery, EmailQuery, AgeQuery, IdQuery]


__all__ = [
    "Key",
    "Record",
    "RecordDraft",
    "NameQuery",
    "EmailQuery",
    "AgeQuery",
    "IdQuery",
    "Query",
]
