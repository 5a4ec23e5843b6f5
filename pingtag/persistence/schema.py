"""Persisted tag document schemas.

The document is a single JSON object ``{"tags": [...]}``. Two shapes exist:

- current: ``subscribers`` is a list of ``{"id": int, "username": str}``
- legacy: ``subscribers`` is a bare list of user ids

Only the current shape is ever written.
"""

import json
import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Timestamp used when a record carries no created_at
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# Sub-microsecond digits, as written by nanosecond-precision encoders
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class _TagRecordBase(BaseModel):
    name: str
    creator_id: int
    creator_name: str = ""
    description: str = ""
    created_at: datetime = ZERO_TIME

    @field_validator("created_at", mode="before")
    @classmethod
    def truncate_fraction(cls, v: Any) -> Any:
        """Trim fractional seconds to microsecond precision."""
        if isinstance(v, str):
            return _EXCESS_FRACTION.sub(r"\1", v, count=1)
        return v

    @field_validator("subscribers", mode="before", check_fields=False)
    @classmethod
    def null_subscribers(cls, v: Any) -> Any:
        """Treat ``null`` as an empty subscriber list."""
        return [] if v is None else v


class SubscriberRecord(BaseModel):
    """Subscriber as persisted in the current schema."""

    id: int
    username: str = ""


class TagRecord(_TagRecordBase):
    """Tag as persisted in the current schema."""

    subscribers: list[SubscriberRecord] = Field(default_factory=list)


class TagDocument(BaseModel):
    """Current-schema document."""

    tags: list[TagRecord] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags(cls, v: Any) -> Any:
        return [] if v is None else v


class LegacyTagRecord(_TagRecordBase):
    """Tag as persisted before subscriber names were stored."""

    subscribers: list[int] = Field(default_factory=list)


class LegacyTagDocument(BaseModel):
    """Legacy-schema document."""

    tags: list[LegacyTagRecord] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags(cls, v: Any) -> Any:
        return [] if v is None else v


def encode_document(document: TagDocument) -> bytes:
    """Serialize a document as indented, human-diffable UTF-8 JSON."""
    payload = document.model_dump(mode="json")
    return (json.dumps(payload, indent=2, ensure_ascii=False) + "\n").encode("utf-8")
