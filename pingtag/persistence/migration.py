"""Two-stage decoding of persisted tag documents.

Raw bytes are first decoded against the current schema. If the structure
does not match, they are decoded against the legacy schema and migrated.
The outcome is reported as a tagged DecodeResult instead of an exception so
the loader decides what to do with each case.
"""

from enum import Enum

import logfire
from pydantic import BaseModel, ValidationError

from pingtag.domain.value import placeholder_name
from pingtag.persistence.schema import (
    LegacyTagDocument,
    SubscriberRecord,
    TagDocument,
    TagRecord,
)


class DecodeOutcome(str, Enum):
    """How a persisted document was understood."""

    CURRENT = "current"
    MIGRATED = "migrated"
    CORRUPT = "corrupt"


class DecodeResult(BaseModel):
    """Result of decoding a persisted document."""

    outcome: DecodeOutcome
    document: TagDocument | None = None
    error: str | None = None


def migrate_legacy(legacy: LegacyTagDocument) -> TagDocument:
    """Convert a legacy document to the current schema.

    Legacy subscribers carry only an id, so each one gets the ``User<id>``
    placeholder, which is read back as "no known display name".
    """
    return TagDocument(
        tags=[
            TagRecord(
                name=record.name,
                creator_id=record.creator_id,
                creator_name=record.creator_name,
                description=record.description,
                created_at=record.created_at,
                subscribers=[
                    SubscriberRecord(id=user_id, username=placeholder_name(user_id))
                    for user_id in record.subscribers
                ],
            )
            for record in legacy.tags
        ]
    )


def decode_document(raw: bytes) -> DecodeResult:
    """Decode persisted bytes as current schema, falling back to legacy.

    Args:
        raw: Document bytes

    Returns:
        DecodeResult tagged CURRENT, MIGRATED or CORRUPT
    """
    try:
        document = TagDocument.model_validate_json(raw)
    except ValidationError as current_error:
        logfire.debug(
            "Document does not match current schema",
            errors=current_error.error_count(),
        )
    else:
        return DecodeResult(outcome=DecodeOutcome.CURRENT, document=document)

    try:
        legacy = LegacyTagDocument.model_validate_json(raw)
    except ValidationError as legacy_error:
        return DecodeResult(outcome=DecodeOutcome.CORRUPT, error=str(legacy_error))

    migrated = migrate_legacy(legacy)
    logfire.info("Legacy tag document migrated", tag_count=len(migrated.tags))
    return DecodeResult(outcome=DecodeOutcome.MIGRATED, document=migrated)
