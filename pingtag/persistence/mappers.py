"""Mappers between persisted records and domain models."""

from pingtag.domain.model.registry import TagRegistry
from pingtag.domain.model.tag import Subscriber, Tag
from pingtag.domain.value import UserId
from pingtag.persistence.schema import SubscriberRecord, TagDocument, TagRecord


def record_to_subscriber(record: SubscriberRecord) -> Subscriber:
    """Convert a subscriber record; empty or placeholder names become unknown."""
    return Subscriber.from_name(UserId(record.id), record.username)


def subscriber_to_record(subscriber: Subscriber) -> SubscriberRecord:
    """Convert a subscriber to a record; unknown names are written as ``User<id>``."""
    return SubscriberRecord(id=subscriber.id, username=subscriber.username)


def record_to_tag(record: TagRecord) -> Tag:
    """Convert a tag record to a domain Tag.

    Repeated subscriber ids keep their first occurrence.
    """
    seen: set[int] = set()
    subscribers = []
    for sub in record.subscribers:
        if sub.id in seen:
            continue
        seen.add(sub.id)
        subscribers.append(record_to_subscriber(sub))

    return Tag(
        name=record.name,
        creator_id=UserId(record.creator_id),
        creator_name=record.creator_name,
        description=record.description,
        subscribers=tuple(subscribers),
        created_at=record.created_at,
    )


def tag_to_record(tag: Tag) -> TagRecord:
    """Convert a domain Tag to a record."""
    return TagRecord(
        name=tag.name,
        creator_id=tag.creator_id,
        creator_name=tag.creator_name,
        description=tag.description,
        subscribers=[subscriber_to_record(sub) for sub in tag.subscribers],
        created_at=tag.created_at,
    )


def document_to_registry(document: TagDocument) -> TagRegistry:
    return TagRegistry(tags=tuple(record_to_tag(r) for r in document.tags))


def registry_to_document(registry: TagRegistry) -> TagDocument:
    return TagDocument(tags=[tag_to_record(t) for t in registry.tags])
