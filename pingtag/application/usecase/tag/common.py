"""Shared tag response items."""

from datetime import datetime

from pydantic import BaseModel

from pingtag.domain.model.tag import Tag


class SubscriberItem(BaseModel):
    """Subscriber in a tag response."""

    id: int
    username: str
    mentionable: bool


class TagItem(BaseModel):
    """Full tag in a response."""

    name: str
    creator_id: int
    creator_name: str
    description: str
    subscriber_count: int
    subscribers: list[SubscriberItem]
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(
            name=tag.name,
            creator_id=tag.creator_id,
            creator_name=tag.creator_name,
            description=tag.description,
            subscriber_count=tag.subscriber_count,
            subscribers=[
                SubscriberItem(
                    id=sub.id, username=sub.username, mentionable=sub.is_mentionable
                )
                for sub in tag.subscribers
            ],
            created_at=tag.created_at,
        )
