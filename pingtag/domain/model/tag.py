"""Tag entity and its subscribers."""

from datetime import datetime, timezone

from pydantic import Field

from pingtag.domain.model.common import DomainModel
from pingtag.domain.value import UserId, placeholder_name, tag_key


class Subscriber(DomainModel):
    """A user registered to be mentioned whenever the tag is used.

    ``display_name`` is None when the user's name was never known, e.g. for
    subscribers migrated from the legacy document format.
    """

    id: UserId
    display_name: str | None = None

    @classmethod
    def from_name(cls, user_id: UserId, name: str | None) -> "Subscriber":
        """Build a subscriber, treating empty and placeholder names as unknown."""
        if not name or name == placeholder_name(user_id):
            return cls(id=user_id, display_name=None)
        return cls(id=user_id, display_name=name)

    @property
    def username(self) -> str:
        """Name to show for this subscriber, falling back to ``User<id>``."""
        return self.display_name or placeholder_name(self.id)

    @property
    def is_mentionable(self) -> bool:
        """Whether a genuine display name is known for this subscriber."""
        return bool(self.display_name) and self.display_name != placeholder_name(
            self.id
        )


class Tag(DomainModel):
    """A named, creator-owned topic that users subscribe to.

    Subscribers keep insertion order and are unique by id. A tag whose
    subscriber list is empty is reclaimable and disappears on the next prune.
    """

    name: str  # Stored with the casing the creator used
    creator_id: UserId
    creator_name: str = ""
    description: str = ""
    subscribers: tuple[Subscriber, ...] = ()
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return tag_key(self.name)

    @property
    def subscriber_count(self) -> int:
        return len(self.subscribers)

    @property
    def is_reclaimable(self) -> bool:
        return not self.subscribers

    def matches(self, name: str) -> bool:
        return self.key == tag_key(name)

    def has_subscriber(self, user_id: UserId) -> bool:
        return any(sub.id == user_id for sub in self.subscribers)

    def with_subscriber(self, subscriber: Subscriber) -> "Tag":
        """Return a copy of this tag with ``subscriber`` appended."""
        return self.model_copy(
            update={"subscribers": (*self.subscribers, subscriber)}
        )

    def mentionable_names(self) -> list[str]:
        return [sub.display_name for sub in self.subscribers if sub.is_mentionable]
