"""Tag registry aggregate."""

from typing import Optional

from pingtag.domain.model.common import DomainModel
from pingtag.domain.model.tag import Tag
from pingtag.domain.value import UserId


class TagRegistry(DomainModel):
    """Root aggregate holding every tag in storage order.

    The registry is immutable: each mutation returns a new registry, so a
    snapshot handed to a caller never changes underneath it.
    """

    tags: tuple[Tag, ...] = ()

    def find(self, name: str) -> Optional[Tag]:
        """Find a tag by case-insensitive name."""
        for tag in self.tags:
            if tag.matches(name):
                return tag
        return None

    def count_created_by(self, creator_id: UserId) -> int:
        return sum(1 for tag in self.tags if tag.creator_id == creator_id)

    def subscribed_by(self, user_id: UserId) -> list[Tag]:
        return [tag for tag in self.tags if tag.has_subscriber(user_id)]

    def with_tag(self, tag: Tag) -> "TagRegistry":
        """Return a registry with ``tag`` appended."""
        return self.model_copy(update={"tags": (*self.tags, tag)})

    def with_replaced(self, tag: Tag) -> "TagRegistry":
        """Return a registry where the tag matching ``tag.name`` is replaced."""
        return self.model_copy(
            update={
                "tags": tuple(tag if t.matches(tag.name) else t for t in self.tags)
            }
        )

    def without(self, name: str) -> "TagRegistry":
        """Return a registry without any tag matching ``name``."""
        return self.model_copy(
            update={"tags": tuple(t for t in self.tags if not t.matches(name))}
        )

    def pruned(self) -> tuple["TagRegistry", int]:
        """Drop reclaimable tags.

        Returns:
            Tuple of (pruned registry, number of tags removed)
        """
        kept = tuple(t for t in self.tags if not t.is_reclaimable)
        removed = len(self.tags) - len(kept)
        if not removed:
            return self, 0
        return self.model_copy(update={"tags": kept}), removed
