"""Domain value objects for pingtag.

Value objects are immutable and defined by their values, not identity.
They carry the read-only projections the tag registry hands out.
"""

from pydantic import Field

from pingtag.domain.value.common import ValueObject
from pingtag.domain.value.identifiers import UserId

PLACEHOLDER_PREFIX = "User"


def placeholder_name(user_id: UserId | int) -> str:
    """Synthesize the stand-in display name for a user with no known name.

    The ``User<id>`` pattern is what the persisted document carries for
    subscribers whose real name was never known.
    """
    return f"{PLACEHOLDER_PREFIX}{user_id}"


def tag_key(name: str) -> str:
    """Normalize a tag name for case-insensitive comparison."""
    return name.casefold()


class TagSummary(ValueObject):
    """A row of the tag listing."""

    name: str
    subscriber_count: int
    description: str


class TagMembership(ValueObject):
    """A tag the requester is subscribed to."""

    name: str
    description: str


class TagStat(ValueObject):
    """Subscriber count for a single tag."""

    name: str
    subscriber_count: int


class TagMention(ValueObject):
    """Mentionable subscribers resolved for one ``#tag`` occurrence."""

    tag_name: str
    display_names: tuple[str, ...] = Field(default_factory=tuple)
